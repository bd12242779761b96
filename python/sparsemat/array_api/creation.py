def asarray(obj, /, *, dtype=None, device=None, copy=None):
    """Convert ``obj`` to a sparse DOK matrix.

    A DOK is returned as is (or copied when ``copy=True``), or cast with
    `DOK.astype` when ``dtype`` differs from its own; any 2D dense array-like
    is converted with `DOK.from_dense`.

    Raises
    ------
    ValueError
        If ``device`` is not ``"cpu"``, ``obj`` is not 2D, or a
        dtype change is requested with ``copy=False``.
    """
    import numpy as np

    from ..sparse import DOK

    if device is not None and device != "cpu":
        raise ValueError("Only 'cpu' device is currently supported")
    if isinstance(obj, DOK):
        if dtype is not None and np.dtype(dtype) != obj.dtype:
            if copy is False:
                raise ValueError("changing dtype requires a copy")
            return obj.astype(dtype)
        return obj.copy() if copy else obj
    arr = np.asarray(obj) if dtype is None else np.asarray(obj, dtype=dtype)
    return DOK.from_dense(arr)


def zeros(shape, *, dtype=None, device=None):
    """Create an empty sparse matrix.

    Parameters
    ----------
    shape : tuple of int
        Matrix shape (nrows, ncols).
    dtype : dtype, optional
        Data type (default: int64).
    device : str, optional
        Device (default: "cpu").

    Returns
    -------
    DOK
        Matrix with no stored entries.

    Examples
    --------
    >>> import sparsemat.array_api as xp
    >>> A = xp.zeros((10, 20))
    >>> A.nnz
    0
    """
    import numpy as np

    from ..sparse import DOK

    if dtype is None:
        dtype = np.int64
    if device is not None and device != "cpu":
        raise ValueError("Only 'cpu' device is currently supported")
    if len(shape) != 2:
        raise ValueError("zeros requires a 2D shape")
    return DOK(shape[0], shape[1], dtype=dtype)


def eye(n_rows, n_cols=None, k=0, *, dtype=None, device=None):
    """Create an identity-like matrix with ones on diagonal ``k``.

    Parameters
    ----------
    n_rows : int
        Number of rows.
    n_cols : int, optional
        Number of columns (default: ``n_rows``).
    k : int, optional
        Diagonal offset; positive is above the main diagonal.

    Examples
    --------
    >>> import sparsemat.array_api as xp
    >>> I = xp.eye(3)
    >>> I.nnz
    3
    """
    import numpy as np

    from ..sparse import DOK

    if dtype is None:
        dtype = np.int64
    if device is not None and device != "cpu":
        raise ValueError("Only 'cpu' device is currently supported")
    if n_cols is None:
        n_cols = n_rows
    out = DOK(n_rows, n_cols, dtype=dtype)
    for i in range(max(0, -k), min(n_rows, n_cols - k)):
        out.set(i, i + k, 1)
    return out
