"""Base classes for sparse matrices.

These classes hold the shape/dtype bookkeeping shared by the concrete sparse
types in `sparsemat.sparse` and the dense materialization fallback.
"""

import numpy as np


class SparseArray:
    """Abstract base class for sparse arrays.

    Parameters
    ----------
    shape : tuple[int, ...]
        Array shape. Stored as a tuple of non-negative ints.
    dtype : Any, optional
        Element dtype metadata (informational for base class).

    Attributes
    ----------
    ndim : int
        Number of dimensions, equal to ``len(shape)``.
    dtype : Any
        Element type metadata.

    Raises
    ------
    ValueError
        If any extent is negative or not an integer.
    """

    def __init__(self, shape, dtype=None):
        shape = tuple(shape)
        for n in shape:
            if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
                raise ValueError(f"shape entries must be integers, got {n!r}")
            if n < 0:
                raise ValueError(f"shape entries must be non-negative, got {n}")
        self._shape = tuple(int(n) for n in shape)
        self.ndim = len(self._shape)
        self.dtype = dtype

    @property
    def shape(self):
        """Array shape; fixed at construction."""
        return self._shape

    def __array_namespace__(self):
        import sparsemat.array_api as xp
        return xp


class SparseMatrix(SparseArray):
    """Abstract base class for 2D sparse matrices.

    Parameters
    ----------
    shape : tuple[int, int]
        Matrix shape. Must be two-dimensional.
    dtype : Any, optional
        Element dtype metadata.

    Raises
    ------
    ValueError
        If ``shape`` is not 2D.
    """

    def __init__(self, shape, dtype=None):
        if len(shape) != 2:
            raise ValueError("SparseMatrix requires 2D shape")
        super().__init__(shape, dtype=dtype)

    @property
    def rows(self):
        """Number of rows."""
        return self._shape[0]

    @property
    def cols(self):
        """Number of columns."""
        return self._shape[1]

    def toarray(self):
        """Return a dense numpy.ndarray with the same shape and dtype.

        Notes
        -----
        The base implementation returns an all-zeros array. Concrete sparse
        matrix types should override this to materialize actual data.
        """
        return np.zeros(self.shape, dtype=self.dtype)
