"""Dictionary-of-keys (DOK) sparse matrix.

Only non-zero entries are stored, in a dict keyed by ``(row, col)`` tuples.
Setting an entry to zero deletes its key, so the stored entry count is always
the true non-zero count. Arithmetic never mutates its operands and walks
stored entries only, never the dense ``rows x cols`` grid.

Notes
-----
Keys are not bounds-checked on write: `DOK.set` and the text loader accept
coordinates outside the declared shape. Such entries stay stored on the
matrix itself, but arithmetic, `toarray` and `render` only see the declared
extent, so results never hold out-of-range keys.
"""

import logging
from collections import defaultdict

import numpy as np

from .._config import get_cell_width
from ..errors import DimensionMismatchError
from .base import SparseMatrix

logger = logging.getLogger(__name__)


class DOK(SparseMatrix):
    """Dictionary-of-keys sparse matrix.

    Parameters
    ----------
    rows, cols : int
        Matrix dimensions, fixed for the lifetime of the matrix.
    dtype : numpy.dtype, optional
        Value dtype used by `toarray` (default ``np.int64``).

    Attributes
    ----------
    shape : tuple[int, int]
        ``(rows, cols)``.
    nnz : int
        Number of stored (non-zero) entries.

    Examples
    --------
    >>> from sparsemat.sparse import DOK
    >>> a = DOK(2, 2)
    >>> a[0, 0] = 1
    >>> a[1, 1] = 1
    >>> b = DOK.from_text("rows=2\\ncols=2\\n(0, 1, 5)\\n(1, 0, 3)\\n")
    >>> (a @ b) == b
    True
    >>> (b - b).nnz
    0
    """

    def __init__(self, rows, cols, dtype=np.int64):
        super().__init__((rows, cols), dtype=dtype)
        self._entries = {}

    # ---------- construction ----------

    @classmethod
    def from_text(cls, content, strict=False):
        """Parse the ``rows=/cols=/(r, c, v)`` text format.

        See `sparsemat.io.loads`.
        """
        from ..io import loads

        return loads(content, strict=strict)

    @classmethod
    def from_file(cls, path, strict=False):
        """Read and parse a matrix file. See `sparsemat.io.load`."""
        from ..io import load

        return load(path, strict=strict)

    @classmethod
    def from_dense(cls, array):
        """Build from a dense 2D array-like, skipping zeros.

        Raises
        ------
        ValueError
            If ``array`` is not two-dimensional.
        """
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError("from_dense requires a 2D array")
        out = cls(arr.shape[0], arr.shape[1], dtype=arr.dtype)
        rr, cc = np.nonzero(arr)
        for r, c in zip(rr.tolist(), cc.tolist()):
            out.set(r, c, arr[r, c].item())
        return out

    # ---------- element access ----------

    def get(self, row, col):
        """Return the value at ``(row, col)``, or ``0`` if none is stored."""
        return self._entries.get((row, col), 0)

    def set(self, row, col, value):
        """Store ``value`` at ``(row, col)``; a zero value removes the key."""
        if value == 0:
            self._entries.pop((row, col), None)
        else:
            self._entries[(row, col)] = value

    def __getitem__(self, key):
        row, col = self._key(key)
        return self.get(row, col)

    def __setitem__(self, key, value):
        row, col = self._key(key)
        self.set(row, col, value)

    @staticmethod
    def _key(key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("DOK indices must be (row, col) pairs")
        row, col = key
        for i in (row, col):
            if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
                raise TypeError(f"DOK indices must be integers, got {i!r}")
        return int(row), int(col)

    @property
    def nnz(self):
        """Number of stored non-zero entries (int)."""
        return len(self._entries)

    def items(self):
        """Iterate over ``((row, col), value)`` pairs of stored entries.

        Iteration order is unspecified.
        """
        return iter(self._entries.items())

    def copy(self):
        out = DOK(self.rows, self.cols, dtype=self.dtype)
        out._entries = dict(self._entries)
        return out

    def astype(self, dtype):
        """Return a copy whose dtype and stored values are cast to ``dtype``.

        Values that cast to zero are dropped.
        """
        dtype = np.dtype(dtype)
        out = DOK(self.rows, self.cols, dtype=dtype)
        for (r, c), v in self._entries.items():
            out.set(r, c, dtype.type(v).item())
        return out

    # ---------- arithmetic ----------

    @staticmethod
    def _check_operand(op, other):
        if not isinstance(other, DOK):
            raise TypeError(f"{op} requires a DOK operand, got {type(other).__name__}")

    def _in_shape(self, key):
        return 0 <= key[0] < self.rows and 0 <= key[1] < self.cols

    def _check_same_shape(self, op, other):
        self._check_operand(op, other)
        if self.shape != other.shape:
            raise DimensionMismatchError(op, self.shape, other.shape)

    def add(self, other):
        """Elementwise sum ``self + other``.

        Only the union of both operands' stored keys is visited.

        Raises
        ------
        DimensionMismatchError
            If the shapes differ.
        """
        self._check_same_shape("add", other)
        out = DOK(self.rows, self.cols, dtype=self.dtype)
        for key in self._entries.keys() | other._entries.keys():
            if self._in_shape(key):
                out.set(key[0], key[1], self.get(*key) + other.get(*key))
        logger.debug("add %dx%d: nnz %d + %d -> %d", self.rows, self.cols, self.nnz, other.nnz, out.nnz)
        return out

    def subtract(self, other):
        """Elementwise difference ``self - other``.

        Raises
        ------
        DimensionMismatchError
            If the shapes differ.
        """
        self._check_same_shape("subtract", other)
        out = DOK(self.rows, self.cols, dtype=self.dtype)
        for key in self._entries.keys() | other._entries.keys():
            if not self._in_shape(key):
                continue
            # keys stored only in `other` come out negated
            out.set(key[0], key[1], self.get(*key) - other.get(*key))
        logger.debug(
            "subtract %dx%d: nnz %d - %d -> %d", self.rows, self.cols, self.nnz, other.nnz, out.nnz
        )
        return out

    def matmul(self, other):
        """Matrix product ``self @ other``.

        ``other``'s entries are grouped by row once, so each stored entry
        ``(r, k)`` of ``self`` only meets the entries of row ``k`` of
        ``other``. Products that sum to exactly zero are not stored.

        Returns
        -------
        DOK
            New matrix of shape ``(self.rows, other.cols)``.

        Raises
        ------
        DimensionMismatchError
            If ``self.cols != other.rows``.
        """
        self._check_operand("matmul", other)
        if self.cols != other.rows:
            raise DimensionMismatchError(
                "matmul", self.shape, other.shape, reason="inner dimensions must agree"
            )
        other_rows = defaultdict(list)
        for (k, c), w in other._entries.items():
            if not other._in_shape((k, c)):
                continue
            other_rows[k].append((c, w))

        acc = defaultdict(int)
        for (r, k), v in self._entries.items():
            if not self._in_shape((r, k)):
                continue
            for c, w in other_rows.get(k, ()):
                acc[(r, c)] += v * w

        out = DOK(self.rows, other.cols, dtype=self.dtype)
        for (r, c), total in acc.items():
            out.set(r, c, total)
        logger.debug(
            "matmul %dx%d @ %dx%d: nnz %d, %d -> %d",
            self.rows,
            self.cols,
            other.rows,
            other.cols,
            self.nnz,
            other.nnz,
            out.nnz,
        )
        return out

    def __add__(self, other):
        if isinstance(other, DOK):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, DOK):
            return self.subtract(other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, DOK):
            return self.matmul(other)
        return NotImplemented

    def __neg__(self):
        out = DOK(self.rows, self.cols, dtype=self.dtype)
        out._entries = {k: -v for k, v in self._entries.items()}
        return out

    @property
    def T(self):
        """Transpose as a new DOK of shape ``(cols, rows)``."""
        out = DOK(self.cols, self.rows, dtype=self.dtype)
        out._entries = {(c, r): v for (r, c), v in self._entries.items()}
        return out

    def __eq__(self, other):
        if not isinstance(other, DOK):
            return NotImplemented
        return self.shape == other.shape and self._entries == other._entries

    __hash__ = None

    # ---------- presentation ----------

    def to_text(self):
        """Serialize to the text format. See `sparsemat.io.dumps`."""
        from ..io import dumps

        return dumps(self)

    def toarray(self):
        """Convert to a dense NumPy ``ndarray`` of shape ``(rows, cols)``.

        Entries stored outside the declared shape are left out.
        """
        out = np.zeros(self.shape, dtype=self.dtype)
        for (r, c), v in self._entries.items():
            if 0 <= r < self.rows and 0 <= c < self.cols:
                out[r, c] = v
        return out

    def render(self, width=None):
        """Dense grid of every cell, each right-aligned to ``width`` chars.

        ``width`` defaults to `sparsemat.get_cell_width`.
        """
        if width is None:
            width = get_cell_width()
        lines = [f"Matrix ({self.rows}x{self.cols}):"]
        for r in range(self.rows):
            lines.append("".join(f"{self.get(r, c)} ".rjust(width) for c in range(self.cols)))
        return "\n".join(lines)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"DOK(shape={self.shape}, nnz={self.nnz})"
