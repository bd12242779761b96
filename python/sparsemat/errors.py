"""Exception types raised by :mod:`sparsemat`.

Each failure kind is its own class so callers can tell a missing file from a
malformed one, or a malformed file from incompatible operands, without
inspecting messages. All derive from :class:`SparseMatrixError`.
"""


class SparseMatrixError(Exception):
    """Base class for all sparsemat errors."""


class MatrixIOError(SparseMatrixError, OSError):
    """Reading or writing a matrix file failed.

    Parameters
    ----------
    path : str or os.PathLike
        The file that could not be read or written.
    message : str
        Human readable description, usually taken from the underlying
        ``OSError``.
    """

    def __init__(self, path, message):
        self.path = path
        self.message = message
        super().__init__(f"cannot access matrix file {str(path)!r}: {message}")

    def __reduce__(self):
        return type(self), (self.path, self.message)


class FormatError(SparseMatrixError, ValueError):
    """Matrix text does not follow the header/entry grammar.

    Attributes
    ----------
    line : str or None
        The offending line, stripped of surrounding whitespace.
    lineno : int or None
        1-based line number of ``line`` within the parsed content.
    """

    def __init__(self, message, line=None, lineno=None):
        self.message = message
        self.line = line
        self.lineno = lineno
        if line is not None:
            where = f"line {lineno}: " if lineno is not None else ""
            message = f"{message} ({where}{line!r})"
        super().__init__(message)

    def __reduce__(self):
        return type(self), (self.message, self.line, self.lineno)


class DimensionMismatchError(SparseMatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation.

    Attributes
    ----------
    op : str
        Name of the operation, e.g. ``"add"`` or ``"matmul"``.
    left, right : tuple[int, int]
        Shapes of the two operands.
    """

    def __init__(self, op, left, right, reason=None):
        self.op = op
        self.left = tuple(left)
        self.right = tuple(right)
        self.reason = reason
        if reason is None:
            reason = "shapes must match"
        super().__init__(
            f"{op}: {reason}, got {self.left[0]}x{self.left[1]} "
            f"and {self.right[0]}x{self.right[1]}"
        )

    def __reduce__(self):
        return type(self), (self.op, self.left, self.right, self.reason)


__all__ = [
    "SparseMatrixError",
    "MatrixIOError",
    "FormatError",
    "DimensionMismatchError",
]
