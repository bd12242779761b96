"""Text format reader and writer for DOK matrices.

The format is line oriented; blank lines are ignored::

    rows=3
    cols=4
    (0, 1, 5)
    (2, 3, -7)

The first two non-blank lines declare the shape, every later one is a
``(row, col, value)`` triple with a signed integer value. Whitespace after
the commas is optional. Later triples overwrite earlier ones at the same
coordinate, and a zero value clears the coordinate.
"""

import logging
import re
from pathlib import Path

from .errors import FormatError, MatrixIOError
from .sparse.dok import DOK

logger = logging.getLogger(__name__)

_ROWS_RE = re.compile(r"rows\s*=\s*(\d+)")
_COLS_RE = re.compile(r"cols\s*=\s*(\d+)")
_ENTRY_RE = re.compile(r"\(\s*(\d+)\s*,\s*(\d+)\s*,\s*([+-]?\d+)\s*\)")


def _nonblank(content):
    for lineno, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if line:
            yield lineno, line


def _header(lines, pattern):
    try:
        lineno, line = next(lines)
    except StopIteration:
        raise FormatError("missing or invalid dimension header") from None
    m = pattern.fullmatch(line)
    if m is None:
        raise FormatError("missing or invalid dimension header", line, lineno)
    return int(m.group(1))


def loads(content, strict=False):
    """Parse matrix text into a new `DOK`.

    Parameters
    ----------
    content : str
        Full text of a matrix description.
    strict : bool, optional
        When True, reject entries whose coordinates fall outside the declared
        shape. By default such entries are stored as given.

    Returns
    -------
    DOK
        The parsed matrix.

    Raises
    ------
    FormatError
        If the header is missing or invalid, or any entry line is malformed.
        Nothing is returned for a partially valid input.
    """
    lines = _nonblank(content)
    rows = _header(lines, _ROWS_RE)
    cols = _header(lines, _COLS_RE)
    out = DOK(rows, cols)
    for lineno, line in lines:
        m = _ENTRY_RE.fullmatch(line)
        if m is None:
            raise FormatError("malformed entry line", line, lineno)
        r, c, v = (int(g) for g in m.groups())
        if strict and not (r < rows and c < cols):
            raise FormatError(f"entry outside declared shape {rows}x{cols}", line, lineno)
        out.set(r, c, v)
    logger.debug("parsed %dx%d matrix, nnz=%d", rows, cols, out.nnz)
    return out


def dumps(matrix):
    """Serialize a matrix to the text format.

    Entry lines follow the matrix's iteration order, which is unspecified.
    """
    parts = [f"rows={matrix.rows}\n", f"cols={matrix.cols}\n"]
    parts.extend(f"({r}, {c}, {v})\n" for (r, c), v in matrix.items())
    return "".join(parts)


def load(path, strict=False):
    """Read a matrix file and parse it with `loads`.

    Raises
    ------
    MatrixIOError
        If the file cannot be read.
    FormatError
        If the file content is not valid UTF-8 or not a valid matrix text.
    """
    logger.debug("loading matrix from %s", path)
    try:
        content = Path(path).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise FormatError(f"{path} is not valid UTF-8 text") from e
    except OSError as e:
        raise MatrixIOError(path, e.strerror or str(e)) from e
    return loads(content, strict=strict)


def dump(matrix, path):
    """Write ``dumps(matrix)`` to ``path``.

    Raises
    ------
    MatrixIOError
        If the file cannot be written.
    """
    try:
        Path(path).write_text(dumps(matrix), encoding="utf-8")
    except OSError as e:
        raise MatrixIOError(path, e.strerror or str(e)) from e
    logger.debug("wrote %dx%d matrix (nnz=%d) to %s", matrix.rows, matrix.cols, matrix.nnz, path)


__all__ = ["loads", "dumps", "load", "dump"]
