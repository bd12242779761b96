"""Display settings shared by every matrix in the process.

``SPARSEMAT_CELL_WIDTH``, when set to an integer, takes precedence over the
value given to `set_cell_width`; it is read on every call and never written.
"""

import os

_ENV_CELL_WIDTH = "SPARSEMAT_CELL_WIDTH"
_default_cell_width = 8
_cell_width = _default_cell_width


def set_cell_width(n: int) -> None:
    """Set the column width used by `DOK.render`.

    Raises
    ------
    ValueError
        If ``n`` is not a positive integer.
    """
    global _cell_width
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise ValueError(f"cell width must be a positive integer, got {n!r}")
    _cell_width = n


def get_cell_width() -> int:
    raw = os.environ.get(_ENV_CELL_WIDTH, "").strip()
    if not raw:
        return _cell_width
    try:
        override = int(raw)
    except ValueError:
        return _cell_width
    return max(1, override)
