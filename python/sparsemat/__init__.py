import logging

from ._config import get_cell_width, set_cell_width
from .errors import DimensionMismatchError, FormatError, MatrixIOError, SparseMatrixError
from .sparse import DOK
from .io import dump, dumps, load, loads
from . import array_api as array_api

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "DOK",
    "load",
    "loads",
    "dump",
    "dumps",
    "set_cell_width",
    "get_cell_width",
    "SparseMatrixError",
    "MatrixIOError",
    "FormatError",
    "DimensionMismatchError",
    "array_api",
]
