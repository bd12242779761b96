from .base import SparseArray, SparseMatrix
from .dok import DOK

__all__ = [
    "SparseArray",
    "SparseMatrix",
    "DOK",
]
