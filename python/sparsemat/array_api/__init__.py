from ._namespace import __array_namespace_info__
from .creation import asarray, eye, zeros
from .elementwise import add, negative, subtract
from .linalg import matmul, matrix_transpose

__all__ = [
    "__array_namespace_info__",
    "asarray",
    "eye",
    "zeros",
    "add",
    "subtract",
    "negative",
    "matmul",
    "matrix_transpose",
]


def __getattr__(name):
    from . import _namespace

    return getattr(_namespace, name)
