from typing import Any, Dict

from ..sparse.base import SparseArray


def _numpy_xp():
    import numpy as xp

    return xp


def __array_namespace_info__() -> Dict[str, Any]:
    return {
        "devices": ["cpu"],
        "default_device": "cpu",
        "dtypes": ["int64", "float64"],
        "default_dtypes": {
            "floating": "float64",
            "integral": "int64",
        },
        "capabilities": {
            "sparse": True,
            "linalg": ["matmul", "matrix_transpose"],
            "elementwise": ["add", "subtract", "negative"],
            "creation": ["zeros", "eye", "asarray"],
        },
    }


def __getattr__(name: str):
    xp = _numpy_xp()
    attr = getattr(xp, name)

    if callable(attr):

        def guarded(*args, **kwargs):
            for v in list(args) + list(kwargs.values()):
                if isinstance(v, SparseArray):
                    raise NotImplementedError(
                        f"{name!s} is not implemented for sparse inputs in sparsemat.array_api"
                    )
            return attr(*args, **kwargs)

        return guarded

    return attr
