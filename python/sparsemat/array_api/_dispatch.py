from ..sparse import DOK
from ..sparse.base import SparseArray
from ._namespace import _numpy_xp


def _is_sparse(x) -> bool:
    return isinstance(x, SparseArray)


def add(x, y):
    if isinstance(x, DOK) and isinstance(y, DOK):
        return x + y
    if _is_sparse(x) or _is_sparse(y):
        raise NotImplementedError("add for sparse inputs is only implemented for DOK+DOK")
    xp = _numpy_xp()
    return xp.add(x, y)


def subtract(x, y):
    if isinstance(x, DOK) and isinstance(y, DOK):
        return x - y
    if _is_sparse(x) or _is_sparse(y):
        raise NotImplementedError("subtract for sparse inputs is only implemented for DOK-DOK")
    xp = _numpy_xp()
    return xp.subtract(x, y)


def negative(x):
    if isinstance(x, DOK):
        return -x
    if _is_sparse(x):
        raise NotImplementedError("negative is only implemented for DOK")
    xp = _numpy_xp()
    return xp.negative(x)


# ===== Linalg =====
def matmul(x, y):
    if isinstance(x, DOK) and isinstance(y, DOK):
        return x @ y
    if _is_sparse(x) or _is_sparse(y):
        # mixed sparse/dense would densify the result
        raise NotImplementedError("matmul for sparse inputs is only implemented for DOK@DOK")
    xp = _numpy_xp()
    return xp.matmul(x, y)


def matrix_transpose(x):
    if isinstance(x, DOK):
        return x.T
    if _is_sparse(x):
        raise NotImplementedError("matrix_transpose is only implemented for DOK")
    xp = _numpy_xp()
    return xp.swapaxes(xp.asarray(x), -1, -2)
