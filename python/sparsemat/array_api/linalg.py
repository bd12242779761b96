from . import _dispatch as _dp


def matmul(x, y):
    return _dp.matmul(x, y)


def matrix_transpose(x):
    return _dp.matrix_transpose(x)
