from . import _dispatch as _dp


def add(x, y):
    return _dp.add(x, y)


def subtract(x, y):
    return _dp.subtract(x, y)


def negative(x):
    return _dp.negative(x)
