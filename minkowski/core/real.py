import math
from decimal import Decimal
from functools import singledispatch
from typing import Optional, TypeVar

import numpy as np

Real = TypeVar("Real")


def zero_of(x: Real) -> Real:
    """The additive identity of x's type"""
    return type(x)(0)


def one_of(x: Real) -> Real:
    return type(x)(1)


@singledispatch
def divide(a, b):
    return a / b


@divide.register(int)
@divide.register(float)
@divide.register(np.integer)
def _(a, b):
    return divide(np.float64(a), b)


@divide.register
def _(a: np.floating, b):
    # IEEE semantics, 1.0 / 0.0 is inf
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return a / b


def recip(x: Real, like: Optional[Real] = None) -> Real:
    """
    1 / x, with the numerator of like's type (x's type by default), so
    numpy float32 and Decimal do not get promoted
    """
    return divide(one_of(x if like is None else like), x)


@singledispatch
def powf(x, p):
    return x ** p


@powf.register(int)
@powf.register(float)
@powf.register(np.integer)
def _(x, p):
    return powf(np.float64(x), p)


@powf.register
def _(x: np.floating, p):
    # IEEE semantics, 0.0 ** -1 is inf and overflow saturates to inf
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return x ** p


@singledispatch
def sqrt(x):
    """
    Square root that keeps the scalar type where the type has its own
    square root (Decimal, numpy floating scalars). Anything else goes
    through math.sqrt and comes back as a float.
    """
    return math.sqrt(x)


@sqrt.register
def _(x: Decimal):
    return x.sqrt()


@sqrt.register
def _(x: np.floating):
    return np.sqrt(x)
