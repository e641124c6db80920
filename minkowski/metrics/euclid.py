from decimal import Decimal
from functools import total_ordering
from numbers import Real
from typing import Any, Generic, TypeVar

from minkowski.core.coordinates import Coordinates, as_coordinates
from minkowski.core.proximity import Minkowski, classify
from minkowski.core.real import sqrt

V = TypeVar("V")


def euclidean_distance_squared(x: Any, y: Any):
    """sum((x[i] - y[i]) ** 2 for i in range(k))"""
    x, y = as_coordinates(x), as_coordinates(y)
    assert x.dims() == y.dims(), "points must have the same number of dimensions"
    total = 0
    for i in range(x.dims()):
        diff = x.coord(i) - y.coord(i)
        total += diff * diff
    return total


@classify(Minkowski)
def euclidean_distance(x: Any, y: Any):
    """
    Compute the euclidean (l2) distance between two points,
    sqrt(sum((x[i] - y[i]) ** 2 for i in range(k)))
    """
    return sqrt(euclidean_distance_squared(x, y))


@total_ordering
class EuclideanDistance(Generic[V]):
    """
    A euclidean distance. The squared distance is stored, so comparing
    two distances never takes a square root. Plain numbers compare
    against the (non-squared) distance, i.e.
    EuclideanDistance.from_squared(25) == 5
    """

    __slots__ = ("_squared",)

    def __init__(self, squared: V):
        self._squared = squared

    @classmethod
    def from_squared(cls, squared: V) -> "EuclideanDistance[V]":
        return cls(squared)

    @classmethod
    def from_value(cls, value: V) -> "EuclideanDistance[V]":
        return cls(value * value)

    def squared(self) -> V:
        return self._squared

    def value(self) -> V:
        return sqrt(self._squared)

    def __float__(self):
        return float(self.value())

    def __eq__(self, other):
        if isinstance(other, EuclideanDistance):
            return self._squared == other._squared
        if isinstance(other, (Real, Decimal)):
            return self.value() == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, EuclideanDistance):
            return self._squared < other._squared
        if isinstance(other, (Real, Decimal)):
            return self.value() < other
        return NotImplemented

    def __hash__(self):
        return hash(self.value())

    def __repr__(self):
        return f"EuclideanDistance.from_squared({self._squared!r})"


class Euclidean(Coordinates[V], Minkowski):
    """A point in euclidean (l2) space"""

    def __init__(self, point: Any):
        self.point = as_coordinates(point)

    def dims(self) -> int:
        return self.point.dims()

    def coord(self, i: int) -> V:
        return self.point.coord(i)

    def distance(self, other: Any) -> EuclideanDistance:
        return EuclideanDistance.from_squared(
            euclidean_distance_squared(self, other)
        )

    def __repr__(self):
        return f"Euclidean({self.point!r})"
