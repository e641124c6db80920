from typing import Any, TypeVar

from minkowski.core.coordinates import Coordinates, as_coordinates
from minkowski.core.proximity import Minkowski, classify

V = TypeVar("V")


@classify(Minkowski)
def taxicab_distance(x: Any, y: Any):
    """
    Compute the taxicab (l1) distance between two points,
    sum(abs(x[i] - y[i]) for i in range(k))
    """
    x, y = as_coordinates(x), as_coordinates(y)
    assert x.dims() == y.dims(), "points must have the same number of dimensions"
    return sum(abs(x.coord(i) - y.coord(i)) for i in range(x.dims()))


class Taxicab(Coordinates[V], Minkowski):
    """A point in taxicab (l1) space"""

    def __init__(self, point: Any):
        self.point = as_coordinates(point)

    def dims(self) -> int:
        return self.point.dims()

    def coord(self, i: int) -> V:
        return self.point.coord(i)

    def distance(self, other: Any):
        return taxicab_distance(self, other)

    def __repr__(self):
        return f"Taxicab({self.point!r})"
