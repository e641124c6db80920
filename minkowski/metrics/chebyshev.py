from typing import Any, TypeVar

from minkowski.core.coordinates import Coordinates, as_coordinates
from minkowski.core.proximity import Minkowski, classify

V = TypeVar("V")


@classify(Minkowski)
def chebyshev_distance(x: Any, y: Any):
    """
    Compute the chebyshev (l_inf) distance between two points,
    max(abs(x[i] - y[i]) for i in range(k)). Zero dimensional points
    are at distance 0
    """
    x, y = as_coordinates(x), as_coordinates(y)
    assert x.dims() == y.dims(), "points must have the same number of dimensions"
    return max((abs(x.coord(i) - y.coord(i)) for i in range(x.dims())), default=0)


class Chebyshev(Coordinates[V], Minkowski):
    """A point in chebyshev (l_inf) space"""

    def __init__(self, point: Any):
        self.point = as_coordinates(point)

    def dims(self) -> int:
        return self.point.dims()

    def coord(self, i: int) -> V:
        return self.point.coord(i)

    def distance(self, other: Any):
        return chebyshev_distance(self, other)

    def __repr__(self):
        return f"Chebyshev({self.point!r})"
