"""
lp/Minkowski distances

    lp_distance(p, x, y) = ||x - y||_p = (sum_i |x_i - y_i|^p)^(1/p)

The dedicated l1, l2 and l_inf implementations are re-exported here.
They compute the p = 1, p = 2 and p = inf cases directly rather than
through the general sum.
"""
from typing import Any

from minkowski.core.coordinates import as_coordinates
from minkowski.core.proximity import Minkowski
from minkowski.core.real import Real, powf, recip, zero_of
from minkowski.metrics.chebyshev import Chebyshev as Linf
from minkowski.metrics.chebyshev import chebyshev_distance as linf_distance
from minkowski.metrics.euclid import Euclidean as L2
from minkowski.metrics.euclid import EuclideanDistance as L2Distance
from minkowski.metrics.euclid import euclidean_distance as l2_distance
from minkowski.metrics.taxi import Taxicab as L1
from minkowski.metrics.taxi import taxicab_distance as l1_distance

__all__ = [
    "L1", "l1_distance",
    "L2", "L2Distance", "l2_distance",
    "Linf", "linf_distance",
    "lp_distance", "Minkowski",
]


def lp_distance(p: Real, x: Any, y: Any) -> Real:
    """
    Compute the lp (Minkowski) distance between two points

    Parameters
    ----------
    p: the exponent, a positive real number. Preferably of the same type
        as the coordinates
    x, y: two points with the same number of dimensions. They may be of
        different types as long as their coordinates share a type

    Returns
    -------
    (sum(abs(x[i] - y[i]) ** p for i in range(k))) ** (1 / p)

    Notes
    -----
    This is a metric for p >= 1 only, yet p is not validated. For p = 1
    and p = 2 prefer l1_distance and l2_distance. The case p = inf is
    not covered by this formula (large p overflows to inf), use linf_distance.
    Zero dimensional points are at distance 0 for every p > 0.
    """
    x, y = as_coordinates(x), as_coordinates(y)
    assert x.dims() == y.dims(), "points must have the same number of dimensions"

    total = zero_of(p)
    for i in range(x.dims()):
        total += powf(abs(x.coord(i) - y.coord(i)), p)

    return powf(total, recip(p, like=total))
