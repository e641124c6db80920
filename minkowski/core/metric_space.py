import logging
from itertools import combinations, product
from typing import Callable, Generic, Iterable, Set, TypeVar

from tqdm import tqdm

T = TypeVar("T")
DistanceFunc = Callable[[T, T], float]

logger = logging.getLogger(__name__)


class MetricSpace(Generic[T]):
    def __init__(self, d: DistanceFunc[T]):
        self.d = d

    @classmethod
    def is_metric(
        cls,
        d_S: DistanceFunc[T],
        S: Iterable[T],
        tol: float = 0.0,
        progress_bar: bool = False
    ) -> bool:
        """
        validates if the function d_S is in fact a metric on S, i.e. satisfies
        1. d_S(x, y) >= 0 and d_S(x, y) == 0 iff x == y for all x, y in S
        2. d_S(x, y) == d_S(y, x) for all x, y in S
        3. d_S(x, y) <= d_S(x, z) + d_S(z, y) for all x, y, z in S

        Parameters
        ----------
        d_S: the distance function to validate
        S: the points to validate on. Points must be hashable
        tol: absolute tolerance for every comparison, to absorb rounding
            errors of floating point distances
        progress_bar: If True, display a progress bar over the checked pairs

        Returns
        -------
        True if no violation was found. The first violation found is
        logged in debug level
        """
        S = list(dict.fromkeys(S))
        if not all(abs(d_S(x, x)) <= tol for x in S):
            logger.debug("d(x, x) != 0 for some x")
            return False
        pairs = combinations(S, 2)
        if progress_bar:
            pairs = tqdm(pairs, total=len(S) * (len(S) - 1) // 2)
        for x, y in pairs:
            dxy = d_S(x, y)
            if dxy <= 0:
                logger.debug("d(%r, %r) = %r for distinct points", x, y, dxy)
                return False
            if abs(dxy - d_S(y, x)) > tol:
                logger.debug("d(%r, %r) != d(%r, %r)", x, y, y, x)
                return False
            for z in S:
                if dxy > d_S(x, z) + d_S(z, y) + tol:
                    logger.debug(
                        "triangle inequality violated by %r, %r, %r", x, y, z
                    )
                    return False
        return True


class FiniteMetricSpace(MetricSpace[T]):
    def __init__(self, points: Set[T], d: DistanceFunc[T]):
        self.points: Set[T] = points
        super().__init__(d)

    def __iter__(self):
        return iter(self.points)

    def __len__(self):
        return len(self.points)

    def pairs(self):
        return combinations(self.points, 2)

    def set_distance(self, A: Iterable[T], B: Iterable[T]):
        return min(self.d(u, v) for u, v in product(A, B))

    def diameter(self):
        return max((self.d(u, v) for u, v in self.pairs()), default=0)

    def validate(self, tol: float = 0.0, progress_bar: bool = False) -> bool:
        """validates that d is a metric on the points of this space"""
        return self.is_metric(self.d, self.points, tol, progress_bar)
