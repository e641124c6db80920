import logging
import math
from functools import partial

from minkowski.core.metric_space import MetricSpace
from minkowski.core.proximity import classify
from minkowski.metrics.lp import (Minkowski, l1_distance, l2_distance,
                                  linf_distance, lp_distance)

logger = logging.getLogger(__name__)


class LpMetric(MetricSpace):
    """
    A class representing an lp metric space. Given two vectors
    x, y in R^k, the distance between x and y according to the
    lp norm is ||x - y||_p = sum(abs(x[i] - y[i]) ** p for i in range(k)) ** 1/p.
    This forms a metric for all p >= 1. We can also consider the
    case of p = inf in which ||x - y||_inf = max(abs(x[i] - y[i]) for i in range(k))
    """

    def __init__(self, p: float):
        """
        Parameters
        ----------
        p: a float between one and infinity (including infinity)

        Examples
        --------
        For p = 2 we get the euclidean norm, and for p = float("inf") we
        get the maximum norm
        """
        if not p >= 1:
            raise ValueError(f"lp is a metric only for p >= 1, got p = {p}")
        super().__init__(self.__distance_func(p))
        self.p = p

    @staticmethod
    def __distance_func(p: float):
        dedicated = {1: l1_distance, 2: l2_distance, math.inf: linf_distance}
        if p in dedicated:
            logger.debug("using %s for p = %s", dedicated[p].__name__, p)
            return dedicated[p]
        return classify(Minkowski)(partial(lp_distance, p))

    def __repr__(self):
        return f"LpMetric(p={self.p!r})"
