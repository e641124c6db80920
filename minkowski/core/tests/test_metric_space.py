import logging
from typing import Dict, Tuple

from minkowski.core.metric_space import FiniteMetricSpace, MetricSpace


class TestIsMetric:

    N = 6

    def test_absolute_difference(self):
        assert MetricSpace.is_metric(lambda x, y: abs(y - x), set(range(self.N)))

    def test_discrete_metric(self):
        assert MetricSpace.is_metric(
            lambda x, y: 0 if x == y else 1, set(range(self.N))
        )

    def test_custom_metric(self):
        S = {1, 2, 3}
        dy: Dict[Tuple[int, int], float] = {(1, 2): 0.5 , (1, 3): 0.9, (2, 3): 1.4}
        dy.update({(v, u): d for (u, v), d in dy.items()})
        dy.update({(u, u): 0 for u in S})
        assert MetricSpace.is_metric(lambda x, y: dy[(x, y)], S)
        dy[(2, 3)] = dy[(3, 2)] = 1.5
        assert not MetricSpace.is_metric(lambda x, y: dy[(x, y)], S)

    def test_not_symmetric(self):
        assert not MetricSpace.is_metric(
            lambda x, y: 2 * (y - x) if y > x else (x - y), set(range(self.N))
        )

    def test_nonzero_self_distance(self):
        assert not MetricSpace.is_metric(lambda x, y: 1, set(range(self.N)))

    def test_zero_distance_between_distinct_points(self):
        assert not MetricSpace.is_metric(
            lambda x, y: abs(y // 2 - x // 2), set(range(self.N))
        )

    def test_squared_difference_is_not_a_metric(self):
        assert not MetricSpace.is_metric(lambda x, y: (y - x) ** 2, set(range(self.N)))

    def test_tolerance(self):
        d = lambda x, y: abs(y - x) + (1e-12 if x > y else 0)
        assert not MetricSpace.is_metric(d, set(range(self.N)))
        assert MetricSpace.is_metric(d, set(range(self.N)), tol=1e-9)

    def test_progress_bar(self):
        assert MetricSpace.is_metric(
            lambda x, y: abs(y - x), set(range(self.N)), progress_bar=True
        )

    def test_violation_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="minkowski.core.metric_space"):
            assert not MetricSpace.is_metric(lambda x, y: (y - x) ** 2, {0, 1, 2})
        assert "triangle inequality" in caplog.text


class TestFiniteMetricSpace:

    N = 5

    def test_container(self):
        X = FiniteMetricSpace(set(range(self.N)), lambda x, y: abs(y - x))
        assert len(X) == self.N
        assert set(X) == set(range(self.N))
        assert len(list(X.pairs())) == self.N * (self.N - 1) // 2

    def test_set_distance(self):
        X = FiniteMetricSpace(set(range(self.N)), lambda x, y: abs(y - x))
        assert X.set_distance({0, 1}, {3, 4}) == 2
        assert X.set_distance({2}, {2, 4}) == 0

    def test_diameter(self):
        X = FiniteMetricSpace(set(range(self.N)), lambda x, y: abs(y - x))
        assert X.diameter() == self.N - 1
        assert FiniteMetricSpace({0}, lambda x, y: abs(y - x)).diameter() == 0

    def test_validate(self):
        assert FiniteMetricSpace(set(range(self.N)), lambda x, y: abs(y - x)).validate()
        assert not FiniteMetricSpace(
            set(range(self.N)), lambda x, y: (y - x) ** 2
        ).validate()
