import numpy as np
import pytest
from minkowski.core.coordinates import (ArrayCoordinates, Coordinates,
                                        SequenceCoordinates, as_coordinates,
                                        dims)
from minkowski.core.proximity import Ref


class Polar(Coordinates[float]):
    """a point stored as a radius and an angle, exposing cartesian coordinates"""

    def __init__(self, r, theta):
        self.r, self.theta = r, theta

    def dims(self):
        return 2

    def coord(self, i):
        return self.r * (np.cos(self.theta) if i == 0 else np.sin(self.theta))


class TestAsCoordinates:

    def test_sequences(self):
        for point in [(1, 2, 3), [1, 2, 3]]:
            x = as_coordinates(point)
            assert isinstance(x, SequenceCoordinates)
            assert x.dims() == 3
            assert [x.coord(i) for i in range(3)] == [1, 2, 3]

    def test_array(self):
        x = as_coordinates(np.array([0.5, 1.5]))
        assert isinstance(x, ArrayCoordinates)
        assert x.dims() == 2
        assert x.coord(1) == 1.5

    def test_coordinates_are_returned_as_is(self):
        p = Polar(1.0, 0.0)
        assert as_coordinates(p) is p
        assert list(p) == [1.0, 0.0]
        assert len(p) == 2

    def test_ref_is_unwrapped(self):
        p = Polar(2.0, 0.0)
        assert as_coordinates(Ref(p)) is p
        assert as_coordinates(Ref(Ref((1, 2)))).dims() == 2

    def test_zero_dimensional(self):
        assert dims(()) == 0
        assert dims(np.array([])) == 0

    def test_not_a_point(self):
        with pytest.raises(TypeError):
            as_coordinates(3.0)
        with pytest.raises(TypeError):
            as_coordinates("abc")
        with pytest.raises(TypeError):
            as_coordinates({1: 2})

    def test_array_must_be_one_dimensional(self):
        with pytest.raises(ValueError):
            as_coordinates(np.zeros((2, 2)))
        with pytest.raises(ValueError):
            as_coordinates(np.array(1.0))
