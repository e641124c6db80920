from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

import numpy as np

from minkowski.core.proximity import unwrap

V = TypeVar("V")


class Coordinates(ABC, Generic[V]):
    """
    A point with a fixed number of dimensions and one real coordinate
    value per dimension. Every coordinate of a point has the same
    scalar type V.
    """

    @abstractmethod
    def dims(self) -> int:
        pass

    @abstractmethod
    def coord(self, i: int) -> V:
        pass

    def __len__(self):
        return self.dims()

    def __iter__(self):
        return (self.coord(i) for i in range(self.dims()))


class SequenceCoordinates(Coordinates[V]):
    """Coordinates read from a python sequence such as a tuple or a list"""

    def __init__(self, values: Sequence):
        self.values = values

    def dims(self) -> int:
        return len(self.values)

    def coord(self, i: int) -> V:
        return self.values[i]

    def __repr__(self):
        return f"{type(self).__name__}({self.values!r})"


class ArrayCoordinates(Coordinates[V]):
    """Coordinates read from a one dimensional numpy array"""

    def __init__(self, values: np.ndarray):
        if values.ndim != 1:
            raise ValueError(
                f"points must be one dimensional arrays, got shape {values.shape}"
            )
        self.values = values

    def dims(self) -> int:
        return self.values.shape[0]

    def coord(self, i: int) -> V:
        return self.values[i]

    def __repr__(self):
        return f"{type(self).__name__}({self.values!r})"


def as_coordinates(x: Any) -> Coordinates:
    """
    Adapt x to the Coordinates interface

    Parameters
    ----------
    x: a Coordinates instance, a one dimensional numpy array, a sequence
        of numbers, or a forwarding wrapper (see proximity.Ref) around
        one of those

    Returns
    -------
    x itself if it already implements Coordinates, otherwise a view over it
    """
    x = unwrap(x)
    if isinstance(x, Coordinates):
        return x
    if isinstance(x, np.ndarray):
        return ArrayCoordinates(x)
    if isinstance(x, Sequence) and not isinstance(x, (str, bytes)):
        return SequenceCoordinates(x)
    raise TypeError(f"{type(x).__name__} object can not be used as a point")


def dims(x: Any) -> int:
    return as_coordinates(x).dims()
