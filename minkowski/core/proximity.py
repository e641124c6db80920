from abc import ABC, abstractmethod
from functools import partial
from typing import Any, Callable, Generic, Type, TypeVar

T = TypeVar("T")
F = TypeVar("F", bound=Callable)


class Proximity(ABC):
    """
    Something that can tell how close it is to other points. Nothing is
    assumed about the measure, it may be a similarity score that violates
    the metric axioms.
    """

    @abstractmethod
    def distance(self, other: Any):
        pass


class Metric(Proximity):
    """
    A proximity which is a metric in the mathematical sense, i.e. for all
    points x, y, z
    1. d(x, y) >= 0 and d(x, y) == 0 iff x == y
    2. d(x, y) == d(y, x)
    3. d(x, y) <= d(x, z) + d(z, y)

    Nothing is checked at runtime. Algorithms which prune using the
    triangle inequality should require this capability rather than
    Proximity. MetricSpace.is_metric can validate the claim on a sample.
    """


class Minkowski(Metric):
    """
    A Minkowski (lp) distance for some p >= 1:
    ||x - y||_p = sum(abs(x[i] - y[i]) ** p for i in range(k)) ** (1 / p)
    or the limiting case p = inf, max(abs(x[i] - y[i]) for i in range(k))
    """


def classify(capability: Type[Proximity]) -> Callable[[F], F]:
    """
    Decorator that records a capability on a distance function

    Parameters
    ----------
    capability: Proximity or one of its refinements (Metric, Minkowski)

    Examples
    --------
    >>> @classify(Metric)
    ... def discrete(x, y):
    ...     return 0 if x == y else 1
    >>> satisfies(discrete, Metric)
    True
    """
    if not (isinstance(capability, type) and issubclass(capability, Proximity)):
        raise TypeError(f"{capability!r} is not a proximity capability")

    def decorator(func: F) -> F:
        func.__capability__ = capability  # type: ignore
        return func
    return decorator


def _forwarding_chain(obj: Any):
    yield obj
    seen = {id(obj)}
    while True:
        if isinstance(obj, partial):
            obj = obj.func
        elif hasattr(obj, "__wrapped__"):
            obj = obj.__wrapped__
        else:
            return
        if id(obj) in seen:
            return
        seen.add(id(obj))
        yield obj


def unwrap(obj: Any) -> Any:
    """
    Follow forwarding wrappers down to the object they forward to.
    Understands the __wrapped__ attribute (functools.wraps, Ref) and
    functools.partial.
    """
    *_, target = _forwarding_chain(obj)
    return target


def satisfies(obj: Any, capability: Type[Proximity]) -> bool:
    """
    Check whether obj carries the given capability, either as an instance
    of it or as a function classified with it (or with a refinement of it).
    A wrapper which only forwards to something with the capability has it
    as well.
    """
    if not (isinstance(capability, type) and issubclass(capability, Proximity)):
        raise TypeError(f"{capability!r} is not a proximity capability")
    for target in _forwarding_chain(obj):
        if isinstance(target, capability):
            return True
        marked = getattr(target, "__capability__", None)
        if isinstance(marked, type) and issubclass(marked, capability):
            return True
    return False


class Ref(Generic[T]):
    """
    A forwarding wrapper around a point. It has every capability its
    target has, and distances between wrappers are the distances between
    their targets, i.e. Ref(x).distance(Ref(y)) == x.distance(y)
    """

    def __init__(self, target: T):
        self.__wrapped__ = target

    def distance(self, other: Any):
        return unwrap(self).distance(unwrap(other))

    def __eq__(self, other):
        return unwrap(self) == unwrap(other)

    def __hash__(self):
        return hash(unwrap(self))

    def __repr__(self):
        return f"Ref({self.__wrapped__!r})"
