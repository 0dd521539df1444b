"""
Planar coordinates

A Point is a pair of numbers with a mode flag:
- Cartesian (is_polar=False): first = x, second = y
- Polar (is_polar=True): first = radius, second = angle in radians

A Vector is a Cartesian displacement, used only additively against Points.

Conversions:
- to_polar: (x, y) → (hypot(x, y), arctan2(y, x))
- from_polar: (r, φ) → (r·cos φ, r·sin φ)
- distance: Euclidean distance between two points
"""

from typing import Tuple
import numpy as np


TAU = 2 * np.pi


class Point:
    """
    Immutable 2D point in Cartesian or polar form

    Parameters
    ----------
    first : float
        x coordinate, or radius when polar
    second : float
        y coordinate, or angle when polar
    is_polar : bool
        Interpretation of the two components

    Examples
    --------
    >>> p = Point(3, 4)
    >>> to_polar(p).first
    5.0
    >>> Point(1, 0, is_polar=True)
    Point(1.0, 0.0, is_polar=True)
    """

    __slots__ = ('_first', '_second', '_is_polar', '_hash')

    def __init__(self, first: float, second: float, is_polar: bool = False):
        object.__setattr__(self, '_first', np.float64(first))
        object.__setattr__(self, '_second', np.float64(second))
        object.__setattr__(self, '_is_polar', bool(is_polar))
        object.__setattr__(
            self, '_hash', hash((float(first), float(second), bool(is_polar)))
        )

    @property
    def first(self) -> float:
        """x, or radius in polar form"""
        return self._first

    @property
    def second(self) -> float:
        """y, or angle in polar form"""
        return self._second

    @property
    def is_polar(self) -> bool:
        return self._is_polar

    def __setattr__(self, name, value):
        raise AttributeError("Point objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Point objects are immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return False
        return (self._first == other._first and
                self._second == other._second and
                self._is_polar == other._is_polar)

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        if self._is_polar:
            return f"Point({float(self._first)}, {float(self._second)}, is_polar=True)"
        return f"Point({float(self._first)}, {float(self._second)})"

    def __iter__(self):
        yield self._first
        yield self._second

    def __add__(self, v: 'Vector') -> 'Point':
        """Displace a Cartesian point by a vector"""
        if not isinstance(v, Vector):
            return NotImplemented
        p = from_polar(self)
        return Point(p.first + v.first, p.second + v.second)

    def __sub__(self, v: 'Vector') -> 'Point':
        """Displace a Cartesian point by the opposite of a vector"""
        if not isinstance(v, Vector):
            return NotImplemented
        p = from_polar(self)
        return Point(p.first - v.first, p.second - v.second)

    def __truediv__(self, s: float) -> 'Point':
        """
        Shrink a Cartesian point towards the origin

        Division goes through numpy, so s == 0 yields inf/nan components
        instead of raising.
        """
        p = from_polar(self)
        return Point(np.divide(p.first, s), np.divide(p.second, s))

    def to_tuple(self) -> Tuple[float, float]:
        return (float(self._first), float(self._second))

    def to_array(self) -> np.ndarray:
        """Components as a float array of shape (2,)"""
        return np.array([self._first, self._second], dtype=np.float64)


class Vector:
    """
    Immutable 2D displacement

    Examples
    --------
    >>> Point(1, 1) - Vector(1, 2)
    Point(0.0, -1.0)
    """

    __slots__ = ('_first', '_second')

    def __init__(self, first: float, second: float):
        object.__setattr__(self, '_first', np.float64(first))
        object.__setattr__(self, '_second', np.float64(second))

    @property
    def first(self) -> float:
        return self._first

    @property
    def second(self) -> float:
        return self._second

    def __setattr__(self, name, value):
        raise AttributeError("Vector objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Vector objects are immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return False
        return self._first == other._first and self._second == other._second

    def __hash__(self) -> int:
        return hash((float(self._first), float(self._second)))

    def __repr__(self) -> str:
        return f"Vector({float(self._first)}, {float(self._second)})"

    def __neg__(self) -> 'Vector':
        return Vector(-self._first, -self._second)


def to_polar(p: Point) -> Point:
    """
    Convert a Cartesian point to polar form

    Polar input is returned unchanged. The angle lies in (-π, π].

    Examples
    --------
    >>> to_polar(Point(0, 2))
    Point(2.0, 1.5707963267948966, is_polar=True)
    """
    if p.is_polar:
        return p
    return Point(np.hypot(p.first, p.second),
                 np.arctan2(p.second, p.first),
                 is_polar=True)


def from_polar(p: Point) -> Point:
    """Convert a polar point to Cartesian form; Cartesian input is returned unchanged"""
    if not p.is_polar:
        return p
    return Point(p.first * np.cos(p.second), p.first * np.sin(p.second))


def distance(a: Point, b: Point) -> float:
    """
    Euclidean distance between two points

    Polar arguments are converted to Cartesian first.

    Examples
    --------
    >>> distance(Point(0, 0), Point(3, 4))
    5.0
    """
    a = from_polar(a)
    b = from_polar(b)
    return float(np.hypot(a.first - b.first, a.second - b.second))
