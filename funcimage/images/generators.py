"""
Pattern generators

Factories for images defined directly by a formula over the point:
- constant: The same value everywhere
- circle: Disc around a center
- checker: Axis-aligned checkerboard
- polar_checker: Checkerboard in (radius, angle) space
- rings: Concentric rings around a center
- vertical_stripe: Band of given width centered on x = 0

Numeric parameters are not validated. A zero or negative size produces
whatever the arithmetic produces; construction only emits a RuntimeWarning.
"""

from typing import TypeVar
import numpy as np

from ..core.functional import compose
from ..core.coordinate import Point, Vector, distance, to_polar, from_polar, TAU
from .base import BaseImage, warn_degenerate
from .transforms import translate


T = TypeVar('T')


def constant(t: T) -> BaseImage[T]:
    """
    Image with the same value at every point

    Examples
    --------
    >>> constant(7)(Point(-1e9, 3))
    7
    """
    def sample(p: Point) -> T:
        return t

    return BaseImage(sample, name="constant", t=t)


def circle(q: Point, r: float, inner: T, outer: T) -> BaseImage[T]:
    """
    Disc of radius r around q

    Points strictly closer than r map to inner; the boundary and everything
    beyond map to outer.

    Parameters
    ----------
    q : Point
        Center
    r : float
        Radius
    inner, outer : T
        Values inside and outside the disc

    Examples
    --------
    >>> disc = circle(Point(0, 0), 5, True, False)
    >>> disc(Point(3, 0)), disc(Point(5, 0))
    (True, False)
    """
    if r <= 0:
        warn_degenerate("circle", "r", r, "positive")

    def sample(p: Point) -> T:
        return inner if distance(q, p) < r else outer

    return BaseImage(sample, name="circle", q=q, r=r,
                     inner=inner, outer=outer)


def checker(d: float, this_way: T, that_way: T) -> BaseImage[T]:
    """
    Checkerboard of squares with side d

    The square containing (x, y) is selected by the parity of
    floor(x / d) + floor(y / d): even gives this_way, odd gives that_way.
    The components are read as stored, so a polar point is checkered in
    (radius, angle) space.

    Examples
    --------
    >>> board = checker(1, 'a', 'b')
    >>> board(Point(0.5, 0.5)), board(Point(1.5, 0.5))
    ('a', 'b')
    """
    if d <= 0:
        warn_degenerate("checker", "d", d, "positive")

    def sample(p: Point) -> T:
        x = np.floor(np.divide(p.first, d))
        y = np.floor(np.divide(p.second, d))
        return this_way if (x + y) % 2 == 0 else that_way

    return BaseImage(sample, name="checker", d=d,
                     this_way=this_way, that_way=that_way)


def polar_checker(d: float, n: int, this_way: T, that_way: T) -> BaseImage[T]:
    """
    Checkerboard in polar coordinates

    The radius is cut every d units and the full turn into n segments:
    the angle is rescaled by d * n / 2π before deferring to checker.

    Parameters
    ----------
    d : float
        Radial length of each piece
    n : int
        Number of angular segments
    this_way, that_way : T
        Alternating values
    """
    board = checker(d, this_way, that_way)

    def stretch_angle(p: Point) -> Point:
        return Point(p.first, p.second * d * n / TAU, is_polar=True)

    return BaseImage(
        compose(to_polar, stretch_angle, board),
        name="polar_checker", d=d, n=n,
    )


def rings(q: Point, d: float, this_way: T, that_way: T) -> BaseImage[T]:
    """
    Concentric rings of width d around q

    Examples
    --------
    >>> target = rings(Point(0, 0), 1, 'in', 'out')
    >>> target(Point(0.5, 0)), target(Point(1.5, 0))
    ('in', 'out')
    """
    c = from_polar(q)
    shifted = translate(polar_checker(d, 1, this_way, that_way),
                        Vector(c.first, c.second))

    return BaseImage(shifted, name="rings", q=q, d=d)


def vertical_stripe(d: float, this_way: T, that_way: T) -> BaseImage[T]:
    """
    Vertical band of width d centered on the y axis

    Points with 2|x| < d map to this_way, all others to that_way.

    Examples
    --------
    >>> stripe = vertical_stripe(4, 1, 0)
    >>> stripe(Point(1, 0)), stripe(Point(2, 0))
    (1, 0)
    """
    if d <= 0:
        warn_degenerate("vertical_stripe", "d", d, "positive")

    def sample(p: Point) -> T:
        return this_way if np.abs(p.first) * 2 < d else that_way

    return BaseImage(sample, name="vertical_stripe", d=d,
                     this_way=this_way, that_way=that_way)
