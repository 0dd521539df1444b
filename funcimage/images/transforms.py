"""
Geometric transforms

Each transform moves the image by pulling the sampling point back through
the inverse motion:
- rotate: Sample at the point rotated by -phi
- translate: Sample at p - v
- scale: Sample at p / s
"""

from typing import TypeVar

from ..core.functional import compose, lift
from ..core.coordinate import Point, Vector, to_polar, from_polar
from .base import BaseImage, as_image, warn_degenerate


T = TypeVar('T')


def rotate(image: BaseImage[T], phi: float) -> BaseImage[T]:
    """
    Rotate an image counter-clockwise by phi radians about the origin

    Examples
    --------
    >>> half = BaseImage(lambda p: p.first > 0)
    >>> quarter_turn = rotate(half, np.pi / 2)
    >>> quarter_turn(Point(0, 1))
    True
    """
    image = as_image(image)

    def turn_back(p: Point) -> Point:
        return Point(p.first, p.second - phi, is_polar=True)

    return BaseImage(
        compose(to_polar, turn_back, from_polar, image),
        name="rotate", image=image, phi=phi,
    )


def translate(image: BaseImage[T], v: Vector) -> BaseImage[T]:
    """
    Shift an image by a vector

    Examples
    --------
    >>> dot = circle(Point(0, 0), 1, True, False)
    >>> translate(dot, Vector(5, 0))(Point(5, 0))
    True
    """
    image = as_image(image)

    def shift_back(p: Point) -> Point:
        return p - v

    return BaseImage(lift(image, shift_back),
                     name="translate", image=image, v=v)


def scale(image: BaseImage[T], s: float) -> BaseImage[T]:
    """Magnify an image by factor s about the origin"""
    image = as_image(image)
    if s == 0:
        warn_degenerate("scale", "s", s, "non-zero")

    def shrink_back(p: Point) -> Point:
        return p / s

    return BaseImage(lift(image, shrink_back),
                     name="scale", image=image, s=s)
