"""
Image algebra

Infinite images as pure functions of a point, and the operations that
build new images from old ones.

Examples
--------
>>> from funcimage.core import Point, Vector, Colors
>>> from funcimage.images import circle, checker, cond, translate, constant
>>>
>>> board = checker(10, Colors.black, Colors.white)
>>> dot = translate(circle(Point(0, 0), 25, True, False), Vector(50, 50))
>>> picture = cond(dot, constant(Colors.red), board)
>>> picture(Point(50, 50))
Color(r=255, g=0, b=0)
"""

from .base import (
    BaseImage,
    Region,
    Image,
    Blend,
    as_image,
)

from .generators import (
    constant,
    circle,
    checker,
    polar_checker,
    rings,
    vertical_stripe,
)

from .transforms import (
    rotate,
    translate,
    scale,
)

from .compositing import (
    cond,
    lerp,
    darken,
    lighten,
    BLACK,
    WHITE,
)

__all__ = [
    # Handles
    'BaseImage',
    'Region',
    'Image',
    'Blend',
    'as_image',

    # Generators
    'constant',
    'circle',
    'checker',
    'polar_checker',
    'rings',
    'vertical_stripe',

    # Transforms
    'rotate',
    'translate',
    'scale',

    # Compositing
    'cond',
    'lerp',
    'darken',
    'lighten',
    'BLACK',
    'WHITE',
]
