"""
funcimage: functional images

Images are pure functions from points in the plane to values. They are
built from a handful of generators and combined with composition and
point-wise lifting; nothing is evaluated until an image is sampled.

Examples
--------
>>> from funcimage import Point, Colors, rings, lighten, constant
>>> target = rings(Point(0, 0), 10, Colors.red, Colors.blue)
>>> faded = lighten(target, constant(0.5))
>>> faded(Point(5, 0))
Color(r=255, g=128, b=128)
"""

from .core import (
    compose,
    lift,
    Point,
    Vector,
    distance,
    to_polar,
    from_polar,
    Color,
    Colors,
)

from .images import (
    BaseImage,
    Region,
    Image,
    Blend,
    constant,
    circle,
    checker,
    polar_checker,
    rings,
    vertical_stripe,
    rotate,
    translate,
    scale,
    cond,
    lerp,
    darken,
    lighten,
)


__version__ = '0.1.0'


__all__ = [
    # Combinators
    'compose',
    'lift',

    # Collaborators
    'Point',
    'Vector',
    'distance',
    'to_polar',
    'from_polar',
    'Color',
    'Colors',

    # Image algebra
    'BaseImage',
    'Region',
    'Image',
    'Blend',
    'constant',
    'circle',
    'checker',
    'polar_checker',
    'rings',
    'vertical_stripe',
    'rotate',
    'translate',
    'scale',
    'cond',
    'lerp',
    'darken',
    'lighten',
]


QUICK_REFERENCE = """
funcimage Quick Reference
=========================

COMBINATORS:
    compose(f, g, h)          - h(g(f(x)))
    lift(h, f, g)             - p -> h(f(p), g(p))

GENERATORS:
    constant(t)               - t everywhere
    circle(q, r, in, out)     - Disc of radius r around q
    checker(d, a, b)          - Squares of side d
    polar_checker(d, n, a, b) - Checker in (radius, angle)
    rings(q, d, a, b)         - Concentric rings around q
    vertical_stripe(d, a, b)  - Band 2|x| < d

TRANSFORMS:
    rotate(img, phi)          - Counter-clockwise about origin
    translate(img, v)         - Shift by vector
    scale(img, s)             - Magnify about origin

COMPOSITING:
    cond(region, a, b)        - a inside region, b outside
    lerp(blend, a, b)         - Mix a towards b by blend
    darken(img, blend)        - Mix towards black
    lighten(img, blend)       - Mix towards white

SAMPLING:
    img(Point(x, y))          - Evaluate at a point
"""


def help():
    """Print quick reference"""
    print(QUICK_REFERENCE)
