"""
funcimage core module

Combinators and the value types images are defined over.

This module provides:
- compose, lift: Function composition and point-wise lifting
- Point, Vector: Planar coordinates, polar conversion, distance
- Color, Colors: RGB colors with weighted mean
"""

from .functional import (
    compose,
    lift,
)

from .coordinate import (
    Point,
    Vector,
    distance,
    to_polar,
    from_polar,
    TAU,
)

from .color import (
    Color,
    Colors,
    CHANNEL_MAX,
)

__all__ = [
    # Combinators
    'compose',
    'lift',

    # Coordinates
    'Point',
    'Vector',
    'distance',
    'to_polar',
    'from_polar',
    'TAU',

    # Colors
    'Color',
    'Colors',
    'CHANNEL_MAX',
]
