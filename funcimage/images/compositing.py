"""
Compositing operators

Combine color images point by point:
- cond: Pick one of two images by a region
- lerp: Mix two images with a spatially varying weight
- darken: Mix towards black
- lighten: Mix towards white
"""

from ..core.functional import lift
from ..core.color import Color, Colors
from .base import BaseImage, Image, Region, Blend, as_image
from .generators import constant


# Shared reference images; built once at import and never mutated
BLACK = constant(Colors.black)
WHITE = constant(Colors.white)


def _weighted_mean(fraction: float, this_color: Color, that_color: Color) -> Color:
    return this_color.weighted_mean(that_color, fraction)


def cond(region: Region, this_way: Image, that_way: Image) -> Image:
    """
    Put one image over another inside a region

    At p the result is this_way(p) where region(p) holds and that_way(p)
    elsewhere. Only the selected image is sampled.

    Examples
    --------
    >>> disc = circle(Point(0, 0), 1, True, False)
    >>> red_on_white = cond(disc, constant(Colors.red), constant(Colors.white))
    >>> red_on_white(Point(0, 0))
    Color(r=255, g=0, b=0)
    """
    region = as_image(region, "region")
    this_way = as_image(this_way, "this_way")
    that_way = as_image(that_way, "that_way")

    def sample(p):
        return this_way(p) if region(p) else that_way(p)

    return BaseImage(sample, name="cond",
                     region=region, this_way=this_way, that_way=that_way)


def lerp(blend: Blend, this_way: Image, that_way: Image) -> Image:
    """
    Mix two images

    At p the result is this_way(p).weighted_mean(that_way(p), blend(p)):
    blend 0 gives this_way, blend 1 gives that_way.

    Parameters
    ----------
    blend : Blend
        Weight of that_way at each point
    this_way, that_way : Image
        Images to mix
    """
    blend = as_image(blend, "blend")
    this_way = as_image(this_way, "this_way")
    that_way = as_image(that_way, "that_way")

    return BaseImage(lift(_weighted_mean, blend, this_way, that_way),
                     name="lerp",
                     blend=blend, this_way=this_way, that_way=that_way)


def darken(image: Image, blend: Blend) -> Image:
    """Mix an image towards black by blend"""
    return lerp(blend, image, BLACK)


def lighten(image: Image, blend: Blend) -> Image:
    """Mix an image towards white by blend"""
    return lerp(blend, image, WHITE)
