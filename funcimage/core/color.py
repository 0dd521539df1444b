"""
RGB colors

A Color holds three integer channels in [0, CHANNEL_MAX]. The only
operation the image algebra needs is weighted_mean, which interpolates
channel-wise and rounds back to integers.
"""

from typing import Tuple
import numpy as np


CHANNEL_MAX = 255


class Color:
    """
    Immutable RGB color

    Parameters
    ----------
    r, g, b : int
        Channel intensities in [0, 255]

    Raises
    ------
    ValueError
        If a channel lies outside [0, 255]

    Examples
    --------
    >>> Color(255, 0, 0).weighted_mean(Color(0, 0, 255), 0.5)
    Color(r=128, g=0, b=128)
    """

    __slots__ = ('_r', '_g', '_b')

    def __init__(self, r: int, g: int, b: int):
        for name, value in (('r', r), ('g', g), ('b', b)):
            if not 0 <= value <= CHANNEL_MAX:
                raise ValueError(
                    f"{name} must be in [0, {CHANNEL_MAX}], got {value}"
                )
        object.__setattr__(self, '_r', int(r))
        object.__setattr__(self, '_g', int(g))
        object.__setattr__(self, '_b', int(b))

    @property
    def r(self) -> int:
        return self._r

    @property
    def g(self) -> int:
        return self._g

    @property
    def b(self) -> int:
        return self._b

    def __setattr__(self, name, value):
        raise AttributeError("Color objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Color objects are immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return False
        return self.to_tuple() == other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return f"Color(r={self._r}, g={self._g}, b={self._b})"

    def weighted_mean(self, other: 'Color', fraction: float) -> 'Color':
        """
        Interpolate towards another color

        Each channel becomes round((1 - w) * self + w * other), so w = 0
        gives self and w = 1 gives other exactly. Fractions outside [0, 1]
        extrapolate and the channels are clipped to [0, 255]; a NaN
        fraction counts as 0.

        Parameters
        ----------
        other : Color
            Target color
        fraction : float
            Weight of other in the result

        Returns
        -------
        mixed : Color
        """
        fraction = np.nan_to_num(np.float64(fraction))
        with np.errstate(over='ignore', invalid='ignore'):
            mixed = (1 - fraction) * self.to_array() + fraction * other.to_array()
        mixed = np.rint(np.clip(np.nan_to_num(mixed), 0, CHANNEL_MAX))
        return Color(*(int(c) for c in mixed))

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self._r, self._g, self._b)

    def to_array(self) -> np.ndarray:
        """Channels as a float array of shape (3,)"""
        return np.array(self.to_tuple(), dtype=np.float64)

    @classmethod
    def from_hex(cls, code: str) -> 'Color':
        """
        Create color from '#rrggbb'

        Examples
        --------
        >>> Color.from_hex('#ff8000')
        Color(r=255, g=128, b=0)
        """
        code = code.strip().lstrip('#')
        if len(code) != 6:
            raise ValueError(f"Expected '#rrggbb', got '{code}'")
        return cls(int(code[0:2], 16), int(code[2:4], 16), int(code[4:6], 16))


class Colors:
    """Named colors"""
    black = Color(0, 0, 0)
    white = Color(CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX)
    red = Color(CHANNEL_MAX, 0, 0)
    green = Color(0, CHANNEL_MAX, 0)
    blue = Color(0, 0, CHANNEL_MAX)
