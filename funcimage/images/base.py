"""
Image handles

A BaseImage wraps a pure function Point → T. Three instantiations carry
names of their own:
- Region: Point → bool
- Image: Point → Color
- Blend: Point → fraction, nominally in [0, 1]
"""

from typing import Any, Callable, Dict, Generic, TypeVar
import warnings

from ..core.coordinate import Point
from ..core.color import Color


T = TypeVar('T')


class BaseImage(Generic[T]):
    """
    Immutable handle to a mapping from points to values

    Calling the handle with a Point samples it. The name and params are
    only used for repr and never affect sampling.

    Parameters
    ----------
    sampler : Callable[[Point], T]
        Pure function to evaluate at each point
    name : str
        Human-readable construction name
    **params
        Construction parameters, for display

    Examples
    --------
    >>> img = BaseImage(lambda p: p.first > 0, name='right_half')
    >>> img(Point(1, 0))
    True
    >>> img
    right_half
    """

    __slots__ = ('_sampler', '_name', '_params')

    def __init__(self, sampler: Callable[[Point], T], name: str = "image", **params):
        if not callable(sampler):
            raise TypeError(f"sampler must be callable, got {type(sampler).__name__}")
        object.__setattr__(self, '_sampler', sampler)
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_params', dict(params))

    @property
    def name(self) -> str:
        return self._name

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    def __setattr__(self, name, value):
        raise AttributeError("BaseImage objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("BaseImage objects are immutable")

    def __call__(self, p: Point) -> T:
        """Sample at a point"""
        return self._sampler(p)

    def __repr__(self) -> str:
        params_str = ', '.join(f"{k}={v!r}" for k, v in self._params.items())
        return f"{self._name}({params_str})" if params_str else self._name

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


Region = BaseImage[bool]
Image = BaseImage[Color]
Blend = BaseImage[float]


def as_image(source, role: str = "image") -> BaseImage:
    """
    Wrap a plain callable as a BaseImage; BaseImage input is returned as-is

    Raises
    ------
    TypeError
        If source is not callable
    """
    if isinstance(source, BaseImage):
        return source
    if not callable(source):
        raise TypeError(f"{role} must be callable, got {type(source).__name__}")
    return BaseImage(source, name=getattr(source, '__name__', 'image'))


def warn_degenerate(factory: str, param: str, value, requirement: str) -> None:
    """Report a numeric parameter outside its meaningful range"""
    warnings.warn(
        f"{factory}: {param}={value!r} is not {requirement}; "
        f"the resulting image is degenerate",
        RuntimeWarning,
        stacklevel=3,
    )
