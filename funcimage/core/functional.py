"""
Function combinators

The two primitives the image algebra is built from:
- compose: Left-to-right composition, compose(f, g, h)(x) = h(g(f(x)))
- lift: Point-wise lifting, lift(h, f, g)(p) = h(f(p), g(p))

Both check their arguments when called, so a malformed chain fails before
any image is built rather than on first sampling.
"""

from typing import Callable
import inspect


def _name_of(func: Callable) -> str:
    return getattr(func, '__name__', type(func).__name__)


def _require_callable(func, role: str) -> None:
    if not callable(func):
        raise TypeError(f"{role} must be callable, got {type(func).__name__}")


def _check_arity(h: Callable, n: int) -> None:
    """Reject h if its signature cannot take n positional arguments"""
    try:
        signature = inspect.signature(h)
    except (TypeError, ValueError):
        # builtins and ufuncs without introspectable signatures
        return
    try:
        signature.bind(*([None] * n))
    except TypeError:
        raise TypeError(
            f"{_name_of(h)}{signature} cannot be lifted over {n} function(s)"
        ) from None


def compose(*functions: Callable) -> Callable:
    """
    Compose functions left-to-right

    compose(f1, f2, ..., fn)(x) = fn(...f2(f1(x)))

    Parameters
    ----------
    *functions : Callable
        Unary functions; the output of each feeds the next

    Returns
    -------
    composed : Callable
        Unary function; the identity when no functions are given

    Raises
    ------
    TypeError
        If any argument is not callable

    Examples
    --------
    >>> double_then_negate = compose(lambda x: 2 * x, lambda x: -x)
    >>> double_then_negate(3)
    -6
    >>> compose()(42)
    42
    """
    for func in functions:
        _require_callable(func, "compose argument")

    if not functions:
        def identity(x):
            return x
        return identity

    def composed(x):
        result = x
        for func in functions:
            result = func(result)
        return result

    composed.__name__ = ' → '.join(_name_of(f) for f in functions)

    return composed


def lift(h: Callable, *functions: Callable) -> Callable:
    """
    Lift an n-ary function point-wise over n unary functions

    lift(h, f1, ..., fn)(p) = h(f1(p), ..., fn(p))

    With no functions, lift(h)(p) = h() and p is ignored.

    Parameters
    ----------
    h : Callable
        Combining function taking n arguments
    *functions : Callable
        Unary functions sharing one argument

    Returns
    -------
    lifted : Callable
        Unary function of the shared argument

    Raises
    ------
    TypeError
        If h or any function is not callable, or h cannot take n arguments

    Examples
    --------
    >>> add = lambda a, b: a + b
    >>> f = lift(add, lambda x: x * x, lambda x: x + 1)
    >>> f(3)
    13
    >>> lift(lambda: 'c')('ignored')
    'c'
    """
    _require_callable(h, "lifted function")
    for func in functions:
        _require_callable(func, "lift argument")
    _check_arity(h, len(functions))

    def lifted(p):
        return h(*[func(p) for func in functions])

    lifted.__name__ = f"lift({_name_of(h)})"

    return lifted
