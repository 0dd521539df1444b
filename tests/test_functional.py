import pytest
from hypothesis import given, strategies as st

from funcimage.core import compose, lift

from conftest import points


@given(points)
def test_empty_compose_is_identity(p):
    assert compose()(p) == p


@given(st.integers(min_value=-10**6, max_value=10**6))
def test_compose_applies_left_to_right(x):
    f = lambda v: v + 3
    g = lambda v: v * 2

    assert compose(f, g)(x) == g(f(x))
    assert compose(g, f)(x) == f(g(x))


def test_compose_chains_different_types():
    to_text = compose(abs, str, len)

    assert to_text(-12345) == 5


def test_compose_is_reusable():
    inc = compose(lambda v: v + 1)

    assert [inc(0), inc(0), inc(5)] == [1, 1, 6]


def test_compose_names_the_chain():
    def first(x):
        return x

    def second(x):
        return x

    assert compose(first, second).__name__ == "first → second"


def test_compose_rejects_non_callable():
    with pytest.raises(TypeError, match="compose argument must be callable"):
        compose(abs, 42)


@given(st.integers(), st.integers())
def test_lift_applies_h_to_each_result(a, b):
    h = lambda x, y, z: (x, y, z)
    lifted = lift(h, lambda p: p[0], lambda p: p[1], lambda p: p[0] - p[1])

    assert lifted((a, b)) == (a, b, a - b)


def test_nullary_lift_ignores_argument():
    calls = []

    def h():
        calls.append(None)
        return "value"

    lifted = lift(h)

    assert lifted(1) == "value"
    assert lifted("anything") == "value"
    assert len(calls) == 2


def test_lift_single_function():
    assert lift(str, lambda p: p * 2)(21) == "42"


def test_lift_rejects_wrong_arity():
    with pytest.raises(TypeError, match="cannot be lifted over 1"):
        lift(lambda a, b: a + b, abs)


def test_lift_accepts_variadic_h():
    lifted = lift(lambda *args: sum(args), abs, abs, abs)

    assert lifted(-2) == 6


def test_lift_rejects_non_callable():
    with pytest.raises(TypeError, match="lifted function must be callable"):
        lift(3, abs)
    with pytest.raises(TypeError, match="lift argument must be callable"):
        lift(max, abs, "abs")
