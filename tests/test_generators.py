import numpy as np
import pytest
from hypothesis import given, strategies as st

from funcimage.core import Point, distance
from funcimage.images import (
    BaseImage,
    constant,
    circle,
    checker,
    polar_checker,
    rings,
    vertical_stripe,
)

from conftest import points


@given(points)
def test_constant_ignores_point(p):
    assert constant(7)(p) == 7


@pytest.mark.parametrize("p", [
    Point(0, 0),
    Point(-1e300, 1e300),
    Point(1e-300, -1e-300),
    Point(3, np.pi, is_polar=True),
])
def test_constant_at_extreme_points(p):
    assert constant("t")(p) == "t"


@pytest.mark.parametrize("x, expected", [
    (3, True),
    (5, False),
    (6, False),
    (-4.999, True),
])
def test_circle_scenario(x, expected):
    disc = circle(Point(0, 0), 5, True, False)

    assert disc(Point(x, 0)) is expected


@given(points, points, st.floats(min_value=0.1, max_value=1e6))
def test_circle_membership_matches_distance(q, p, r):
    disc = circle(q, r, "in", "out")

    assert disc(p) == ("in" if distance(q, p) < r else "out")


def test_circle_off_origin():
    disc = circle(Point(10, -10), 1, 1, 0)

    assert disc(Point(10.5, -10)) == 1
    assert disc(Point(0, 0)) == 0


cell_sizes = st.sampled_from([0.5, 1.0, 2.0, 8.0])
cell_offsets = st.sampled_from([0.25, 0.5, 0.75])
cell_indices = st.integers(min_value=-1000, max_value=1000)


@given(cell_sizes, cell_indices, cell_indices, cell_offsets, cell_offsets)
def test_checker_alternates_along_both_axes(d, i, j, fx, fy):
    board = checker(d, "a", "b")
    x = (i + fx) * d
    y = (j + fy) * d

    here = board(Point(x, y))

    assert board(Point(x + d, y)) != here
    assert board(Point(x, y + d)) != here
    assert board(Point(x + 2 * d, y)) == here
    assert board(Point(x + d, y + d)) == here


def test_checker_origin_cell_and_negative_coordinates():
    board = checker(1, "a", "b")

    assert board(Point(0.5, 0.5)) == "a"
    assert board(Point(-0.5, 0.5)) == "b"
    assert board(Point(-0.5, -0.5)) == "a"


def test_polar_checker_segments():
    board = polar_checker(1, 4, "a", "b")

    def at(radius, angle):
        return board(Point(radius * np.cos(angle), radius * np.sin(angle)))

    assert at(0.5, np.pi / 4) == "a"
    assert at(0.5, 3 * np.pi / 4) == "b"
    assert at(1.5, np.pi / 4) == "b"
    assert at(1.5, 3 * np.pi / 4) == "a"


def test_rings_alternate_with_radius():
    target = rings(Point(0, 0), 1, "in", "out")

    assert target(Point(0.5, 0)) == "in"
    assert target(Point(1.5, 0)) == "out"
    assert target(Point(2.5, 0)) == "in"


def test_rings_are_centered():
    target = rings(Point(10, 20), 2, 1, 0)

    assert target(Point(11, 20)) == 1
    assert target(Point(13, 20)) == 0


def test_rings_accept_polar_center():
    polar = rings(Point(10, np.pi / 2, is_polar=True), 1, "in", "out")
    cartesian = rings(Point(0, 10), 1, "in", "out")

    for p in [Point(0, 10), Point(0.5, 10), Point(0, 11.5), Point(-2.5, 10)]:
        assert polar(p) == cartesian(p)
    assert polar(Point(0, 10)) == "in"


def test_vertical_stripe_scenario():
    stripe = vertical_stripe(4, 1, 0)

    assert stripe(Point(1, 0)) == 1
    assert stripe(Point(2, 0)) == 0
    assert stripe(Point(-1.9, 1e9)) == 1


def test_generators_return_image_handles():
    disc = circle(Point(1, 2), 3, True, False)

    assert isinstance(disc, BaseImage)
    assert disc.name == "circle"
    assert disc.params == {"q": Point(1, 2), "r": 3, "inner": True, "outer": False}
    assert repr(disc) == "circle(q=Point(1.0, 2.0), r=3, inner=True, outer=False)"


def test_repr_tells_apart_images_with_different_values():
    assert repr(checker(1, "a", "b")) != repr(checker(1, "b", "a"))
    assert repr(vertical_stripe(2, 1, 0)) == "vertical_stripe(d=2, this_way=1, that_way=0)"


def test_images_are_immutable():
    img = constant(1)

    with pytest.raises(AttributeError):
        img.name = "other"


def test_degenerate_sizes_warn_but_still_build():
    with pytest.warns(RuntimeWarning, match="checker: d=0"):
        board = checker(0, "a", "b")
    with pytest.warns(RuntimeWarning, match="circle: r=-1"):
        disc = circle(Point(0, 0), -1, True, False)
    with pytest.warns(RuntimeWarning, match="vertical_stripe"):
        stripe = vertical_stripe(0, 1, 0)

    with np.errstate(all='ignore'):
        assert board(Point(1, 1)) == "b"
    assert disc(Point(0, 0)) is False
    assert stripe(Point(0, 0)) == 0
