"""Tests for triba.board layouts."""

import math

import pytest

from triba.board import CircleLayout, GridLayout, PointSetLayout, create_layout
from triba.errors import InvalidGeometryError
from triba.models import BoardType, Point


def test_grid_points_column_major(grid3):
    pts = grid3.points()
    assert len(pts) == 9
    assert pts[0] == Point(x=80, y=80)
    assert pts[1] == Point(x=80, y=180)
    assert pts[3] == Point(x=180, y=80)
    assert pts[8] == Point(x=280, y=280)


def test_points_are_stable(grid3):
    assert grid3.points() is grid3.points()
    assert all(a is b for a, b in zip(grid3.points(), grid3.points()))


def test_default_grid_spacing():
    layout = GridLayout()
    assert len(layout) == 100
    assert layout.spacing_x == pytest.approx(440 / 9)
    xs = sorted({p.x for p in layout.points()})
    assert xs[0] == pytest.approx(80)
    assert xs[-1] == pytest.approx(520)


def test_circle_ring_counts():
    layout = CircleLayout()
    pts = layout.points()
    # center + floor(24 * r / 5) for r = 1..5
    assert len(pts) == 1 + 4 + 9 + 14 + 19 + 24
    assert pts[0] == Point(x=300, y=300)
    # first point of each ring sits straight above the center
    assert pts[1].x == pytest.approx(300)
    assert pts[1].y == pytest.approx(300 - 270 / 5)


def test_circle_outer_ring_radius():
    layout = CircleLayout()
    outer = layout.points()[-24:]
    for p in outer:
        assert math.hypot(p.x - 300, p.y - 300) == pytest.approx(270)


def test_find_point_resolves_within_tolerance(grid3):
    board_point = grid3.points()[4]
    assert grid3.find_point(Point(x=180, y=180)) is board_point
    assert grid3.find_point(Point(x=181.5, y=179)) is board_point
    assert grid3.find_point(Point(x=130, y=130)) is None
    assert not grid3.contains(Point(x=0, y=0))


def test_point_set_layout_keeps_order():
    pts = [Point(x=5, y=5), Point(x=1, y=1)]
    layout = PointSetLayout(pts)
    assert list(layout.points()) == pts


@pytest.mark.parametrize(
    "board_type, expected",
    [
        (BoardType.SQUARE8, 64),
        (BoardType.SQUARE10, 100),
        (BoardType.SQUARE12, 144),
        ("circle", 71),
    ],
)
def test_create_layout_presets(board_type, expected):
    assert len(create_layout(board_type)) == expected


def test_invalid_layout_parameters():
    with pytest.raises(InvalidGeometryError):
        GridLayout(size=1)
    with pytest.raises(InvalidGeometryError):
        GridLayout(size=5, width=100, height=100, padding=80)
    with pytest.raises(InvalidGeometryError):
        CircleLayout(rings=1)
