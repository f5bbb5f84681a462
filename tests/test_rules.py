"""Tests for triba.rules - move validation and terminal-state search."""

import pytest

from triba.errors import InvalidGeometryError
from triba.geometry import segments_intersect
from triba.models import Player, Point, RejectionReason, Segment
from triba.rules import (
    get_unused_points,
    has_intersections,
    is_move_possible,
    is_point_used,
    validate_move,
)


def P(x, y) -> Point:
    return Point(x=x, y=y)


@pytest.fixture
def claimed(triangle_factory):
    """A single claimed right triangle with legs of 200 at the origin."""
    return [triangle_factory([(0, 0), (200, 0), (0, 200)], Player.A)]


class TestIsPointUsed:
    def test_vertices_are_used(self, claimed):
        for vertex in claimed[0].points:
            assert is_point_used(vertex, claimed)

    def test_near_vertex_is_used(self, claimed):
        assert is_point_used(P(1.5, -1), claimed)

    def test_edge_interiors_are_used(self, claimed):
        assert is_point_used(P(100, 0), claimed)
        assert is_point_used(P(0, 100), claimed)
        assert is_point_used(P(100, 100), claimed)

    def test_interior_and_exterior_points_are_free(self, claimed):
        assert not is_point_used(P(50, 50), claimed)
        assert not is_point_used(P(300, 300), claimed)

    def test_disabled_points_use_exact_match(self):
        disabled = {P(10, 10)}
        assert is_point_used(P(10, 10), [], disabled)
        # No tolerance for disabled lookups, unlike claimed vertices.
        assert not is_point_used(P(10.5, 10), [], disabled)

    def test_get_unused_points_keeps_order(self, claimed):
        pts = [P(300, 300), P(0, 0), P(50, 50), P(100, 0), P(400, 10)]
        assert get_unused_points(pts, claimed) == [P(300, 300), P(50, 50), P(400, 10)]


class TestValidateMove:
    def test_first_move_on_empty_board_is_legal(self):
        result = validate_move([P(0, 0), P(100, 0), P(0, 100)], [])
        assert result.legal
        assert result.reason is None

    def test_collinear_points_rejected(self):
        result = validate_move([P(0, 0), P(50, 0), P(100, 0)], [])
        assert not result.legal
        assert result.reason is RejectionReason.COLLINEAR
        assert result.message == "Points cannot be collinear!"

    def test_thin_triangle_rejected_as_collinear(self):
        result = validate_move([P(0, 0), P(100, 0), P(50, 1)], [])
        assert result.reason is RejectionReason.COLLINEAR

    def test_shared_vertex_is_already_used(self, claimed):
        # The edges only touch at (200, 0); geometry alone calls that no
        # intersection, the usability check rejects it.
        candidate = [P(200, 0), P(400, 0), P(300, 200)]
        assert not segments_intersect(
            Segment(left=P(0, 0), right=P(200, 0)),
            Segment(left=P(200, 0), right=P(300, 200)),
        )
        result = validate_move(candidate, claimed)
        assert result.reason is RejectionReason.ALREADY_USED

    def test_point_on_existing_edge_is_already_used(self, claimed):
        result = validate_move([P(100, 100), P(300, 100), P(300, 300)], claimed)
        assert result.reason is RejectionReason.ALREADY_USED

    def test_crossing_triangle_rejected(self, claimed):
        # No shared vertices; the new edges cross the claimed hypotenuse.
        candidate = [P(50, 50), P(300, 50), P(50, 300)]
        result = validate_move(candidate, claimed)
        assert result.reason is RejectionReason.INTERSECTS_EXISTING

    def test_used_takes_priority_over_collinear(self, claimed):
        result = validate_move([P(0, 0), P(300, 300), P(400, 400)], claimed)
        assert result.reason is RejectionReason.ALREADY_USED

    def test_collinear_takes_priority_over_intersection(self, claimed):
        # Collinear line that would also cross the hypotenuse.
        result = validate_move([P(50, 50), P(150, 150), P(250, 250)], claimed)
        assert result.reason is RejectionReason.COLLINEAR

    def test_disjoint_triangle_legal(self, claimed):
        result = validate_move([P(300, 300), P(400, 300), P(300, 400)], claimed)
        assert result.legal

    def test_enclosing_triangle_without_crossings_is_legal(self, claimed):
        result = validate_move([P(-100, -100), P(600, -100), P(-100, 600)], claimed)
        assert result.legal

    def test_disabled_point_rejected(self):
        result = validate_move([P(0, 0), P(100, 0), P(0, 100)], [], {P(100, 0)})
        assert result.reason is RejectionReason.ALREADY_USED

    def test_wrong_point_count_is_contract_error(self):
        with pytest.raises(InvalidGeometryError):
            validate_move([P(0, 0), P(100, 0)], [])

    def test_has_intersections_without_claims(self, triangle_factory):
        tri = triangle_factory([(0, 0), (100, 0), (0, 100)])
        assert not has_intersections(tri.segments, [])


class TestIsMovePossible:
    def test_fewer_than_three_unused(self, claimed):
        pts = list(claimed[0].points) + [P(500, 500), P(600, 500)]
        assert not is_move_possible(pts, claimed)

    def test_empty_point_set(self):
        assert not is_move_possible([], [])

    def test_known_constructible_triangle(self, claimed):
        pts = list(claimed[0].points) + [P(300, 300), P(400, 300), P(300, 400)]
        assert is_move_possible(pts, claimed)

    def test_only_collinear_leftovers(self, claimed):
        pts = list(claimed[0].points) + [P(300, 300), P(400, 300), P(500, 300)]
        assert not is_move_possible(pts, claimed)

    def test_only_crossing_leftovers(self, claimed):
        # Any triangle on these three crosses the claimed hypotenuse.
        pts = list(claimed[0].points) + [P(50, 50), P(300, 50), P(50, 300)]
        assert not is_move_possible(pts, claimed)

    def test_disabled_points_are_excluded(self):
        pts = [P(0, 0), P(100, 0), P(0, 100), P(100, 100)]
        assert is_move_possible(pts, [], {P(100, 100)})
        assert not is_move_possible(pts, [], {P(100, 100), P(0, 0)})

    def test_full_grid_has_moves(self, grid4):
        assert is_move_possible(grid4.points(), [])
