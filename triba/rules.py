"""Move validation and terminal-state search for Triba.

These helpers are side-effect free: callers pass in the claimed triangles
and the disabled point set and receive verdicts. :class:`GameEngine`
owns the state and decides what to do with them.

Point identity is tolerance-based for claimed vertices and edges
(:func:`points_close`, :func:`point_on_segment`) but exact for the
disabled set, which holds the board's own point objects.
"""
from __future__ import annotations

import logging
from itertools import combinations
from typing import AbstractSet, Iterable, Sequence

from .geometry import orientation, point_on_segment, points_close, segments_intersect
from .models import (
    LegalityResult,
    Orientation,
    Point,
    RejectionReason,
    Segment,
    Triangle,
)

__all__ = [
    "get_unused_points",
    "has_intersections",
    "is_move_possible",
    "is_point_used",
    "validate_move",
]

logger = logging.getLogger(__name__)


def is_point_used(
    point: Point,
    triangles: Sequence[Triangle],
    disabled: AbstractSet[Point] = frozenset(),
) -> bool:
    """Return True if ``point`` is disabled, a claimed vertex, or on a claimed edge."""
    if point in disabled:
        return True
    for triangle in triangles:
        if any(points_close(vertex, point) for vertex in triangle.points):
            return True
        if any(point_on_segment(point, segment) for segment in triangle.segments):
            return True
    return False


def get_unused_points(
    points: Iterable[Point],
    triangles: Sequence[Triangle],
    disabled: AbstractSet[Point] = frozenset(),
) -> list[Point]:
    """Return the points still available for play, in board order."""
    return [p for p in points if not is_point_used(p, triangles, disabled)]


def _claimed_segments(triangles: Sequence[Triangle]) -> list[Segment]:
    return [segment for triangle in triangles for segment in triangle.segments]


def has_intersections(
    candidate_segments: Iterable[Segment],
    triangles: Sequence[Triangle],
) -> bool:
    """Return True if any candidate segment crosses a claimed triangle's edge."""
    existing = _claimed_segments(triangles)
    if not existing:
        return False
    for candidate in candidate_segments:
        for segment in existing:
            if segments_intersect(candidate, segment):
                return True
    return False


def validate_move(
    points: Sequence[Point],
    triangles: Sequence[Triangle],
    disabled: AbstractSet[Point] = frozenset(),
) -> LegalityResult:
    """Decide whether the three ``points`` form a legal move.

    Checks run in a fixed order and stop at the first failure, so the most
    specific diagnostic wins when several apply:

    1. any point already used -> ``ALREADY_USED``
    2. the points are collinear (or too thin) -> ``COLLINEAR``
    3. an edge crosses a claimed edge -> ``INTERSECTS_EXISTING``

    Raises:
        InvalidGeometryError: if ``points`` does not hold exactly 3 points.
    """
    candidate = Triangle.create(points)

    if any(is_point_used(p, triangles, disabled) for p in candidate.points):
        return LegalityResult.rejected(RejectionReason.ALREADY_USED)

    if orientation(*candidate.points) is Orientation.COLLINEAR:
        return LegalityResult.rejected(RejectionReason.COLLINEAR)

    if has_intersections(candidate.segments, triangles):
        return LegalityResult.rejected(RejectionReason.INTERSECTS_EXISTING)

    return LegalityResult.ok()


def is_move_possible(
    points: Iterable[Point],
    triangles: Sequence[Triangle],
    disabled: AbstractSet[Point] = frozenset(),
) -> bool:
    """Return True if some triple of unused points is a legal move.

    Every unordered triple of unused points is tried once, stopping at the
    first non-collinear triple whose edges clear all claimed edges. Edge
    clearance depends only on the point pair, so it is computed once per
    pair and shared by all triples containing it.
    """
    unused = get_unused_points(points, triangles, disabled)
    if len(unused) < 3:
        logger.debug("No move possible: %d unused points", len(unused))
        return False

    existing = _claimed_segments(triangles)
    clear: dict[tuple[int, int], bool] = {}

    def pair_is_clear(i: int, j: int) -> bool:
        key = (i, j)
        if key not in clear:
            segment = Segment(left=unused[i], right=unused[j])
            clear[key] = not any(segments_intersect(segment, s) for s in existing)
        return clear[key]

    for i, j, k in combinations(range(len(unused)), 3):
        if orientation(unused[i], unused[j], unused[k]) is Orientation.COLLINEAR:
            continue
        if pair_is_clear(i, j) and pair_is_clear(j, k) and pair_is_clear(i, k):
            logger.debug("Move still possible, e.g. %s",
                         [unused[n].to_key() for n in (i, j, k)])
            return True

    logger.debug("No move possible among %d unused points", len(unused))
    return False
