"""Geometry kernel for the Triba rules engine.

Pure functions over points and segments. Anything exposing ``x``/``y``
attributes works as a point, so hot loops may pass board ``Point`` models
directly without building intermediate objects.

All tolerances are fixed module constants tuned for layout (pixel-scale)
coordinates; callers cannot vary them per call.

Usage:
    from triba.geometry import orientation, segments_intersect

    if orientation(p, q, r) is Orientation.COLLINEAR:
        ...
"""

from __future__ import annotations

from .models import Orientation, Point, Segment

__all__ = [
    "CLICK_TOLERANCE",
    "COLLINEAR_TOLERANCE",
    "DISTANCE_TOLERANCE",
    "MIN_AREA_TOLERANCE",
    "OVERLAP_EPSILON",
    "VERTEX_TOLERANCE",
    "orientation",
    "point_on_segment",
    "points_close",
    "segments_intersect",
    "signed_area",
]

# Absolute signed area below which three points are collinear.
COLLINEAR_TOLERANCE = 1e-3
# Triangles thinner than this are indistinguishable from a line on screen
# and are treated as collinear.
MIN_AREA_TOLERANCE = 100.0
# Bounding-box slack for collinear overlap, so touching boxes overlap.
OVERLAP_EPSILON = 1e-10
# Max distance from a segment's line for a point to count as on it. Segments
# shorter than this are degenerate.
DISTANCE_TOLERANCE = 3.0
# Per-axis tolerance for two points being the same vertex.
VERTEX_TOLERANCE = 2.0
# Hit-test radius for mapping a click to a board point (presentation layer).
CLICK_TOLERANCE = 15.0


def signed_area(p: Point, q: Point, r: Point) -> float:
    """Signed area of triangle ``p, q, r`` (positive is clockwise on a y-down screen)."""
    return (
        p.x * (q.y - r.y)
        + q.x * (r.y - p.y)
        + r.x * (p.y - q.y)
    ) / 2


def orientation(p: Point, q: Point, r: Point) -> Orientation:
    """Classify the ordered triple ``p, q, r``.

    Two gates yield COLLINEAR: a tight floating-point tolerance for true
    collinearity, and a coarser minimum area that rejects triangles too thin
    to be told apart from a line.
    """
    area = signed_area(p, q, r)
    if abs(area) < COLLINEAR_TOLERANCE or abs(area) < MIN_AREA_TOLERANCE:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if area > 0 else Orientation.COUNTERCLOCKWISE


def points_close(a: Point, b: Point, tolerance: float = VERTEX_TOLERANCE) -> bool:
    """Return True if ``a`` and ``b`` are the same point within ``tolerance`` on each axis."""
    return abs(a.x - b.x) < tolerance and abs(a.y - b.y) < tolerance


def _shared_endpoints(s1: Segment, s2: Segment) -> list[tuple[Point, Point, Point, Point]]:
    """Return ``(a, b, other1, other2)`` for every endpoint ``a`` of ``s1`` close to an endpoint ``b`` of ``s2``."""
    shared = []
    for a, other1 in ((s1.left, s1.right), (s1.right, s1.left)):
        for b, other2 in ((s2.left, s2.right), (s2.right, s2.left)):
            if points_close(a, b):
                shared.append((a, b, other1, other2))
    return shared


def _boxes_overlap(s1: Segment, s2: Segment) -> bool:
    overlap_x = (
        max(min(s1.left.x, s1.right.x), min(s2.left.x, s2.right.x))
        <= min(max(s1.left.x, s1.right.x), max(s2.left.x, s2.right.x)) + OVERLAP_EPSILON
    )
    overlap_y = (
        max(min(s1.left.y, s1.right.y), min(s2.left.y, s2.right.y))
        <= min(max(s1.left.y, s1.right.y), max(s2.left.y, s2.right.y)) + OVERLAP_EPSILON
    )
    return overlap_x and overlap_y


def segments_intersect(s1: Segment, s2: Segment) -> bool:
    """Return True if segments ``s1`` and ``s2`` cross or overlap.

    Segments that only share an endpoint do not intersect; rejecting a
    move that reuses a vertex is the usability check's job. They still
    intersect when they are collinear and run along each other away from
    the shared endpoint.

    The test is symmetric in its arguments.
    """
    o1 = orientation(s1.left, s1.right, s2.left)
    o2 = orientation(s1.left, s1.right, s2.right)
    o3 = orientation(s2.left, s2.right, s1.left)
    o4 = orientation(s2.left, s2.right, s1.right)
    collinear = (
        o1 is Orientation.COLLINEAR
        and o2 is Orientation.COLLINEAR
        and o3 is Orientation.COLLINEAR
        and o4 is Orientation.COLLINEAR
    )

    shared = _shared_endpoints(s1, s2)
    if shared:
        if not collinear:
            return False
        # Overlap iff both segments leave the shared point in the same direction.
        for a, b, end1, end2 in shared:
            origin_x = (a.x + b.x) / 2
            origin_y = (a.y + b.y) / 2
            dot = (end1.x - origin_x) * (end2.x - origin_x) + (end1.y - origin_y) * (end2.y - origin_y)
            if dot > 0:
                return True
        return False

    if o1 != o2 and o3 != o4:
        return True

    if collinear:
        return _boxes_overlap(s1, s2)

    return False


def point_on_segment(point: Point, segment: Segment) -> bool:
    """Return True if ``point`` lies on ``segment`` within ``DISTANCE_TOLERANCE``."""
    dx = segment.right.x - segment.left.x
    dy = segment.right.y - segment.left.y
    length = segment.length
    if length < DISTANCE_TOLERANCE:
        return False

    distance = abs(
        dy * point.x
        - dx * point.y
        + segment.right.x * segment.left.y
        - segment.right.y * segment.left.x
    ) / length
    if distance > DISTANCE_TOLERANCE:
        return False

    projection = ((point.x - segment.left.x) * dx + (point.y - segment.left.y) * dy) / length
    return 0 <= projection <= length
