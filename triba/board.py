"""Board topology providers for the Triba rules engine.

A layout is the only thing the engine knows about the board: it yields a
finite, ordered, stable set of :class:`Point` objects. The engine never
special-cases grid vs. ring boards; it asks for "all points" here and
derives "unused points" itself.

Coordinates are layout (pixel-scale) units. The geometry tolerances in
:mod:`triba.geometry` are tuned for this scale, so the default extents
mirror a 600x600 drawing surface.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from .errors import InvalidGeometryError
from .geometry import points_close
from .models import BoardType, Point

__all__ = [
    "BoardLayout",
    "CircleLayout",
    "GridLayout",
    "PointSetLayout",
    "create_layout",
]

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 600.0
DEFAULT_HEIGHT = 600.0
DEFAULT_PADDING = 80.0


class BoardLayout(ABC):
    """Enumerable point set the engine plays on.

    Subclasses implement :meth:`_generate_points`; the result is computed
    once and cached so every call to :meth:`points` returns the same
    objects in the same order.
    """

    name: str = "custom"

    def __init__(self) -> None:
        self._points: tuple[Point, ...] | None = None

    @abstractmethod
    def _generate_points(self) -> list[Point]:
        """Build the layout's points in enumeration order."""

    def points(self) -> tuple[Point, ...]:
        """Return all board points."""
        if self._points is None:
            self._points = tuple(self._generate_points())
            logger.debug("Generated %d points for %s layout", len(self._points), self.name)
        return self._points

    def find_point(self, point: Point) -> Point | None:
        """Return the board's own point matching ``point``, or ``None``.

        Matching uses the vertex tolerance, so a caller-built ``Point`` with
        slightly different float coordinates still resolves to the
        canonical board object.
        """
        for candidate in self.points():
            if candidate == point:
                return candidate
        for candidate in self.points():
            if points_close(candidate, point):
                return candidate
        return None

    def contains(self, point: Point) -> bool:
        return self.find_point(point) is not None

    def __len__(self) -> int:
        return len(self.points())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(points={len(self)})"


class GridLayout(BoardLayout):
    """Rectangular ``size`` x ``size`` grid, enumerated column by column."""

    name = "grid"

    def __init__(
        self,
        size: int = 10,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        padding: float = DEFAULT_PADDING,
    ) -> None:
        super().__init__()
        if size < 2:
            raise InvalidGeometryError(
                "Grid layout needs at least 2 points per side",
                context={"size": size},
            )
        if width <= 2 * padding or height <= 2 * padding:
            raise InvalidGeometryError(
                "Grid padding leaves no drawable area",
                context={"width": width, "height": height, "padding": padding},
            )
        self.size = size
        self.width = width
        self.height = height
        self.padding = padding
        self.spacing_x = (width - 2 * padding) / (size - 1)
        self.spacing_y = (height - 2 * padding) / (size - 1)

    def _generate_points(self) -> list[Point]:
        points = []
        for i in range(self.size):
            for j in range(self.size):
                points.append(
                    Point(
                        x=self.padding + i * self.spacing_x,
                        y=self.padding + j * self.spacing_y,
                    )
                )
        return points


class CircleLayout(BoardLayout):
    """Concentric rings around a center point.

    Ring ``r`` (1-based, up to ``rings - 1``) holds
    ``floor(dot_count * r / (rings - 1))`` evenly spaced points, the first
    one straight above the center.
    """

    name = "circle"

    def __init__(
        self,
        rings: int = 6,
        dot_count: int = 24,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        radius_fraction: float = 0.45,
    ) -> None:
        super().__init__()
        if rings < 2:
            raise InvalidGeometryError(
                "Circle layout needs a center and at least one ring",
                context={"rings": rings},
            )
        if dot_count < 1 or radius_fraction <= 0:
            raise InvalidGeometryError(
                "Circle layout needs a positive dot count and radius",
                context={"dot_count": dot_count, "radius_fraction": radius_fraction},
            )
        self.rings = rings
        self.dot_count = dot_count
        self.center_x = width / 2
        self.center_y = height / 2
        self.radius = min(width, height) * radius_fraction

    def _generate_points(self) -> list[Point]:
        points = [Point(x=self.center_x, y=self.center_y)]
        for ring in range(1, self.rings):
            ring_radius = self.radius * ring / (self.rings - 1)
            dots_in_ring = math.floor(self.dot_count * (ring / (self.rings - 1)))
            for i in range(dots_in_ring):
                angle = (i * 2 * math.pi / dots_in_ring) - math.pi / 2
                points.append(
                    Point(
                        x=self.center_x + ring_radius * math.cos(angle),
                        y=self.center_y + ring_radius * math.sin(angle),
                    )
                )
        return points


class PointSetLayout(BoardLayout):
    """Explicit point set, e.g. a hand-built board for custom play or tests."""

    name = "point_set"

    def __init__(self, points: Iterable[Point]) -> None:
        super().__init__()
        self._source: Sequence[Point] = list(points)

    def _generate_points(self) -> list[Point]:
        return list(self._source)


def create_layout(board_type: BoardType | str) -> BoardLayout:
    """Return a fresh layout for a board preset."""
    board_type = BoardType(board_type)
    if board_type == BoardType.SQUARE8:
        return GridLayout(size=8)
    if board_type == BoardType.SQUARE10:
        return GridLayout(size=10)
    if board_type == BoardType.SQUARE12:
        return GridLayout(size=12)
    return CircleLayout()
