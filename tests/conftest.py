"""
Shared pytest fixtures for Triba tests.

Layout fixtures use round coordinates (spacing of 100 units) so triangle
areas and edge positions in tests are easy to verify by hand. Engine
fixtures are function-scoped to keep state isolated between tests.
"""

from pathlib import Path
import sys
from typing import Callable, Iterable, List, Sequence

import pytest

# Ensure the repository root is on sys.path so `import triba` works when
# running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from triba.board import GridLayout, PointSetLayout  # noqa: E402
from triba.game_engine import GameEngine  # noqa: E402
from triba.models import GameVariant, Point, Player, Triangle  # noqa: E402


class ScriptedRng:
    """Stand-in for ``random.Random`` that replays fixed values.

    ``randint`` and ``randrange`` pop from their own queues; running out
    of values fails the test loudly.
    """

    def __init__(self, randints: Iterable[int] = (), randranges: Iterable[int] = ()):
        self.randints: List[int] = list(randints)
        self.randranges: List[int] = list(randranges)
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append(("randint", a, b))
        value = self.randints.pop(0)
        assert a <= value <= b, f"scripted randint {value} outside [{a}, {b}]"
        return value

    def randrange(self, stop: int) -> int:
        self.calls.append(("randrange", stop))
        value = self.randranges.pop(0)
        assert 0 <= value < stop, f"scripted randrange {value} outside [0, {stop})"
        return value


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def point_factory() -> Callable[..., Point]:
    """Factory for points from plain coordinates."""

    def _create_point(x: float, y: float) -> Point:
        return Point(x=x, y=y)

    return _create_point


@pytest.fixture
def triangle_factory() -> Callable[..., Triangle]:
    """Factory for triangles from coordinate pairs."""

    def _create_triangle(
        coords: Sequence[tuple],
        player: Player = Player.A,
    ) -> Triangle:
        return Triangle.create([Point(x=x, y=y) for x, y in coords], player)

    return _create_triangle


@pytest.fixture
def engine_factory() -> Callable[..., GameEngine]:
    """Factory for engines on arbitrary layouts."""

    def _create_engine(layout, variant=GameVariant.STANDARD, rng=None) -> GameEngine:
        return GameEngine.new_game(layout, variant=variant, rng=rng)

    return _create_engine


# =============================================================================
# LAYOUT FIXTURES
# =============================================================================


@pytest.fixture
def grid3() -> GridLayout:
    """3x3 grid with points at 80, 180, 280 on each axis.

    Index ``i * 3 + j`` is the point at ``x = 80 + 100*i, y = 80 + 100*j``.
    """
    return GridLayout(size=3, width=360, height=360, padding=80)


@pytest.fixture
def grid4() -> GridLayout:
    """4x4 grid with points at 80, 180, 280, 380 on each axis."""
    return GridLayout(size=4, width=460, height=460, padding=80)


@pytest.fixture
def single_triangle_board() -> PointSetLayout:
    """Exactly one legal move exists: the right triangle at the origin."""
    return PointSetLayout(
        [Point(x=0, y=0), Point(x=100, y=0), Point(x=0, y=100)]
    )


@pytest.fixture
def two_triangle_board() -> PointSetLayout:
    """Two far-apart triangles; the game lasts exactly two moves."""
    return PointSetLayout(
        [
            Point(x=0, y=0),
            Point(x=100, y=0),
            Point(x=0, y=100),
            Point(x=500, y=500),
            Point(x=600, y=500),
            Point(x=500, y=600),
        ]
    )


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRng]:
    return ScriptedRng
