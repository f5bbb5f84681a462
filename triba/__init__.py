"""Triba rules engine.

Two players alternately claim triangles on a field of points. This package
holds the move validation and game-state engine; drawing and input
handling live with the presentation layer (see ``triba.cli`` for a
terminal front end).

    from triba import GameEngine, create_layout, BoardType

    engine = GameEngine.new_game(create_layout(BoardType.SQUARE10))
    result = engine.select_point(engine.points[0])

Architecture:
- geometry.py: orientation / intersection / on-segment tests
- models.py: pydantic value types and game state
- board.py: grid, ring and explicit point-set layouts
- rules.py: move validator and terminal-state search
- dynamic.py: disable schedule for the dynamic variant
- game_engine.py: turn-based state machine
"""

from triba.board import BoardLayout, CircleLayout, GridLayout, PointSetLayout, create_layout
from triba.config import GameConfig
from triba.errors import (
    ConfigurationError,
    InvalidGeometryError,
    InvalidMoveError,
    InvalidStateError,
    TribaError,
)
from triba.game_engine import GameEngine
from triba.models import (
    BoardType,
    GameState,
    GameVariant,
    LegalityResult,
    Orientation,
    Player,
    Point,
    RejectionReason,
    Segment,
    SelectionOutcome,
    SelectionResult,
    Triangle,
)
from triba.rules import is_move_possible, validate_move

__version__ = "1.0.0"

__all__ = [
    "BoardLayout",
    "BoardType",
    "CircleLayout",
    "ConfigurationError",
    "GameConfig",
    "GameEngine",
    "GameState",
    "GameVariant",
    "GridLayout",
    "InvalidGeometryError",
    "InvalidMoveError",
    "InvalidStateError",
    "LegalityResult",
    "Orientation",
    "Player",
    "Point",
    "PointSetLayout",
    "RejectionReason",
    "Segment",
    "SelectionOutcome",
    "SelectionResult",
    "Triangle",
    "TribaError",
    "create_layout",
    "is_move_possible",
    "validate_move",
]
