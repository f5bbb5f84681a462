"""
Pydantic Models for Triba Game State
Value types shared by the geometry kernel, the validator and the engine.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Any, List, Optional, Set, Tuple
from enum import Enum
import math

from .errors import InvalidGeometryError


class Player(str, Enum):
    """Player symbol enumeration"""
    A = "A"
    B = "B"

    @property
    def opponent(self) -> "Player":
        return Player.B if self is Player.A else Player.A


class Orientation(Enum):
    """Orientation of an ordered point triple"""
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


class BoardType(str, Enum):
    """Board layout presets"""
    SQUARE8 = "square8"
    SQUARE10 = "square10"
    SQUARE12 = "square12"
    CIRCLE = "circle"


class GameVariant(str, Enum):
    """Game variant enumeration"""
    STANDARD = "standard"
    DYNAMIC = "dynamic"


class RejectionReason(str, Enum):
    """Why a three-point move was refused"""
    ALREADY_USED = "already_used"
    COLLINEAR = "collinear"
    INTERSECTS_EXISTING = "intersects_existing"


REJECTION_MESSAGES = {
    RejectionReason.ALREADY_USED: "Cannot use dots that are already part of a triangle!",
    RejectionReason.COLLINEAR: "Points cannot be collinear!",
    RejectionReason.INTERSECTS_EXISTING: "Triangle cannot intersect with existing triangles!",
}


class SelectionOutcome(str, Enum):
    """Result kind of a single point selection"""
    SELECTION_IGNORED = "selection_ignored"
    SELECTION_UPDATED = "selection_updated"
    MOVE_ACCEPTED = "move_accepted"
    MOVE_REJECTED = "move_rejected"
    GAME_ENDED = "game_ended"


class Point(BaseModel):
    """Board point in layout coordinates"""
    x: float
    y: float

    class Config:
        frozen = True

    def to_key(self) -> str:
        """Convert point to string key"""
        return f"{self.x:g},{self.y:g}"


def _x_of(value: Any) -> Any:
    if isinstance(value, Point):
        return value.x
    if isinstance(value, dict):
        return value.get("x")
    return None


class Segment(BaseModel):
    """Line segment with its endpoints ordered by x.

    Endpoints handed over in the other order are swapped, so
    ``left.x <= right.x`` always holds.
    """
    left: Point
    right: Point

    class Config:
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def _order_endpoints(cls, data: Any) -> Any:
        if isinstance(data, dict):
            left_x = _x_of(data.get("left"))
            right_x = _x_of(data.get("right"))
            if left_x is not None and right_x is not None and left_x > right_x:
                data = {**data, "left": data["right"], "right": data["left"]}
        return data

    @property
    def length(self) -> float:
        return math.hypot(self.right.x - self.left.x, self.right.y - self.left.y)


class Triangle(BaseModel):
    """Claimed (or hypothetical) triangle.

    ``segments`` are derived from ``points`` as p0-p1, p1-p2, p2-p0. Use
    :meth:`create` rather than the raw constructor so the three-point
    contract is enforced with :class:`InvalidGeometryError`.
    """
    points: Tuple[Point, Point, Point]
    segments: Tuple[Segment, Segment, Segment]
    player: Optional[Player] = None

    class Config:
        frozen = True

    @classmethod
    def create(cls, points, player: Optional[Player] = None) -> "Triangle":
        points = tuple(points)
        if len(points) != 3:
            raise InvalidGeometryError(
                "Triangle must have exactly 3 points",
                context={"point_count": len(points)},
            )
        p0, p1, p2 = points
        return cls(
            points=(p0, p1, p2),
            segments=(
                Segment(left=p0, right=p1),
                Segment(left=p1, right=p2),
                Segment(left=p2, right=p0),
            ),
            player=player,
        )


class LegalityResult(BaseModel):
    """Verdict of the move validator"""
    legal: bool
    reason: Optional[RejectionReason] = None

    class Config:
        frozen = True

    @classmethod
    def ok(cls) -> "LegalityResult":
        return cls(legal=True)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "LegalityResult":
        return cls(legal=False, reason=reason)

    @property
    def message(self) -> Optional[str]:
        if self.reason is None:
            return None
        return REJECTION_MESSAGES[self.reason]


class SelectionResult(BaseModel):
    """What happened after the engine processed one selected point.

    ``player`` is the player who made the selection; ``next_player`` is
    the player to act afterwards.
    """
    outcome: SelectionOutcome
    player: Player
    next_player: Player
    selection: List[Point] = Field(default_factory=list)
    triangle: Optional[Triangle] = None
    reason: Optional[RejectionReason] = None
    winner: Optional[Player] = None

    @property
    def message(self) -> Optional[str]:
        if self.reason is None:
            return None
        return REJECTION_MESSAGES[self.reason]


class GameState(BaseModel):
    """Complete game state"""
    current_player: Player = Player.A
    selection: List[Point] = Field(default_factory=list)
    move_count: int = 0
    game_over: bool = False
    winner: Optional[Player] = None
    triangles: List[Triangle] = Field(default_factory=list)
    # Exact-match lookups; vertex/edge usability uses tolerances instead.
    disabled_points: Set[Point] = Field(default_factory=set)
    game_count: int = 0
    # Dynamic variant schedule snapshot (None for the standard variant)
    next_disable_move: Optional[int] = None
    disable_count: Optional[int] = None
