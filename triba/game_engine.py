"""Core game engine for Triba.

Players alternately pick three unused board points to claim a triangle.
The engine is an explicit state machine driven by :meth:`GameEngine.select_point`:

- Selecting: 0-2 points chosen. Unusable or repeated picks are ignored
  and do not cost the turn.
- Evaluating: the third point runs :func:`triba.rules.validate_move`.
  A rejection clears the selection and passes the turn to the opponent.
- Committed: the triangle is claimed, the dynamic-disable hook runs, the
  turn passes and the terminal search runs for the new current player.
- GameOver: no legal triangle remains; the player who just moved wins.
  Further selections are ignored until :meth:`GameEngine.reset`.

Gameplay rejections are returned as :class:`SelectionResult` values, never
raised. Exceptions are reserved for caller bugs (points that are not on the
board, corrupted state).
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from .board import BoardLayout, create_layout
from .config import DEBUG_ENGINE, GameConfig
from .dynamic import DisableSchedule
from .errors import InvalidMoveError, InvalidStateError
from .models import (
    GameState,
    GameVariant,
    Player,
    Point,
    SelectionOutcome,
    SelectionResult,
    Triangle,
)
from .rules import get_unused_points, is_move_possible, is_point_used, validate_move

__all__ = ["GameEngine"]

logger = logging.getLogger(__name__)


def _debug(msg: str, *args) -> None:
    """Log a debug message when engine debug is enabled."""
    if DEBUG_ENGINE:
        logger.debug(msg, *args)


def starting_player(game_count: int) -> Player:
    """Player who opens game number ``game_count`` (0-based)."""
    return Player.A if game_count % 2 == 0 else Player.B


class GameEngine:
    """Triba game on one board layout.

    Args:
        layout: Board topology provider; only its point set is used.
        variant: ``standard`` or ``dynamic``.
        rng: Random source for the dynamic schedule. Defaults to a fresh
            ``random.Random()``; pass a seeded instance to replay games.
    """

    def __init__(
        self,
        layout: BoardLayout,
        variant: GameVariant | str = GameVariant.STANDARD,
        rng: Optional[random.Random] = None,
    ):
        self.layout = layout
        self.variant = GameVariant(variant)
        self.rng = rng if rng is not None else random.Random()
        self.schedule: Optional[DisableSchedule] = None
        if self.variant == GameVariant.DYNAMIC:
            self.schedule = DisableSchedule(self.rng)
        self.state = GameState(current_player=starting_player(0))
        self._sync_schedule()
        logger.info(
            "New %s game on %r, %s to move",
            self.variant.value, layout, self.state.current_player.value,
        )

    @classmethod
    def new_game(
        cls,
        layout: BoardLayout,
        variant: GameVariant | str = GameVariant.STANDARD,
        rng: Optional[random.Random] = None,
    ) -> "GameEngine":
        """Start a game; ``engine.state`` and ``engine.points`` hold the initial view."""
        return cls(layout, variant=variant, rng=rng)

    @classmethod
    def from_config(cls, config: GameConfig) -> "GameEngine":
        rng = random.Random(config.rng_seed) if config.rng_seed is not None else None
        return cls(create_layout(config.board_type), variant=config.variant, rng=rng)

    # ------------------------------------------------------------------
    # Query accessors
    # ------------------------------------------------------------------

    @property
    def points(self) -> tuple[Point, ...]:
        return self.layout.points()

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def triangles(self) -> tuple[Triangle, ...]:
        return tuple(self.state.triangles)

    @property
    def disabled_points(self) -> frozenset[Point]:
        return frozenset(self.state.disabled_points)

    @property
    def selection(self) -> tuple[Point, ...]:
        return tuple(self.state.selection)

    @property
    def move_count(self) -> int:
        return self.state.move_count

    @property
    def is_game_over(self) -> bool:
        return self.state.game_over

    @property
    def winner(self) -> Optional[Player]:
        return self.state.winner

    def is_point_used(self, point: Point) -> bool:
        return is_point_used(point, self.state.triangles, self.state.disabled_points)

    def unused_points(self) -> List[Point]:
        return get_unused_points(self.points, self.state.triangles, self.state.disabled_points)

    def is_move_possible(self) -> bool:
        return is_move_possible(self.points, self.state.triangles, self.state.disabled_points)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def select_point(self, point: Point) -> SelectionResult:
        """Process one selected board point.

        Raises:
            InvalidMoveError: if ``point`` is not on the board.
            InvalidStateError: if the pending selection is already full.
        """
        state = self.state
        player = state.current_player

        if state.game_over:
            _debug("Selection ignored: game over")
            return self._result(SelectionOutcome.SELECTION_IGNORED, player)

        board_point = self.layout.find_point(point)
        if board_point is None:
            raise InvalidMoveError(
                "Selected point is not on the board",
                rule_ref="board-membership",
                context={"point": point.to_key()},
            )

        if self.is_point_used(board_point):
            _debug("Selection ignored: %s already used", board_point.to_key())
            return self._result(SelectionOutcome.SELECTION_IGNORED, player)

        if board_point in state.selection:
            _debug("Selection ignored: %s already selected", board_point.to_key())
            return self._result(SelectionOutcome.SELECTION_IGNORED, player)

        if len(state.selection) >= 3:
            raise InvalidStateError(
                "Pending selection already holds 3 points",
                context={"selection": [p.to_key() for p in state.selection]},
            )

        state.selection.append(board_point)
        _debug("Player %s selected %s (%d/3)", player.value, board_point.to_key(), len(state.selection))
        if len(state.selection) < 3:
            return self._result(SelectionOutcome.SELECTION_UPDATED, player)

        return self._evaluate_selection()

    def reset(self) -> GameState:
        """Start the next game on the same layout, alternating the opener."""
        game_count = self.state.game_count + 1
        self.state = GameState(
            current_player=starting_player(game_count),
            game_count=game_count,
        )
        if self.schedule is not None:
            self.schedule.reset()
        self._sync_schedule()
        logger.info("Game %d started, %s to move", game_count, self.state.current_player.value)
        return self.state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _evaluate_selection(self) -> SelectionResult:
        state = self.state
        mover = state.current_player
        picked = list(state.selection)
        state.selection.clear()

        verdict = validate_move(picked, state.triangles, state.disabled_points)
        if not verdict.legal:
            state.current_player = mover.opponent
            logger.info(
                "Invalid move by player %s: %s Switching to player %s",
                mover.value, verdict.message, state.current_player.value,
            )
            return SelectionResult(
                outcome=SelectionOutcome.MOVE_REJECTED,
                player=mover,
                next_player=state.current_player,
                selection=picked,
                reason=verdict.reason,
            )

        triangle = Triangle.create(picked, mover)
        state.triangles.append(triangle)
        state.move_count += 1
        self._run_disable_hook()
        state.current_player = mover.opponent
        _debug("Move %d committed by player %s", state.move_count, mover.value)

        if not self.is_move_possible():
            state.game_over = True
            state.winner = mover
            logger.info("Game over after %d moves: player %s wins", state.move_count, mover.value)
            return SelectionResult(
                outcome=SelectionOutcome.GAME_ENDED,
                player=mover,
                next_player=state.current_player,
                selection=picked,
                triangle=triangle,
                winner=mover,
            )

        return SelectionResult(
            outcome=SelectionOutcome.MOVE_ACCEPTED,
            player=mover,
            next_player=state.current_player,
            selection=picked,
            triangle=triangle,
        )

    def _run_disable_hook(self) -> None:
        if self.schedule is None:
            return
        disabled = self.schedule.on_move(self.state.move_count, self.unused_points())
        self.state.disabled_points.update(disabled)
        self._sync_schedule()

    def _sync_schedule(self) -> None:
        if self.schedule is None:
            return
        self.state.next_disable_move = self.schedule.next_disable_move
        self.state.disable_count = self.schedule.disable_count

    def _result(self, outcome: SelectionOutcome, player: Player) -> SelectionResult:
        return SelectionResult(
            outcome=outcome,
            player=player,
            next_player=self.state.current_player,
            selection=list(self.state.selection),
            winner=self.state.winner,
        )
