#!/usr/bin/env python
"""Play Triba in a terminal.

Each input line selects one point, either by board index (``17``) or by
layout coordinates (``128.9 177.8`` / ``128.9,177.8``); coordinates snap to
the nearest point within the click tolerance. Commands:

    points   list board points with their indices and status
    new      start the next game (the opening player alternates)
    quit     leave

Usage:
    triba-play --board square8
    triba-play --board square10 --variant dynamic --seed 42
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Iterable, Optional, Sequence, TextIO

from triba.config import LOG_LEVEL, GameConfig
from triba.errors import TribaError
from triba.game_engine import GameEngine
from triba.geometry import CLICK_TOLERANCE
from triba.logging_config import setup_logging
from triba.models import BoardType, GameVariant, Point, SelectionOutcome, SelectionResult

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit", "q"}
RESET_COMMANDS = {"new", "reset"}
LIST_COMMANDS = {"points", "show"}


def closest_point(
    points: Iterable[Point],
    x: float,
    y: float,
    tolerance: float = CLICK_TOLERANCE,
) -> Optional[Point]:
    """Return the point nearest ``(x, y)`` if it is within ``tolerance``."""
    closest = None
    min_distance = math.inf
    for point in points:
        distance = math.hypot(point.x - x, point.y - y)
        if distance < min_distance and distance < tolerance:
            min_distance = distance
            closest = point
    return closest


def parse_selection(text: str, points: Sequence[Point]) -> Optional[Point]:
    """Resolve one line of input to a board point, or ``None``."""
    parts = text.replace(",", " ").split()
    if len(parts) == 1:
        try:
            index = int(parts[0])
        except ValueError:
            return None
        if 0 <= index < len(points):
            return points[index]
        return None
    if len(parts) == 2:
        try:
            x, y = float(parts[0]), float(parts[1])
        except ValueError:
            return None
        return closest_point(points, x, y)
    return None


def format_points(engine: GameEngine) -> str:
    selected = set(engine.selection)
    lines = []
    for index, point in enumerate(engine.points):
        if point in engine.disabled_points:
            status = "disabled"
        elif point in selected:
            status = "selected"
        elif engine.is_point_used(point):
            status = "used"
        else:
            status = "free"
        lines.append(f"{index:4d}: ({point.x:7.1f}, {point.y:7.1f}) {status}")
    return "\n".join(lines)


def describe_result(result: SelectionResult, engine: GameEngine) -> str:
    outcome = result.outcome
    if outcome == SelectionOutcome.SELECTION_IGNORED:
        if engine.is_game_over:
            return "Game is over. Type 'new' to play again."
        return "Dot unavailable or already selected."
    if outcome == SelectionOutcome.SELECTION_UPDATED:
        return f"Player {result.player.value}: {len(result.selection)}/3 dots selected"
    if outcome == SelectionOutcome.MOVE_REJECTED:
        return (
            f"Invalid move: {result.message}\n"
            f"Switching to Player {result.next_player.value}'s turn"
        )
    corners = " ".join(f"({p.x:.1f}, {p.y:.1f})" for p in result.triangle.points)
    claimed = f"Player {result.player.value} claimed {corners}"
    if outcome == SelectionOutcome.GAME_ENDED:
        return f"{claimed}\nGame Over! Player {result.winner.value} wins!"
    return f"{claimed}\nPlayer {result.next_player.value} to move"


def run_session(
    engine: GameEngine,
    lines: Iterable[str],
    out: TextIO = sys.stdout,
) -> GameEngine:
    """Feed input ``lines`` to ``engine``, writing outcomes to ``out``."""
    out.write(f"{len(engine.points)} dots. Player {engine.current_player.value} to move.\n")
    for raw in lines:
        command = raw.strip().lower()
        if not command:
            continue
        if command in QUIT_COMMANDS:
            break
        if command in RESET_COMMANDS:
            engine.reset()
            out.write(f"New game. Player {engine.current_player.value} to move.\n")
            continue
        if command in LIST_COMMANDS:
            out.write(format_points(engine) + "\n")
            continue

        point = parse_selection(command, engine.points)
        if point is None:
            out.write("No dot there.\n")
            continue

        disabled_before = len(engine.disabled_points)
        result = engine.select_point(point)
        out.write(describe_result(result, engine) + "\n")
        newly_disabled = len(engine.disabled_points) - disabled_before
        if newly_disabled:
            out.write(f"{newly_disabled} dot(s) disabled.\n")
    return engine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Triba in the terminal")
    parser.add_argument(
        "--board",
        choices=[b.value for b in BoardType],
        default=None,
        help="Board layout (default: TRIBA_BOARD_TYPE or square10)",
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in GameVariant],
        default=None,
        help="Game variant (default: TRIBA_VARIANT or standard)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed for the dynamic variant",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("triba", level=args.log_level, format_style="compact")

    try:
        config = GameConfig.from_env()
    except TribaError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    updates = {}
    if args.board is not None:
        updates["board_type"] = BoardType(args.board)
    if args.variant is not None:
        updates["variant"] = GameVariant(args.variant)
    if args.seed is not None:
        updates["rng_seed"] = args.seed
    config = config.model_copy(update=updates)

    engine = GameEngine.from_config(config)
    run_session(engine, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
