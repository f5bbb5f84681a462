"""Dynamic-disable policy for the Triba "dynamic" variant.

Every few accepted moves a handful of unused points are taken out of play.
The schedule draws all of its randomness from the injected ``rng`` (any
object with ``random.Random``'s ``randint``/``randrange``) so tests can
replay fixed sequences.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from .models import Point

__all__ = [
    "DISABLE_COUNT_RANGE",
    "DISABLE_INTERVAL_RANGE",
    "MIN_UNUSED_POINTS",
    "DisableSchedule",
]

logger = logging.getLogger(__name__)

# Moves between disable events, inclusive.
DISABLE_INTERVAL_RANGE = (1, 2)
# Points disabled per event, inclusive.
DISABLE_COUNT_RANGE = (2, 5)
# Disabling stops once this many unused points remain.
MIN_UNUSED_POINTS = 3


class DisableSchedule:
    """When to disable points next, and how many."""

    def __init__(self, rng: random.Random):
        self.rng = rng
        self.next_disable_move = 0
        self.disable_count = 0
        self.reset()

    def reset(self) -> None:
        """Sample a fresh schedule for a new game."""
        self.next_disable_move = self.rng.randint(*DISABLE_INTERVAL_RANGE)
        self.disable_count = self.rng.randint(*DISABLE_COUNT_RANGE)

    def on_move(self, move_count: int, unused_points: Sequence[Point]) -> list[Point]:
        """Return the points to disable after accepted move ``move_count``.

        Returns an empty list when no event is due. When an event fires,
        the next threshold and count are resampled even if nothing could be
        disabled.
        """
        if move_count != self.next_disable_move:
            return []

        candidates = list(unused_points)
        picked: list[Point] = []
        while len(picked) < self.disable_count and len(candidates) > MIN_UNUSED_POINTS:
            picked.append(candidates.pop(self.rng.randrange(len(candidates))))

        self.next_disable_move = move_count + self.rng.randint(*DISABLE_INTERVAL_RANGE)
        self.disable_count = self.rng.randint(*DISABLE_COUNT_RANGE)
        logger.info(
            "Disabled %d point(s) after move %d; next event at move %d",
            len(picked), move_count, self.next_disable_move,
        )
        return picked
