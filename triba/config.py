"""Runtime configuration for the Triba engine.

Environment flags (read at import):

    TRIBA_DEBUG_ENGINE   "1"/"true"/"yes"/"on" logs every selection at DEBUG
    TRIBA_LOG_LEVEL      default level for :func:`setup_logging` (INFO)

Game settings (read by :meth:`GameConfig.from_env`):

    TRIBA_BOARD_TYPE     square8 | square10 | square12 | circle
    TRIBA_VARIANT        standard | dynamic
    TRIBA_RNG_SEED       integer seed for the dynamic variant
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from .errors import ConfigurationError
from .models import BoardType, GameVariant

__all__ = [
    "DEBUG_ENGINE",
    "LOG_LEVEL",
    "GameConfig",
    "env_flag",
]

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: str = "0") -> bool:
    """Return True if environment variable ``name`` holds a truthy value."""
    return os.environ.get(name, default).strip().lower() in _TRUTHY


DEBUG_ENGINE = env_flag("TRIBA_DEBUG_ENGINE")
LOG_LEVEL = os.environ.get("TRIBA_LOG_LEVEL", "INFO").upper()


class GameConfig(BaseModel):
    """Settings for a new game"""
    board_type: BoardType = Field(BoardType.SQUARE10, alias="boardType")
    variant: GameVariant = GameVariant.STANDARD
    rng_seed: Optional[int] = Field(None, alias="rngSeed")

    class Config:
        populate_by_name = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GameConfig":
        """Build a config from ``TRIBA_*`` environment variables.

        Raises:
            ConfigurationError: if a variable holds an unknown value.
        """
        environ = os.environ if environ is None else environ
        board = environ.get("TRIBA_BOARD_TYPE", BoardType.SQUARE10.value)
        variant = environ.get("TRIBA_VARIANT", GameVariant.STANDARD.value)
        seed = environ.get("TRIBA_RNG_SEED")

        try:
            board_type = BoardType(board.strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown board type: {board!r}",
                context={"choices": [b.value for b in BoardType]},
            ) from None
        try:
            game_variant = GameVariant(variant.strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown game variant: {variant!r}",
                context={"choices": [v.value for v in GameVariant]},
            ) from None
        rng_seed = None
        if seed is not None and seed.strip():
            try:
                rng_seed = int(seed)
            except ValueError:
                raise ConfigurationError(f"TRIBA_RNG_SEED must be an integer, got {seed!r}") from None

        return cls(board_type=board_type, variant=game_variant, rng_seed=rng_seed)
