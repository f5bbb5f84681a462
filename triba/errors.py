"""
Triba Error Hierarchy

Unified exception hierarchy for the rules engine. All custom exceptions
inherit from TribaError so callers can catch and filter them in one place.

Gameplay rejections (already-used points, collinear picks, crossing edges) are
NOT exceptions: they are reported as ``LegalityResult`` / ``SelectionResult``
values. The classes below signal caller bugs and bad configuration.

Usage:
    from triba.errors import InvalidMoveError

    try:
        engine.select_point(point)
    except InvalidMoveError as e:
        logger.warning(f"Bad selection: {e.message}")
"""

from typing import Any

__all__ = [
    "ConfigurationError",
    "InvalidGeometryError",
    "InvalidMoveError",
    "InvalidStateError",
    "RulesViolationError",
    # Base error
    "TribaError",
    "ValidationError",
]


class TribaError(Exception):
    """Base exception for all Triba errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "TRIBA_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Game Rules Errors
# =============================================================================


class RulesViolationError(TribaError):
    """Input the rules engine refuses to process.

    Attributes:
        rule_ref: Short name of the violated rule (e.g., "board-membership")
    """
    code: str = "RULES_VIOLATION"

    def __init__(
        self,
        message: str,
        rule_ref: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.rule_ref = rule_ref
        if rule_ref:
            self.context["rule_ref"] = rule_ref


class InvalidMoveError(RulesViolationError):
    """Selection that cannot be applied to the current board.

    Raised when the presentation layer hands the engine a point that is
    not part of the active layout. Hit-testing must resolve clicks to
    board points before calling the engine.
    """
    code: str = "INVALID_MOVE"


class InvalidStateError(TribaError):
    """Corrupted or unexpected game state.

    Raised when the game state is in a configuration that should not be
    reachable through normal play (e.g., a pending selection of 4 points).
    """
    code: str = "INVALID_STATE"


class InvalidGeometryError(TribaError):
    """Geometric construction contract broken.

    Raised when a triangle is built from other than exactly three points
    or a layout is given parameters that cannot produce a point set.
    """
    code: str = "INVALID_GEOMETRY"


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(TribaError):
    """Base class for validation errors."""
    code: str = "VALIDATION_ERROR"


class ConfigurationError(ValidationError):
    """Invalid configuration."""
    code: str = "CONFIGURATION_ERROR"
