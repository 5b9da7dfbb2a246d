"""
Qubic Error Hierarchy

Unified exception hierarchy for the engine boundary. Search itself never
raises; these errors reject malformed input before it reaches the search.

Usage:
    from qubic.errors import InvalidMoveError

    try:
        game.make_move(x, y, z)
    except InvalidMoveError as e:
        logger.warning(f"Rejected move: {e.message}")
"""

from typing import Any

__all__ = [
    # AI errors
    "AIError",
    "ConfigurationError",
    "InvalidMoveError",
    # Game state errors
    "InvalidStateError",
    # Base error
    "QubicError",
    # Validation errors
    "ValidationError",
]


class QubicError(Exception):
    """Base exception for all Qubic errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "QUBIC_ERROR"

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
# Game State Errors
# =============================================================================


class InvalidStateError(QubicError):
    """Corrupted or impossible board.

    Raised when occupancy masks overlap or reach outside the 64 cells
    of the cube.
    """
    code: str = "INVALID_STATE"

    def __init__(
        self,
        message: str,
        x_mask: int | None = None,
        o_mask: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if x_mask is not None:
            self.context["x_mask"] = hex(x_mask)
        if o_mask is not None:
            self.context["o_mask"] = hex(o_mask)


class InvalidMoveError(QubicError):
    """Move that cannot be applied to the current board.

    Raised for occupied cells, coordinates outside the cube, a side to
    move of ``Player.NONE``, or moves after the game has ended.
    """
    code: str = "INVALID_MOVE"

    def __init__(
        self,
        message: str,
        cell: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if cell is not None:
            self.context["cell"] = cell


# =============================================================================
# AI Errors
# =============================================================================


class AIError(QubicError):
    """Base class for AI-related errors."""
    code: str = "AI_ERROR"


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(QubicError):
    """Base class for validation errors."""
    code: str = "VALIDATION_ERROR"


class ConfigurationError(ValidationError):
    """Invalid configuration (unknown difficulty, bad env override)."""
    code: str = "CONFIGURATION_ERROR"
