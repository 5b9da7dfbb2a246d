"""
Pydantic Models for the Qubic engine boundary
Mirrors the shapes exchanged with host bindings (masks, side, difficulty)
"""

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, Field

from .config import MAX_SEARCH_DEPTH

MASK_LIMIT = 1 << 64


class Player(IntEnum):
    """Side marker; values match the host binding's ``player`` byte."""
    NONE = 0
    X = 1
    O = 2

    @property
    def opponent(self) -> "Player":
        if self is Player.X:
            return Player.O
        if self is Player.O:
            return Player.X
        return Player.NONE

    @property
    def symbol(self) -> str:
        return {Player.X: "X", Player.O: "O"}.get(self, ".")


class GameStatus(str, Enum):
    """Terminal classification of a board, independent of turn"""
    ONGOING = "ongoing"
    DRAW = "draw"
    X_WINS = "x_wins"
    O_WINS = "o_wins"


class AIDifficulty(str, Enum):
    """Difficulty ladder exposed to callers"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class AIType(str, Enum):
    """AI type enumeration"""
    RANDOM = "random"
    MINIMAX = "minimax"


class CellPosition(BaseModel):
    """Cube coordinate of a single cell"""
    x: int = Field(ge=0, le=3)
    y: int = Field(ge=0, le=3)
    z: int = Field(ge=0, le=3)

    class Config:
        frozen = True

    def to_index(self) -> int:
        """Linear cell index ``x + 4*y + 16*z``."""
        return self.x + 4 * self.y + 16 * self.z

    @classmethod
    def from_index(cls, index: int) -> "CellPosition":
        return cls(x=index % 4, y=(index // 4) % 4, z=index // 16)


class EngineConfig(BaseModel):
    """Resolved search settings for one call to the engine.

    ``max_depth`` is bounded above by ``QUBIC_MAX_SEARCH_DEPTH`` since the
    recursion has no stack guard of its own.
    """
    max_depth: int = Field(ge=1, le=MAX_SEARCH_DEPTH, alias="maxDepth")
    hard_mode: bool = Field(False, alias="hardMode")

    class Config:
        populate_by_name = True
        frozen = True


class AIConfig(BaseModel):
    """AI configuration.

    ``max_depth`` and ``hard_mode`` override the difficulty profile when
    set; ``rng_seed`` drives the per-instance RNG used by random play.
    """
    difficulty: AIDifficulty = AIDifficulty.MEDIUM
    max_depth: Optional[int] = Field(
        None, ge=1, le=MAX_SEARCH_DEPTH, alias="maxDepth"
    )
    hard_mode: Optional[bool] = Field(None, alias="hardMode")
    rng_seed: Optional[int] = Field(None, alias="rngSeed")

    class Config:
        populate_by_name = True


class MoveRequest(BaseModel):
    """Request model for AI move selection.

    Carries the two occupancy masks, the side to move and the difficulty,
    exactly what the host binding passes to the engine.
    """
    x_mask: int = Field(0, ge=0, lt=MASK_LIMIT, alias="xMask")
    o_mask: int = Field(0, ge=0, lt=MASK_LIMIT, alias="oMask")
    player: Player
    difficulty: AIDifficulty = AIDifficulty.MEDIUM
    rng_seed: Optional[int] = Field(None, alias="rngSeed")

    class Config:
        populate_by_name = True


class MoveResponse(BaseModel):
    """Response model for AI move selection."""
    move: int = Field(ge=-1, lt=64)
    position: Optional[CellPosition] = None
    ai_type: AIType = Field(alias="aiType")
    difficulty: AIDifficulty
    score: Optional[int] = None

    class Config:
        populate_by_name = True
