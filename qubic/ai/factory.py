"""Unified AI Factory for Qubic.

This module maps the difficulty ladder onto concrete AI configurations and
is the single place that creates AI instances. Host bindings call
:func:`find_ai_move` with raw masks; everything else goes through
:class:`AIFactory`.

Usage:
    from qubic.ai.factory import AIFactory, find_ai_move

    # Create AI from difficulty level
    ai = AIFactory.create_from_difficulty(AIDifficulty.HARD, Player.O)

    # One-shot move for a host binding
    move = find_ai_move(x_mask, o_mask, player=1, difficulty="medium")

    # Register custom AI implementation
    AIFactory.register("custom_ai", CustomAIClass)
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, TypedDict

from ..config import HARD_DEPTH, MEDIUM_DEPTH
from ..errors import AIError, ConfigurationError, InvalidMoveError
from ..models import AIConfig, AIDifficulty, AIType, EngineConfig, Player
from ..rules.board import Board

if TYPE_CHECKING:
    from .base import BaseAI

logger = logging.getLogger(__name__)


class DifficultyProfile(TypedDict):
    """Canonical profile for a single difficulty rung."""
    ai_type: AIType
    max_depth: int
    hard_mode: bool
    profile_id: str


# max_depth is still carried for the random rung so that an explicit
# AIType.MINIMAX override at "easy" has a sensible depth.
DIFFICULTY_PROFILES: dict[AIDifficulty, DifficultyProfile] = {
    AIDifficulty.EASY: {
        "ai_type": AIType.RANDOM,
        "max_depth": 1,
        "hard_mode": False,
        "profile_id": "v1-random-easy",
    },
    AIDifficulty.MEDIUM: {
        "ai_type": AIType.MINIMAX,
        "max_depth": MEDIUM_DEPTH,
        "hard_mode": False,
        "profile_id": "v1-minimax-medium",
    },
    AIDifficulty.HARD: {
        "ai_type": AIType.MINIMAX,
        "max_depth": HARD_DEPTH,
        "hard_mode": True,
        "profile_id": "v1-minimax-hard",
    },
}

# Lazy-load AI implementations to avoid circular imports
_AI_CLASS_PATHS: dict[str, tuple[str, str]] = {
    AIType.RANDOM.value: ("qubic.ai.random_ai", "RandomAI"),
    AIType.MINIMAX.value: ("qubic.ai.minimax_ai", "MinimaxAI"),
}
_custom_classes: dict[str, type[BaseAI]] = {}


def _coerce_difficulty(difficulty: AIDifficulty | str) -> AIDifficulty:
    try:
        return AIDifficulty(difficulty)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown difficulty: {difficulty!r}",
            context={"valid": [d.value for d in AIDifficulty]},
        ) from e


def get_difficulty_profile(difficulty: AIDifficulty | str) -> DifficultyProfile:
    """Return the canonical profile for ``difficulty``."""
    return DIFFICULTY_PROFILES[_coerce_difficulty(difficulty)]


def resolve_engine_config(config: AIConfig) -> EngineConfig:
    """Merge the difficulty profile with the explicit overrides on ``config``."""
    profile = get_difficulty_profile(config.difficulty)
    max_depth = config.max_depth if config.max_depth is not None else profile["max_depth"]
    hard_mode = config.hard_mode if config.hard_mode is not None else profile["hard_mode"]
    return EngineConfig(max_depth=max_depth, hard_mode=hard_mode)


class AIFactory:
    """Factory for creating AI instances."""

    @staticmethod
    def register(name: str, ai_class: type[BaseAI]) -> None:
        """Register a custom AI implementation under ``name``."""
        _custom_classes[name] = ai_class
        logger.debug(f"Registered custom AI '{name}': {ai_class.__name__}")

    @staticmethod
    def get_class(ai_type: AIType | str) -> type[BaseAI]:
        key = ai_type.value if isinstance(ai_type, AIType) else str(ai_type)
        if key in _custom_classes:
            return _custom_classes[key]
        if key not in _AI_CLASS_PATHS:
            raise ConfigurationError(
                f"Unknown AI type: {key!r}",
                context={"registered": sorted([*_AI_CLASS_PATHS, *_custom_classes])},
            )
        module_name, class_name = _AI_CLASS_PATHS[key]
        module = importlib.import_module(module_name)
        return getattr(module, class_name)

    @classmethod
    def create(
        cls,
        ai_type: AIType | str,
        player: Player,
        config: AIConfig,
    ) -> BaseAI:
        """Create an AI of ``ai_type`` for ``player``."""
        ai_class = cls.get_class(ai_type)
        return ai_class(player, config)

    @classmethod
    def create_from_difficulty(
        cls,
        difficulty: AIDifficulty | str,
        player: Player,
        rng_seed: int | None = None,
    ) -> BaseAI:
        """Create the canonical AI for a difficulty rung."""
        difficulty = _coerce_difficulty(difficulty)
        profile = DIFFICULTY_PROFILES[difficulty]
        config = AIConfig(difficulty=difficulty, rng_seed=rng_seed)
        ai = cls.create(profile["ai_type"], player, config)
        logger.debug(f"Created {ai!r} from profile {profile['profile_id']}")
        return ai


def find_ai_move(
    x_mask: int,
    o_mask: int,
    player: Player | int,
    difficulty: AIDifficulty | str,
    rng_seed: int | None = None,
) -> int:
    """Choose a move for ``player`` on the given masks.

    Returns:
        A cell index in [0, 64), or -1 when no legal move exists.
    """
    board = Board(x_mask, o_mask)
    try:
        side = Player(player)
    except ValueError as e:
        raise InvalidMoveError(
            "Unknown player", context={"player": player}
        ) from e
    ai = AIFactory.create_from_difficulty(difficulty, side, rng_seed)
    move = ai.select_move(board)
    if move != -1 and not (0 <= move < 64 and (board.empty >> move) & 1):
        raise AIError(
            f"{ai!r} selected an illegal cell",
            context={"move": move},
        )
    return move
