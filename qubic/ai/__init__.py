"""AI implementations for Qubic.

The recommended entry point is the factory:

    from qubic.ai import AIFactory, find_ai_move

    ai = AIFactory.create_from_difficulty("hard", Player.O)
    move = ai.select_move(board)

Architecture:
- base.py: BaseAI abstract base class
- factory.py: difficulty profiles and AIFactory
- heuristic.py: static line-weight evaluation
- minimax_ai.py: alpha-beta search, hard-mode pre-pass, MinimaxAI
- random_ai.py: uniform random play ("easy")
"""

from qubic.ai.base import BaseAI
from qubic.ai.factory import (
    DIFFICULTY_PROFILES,
    AIFactory,
    DifficultyProfile,
    find_ai_move,
    get_difficulty_profile,
    resolve_engine_config,
)
from qubic.ai.heuristic import evaluate, evaluation_breakdown
from qubic.ai.minimax_ai import (
    AlphaBetaSearch,
    MinimaxAI,
    SearchOutcome,
    SearchResult,
    analyze_position,
    find_best_move,
    hard_mode_safe_moves,
)
from qubic.ai.random_ai import RandomAI

__all__ = [
    "DIFFICULTY_PROFILES",
    "AIFactory",
    "AlphaBetaSearch",
    "BaseAI",
    "DifficultyProfile",
    "MinimaxAI",
    "RandomAI",
    "SearchOutcome",
    "SearchResult",
    "analyze_position",
    "evaluate",
    "evaluation_breakdown",
    "find_ai_move",
    "find_best_move",
    "get_difficulty_profile",
    "hard_mode_safe_moves",
    "resolve_engine_config",
]
