"""Qubic: move engine for 4x4x4 tic-tac-toe.

    from qubic import Board, EngineConfig, Player, find_best_move

    board = Board.from_cells(x_cells=[0, 1, 2], o_cells=[16, 32])
    move = find_best_move(board, Player.X, EngineConfig(max_depth=3))
"""

from qubic.ai.factory import AIFactory, find_ai_move
from qubic.ai.heuristic import evaluate
from qubic.ai.minimax_ai import find_best_move, hard_mode_safe_moves
from qubic.errors import (
    AIError,
    ConfigurationError,
    InvalidMoveError,
    InvalidStateError,
    QubicError,
)
from qubic.game_engine import Game, check_game_state, get_winning_mask
from qubic.models import (
    AIConfig,
    AIDifficulty,
    AIType,
    EngineConfig,
    GameStatus,
    Player,
)
from qubic.rules.board import Board, cell_coords, cell_index
from qubic.rules.lines import WIN_MASKS, check_terminal_state, winning_line

__version__ = "1.0.0"

__all__ = [
    "WIN_MASKS",
    "AIConfig",
    "AIDifficulty",
    "AIError",
    "AIFactory",
    "AIType",
    "Board",
    "ConfigurationError",
    "EngineConfig",
    "Game",
    "GameStatus",
    "InvalidMoveError",
    "InvalidStateError",
    "Player",
    "QubicError",
    "cell_coords",
    "cell_index",
    "check_game_state",
    "check_terminal_state",
    "evaluate",
    "find_ai_move",
    "find_best_move",
    "get_winning_mask",
    "hard_mode_safe_moves",
    "winning_line",
]
