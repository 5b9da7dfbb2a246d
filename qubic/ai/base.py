"""
Base AI Player class for Qubic
Abstract base class that all AI implementations inherit from
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import random

from ..errors import InvalidMoveError
from ..models import AIConfig, AIDifficulty, Player
from ..rules.board import Board
from .heuristic import evaluate, evaluation_breakdown


def derive_seed(config: AIConfig, player: Player) -> int:
    """
    Derive a deterministic RNG seed when ``AIConfig.rng_seed`` is unset.

    Mixes the difficulty rung and the side into a 32-bit value so that two
    AIs of the same difficulty playing each other still draw different
    random streams. Callers that need reproducibility across runs with
    different settings should pass ``rng_seed`` explicitly.
    """
    rung = list(AIDifficulty).index(config.difficulty) + 1
    base = (rung * 1_000_003) ^ (int(player) * 97_911)
    return int(base & 0xFFFFFFFF)


class BaseAI(ABC):
    """Abstract base class for all AI implementations"""

    def __init__(self, player: Player, config: AIConfig):
        """
        Initialize AI player

        Args:
            player: The side this AI controls (X or O)
            config: AI configuration settings
        """
        if player not in (Player.X, Player.O):
            raise InvalidMoveError(
                "AI must play X or O",
                context={"player": int(player)},
            )
        self.player = player
        self.config = config
        self.move_count = 0

        if self.config.rng_seed is not None:
            self.rng_seed: int = int(self.config.rng_seed)
        else:
            self.rng_seed = derive_seed(self.config, self.player)
        self.rng: random.Random = random.Random(self.rng_seed)

    @abstractmethod
    def select_move(self, board: Board) -> int:
        """
        Select a move for the current board

        Args:
            board: Current board, with this AI's side to move

        Returns:
            Cell index in [0, 64), or -1 if no legal move exists
        """

    def evaluate_position(self, board: Board) -> float:
        """
        Evaluate the board from this AI's perspective

        Args:
            board: Current board

        Returns:
            Evaluation score (positive = good for this AI, negative = bad)
        """
        score = evaluate(board.x_mask, board.o_mask)
        return float(score if self.player is Player.X else -score)

    def get_evaluation_breakdown(self, board: Board) -> Dict[str, float]:
        """
        Get per line-category breakdown of :meth:`evaluate_position`

        Args:
            board: Current board

        Returns:
            Dictionary with evaluation components and a ``"total"`` entry
        """
        sign = 1 if self.player is Player.X else -1
        return {
            name: float(sign * value)
            for name, value in evaluation_breakdown(
                board.x_mask, board.o_mask
            ).items()
        }

    def get_valid_moves(self, board: Board) -> List[int]:
        """Empty cells in ascending index order."""
        return board.empty_cells()

    def get_random_element(self, items: List[Any]) -> Optional[Any]:
        """
        Get random element from list using the per-instance RNG.

        Args:
            items: List of items

        Returns:
            Random item or None if list is empty
        """
        if not items:
            return None
        return self.rng.choice(items)

    def __repr__(self) -> str:
        """String representation of AI"""
        return (
            f"{self.__class__.__name__}"
            f"(player={self.player.symbol}, "
            f"difficulty={self.config.difficulty.value})"
        )
