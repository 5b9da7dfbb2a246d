"""Random AI implementation for Qubic.

This agent selects uniformly random empty cells using the per-instance RNG
on the :class:`BaseAI`. It backs the "easy" difficulty and serves as a
baseline opponent in self-play.
"""

from __future__ import annotations

from ..rules.board import Board
from .base import BaseAI


class RandomAI(BaseAI):
    """AI that selects random empty cells."""

    def select_move(self, board: Board) -> int:
        """Select a random empty cell of ``board``.

        Args:
            board: Current board.

        Returns:
            A random empty cell index, or ``-1`` if the board is full.
        """
        selected = self.get_random_element(self.get_valid_moves(board))
        if selected is None:
            return -1

        self.move_count += 1
        return selected
