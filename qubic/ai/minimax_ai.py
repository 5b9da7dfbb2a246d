"""Minimax AI implementation for Qubic.

The engine is a depth-limited minimax with alpha-beta pruning over the raw
``(x_mask, o_mask)`` bitboard. X is always the maximizing side and O the
minimizing side, so scores are absolute rather than relative to the mover.

Node order:

1. Win check over the line table: an X line scores ``WIN_SCORE + depth``,
   an O line ``-WIN_SCORE - depth``. The remaining depth is added so that
   quicker wins (and slower losses) are preferred.
2. Full board: draw, score 0.
3. ``depth == 0``: static evaluation from :mod:`qubic.ai.heuristic`.
4. Otherwise recurse over empty cells, lowest index first. Only strictly
   better scores replace the running best, so ties keep the earliest cell.

Hard mode adds a pre-pass before the search: if exactly one empty cell
leaves the opponent without an immediate winning reply, that cell is
played without searching. With zero or several such cells the normal
search decides.

The module-level functions are pure and never log; :class:`MinimaxAI`
wraps them and reports what it chose.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple

from ..errors import InvalidMoveError
from ..models import AIConfig, EngineConfig, Player
from ..rules.board import FULL_MASK, Board, iter_bits
from ..rules.lines import WIN_MASKS, completes_line, is_win
from .base import BaseAI
from .heuristic import evaluate

logger = logging.getLogger(__name__)

WIN_SCORE = 100000
# Sentinel bounds; strictly outside any reachable score.
SCORE_BOUND = 1000000


class SearchResult(NamedTuple):
    score: int
    move: int


@dataclass(frozen=True)
class SearchOutcome:
    """Result of a root call, with search bookkeeping.

    ``score`` is ``None`` when the hard-mode pre-pass returned a forced
    move without searching.
    """

    move: int
    score: int | None
    nodes_visited: int
    forced: bool = False


class AlphaBetaSearch:
    """One search tree. Create a fresh instance per root call."""

    def __init__(self) -> None:
        self.nodes_visited: int = 0

    def search(
        self,
        x_mask: int,
        o_mask: int,
        depth: int,
        maximizing: bool,
        alpha: int = -SCORE_BOUND,
        beta: int = SCORE_BOUND,
    ) -> SearchResult:
        self.nodes_visited += 1

        for mask in WIN_MASKS:
            if x_mask & mask == mask:
                return SearchResult(WIN_SCORE + depth, -1)
            if o_mask & mask == mask:
                return SearchResult(-WIN_SCORE - depth, -1)

        occupied = x_mask | o_mask
        if occupied == FULL_MASK:
            return SearchResult(0, -1)

        if depth == 0:
            return SearchResult(evaluate(x_mask, o_mask), -1)

        best_move = -1
        if maximizing:
            best_score = -SCORE_BOUND
            for cell in iter_bits(~occupied & FULL_MASK):
                score = self.search(
                    x_mask | (1 << cell), o_mask, depth - 1, False, alpha, beta
                ).score
                if score > best_score:
                    best_score = score
                    best_move = cell
                alpha = max(alpha, best_score)
                if beta <= alpha:
                    break
        else:
            best_score = SCORE_BOUND
            for cell in iter_bits(~occupied & FULL_MASK):
                score = self.search(
                    x_mask, o_mask | (1 << cell), depth - 1, True, alpha, beta
                ).score
                if score < best_score:
                    best_score = score
                    best_move = cell
                beta = min(beta, best_score)
                if beta <= alpha:
                    break

        return SearchResult(best_score, best_move)


def hard_mode_safe_moves(x_mask: int, o_mask: int, side: Player) -> list[int]:
    """Empty cells after which the opponent has no immediate winning reply."""
    occupied = x_mask | o_mask
    opponent_mask = o_mask if side is Player.X else x_mask
    # An already-complete opponent line makes every candidate unsafe.
    opponent_has_line = is_win(opponent_mask)
    safe: list[int] = []
    for cell in iter_bits(~occupied & FULL_MASK):
        bit = 1 << cell
        opponent_can_win = opponent_has_line
        if not opponent_can_win:
            for reply in iter_bits(~(occupied | bit) & FULL_MASK):
                if completes_line(opponent_mask, reply):
                    opponent_can_win = True
                    break
        if not opponent_can_win:
            safe.append(cell)
    return safe


def analyze_position(
    board: Board, side_to_move: Player, config: EngineConfig
) -> SearchOutcome:
    """Run the hard-mode pre-pass (if enabled) and the search for one root."""
    if side_to_move not in (Player.X, Player.O):
        raise InvalidMoveError(
            "Side to move must be X or O",
            context={"side_to_move": int(side_to_move)},
        )

    if config.hard_mode:
        safe = hard_mode_safe_moves(board.x_mask, board.o_mask, side_to_move)
        if len(safe) == 1:
            return SearchOutcome(
                move=safe[0], score=None, nodes_visited=0, forced=True
            )

    searcher = AlphaBetaSearch()
    score, move = searcher.search(
        board.x_mask,
        board.o_mask,
        config.max_depth,
        side_to_move is Player.X,
    )
    return SearchOutcome(
        move=move, score=score, nodes_visited=searcher.nodes_visited
    )


def find_best_move(
    board: Board, side_to_move: Player, config: EngineConfig
) -> int:
    """Best cell for ``side_to_move``, or -1 if the position has no move."""
    return analyze_position(board, side_to_move, config).move


class MinimaxAI(BaseAI):
    """AI that uses minimax with alpha-beta pruning.

    Difficulty and depth:
        The search depth and hard-mode flag come from the difficulty
        profile in :mod:`qubic.ai.factory`, unless ``AIConfig.max_depth``
        or ``AIConfig.hard_mode`` override them.
    """

    def __init__(self, player: Player, config: AIConfig) -> None:
        super().__init__(player, config)
        from .factory import resolve_engine_config

        self.engine_config: EngineConfig = resolve_engine_config(config)
        self.last_score: int | None = None
        self.nodes_visited: int = 0

    def select_move(self, board: Board) -> int:
        """Select the best move using minimax search.

        Returns:
            The chosen cell index, or ``-1`` if the board is full or already
            won.
        """
        outcome = analyze_position(board, self.player, self.engine_config)
        self.last_score = outcome.score
        self.nodes_visited = outcome.nodes_visited

        if outcome.forced:
            logger.info(
                f"MinimaxAI(player={self.player.symbol}): "
                f"hard-mode safe move selected: {outcome.move}"
            )
        else:
            logger.debug(
                f"MinimaxAI(player={self.player.symbol}, "
                f"depth={self.engine_config.max_depth}): chose move "
                f"{outcome.move} with a score of {outcome.score} "
                f"({outcome.nodes_visited} nodes)"
            )

        if outcome.move >= 0:
            self.move_count += 1
        return outcome.move
