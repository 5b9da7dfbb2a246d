"""Tests for the hard-mode single-safe-move pre-pass."""

import pytest

from qubic.ai.minimax_ai import (
    AlphaBetaSearch,
    analyze_position,
    find_best_move,
    hard_mode_safe_moves,
)
from qubic.models import EngineConfig, Player
from qubic.rules.board import Board


def _mask(*cells: int) -> int:
    mask = 0
    for cell in cells:
        mask |= 1 << cell
    return mask


def _no_search(*args, **kwargs):
    raise AssertionError("search should not run for a forced move")


class TestSafeMoves:
    def test_single_block(self, o_threatens_row) -> None:
        board = o_threatens_row
        assert hard_mode_safe_moves(board.x_mask, board.o_mask, Player.X) == [3]

    def test_single_block_for_o(self) -> None:
        assert hard_mode_safe_moves(_mask(0, 1, 2), _mask(20, 40, 60), Player.O) == [3]

    def test_no_threat_means_every_cell_is_safe(self) -> None:
        assert hard_mode_safe_moves(0, 0, Player.X) == list(range(64))

    def test_double_threat_leaves_nothing_safe(self) -> None:
        # O threatens both 3 (row) and 12 (column)
        x_mask, o_mask = _mask(20, 40, 60, 62, 61), _mask(0, 1, 2, 4, 8)
        assert hard_mode_safe_moves(x_mask, o_mask, Player.X) == []

    def test_existing_opponent_line_leaves_nothing_safe(self) -> None:
        x_mask, o_mask = _mask(0, 1, 2, 3), _mask(20, 40, 60)
        assert hard_mode_safe_moves(x_mask, o_mask, Player.O) == []


class TestHardModeSelection:
    def test_forced_move_skips_search(self, monkeypatch, o_threatens_row) -> None:
        monkeypatch.setattr(AlphaBetaSearch, "search", _no_search)
        config = EngineConfig(max_depth=5, hard_mode=True)
        assert find_best_move(o_threatens_row, Player.X, config) == 3

    def test_forced_outcome(self, o_threatens_row) -> None:
        outcome = analyze_position(
            o_threatens_row, Player.X, EngineConfig(max_depth=1, hard_mode=True)
        )
        assert outcome.forced
        assert outcome.move == 3
        assert outcome.score is None
        assert outcome.nodes_visited == 0

    def test_block_taken_over_own_win(self) -> None:
        # X could win at 63, but only 3 leaves O without a winning reply
        board = Board(_mask(60, 61, 62), _mask(0, 1, 2))
        hard = EngineConfig(max_depth=1, hard_mode=True)
        plain = EngineConfig(max_depth=1)
        assert find_best_move(board, Player.X, hard) == 3
        assert find_best_move(board, Player.X, plain) == 63

    def test_double_threat_falls_back_to_search(self) -> None:
        board = Board(_mask(20, 40, 60, 62, 61), _mask(0, 1, 2, 4, 8))
        outcome = analyze_position(
            board, Player.X, EngineConfig(max_depth=1, hard_mode=True)
        )
        assert not outcome.forced
        assert outcome.nodes_visited > 0
        # X wins on the 60..63 row before O can use either threat
        assert outcome.move == 63

    @pytest.mark.timeout(30)
    def test_quiet_position_falls_back_to_search(self) -> None:
        outcome = analyze_position(
            Board(), Player.X, EngineConfig(max_depth=1, hard_mode=True)
        )
        assert not outcome.forced
        assert outcome.move == 0
        assert outcome.score == 7

    def test_hard_mode_off_ignores_threat(self, o_threatens_row) -> None:
        outcome = analyze_position(o_threatens_row, Player.X, EngineConfig(max_depth=1))
        assert not outcome.forced
        assert outcome.nodes_visited > 0
