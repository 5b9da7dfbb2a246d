"""Unit tests for the bitboard model."""

import pytest

from qubic.errors import InvalidMoveError, InvalidStateError
from qubic.models import Player
from qubic.rules.board import (
    FULL_MASK,
    NUM_CELLS,
    Board,
    bit_at,
    cell_coords,
    cell_index,
    iter_bits,
)


class TestCellIndexing:
    """Tests for the x + 4y + 16z linearization."""

    def test_corners(self) -> None:
        assert cell_index(0, 0, 0) == 0
        assert cell_index(3, 0, 0) == 3
        assert cell_index(0, 3, 0) == 12
        assert cell_index(0, 0, 3) == 48
        assert cell_index(3, 3, 3) == 63

    def test_coords_round_trip_every_cell(self) -> None:
        for index in range(NUM_CELLS):
            assert cell_index(*cell_coords(index)) == index

    def test_bit_at(self) -> None:
        assert bit_at(1, 1, 1) == 1 << 21

    @pytest.mark.parametrize("coords", [(-1, 0, 0), (4, 0, 0), (0, 4, 0), (0, 0, 7)])
    def test_out_of_range_coordinates_rejected(self, coords) -> None:
        with pytest.raises(InvalidMoveError):
            cell_index(*coords)

    @pytest.mark.parametrize("index", [-1, 64, 100])
    def test_out_of_range_index_rejected(self, index) -> None:
        with pytest.raises(InvalidMoveError):
            cell_coords(index)

    def test_iter_bits_ascending(self) -> None:
        assert list(iter_bits(0)) == []
        assert list(iter_bits((1 << 63) | (1 << 5) | 1)) == [0, 5, 63]


class TestBoardValidation:
    """Boundary checks performed when a Board is constructed."""

    def test_empty_board(self) -> None:
        board = Board()
        assert board.occupied == 0
        assert board.empty == FULL_MASK
        assert not board.is_full
        assert board.empty_cells() == list(range(NUM_CELLS))

    def test_overlapping_masks_rejected(self) -> None:
        with pytest.raises(InvalidStateError) as exc_info:
            Board(x_mask=0b11, o_mask=0b10)
        assert exc_info.value.code == "INVALID_STATE"
        assert "x_mask" in exc_info.value.context

    def test_mask_wider_than_cube_rejected(self) -> None:
        with pytest.raises(InvalidStateError):
            Board(x_mask=1 << 64)

    def test_negative_mask_rejected(self) -> None:
        with pytest.raises(InvalidStateError):
            Board(o_mask=-1)

    def test_from_cells(self, board_factory) -> None:
        board = board_factory(x_cells=[0, 63], o_cells=[5])
        assert board.x_mask == (1 << 0) | (1 << 63)
        assert board.o_mask == 1 << 5

    def test_full_board(self) -> None:
        x_mask = 0x5555555555555555
        board = Board(x_mask, FULL_MASK ^ x_mask)
        assert board.is_full
        assert board.empty == 0
        assert board.empty_cells() == []


class TestApply:
    """Tests for Board.apply."""

    def test_apply_returns_new_board(self) -> None:
        board = Board()
        after = board.apply(21, Player.X)
        assert after.x_mask == 1 << 21
        assert after.o_mask == 0
        assert board.x_mask == 0

    def test_apply_for_o(self) -> None:
        after = Board().apply(7, Player.O)
        assert after.o_mask == 1 << 7
        assert after.owner(7) is Player.O
        assert after.owner(8) is Player.NONE

    def test_apply_occupied_cell_rejected(self, board_factory) -> None:
        board = board_factory(x_cells=[4])
        with pytest.raises(InvalidMoveError) as exc_info:
            board.apply(4, Player.O)
        assert exc_info.value.context["cell"] == 4

    def test_apply_for_nobody_rejected(self) -> None:
        with pytest.raises(InvalidMoveError):
            Board().apply(0, Player.NONE)

    def test_apply_out_of_range_rejected(self) -> None:
        with pytest.raises(InvalidMoveError):
            Board().apply(64, Player.X)

    def test_boards_are_values(self) -> None:
        assert Board().apply(3, Player.X) == Board(x_mask=1 << 3)
        assert hash(Board(1, 2)) == hash(Board(1, 2))


class TestSideToMove:
    def test_x_moves_first(self) -> None:
        assert Board().side_to_move() is Player.X

    def test_alternates_by_stone_count(self, board_factory) -> None:
        assert board_factory(x_cells=[0]).side_to_move() is Player.O
        assert board_factory(x_cells=[0], o_cells=[1]).side_to_move() is Player.X

    def test_mask_for(self, board_factory) -> None:
        board = board_factory(x_cells=[0], o_cells=[1])
        assert board.mask_for(Player.X) == 1
        assert board.mask_for(Player.O) == 2
        with pytest.raises(InvalidMoveError):
            board.mask_for(Player.NONE)
