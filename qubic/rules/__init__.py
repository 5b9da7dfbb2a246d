"""Board representation and line geometry for the 4x4x4 cube."""

from qubic.rules.board import (
    FULL_MASK,
    NUM_CELLS,
    SIZE,
    Board,
    bit_at,
    cell_coords,
    cell_index,
    iter_bits,
)
from qubic.rules.lines import (
    LINE_CATEGORIES,
    LINES_THROUGH,
    WIN_MASKS,
    check_terminal_state,
    completes_line,
    is_win,
    winning_line,
)

__all__ = [
    "FULL_MASK",
    "LINES_THROUGH",
    "LINE_CATEGORIES",
    "NUM_CELLS",
    "SIZE",
    "WIN_MASKS",
    "Board",
    "bit_at",
    "cell_coords",
    "cell_index",
    "check_terminal_state",
    "completes_line",
    "is_win",
    "iter_bits",
    "winning_line",
]
