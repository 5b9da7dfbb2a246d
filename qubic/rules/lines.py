"""Winning-line table for the 4x4x4 cube.

The 76 lines are generated once at import time from
:func:`qubic.rules.board.bit_at`. Generation order is fixed (it decides which
line :func:`winning_line` reports when several are complete):

======================  =====  =========================================
Category                Count  Enumeration
======================  =====  =========================================
``x_axis``              16     for y, for z
``y_axis``              16     for x, for z
``z_axis``              16     for x, for y
``xy_diagonal``         8      per z: ``(d, d)``, ``(d, 3-d)``
``xz_diagonal``         8      per y: ``(d, d)``, ``(d, 3-d)``
``yz_diagonal``         8      per x: ``(d, d)``, ``(d, 3-d)``
``space_diagonal``      4      ``(d,d,d)``, ``(d,d,3-d)``, ``(d,3-d,d)``,
                               ``(3-d,d,d)``
======================  =====  =========================================
"""

from __future__ import annotations

from ..models import GameStatus
from .board import FULL_MASK, NUM_CELLS, SIZE, bit_at

N = SIZE
LAST = SIZE - 1


def _generate_lines() -> list[tuple[str, int]]:
    lines: list[tuple[str, int]] = []

    for y in range(N):
        for z in range(N):
            lines.append(("x_axis", _line(lambda d: (d, y, z))))
    for x in range(N):
        for z in range(N):
            lines.append(("y_axis", _line(lambda d: (x, d, z))))
    for x in range(N):
        for y in range(N):
            lines.append(("z_axis", _line(lambda d: (x, y, d))))

    for z in range(N):
        lines.append(("xy_diagonal", _line(lambda d: (d, d, z))))
        lines.append(("xy_diagonal", _line(lambda d: (d, LAST - d, z))))
    for y in range(N):
        lines.append(("xz_diagonal", _line(lambda d: (d, y, d))))
        lines.append(("xz_diagonal", _line(lambda d: (d, y, LAST - d))))
    for x in range(N):
        lines.append(("yz_diagonal", _line(lambda d: (x, d, d))))
        lines.append(("yz_diagonal", _line(lambda d: (x, d, LAST - d))))

    lines.append(("space_diagonal", _line(lambda d: (d, d, d))))
    lines.append(("space_diagonal", _line(lambda d: (d, d, LAST - d))))
    lines.append(("space_diagonal", _line(lambda d: (d, LAST - d, d))))
    lines.append(("space_diagonal", _line(lambda d: (LAST - d, d, d))))
    return lines


def _line(coords) -> int:
    mask = 0
    for d in range(N):
        mask |= bit_at(*coords(d))
    return mask


_LINES = _generate_lines()

WIN_MASKS: tuple[int, ...] = tuple(mask for _, mask in _LINES)
LINE_CATEGORIES: tuple[str, ...] = tuple(category for category, _ in _LINES)

# cell index -> masks of every line passing through it
LINES_THROUGH: tuple[tuple[int, ...], ...] = tuple(
    tuple(mask for mask in WIN_MASKS if mask >> cell & 1)
    for cell in range(NUM_CELLS)
)


def is_win(player_mask: int) -> bool:
    """True iff ``player_mask`` covers at least one complete line."""
    for mask in WIN_MASKS:
        if player_mask & mask == mask:
            return True
    return False


def completes_line(player_mask: int, cell: int) -> bool:
    """True iff claiming ``cell`` would complete a line for ``player_mask``."""
    claimed = player_mask | (1 << cell)
    for mask in LINES_THROUGH[cell]:
        if claimed & mask == mask:
            return True
    return False


def winning_line(x_mask: int, o_mask: int) -> int:
    """First completed line in table order (X checked before O), else 0."""
    for mask in WIN_MASKS:
        if x_mask & mask == mask:
            return mask
        if o_mask & mask == mask:
            return mask
    return 0


def check_terminal_state(x_mask: int, o_mask: int) -> GameStatus:
    """Classify a board; a completed line always outranks a full board."""
    for mask in WIN_MASKS:
        if x_mask & mask == mask:
            return GameStatus.X_WINS
        if o_mask & mask == mask:
            return GameStatus.O_WINS
    if (x_mask | o_mask) & FULL_MASK == FULL_MASK:
        return GameStatus.DRAW
    return GameStatus.ONGOING
