"""Bitboard model for the 4x4x4 cube.

A board is two disjoint 64-bit occupancy masks, one per side. Cell
``(x, y, z)`` maps to bit ``x + 4*y + 16*z``; the line table in
:mod:`qubic.rules.lines` is generated from the same mapping, so the two must
change together.

The hot search paths work on raw ``(x_mask, o_mask)`` integers; :class:`Board`
is the validated value handed across the engine boundary.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..errors import InvalidMoveError, InvalidStateError
from ..models import Player

SIZE = 4
NUM_CELLS = SIZE * SIZE * SIZE
FULL_MASK = (1 << NUM_CELLS) - 1


def cell_index(x: int, y: int, z: int) -> int:
    """Linear index of ``(x, y, z)``; rejects coordinates outside the cube."""
    if not (0 <= x < SIZE and 0 <= y < SIZE and 0 <= z < SIZE):
        raise InvalidMoveError(
            "Coordinates outside the cube",
            context={"x": x, "y": y, "z": z},
        )
    return x + SIZE * y + SIZE * SIZE * z


def bit_at(x: int, y: int, z: int) -> int:
    return 1 << cell_index(x, y, z)


def cell_coords(index: int) -> tuple[int, int, int]:
    """Inverse of :func:`cell_index`, returned as ``(x, y, z)``."""
    if not 0 <= index < NUM_CELLS:
        raise InvalidMoveError("Cell index out of range", cell=index)
    return index % SIZE, (index // SIZE) % SIZE, index // (SIZE * SIZE)


def iter_bits(mask: int) -> Iterator[int]:
    """Yield indices of set bits, lowest first."""
    while mask:
        low = mask & -mask
        yield low.bit_length() - 1
        mask ^= low


@dataclass(frozen=True)
class Board:
    """Immutable occupancy record."""

    x_mask: int = 0
    o_mask: int = 0

    def __post_init__(self) -> None:
        for name, mask in (("x_mask", self.x_mask), ("o_mask", self.o_mask)):
            if mask < 0 or mask > FULL_MASK:
                raise InvalidStateError(
                    f"{name} does not fit in {NUM_CELLS} cells",
                    x_mask=self.x_mask if self.x_mask >= 0 else None,
                    o_mask=self.o_mask if self.o_mask >= 0 else None,
                )
        if self.x_mask & self.o_mask:
            raise InvalidStateError(
                "A cell is occupied by both players",
                x_mask=self.x_mask,
                o_mask=self.o_mask,
            )

    @classmethod
    def from_cells(cls, x_cells=(), o_cells=()) -> Board:
        """Build a board from iterables of cell indices."""
        x_mask = 0
        o_mask = 0
        for cell in x_cells:
            cell_coords(cell)
            x_mask |= 1 << cell
        for cell in o_cells:
            cell_coords(cell)
            o_mask |= 1 << cell
        return cls(x_mask, o_mask)

    @property
    def occupied(self) -> int:
        return self.x_mask | self.o_mask

    @property
    def empty(self) -> int:
        return ~self.occupied & FULL_MASK

    @property
    def is_full(self) -> bool:
        return self.occupied == FULL_MASK

    def mask_for(self, player: Player) -> int:
        if player is Player.X:
            return self.x_mask
        if player is Player.O:
            return self.o_mask
        raise InvalidMoveError("Player.NONE owns no cells")

    def owner(self, index: int) -> Player:
        bit = 1 << index
        if self.x_mask & bit:
            return Player.X
        if self.o_mask & bit:
            return Player.O
        return Player.NONE

    def empty_cells(self) -> list[int]:
        """Legal moves in ascending cell order."""
        return list(iter_bits(self.empty))

    def apply(self, index: int, player: Player) -> Board:
        """Return a new board with ``index`` claimed by ``player``."""
        cell_coords(index)
        bit = 1 << index
        if self.occupied & bit:
            raise InvalidMoveError("Cell already occupied", cell=index)
        if player is Player.X:
            return Board(self.x_mask | bit, self.o_mask)
        if player is Player.O:
            return Board(self.x_mask, self.o_mask | bit)
        raise InvalidMoveError("Player.NONE cannot move", cell=index)

    def side_to_move(self) -> Player:
        """Infer the side to move from stone counts, X moving first."""
        x_count = self.x_mask.bit_count()
        o_count = self.o_mask.bit_count()
        return Player.X if x_count <= o_count else Player.O
