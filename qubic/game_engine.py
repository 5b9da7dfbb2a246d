"""Game session for qubic.

:class:`Game` tracks a board, the side to move and the move history on top
of the pure board functions. It is the state host bindings and the CLI
drive; the search engine itself only ever sees a :class:`Board`.
"""

from __future__ import annotations

import logging

from .errors import InvalidMoveError
from .models import GameStatus, Player
from .rules.board import SIZE, Board, cell_coords, cell_index
from .rules.lines import check_terminal_state, winning_line

logger = logging.getLogger(__name__)


class Game:
    """A single game of 4x4x4 tic-tac-toe, X moving first."""

    def __init__(self, board: Board | None = None, current_player: Player = Player.X):
        if current_player not in (Player.X, Player.O):
            raise InvalidMoveError(
                "Side to move must be X or O",
                context={"current_player": int(current_player)},
            )
        self.board: Board = board if board is not None else Board()
        self.current_player: Player = current_player
        self.history: list[int] = []

    def make_move(self, x: int, y: int, z: int) -> None:
        """Play ``(x, y, z)`` for the side to move and pass the turn."""
        self.make_move_index(cell_index(x, y, z))

    def make_move_index(self, index: int) -> None:
        status = self.check_game_state()
        if status is not GameStatus.ONGOING:
            raise InvalidMoveError(
                "Game is already over",
                cell=index,
                context={"status": status.value},
            )
        self.board = self.board.apply(index, self.current_player)
        self.history.append(index)
        logger.debug(
            f"{self.current_player.symbol} played {index} {cell_coords(index)}"
        )
        self.current_player = self.current_player.opponent

    def check_game_state(self) -> GameStatus:
        return check_terminal_state(self.board.x_mask, self.board.o_mask)

    def winning_line(self) -> int:
        return winning_line(self.board.x_mask, self.board.o_mask)

    def reset(self) -> None:
        self.board = Board()
        self.current_player = Player.X
        self.history = []

    def render(self) -> str:
        """Text picture of the cube: one block per z-layer, rows by y."""
        layers = []
        for z in range(SIZE):
            rows = []
            for y in range(SIZE):
                rows.append(" ".join(
                    self.board.owner(cell_index(x, y, z)).symbol
                    for x in range(SIZE)
                ))
            layers.append(f"z={z}\n" + "\n".join(rows))
        return "\n\n".join(layers)


def check_game_state(x_mask: int, o_mask: int) -> GameStatus:
    """Validated terminal-state query over raw masks."""
    board = Board(x_mask, o_mask)
    return check_terminal_state(board.x_mask, board.o_mask)


def get_winning_mask(x_mask: int, o_mask: int) -> int:
    """Mask of the first completed line, or 0."""
    board = Board(x_mask, o_mask)
    return winning_line(board.x_mask, board.o_mask)
