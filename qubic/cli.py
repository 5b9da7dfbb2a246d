#!/usr/bin/env python3
"""
Command-line front end for the Qubic engine.

Examples:
    # Best move for O at hard difficulty, masks in hex or decimal
    qubic move --x-mask 0x7 --o-mask 0x300 --player 2 --difficulty hard

    # Same, as a MoveResponse JSON document
    qubic move --x-mask 0x7 --o-mask 0x300 --player O --json

    # Watch two AIs play each other
    qubic selfplay --x-difficulty hard --o-difficulty easy --seed 7
"""

from __future__ import annotations

import argparse
import sys

import pydantic

from .ai.factory import AIFactory
from .ai.minimax_ai import MinimaxAI
from .errors import QubicError
from .game_engine import Game
from .logging_config import setup_logging
from .models import (
    AIDifficulty,
    AIType,
    CellPosition,
    GameStatus,
    MoveRequest,
    MoveResponse,
    Player,
)
from .rules.board import Board, cell_coords, iter_bits


def _mask(value: str) -> int:
    return int(value, 0)


def _player(value: str) -> Player:
    lookup = {"1": Player.X, "x": Player.X, "2": Player.O, "o": Player.O}
    try:
        return lookup[value.strip().lower()]
    except KeyError as e:
        raise argparse.ArgumentTypeError(
            f"player must be one of 1, 2, X, O (got {value!r})"
        ) from e


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qubic",
        description="4x4x4 tic-tac-toe move engine",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    difficulties = [d.value for d in AIDifficulty]

    move = subparsers.add_parser("move", help="Choose a move for one position")
    move.add_argument("--x-mask", type=_mask, default=0, help="X occupancy mask")
    move.add_argument("--o-mask", type=_mask, default=0, help="O occupancy mask")
    move.add_argument("--player", type=_player, required=True, help="Side to move")
    move.add_argument("--difficulty", choices=difficulties, default="medium")
    move.add_argument("--seed", type=int, default=None, help="RNG seed for random play")
    move.add_argument("--json", action="store_true", help="Print a MoveResponse JSON document")

    selfplay = subparsers.add_parser("selfplay", help="Play a full AI vs AI game")
    selfplay.add_argument("--x-difficulty", choices=difficulties, default="medium")
    selfplay.add_argument("--o-difficulty", choices=difficulties, default="medium")
    selfplay.add_argument("--seed", type=int, default=None, help="RNG seed for random play")
    selfplay.add_argument("--quiet", action="store_true", help="Only print the final board")

    return parser


def run_move(args: argparse.Namespace) -> int:
    try:
        request = MoveRequest(
            x_mask=args.x_mask,
            o_mask=args.o_mask,
            player=args.player,
            difficulty=args.difficulty,
            rng_seed=args.seed,
        )
    except pydantic.ValidationError as e:
        print(f"Invalid request: {e}", file=sys.stderr)
        return 2

    board = Board(request.x_mask, request.o_mask)
    ai = AIFactory.create_from_difficulty(
        request.difficulty, request.player, request.rng_seed
    )
    move = ai.select_move(board)

    response = MoveResponse(
        move=move,
        position=CellPosition.from_index(move) if move >= 0 else None,
        ai_type=AIType.MINIMAX if isinstance(ai, MinimaxAI) else AIType.RANDOM,
        difficulty=request.difficulty,
        score=ai.last_score if isinstance(ai, MinimaxAI) else None,
    )

    if args.json:
        print(response.model_dump_json(by_alias=True))
    elif move < 0:
        print("No legal move")
    else:
        x, y, z = cell_coords(move)
        print(f"move {move} (x={x}, y={y}, z={z})")
    return 0


def run_selfplay(args: argparse.Namespace) -> int:
    game = Game()
    players = {
        Player.X: AIFactory.create_from_difficulty(args.x_difficulty, Player.X, args.seed),
        Player.O: AIFactory.create_from_difficulty(args.o_difficulty, Player.O, args.seed),
    }

    while game.check_game_state() is GameStatus.ONGOING:
        ai = players[game.current_player]
        move = ai.select_move(game.board)
        if move < 0:
            break
        game.make_move_index(move)
        if not args.quiet:
            x, y, z = cell_coords(move)
            print(f"{ai!r} -> {move} (x={x}, y={y}, z={z})")
            print(game.render())
            print()

    status = game.check_game_state()
    if args.quiet:
        print(game.render())
        print()
    print(f"Result: {status.value} after {len(game.history)} moves")
    line = game.winning_line()
    if line:
        print(f"Winning line: {list(iter_bits(line))}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging("qubic", level=args.log_level, format_style="compact")

    try:
        if args.command == "move":
            return run_move(args)
        return run_selfplay(args)
    except QubicError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
