"""
Command line front end for Minesweeper.

Usage:
    minesweeper [rows cols mines] [--seed N] [--verbose]

Commands read from stdin during a game:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    n           new game
    q           quit
"""
import argparse
import logging
import sys
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple

from .board import Board, BoardConfig, DEFAULT_CONFIG
from .render import render


COMMAND_HELP = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


# ============================================================================
# Argument Handling
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Play Minesweeper in the terminal",
    )
    parser.add_argument(
        "dimensions",
        nargs="*",
        metavar="N",
        help="Board size as: rows cols mines (default: 10 10 15)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine events"
    )
    return parser


def parse_board_config(values: Sequence[str]) -> BoardConfig:
    """
    Turn positional arguments into a board configuration.

    Any problem with the arguments is reported on stderr and the
    default configuration is used instead.

    Args:
        values: Raw positional arguments, expected to be rows, cols, mines.

    Returns:
        The requested configuration, or DEFAULT_CONFIG.
    """
    if not values:
        return DEFAULT_CONFIG

    if len(values) != 3:
        print("Usage: minesweeper [rows cols mines]", file=sys.stderr)
        print("Using default values.", file=sys.stderr)
        return DEFAULT_CONFIG

    try:
        rows, cols, mines = (int(value) for value in values)
    except ValueError as error:
        print(f"Invalid argument type (not an integer): {error}", file=sys.stderr)
        print("Using default values.", file=sys.stderr)
        return DEFAULT_CONFIG

    config = BoardConfig(rows, cols, mines)
    try:
        config.validate()
    except ValueError as error:
        print(f"Invalid argument values: {error}. Using defaults.", file=sys.stderr)
        print("Rows/Cols > 0, Mines >= 0 and < Rows*Cols.", file=sys.stderr)
        return DEFAULT_CONFIG

    return config


# ============================================================================
# Game Session
# ============================================================================

def _parse_coordinates(parts: List[str]) -> Optional[Tuple[int, int]]:
    """Parse 'ROW COL' into integers, or None if malformed."""
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def run_session(
    board: Board, commands: Iterable[str], out: Optional[TextIO] = None
) -> None:
    """
    Play a game by reading commands until 'q' or end of input.

    The board is re-rendered after every call that changed it. On a
    loss every mine is disclosed before rendering.

    Args:
        board: Board to play on.
        commands: Lines of input, one command per line.
        out: Stream the board is rendered to, sys.stdout at call time if None.
    """
    print(render(board), file=out)
    print(COMMAND_HELP, file=out)

    for line in commands:
        parts = line.split()
        if not parts:
            continue

        action = parts[0].lower()
        if action == "q":
            break

        if action == "n":
            board.reset()
            print(render(board), file=out)
            continue

        if action not in ("r", "f"):
            print(COMMAND_HELP, file=out)
            continue

        position = _parse_coordinates(parts[1:])
        if position is None:
            print(COMMAND_HELP, file=out)
            continue

        if board.game_over:
            print("Game over. 'n' for a new game, 'q' to quit.", file=out)
            continue

        if action == "r":
            changed = board.reveal(*position)
        else:
            changed = board.toggle_flag(*position)

        if board.is_lost:
            board.reveal_all_mines()

        if changed:
            print(render(board), file=out)


# ============================================================================
# Entry Point
# ============================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run a game session on stdin."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = parse_board_config(args.dimensions)
    board = Board(config, seed=args.seed)

    print(f"Board: {config.rows}x{config.cols} with {config.num_mines} mines")
    run_session(board, sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
