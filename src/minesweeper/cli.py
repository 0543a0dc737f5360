"""
Interactive text Minesweeper.

Usage:
    minesweeper WIDTH HEIGHT MINES [-v]

Commands, one per line:
    M <x> <y>   toggle the mark on a cell
    <x> <y>     sweep a cell
"""
import argparse
import logging
import sys
from enum import Enum, auto
from typing import List, NamedTuple, Optional, TextIO

from .board import Board, GameState
from .errors import BoardConfigError, OutOfBoundsError
from .render import render_board

logger = logging.getLogger(__name__)

COMMAND_HELP = (
    "Command Help\n"
    "Toggle marking:\n"
    "M [x-coordinate] [y-coordinate]\n"
    "Sweep square:\n"
    "[x-coordinate] [y-coordinate]\n"
)


# ============================================================================
# Command Parsing
# ============================================================================

class Action(Enum):
    """Kinds of player command."""

    MARK = auto()
    SWEEP = auto()
    HELP = auto()


class Command(NamedTuple):
    action: Action
    x: int = 0
    y: int = 0


def _parse_coordinates(tokens: List[str]) -> Optional[List[int]]:
    try:
        return [int(token) for token in tokens[:2]]
    except ValueError:
        return None


def parse_command(line: str) -> Command:
    """
    Parse one input line.

    Anything that is not ``M x y`` or ``x y`` is a request for help.
    """
    tokens = line.split()
    action = Action.SWEEP
    if tokens and tokens[0] == "M":
        action = Action.MARK
        tokens = tokens[1:]
    coords = _parse_coordinates(tokens)
    if len(tokens) < 2 or coords is None:
        return Command(Action.HELP)
    return Command(action, coords[0], coords[1])


# ============================================================================
# Game Loop
# ============================================================================

def play(board: Board, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> GameState:
    """
    Run an interactive session until the game ends or input runs out.

    Returns:
        The game state when the session ended.
    """
    stdout.write(render_board(board))
    while True:
        stdout.write("Enter command:\n> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            break

        command = parse_command(line)
        if command.action == Action.HELP:
            stdout.write(COMMAND_HELP)
            continue

        try:
            if command.action == Action.MARK:
                board.toggle_mark(command.x, command.y)
            else:
                board.sweep(command.x, command.y)
        except OutOfBoundsError as exc:
            stdout.write(f"{exc}\n")
            continue
        stdout.write(render_board(board))

        if board.game_state == GameState.WIN:
            stdout.write("You win!\n")
            break
        if board.game_state == GameState.LOSE:
            stdout.write("BOOM!\n")
            break
    return board.game_state


# ============================================================================
# Entry Point
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Play Minesweeper in the terminal",
    )
    parser.add_argument("width", type=int, help="Number of columns")
    parser.add_argument("height", type=int, help="Number of rows")
    parser.add_argument("mines", type=int, help="Number of mines")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run a game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        board = Board.random(args.width, args.height, args.mines, seed=args.seed)
    except BoardConfigError as exc:
        parser.error(str(exc))

    logger.debug("Starting %dx%d game with %d mines", args.width, args.height, args.mines)
    play(board)
    return 0


if __name__ == "__main__":
    sys.exit(main())
