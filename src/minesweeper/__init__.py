"""
Minesweeper game module.

Provides the board/cell state machine, text rendering, an interactive
CLI, and a Gymnasium environment.
"""
from .cell import Cell, CellState, ClickResult
from .board import Board, BoardConfig, GameState, new_fixed_board, new_random_board
from .environment import MinesweeperEnv, make_vec_env
from .errors import (
    BoardConfigError,
    CellNotRevealedError,
    GamePhaseError,
    InvalidDimensionsError,
    InvalidLayoutError,
    MineAlreadyPlacedError,
    MinesweeperError,
    OutOfBoundsError,
    TooManyMinesError,
)
from .render import render_board

__all__ = [
    "Cell",
    "CellState",
    "ClickResult",
    "Board",
    "BoardConfig",
    "GameState",
    "new_fixed_board",
    "new_random_board",
    "MinesweeperEnv",
    "make_vec_env",
    "render_board",
    "MinesweeperError",
    "BoardConfigError",
    "InvalidDimensionsError",
    "TooManyMinesError",
    "InvalidLayoutError",
    "OutOfBoundsError",
    "MineAlreadyPlacedError",
    "CellNotRevealedError",
    "GamePhaseError",
]
