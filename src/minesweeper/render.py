"""
Text rendering of a Minesweeper board.

One character per cell, one newline-terminated line per row.
"""
from .board import Board
from .cell import CellState


GLYPHS = {
    CellState.MINE_SHOWN: "*",
    CellState.HIDDEN: "~",
    CellState.EXPLODED: "#",
    CellState.FLAGGED: "P",
    CellState.QUESTIONED: "?",
    CellState.MISMARKED: "X",
}

EMPTY_GLYPH = "_"


def cell_glyph(board: Board, x: int, y: int) -> str:
    """Glyph for a single cell; revealed cells show their count."""
    state = board.cell_state(x, y)
    if state == CellState.REVEALED:
        count = board.adjacent_mines(x, y)
        return str(count) if count else EMPTY_GLYPH
    return GLYPHS[state]


def render_board(board: Board) -> str:
    """Render the whole board as text."""
    lines = []
    for y in range(board.height):
        row = "".join(cell_glyph(board, x, y) for x in range(board.width))
        lines.append(row + "\n")
    return "".join(lines)
