"""
Exceptions raised by the Minesweeper core.

Every error derives from MinesweeperError and from the closest builtin,
so callers may catch either.
"""


class MinesweeperError(Exception):
    """Base class for all Minesweeper errors."""


# ============================================================================
# Construction Errors
# ============================================================================

class BoardConfigError(MinesweeperError, ValueError):
    """Board configuration is invalid."""


class InvalidDimensionsError(BoardConfigError):
    """Width or height is not positive."""


class TooManyMinesError(BoardConfigError):
    """More mines requested than the board can hold with one safe cell."""


class InvalidLayoutError(BoardConfigError):
    """Fixed mine layout does not match the board size."""


# ============================================================================
# Runtime Errors
# ============================================================================

class OutOfBoundsError(MinesweeperError, IndexError):
    """Coordinates fall outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside a {width}x{height} board"
        )
        self.x = x
        self.y = y


class MineAlreadyPlacedError(MinesweeperError, RuntimeError):
    """A mine was placed twice on the same cell."""


class CellNotRevealedError(MinesweeperError, RuntimeError):
    """Adjacent mine count was queried on a cell that is still hidden."""


class GamePhaseError(MinesweeperError, RuntimeError):
    """Operation is not allowed in the current game phase."""
