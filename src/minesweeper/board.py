"""
Board module for Minesweeper game.

Implements the game board with deferred mine placement, sweeping,
marking, and game state management.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import (
    BoardConfigError,
    GamePhaseError,
    InvalidDimensionsError,
    InvalidLayoutError,
    OutOfBoundsError,
    TooManyMinesError,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """
    Possible states of the game.

    START holds until the first sweep places the mines. IN_PROGRESS then
    lasts until a mine explodes (LOSE) or every safe cell is revealed
    (WIN). WIN and LOSE are terminal.
    """

    START = auto()
    IN_PROGRESS = auto()
    WIN = auto()
    LOSE = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidDimensionsError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise BoardConfigError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise TooManyMinesError(f"Too many mines (max {max_mines})")

    @property
    def num_cells(self) -> int:
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns a flat list of cells (row-major), tracks how many cells are still
    hidden, and drives the game phase. Coordinates are (x, y) with x the
    column and y the row.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        mine_layout: Optional[Sequence[int]] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Create a board.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            mine_layout: Optional row-major mine flags; nonzero is a mine.
                When given, mines are placed immediately and
                ``config.num_mines`` must match the layout.
            seed: Seed for the mine placement generator.
        """
        self.config = config or BoardConfig()
        self._layout: Optional[Tuple[bool, ...]] = None
        if mine_layout is not None:
            self._layout = self._check_layout(mine_layout)
        self._cells: List[Cell] = []
        self._hidden_cells = 0
        self._game_state = GameState.START
        self.reset(seed=seed)

    @classmethod
    def random(
        cls, width: int, height: int, num_mines: int, seed: Optional[int] = None
    ) -> "Board":
        """Board whose mines are placed on the first sweep."""
        return cls(BoardConfig(width, height, num_mines), seed=seed)

    @classmethod
    def fixed(cls, width: int, height: int, mine_layout: Sequence[int]) -> "Board":
        """Board with an explicit row-major mine layout."""
        num_mines = sum(1 for flag in mine_layout if flag)
        return cls(BoardConfig(width, height, num_mines), mine_layout=mine_layout)

    def _check_layout(self, mine_layout: Sequence[int]) -> Tuple[bool, ...]:
        """Validate a fixed layout against the configuration."""
        layout = tuple(bool(flag) for flag in mine_layout)
        if len(layout) != self.config.num_cells:
            raise InvalidLayoutError(
                f"Layout has {len(layout)} cells, board has "
                f"{self.config.num_cells}"
            )
        if sum(layout) != self.config.num_mines:
            raise InvalidLayoutError(
                f"Layout has {sum(layout)} mines, config expects "
                f"{self.config.num_mines}"
            )
        return layout

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create the cells and wire their neighbor indices."""
        self._cells = [
            Cell(index=self._index(x, y), neighbors=tuple(
                self._index(nx, ny) for nx, ny in self._get_neighbors(x, y)
            ))
            for y in range(self.config.height)
            for x in range(self.config.width)
        ]

    def _initialize_mines(self, init_x: int, init_y: int) -> None:
        """
        Place mines randomly, never at the first-clicked cell.

        Args:
            init_x: Column of the first sweep.
            init_y: Row of the first sweep.
        """
        if self._game_state != GameState.START:
            raise GamePhaseError(
                f"Mines can only be placed at START, not {self._game_state.name}"
            )
        safe_index = self._index(init_x, init_y)
        to_place = self.config.num_mines
        for index in self._rng.permutation(self.config.num_cells):
            if to_place == 0:
                break
            if index == safe_index:
                continue
            self._cells[index].place_mine(self._cells)
            to_place -= 1
        logger.debug(
            "Placed %d mines avoiding (%d, %d)",
            self.config.num_mines, init_x, init_y,
        )

    def _place_layout(self) -> None:
        """Place the mines of a fixed layout."""
        for cell, has_mine in zip(self._cells, self._layout):
            if has_mine:
                cell.place_mine(self._cells)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for valid neighbors.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _index(self, x: int, y: int) -> int:
        return y * self.config.width + x

    def _cell(self, x: int, y: int) -> Cell:
        """Get cell at position, raising if it is off the board."""
        if not self._is_valid_position(x, y):
            raise OutOfBoundsError(x, y, self.config.width, self.config.height)
        return self._cells[self._index(x, y)]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def sweep(self, x: int, y: int) -> GameState:
        """
        Sweep (click) the cell at the given position.

        The first sweep of a random board places the mines so that this
        cell is safe. Hitting a mine loses; revealing the last safe cell
        wins. Either way the whole board is then revealed.

        Args:
            x: Column to sweep.
            y: Row to sweep.

        Returns:
            The resulting game state.
        """
        cell = self._cell(x, y)
        if self.is_over:
            return self._game_state

        if self._game_state == GameState.START:
            self._initialize_mines(x, y)
            self._game_state = GameState.IN_PROGRESS

        result = cell.click(self._cells)
        self._hidden_cells -= result.cells_revealed

        if result.state == CellState.EXPLODED:
            self.reveal_all_cells()
            self._game_state = GameState.LOSE
            logger.info("Mine hit at (%d, %d)", x, y)
        elif self._hidden_cells == self.config.num_mines:
            self.reveal_all_cells()
            self._game_state = GameState.WIN
            logger.info("All safe cells revealed")
        return self._game_state

    def toggle_mark(self, x: int, y: int) -> CellState:
        """
        Cycle the mark on a cell (hidden, flagged, questioned).

        Args:
            x: Column.
            y: Row.

        Returns:
            The cell's resulting state.
        """
        return self._cell(x, y).toggle_mark()

    def reveal_all_cells(self) -> None:
        """Expose every cell; used when the game ends."""
        for cell in self._cells:
            cell.reveal()

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset board to initial state for a new game.

        Random boards go back to START with no mines. Fixed boards place
        their layout again and resume IN_PROGRESS.
        """
        self._rng = np.random.default_rng(seed)
        self._init_grid()
        self._hidden_cells = self.config.num_cells
        self._game_state = GameState.START
        if self._layout is not None:
            self._place_layout()
            self._game_state = GameState.IN_PROGRESS

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def hidden_cells(self) -> int:
        """Number of cells not yet revealed by sweeping."""
        return self._hidden_cells

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._game_state in (GameState.WIN, GameState.LOSE)

    def cell_state(self, x: int, y: int) -> CellState:
        """Get the state of the cell at a position."""
        return self._cell(x, y).state

    def adjacent_mines(self, x: int, y: int) -> int:
        """
        Get the adjacent mine count of a revealed cell.

        Raises:
            CellNotRevealedError: If the cell is still hidden.
        """
        return self._cell(x, y).adjacent_mines()

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(x, y):
            return None
        return self._cells[self._index(x, y)]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agent.

        Returns:
            2D int8 array of shape (height, width), see
            Cell.to_observation for the encoding.
        """
        obs = np.array(
            [cell.to_observation() for cell in self._cells], dtype=np.int8
        )
        return obs.reshape(self.config.height, self.config.width)

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells a sweep would act on.

        Returns:
            List of (x, y) positions that are hidden or questioned.
        """
        if self.is_over:
            return []
        return [
            (cell.index % self.config.width, cell.index // self.config.width)
            for cell in self._cells
            if cell.is_hidden and not cell.is_flagged
        ]


# ============================================================================
# Factory Functions
# ============================================================================

def new_random_board(
    width: int, height: int, num_mines: int, seed: Optional[int] = None
) -> Board:
    """Create a board whose mines are placed on the first sweep."""
    return Board.random(width, height, num_mines, seed=seed)


def new_fixed_board(width: int, height: int, mine_layout: Sequence[int]) -> Board:
    """Create a board from a row-major layout; nonzero entries are mines."""
    return Board.fixed(width, height, mine_layout)
