"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/flagged/revealed/...) and content (mine/number). Cells live in a
flat list owned by the board and refer to their neighbors by index into
that list.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, NamedTuple, Sequence, Set, Tuple

from .errors import CellNotRevealedError, MineAlreadyPlacedError


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    QUESTIONED = auto()
    REVEALED = auto()
    EXPLODED = auto()
    MINE_SHOWN = auto()
    MISMARKED = auto()

    @property
    def is_hidden(self) -> bool:
        """True for states that do not expose the cell's content yet."""
        return self in _HIDDEN_STATES


_HIDDEN_STATES = frozenset(
    {CellState.HIDDEN, CellState.FLAGGED, CellState.QUESTIONED}
)

_NEXT_MARK = {
    CellState.HIDDEN: CellState.FLAGGED,
    CellState.FLAGGED: CellState.QUESTIONED,
    CellState.QUESTIONED: CellState.HIDDEN,
}


class ClickResult(NamedTuple):
    """Outcome of clicking a cell."""

    cells_revealed: int
    state: CellState


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        index: Position of this cell in the board's flat cell list.
        neighbors: Indices of the up to 8 surrounding cells.
        has_mine: Whether this cell contains a mine.
        neighbor_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state.
    """

    index: int = 0
    neighbors: Tuple[int, ...] = field(default_factory=tuple)
    has_mine: bool = False
    neighbor_mines: int = 0
    state: CellState = CellState.HIDDEN

    def click(self, cells: Sequence["Cell"]) -> ClickResult:
        """
        Click this cell.

        Revealed and flagged cells ignore the click. A mine explodes.
        A safe cell with no adjacent mines flood-fills its region.

        Args:
            cells: The board's flat cell list, used to resolve neighbors.

        Returns:
            Number of cells revealed and the resulting state of this cell.
        """
        if not self.state.is_hidden or self.state == CellState.FLAGGED:
            return ClickResult(0, self.state)

        if self.has_mine:
            self.state = CellState.EXPLODED
            return ClickResult(1, self.state)

        self.state = CellState.REVEALED
        revealed = 1
        if self.neighbor_mines == 0:
            revealed += self.flood_fill(cells, {self.index})
        return ClickResult(revealed, self.state)

    def flood_fill(self, cells: Sequence["Cell"], visited: Set[int]) -> int:
        """
        Reveal the mine-free region reachable through zero-count cells.

        Flagged cells stop the fill and are never revealed; mines are
        never revealed. Each index enters ``visited`` at most once.

        Args:
            cells: The board's flat cell list.
            visited: Indices already processed; updated in place.

        Returns:
            Number of cells that left a hidden state.
        """
        revealed = 0
        stack: List[Cell] = [self]
        while stack:
            current = stack.pop()
            for index in current.neighbors:
                if index in visited:
                    continue
                visited.add(index)
                neighbor = cells[index]
                if neighbor.has_mine or neighbor.state == CellState.FLAGGED:
                    continue
                if neighbor.state.is_hidden:
                    neighbor.state = CellState.REVEALED
                    revealed += 1
                if neighbor.neighbor_mines == 0:
                    stack.append(neighbor)
        return revealed

    def toggle_mark(self) -> CellState:
        """
        Cycle hidden -> flagged -> questioned -> hidden.

        Returns:
            The resulting state; unchanged if the cell is revealed.
        """
        self.state = _NEXT_MARK.get(self.state, self.state)
        return self.state

    def reveal(self) -> None:
        """Expose the cell at game end without exploding or flood-filling."""
        if not self.state.is_hidden:
            return
        if not self.has_mine:
            self.state = CellState.REVEALED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.MISMARKED
        else:
            self.state = CellState.MINE_SHOWN

    def place_mine(self, cells: Sequence["Cell"]) -> None:
        """
        Put a mine here and bump the count of every neighbor.

        Raises:
            MineAlreadyPlacedError: If this cell already holds a mine.
        """
        if self.has_mine:
            raise MineAlreadyPlacedError(
                f"Mine already exists at cell {self.index}"
            )
        self.has_mine = True
        for index in self.neighbors:
            cells[index].neighbor_mines += 1

    def adjacent_mines(self) -> int:
        """
        Get the number of mines around this cell.

        Raises:
            CellNotRevealedError: If the cell is still hidden.
        """
        if self.state.is_hidden:
            raise CellNotRevealedError(f"Cell {self.index} is not yet revealed")
        return self.neighbor_mines

    @property
    def is_hidden(self) -> bool:
        """Check if cell is in a hidden state (including marked)."""
        return self.state.is_hidden

    @property
    def is_revealed(self) -> bool:
        """Check if cell shows a number."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for ML agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Questioned cell
            0-8: Revealed cell with adjacent mine count
            9: Mine shown after the game (exploded, shown or mismarked)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.state == CellState.QUESTIONED:
            return -3
        if self.has_mine:
            return 9
        return self.neighbor_mines
