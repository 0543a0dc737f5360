"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(seed=1234)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the bottom-right corner."""
    return Board.fixed(3, 3, [0, 0, 0, 0, 0, 0, 0, 0, 1])


@pytest.fixture
def top_left_mine_board() -> Board:
    """2x2 board with a single mine at (0, 0)."""
    return Board.fixed(2, 2, [1, 0, 0, 0])


@pytest.fixture
def wall_board() -> Board:
    """5x3 board split in two by a column of mines at x=2."""
    return Board.fixed(5, 3, [0, 0, 1, 0, 0] * 3)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.fixed(5, 5, [0] * 25)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def cell_pair() -> list:
    """Two cells that neighbor each other."""
    return [Cell(index=0, neighbors=(1,)), Cell(index=1, neighbors=(0,))]


@pytest.fixture
def cell_row() -> list:
    """Four cells in a row, each neighboring the next."""
    return [
        Cell(index=0, neighbors=(1,)),
        Cell(index=1, neighbors=(0, 2)),
        Cell(index=2, neighbors=(1, 3)),
        Cell(index=3, neighbors=(2,)),
    ]


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
