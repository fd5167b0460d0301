"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 10x10 board with 15 mines."""
    return Board(seed=1234)


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with 1 mine."""
    return Board(BoardConfig(3, 3, 1), seed=7)


@pytest.fixture
def tiny_board() -> Board:
    """Create a 2x2 board with 1 mine."""
    return Board(BoardConfig(2, 2, 1), seed=3)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Helpers
# ============================================================================

def mine_positions(board: Board) -> List[Tuple[int, int]]:
    """List every mine on the board."""
    return [
        (row, col)
        for row, cells in enumerate(board.get_board_snapshot())
        for col, cell in enumerate(cells)
        if cell.is_mine
    ]


def neighbors(board: Board, row: int, col: int) -> List[Tuple[int, int]]:
    """List in-grid neighbors of a cell."""
    return [
        (row + dr, col + dc)
        for dr in (-1, 0, 1)
        for dc in (-1, 0, 1)
        if (dr, dc) != (0, 0)
        and 0 <= row + dr < board.rows
        and 0 <= col + dc < board.cols
    ]


@pytest.fixture
def find_mines():
    """Expose mine_positions to tests."""
    return mine_positions


@pytest.fixture
def find_neighbors():
    """Expose neighbors to tests."""
    return neighbors
