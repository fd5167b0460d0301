"""
Board module for Minesweeper game.

Implements the game board with deferred mine placement, cell revealing,
flagging and game state management.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Tuple, Optional

import numpy as np

from .cell import Cell, CellState, CellView, MINE_SENTINEL


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    The board itself trusts its configuration; callers that build one
    from user input are expected to call validate() first.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 10
    cols: int = 10
    num_mines: int = 15

    def validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


DEFAULT_CONFIG = BoardConfig(10, 10, 15)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Mines are placed on the first reveal so
    that the first clicked cell is always safe.

    Attributes:
        config: Board dimensions and mine count.
        seed: Optional seed for the mine placement; None draws from
            OS entropy.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    _rng: random.Random = field(
        default_factory=random.Random, init=False, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _status: GameStatus = field(default=GameStatus.PLAYING, init=False)
    _game_over: bool = field(default=False, init=False)
    _first_click: bool = field(default=True, init=False)
    _cells_revealed: int = field(default=0, init=False)
    _flags_placed: int = field(default=0, init=False)
    _mines_placed: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Seed the random source and initialize the grid."""
        self._rng = random.Random(self.seed)
        self.reset()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _place_mines(self, safe_row: int, safe_col: int) -> None:
        """
        Place mines randomly, keeping the safe cell clear.

        Args:
            safe_row: Row of the first revealed cell.
            safe_col: Column of the first revealed cell.
        """
        for row in self._grid:
            for cell in row:
                cell.is_mine = False

        positions = self._get_valid_mine_positions(safe_row, safe_col)
        self._rng.shuffle(positions)

        self._mines_placed = min(self.config.num_mines, len(positions))
        for row, col in positions[:self._mines_placed]:
            self._grid[row][col].is_mine = True

        logger.debug(
            "Placed %d of %d mines around safe cell (%d, %d)",
            self._mines_placed, self.config.num_mines, safe_row, safe_col,
        )

    def _get_valid_mine_positions(
        self, safe_row: int, safe_col: int
    ) -> List[Tuple[int, int]]:
        """
        Get all valid positions for mine placement.

        The safe cell and its neighbors are excluded. If that leaves too
        few positions for the configured mines, only the safe cell itself
        is excluded.
        """
        safe_zone = set(self._get_neighbors(safe_row, safe_col))
        safe_zone.add((safe_row, safe_col))

        positions = [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if (row, col) not in safe_zone
        ]
        if len(positions) >= self.config.num_mines:
            return positions

        logger.debug(
            "Board %dx%d too small for a 3x3 safe zone with %d mines",
            self.config.rows, self.config.cols, self.config.num_mines,
        )
        return [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if (row, col) != (safe_row, safe_col)
        ]

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        mines = np.array(
            [[cell.is_mine for cell in row] for row in self._grid],
            dtype=np.int8,
        )
        # Zero border so edge cells sum over in-grid neighbors only.
        pad = np.pad(mines, 1, mode="constant")
        counts = (
            pad[:-2, :-2] + pad[:-2, 1:-1] + pad[:-2, 2:]
            + pad[1:-1, :-2] + pad[1:-1, 2:]
            + pad[2:, :-2] + pad[2:, 1:-1] + pad[2:, 2:]
        )

        for row in range(self.config.rows):
            for col in range(self.config.cols):
                cell = self._grid[row][col]
                if cell.is_mine:
                    cell.adjacent_mines = MINE_SENTINEL
                else:
                    cell.adjacent_mines = int(counts[row, col])

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        On first click, places mines around this cell.
        If cell is empty (0 adjacent mines), reveals the connected empty
        region and its numbered border. If cell is a mine, game is lost.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if any cell changed state, False otherwise.
        """
        if not self._can_reveal(row, col):
            return False

        if self._first_click:
            self._handle_first_click(row, col)

        cell = self._grid[row][col]
        cell.reveal()
        self._cells_revealed += 1

        if cell.is_mine:
            self._status = GameStatus.LOST
            self._game_over = True
            logger.info("Mine hit at (%d, %d), game lost", row, col)
            return True

        if cell.adjacent_mines == 0:
            self._reveal_region(row, col)

        self._check_win_condition()
        return True

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._game_over:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].is_hidden

    def _handle_first_click(self, row: int, col: int) -> None:
        """Handle first click: place mines and calculate counts."""
        self._place_mines(row, col)
        self._calculate_adjacent_mines()
        self._first_click = False

    def _reveal_region(self, row: int, col: int) -> None:
        """Reveal the empty region around an already revealed empty cell."""
        pending = deque([(row, col)])
        while pending:
            current_row, current_col = pending.popleft()
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                # Flagged and revealed cells refuse and stop the fill
                if not neighbor.reveal():
                    continue
                self._cells_revealed += 1
                if neighbor.adjacent_mines == 0:
                    pending.append((neighbor_row, neighbor_col))

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._status != GameStatus.PLAYING:
            return
        total_cells = self.config.rows * self.config.cols
        if self._cells_revealed != total_cells - self._mines_placed:
            return

        self._status = GameStatus.WON
        self._game_over = True
        for row in self._grid:
            for cell in row:
                if cell.is_mine and cell.is_hidden:
                    cell.state = CellState.FLAGGED
        self._flags_placed = self._mines_placed
        logger.info("All safe cells revealed, game won")

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_over:
            return False
        if not self._is_valid_position(row, col):
            return False

        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return False
        self._flags_placed += 1 if cell.is_flagged else -1
        return True

    def reveal_all_mines(self) -> None:
        """
        Disclose the board after a loss.

        Unflagged mines are revealed. Flags on safe cells are cleared
        without revealing the cell, marking them as wrong guesses.
        """
        for row in self._grid:
            for cell in row:
                if cell.is_mine:
                    cell.reveal()
                elif cell.unflag():
                    self._flags_placed -= 1

    def reset(self) -> None:
        """Reset board to initial state for new game."""
        self._init_grid()
        self._status = GameStatus.PLAYING
        self._game_over = False
        self._first_click = True
        self._cells_revealed = 0
        self._flags_placed = 0
        self._mines_placed = 0

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def game_over(self) -> bool:
        """Check if the game has ended."""
        return self._game_over

    def is_game_over(self) -> bool:
        """Alias of the game_over property."""
        return self._game_over

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST

    @property
    def rows(self) -> int:
        """Get number of rows."""
        return self.config.rows

    @property
    def cols(self) -> int:
        """Get number of columns."""
        return self.config.cols

    @property
    def first_click_pending(self) -> bool:
        """Check if mines are still waiting for the first reveal."""
        return self._first_click

    @property
    def cells_revealed(self) -> int:
        """Get number of revealed cells."""
        return self._cells_revealed

    @property
    def flags_placed(self) -> int:
        """Get number of currently flagged cells."""
        return self._flags_placed

    @property
    def mines_placed(self) -> int:
        """Number of mines actually on the board (0 before first reveal)."""
        return self._mines_placed

    @property
    def mines_remaining(self) -> int:
        """Configured mine count minus flags; negative when over-flagged."""
        return self.config.num_mines - self._flags_placed

    def get_cell(self, row: int, col: int) -> Optional[CellView]:
        """Get a read-only view of the cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col].snapshot()

    def get_board_snapshot(self) -> Tuple[Tuple[CellView, ...], ...]:
        """
        Get a read-only copy of the whole grid.

        Returns:
            Tuple of rows, each a tuple of CellView.
        """
        return tuple(
            tuple(cell.snapshot() for cell in row)
            for row in self._grid
        )
