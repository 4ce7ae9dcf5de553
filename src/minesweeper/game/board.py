"""
Board module for Minesweeper game.

Implements the grid of cells, hazard placement and neighbor queries.
Revealing and win/loss bookkeeping live in the reveal engine and the
game session.
"""
import random
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Optional, Protocol, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import InvalidConfiguration, OutOfBounds


# ============================================================================
# Constants
# ============================================================================

class RandomSource(Protocol):
    """Uniform integer generator over an inclusive range."""

    def randint(self, a: int, b: int) -> int:
        ...


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        hazard_count: Total hazards to place.
    """

    rows: int = 8
    cols: int = 8
    hazard_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values can form a playable board."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.hazard_count < 1:
            raise InvalidConfiguration("Number of hazards must be positive")
        max_hazards = self.rows * self.cols - 1
        if self.hazard_count > max_hazards:
            raise InvalidConfiguration(
                f"Too many hazards (max {max_hazards})"
            )

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def cells_to_reveal(self) -> int:
        """Number of safe cells that must be revealed to win."""
        return self.total_cells - self.hazard_count


# Preset difficulty levels
EASY = BoardConfig(8, 8, 10)
NORMAL = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS: Dict[str, BoardConfig] = {
    "easy": EASY,
    "normal": NORMAL,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells, indexed ``[row][col]`` (``grid[y][x]``),
    places hazards with an injected random source and answers
    neighbor queries. A board is never reused across games.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: RandomSource = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self.generate(self.config.rows, self.config.cols)

    @classmethod
    def create(
        cls, config: BoardConfig, rng: Optional[RandomSource] = None
    ) -> "Board":
        """Build a board for ``config`` with all hazards placed."""
        board = cls(config, rng if rng is not None else random.Random())
        board.place_hazards(config.hazard_count)
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def generate(self, rows: int, cols: int) -> None:
        """
        Allocate a fresh grid of hidden, hazard-free cells.

        The configuration follows the new size and keeps its hazard
        count; on failure the current grid is left untouched.

        Args:
            rows: Number of rows.
            cols: Number of columns.

        Raises:
            InvalidConfiguration: If the hazard count no longer fits.
        """
        self.config = replace(self.config, rows=rows, cols=cols)
        self._grid = [
            [Cell(x, y) for x in range(cols)]
            for y in range(rows)
        ]

    def place_hazards(self, count: int) -> None:
        """
        Place ``count`` hazards on distinct, uniformly random cells.

        Positions that already hold a hazard are drawn again. The caller
        must guarantee ``count < rows * cols``; ``BoardConfig`` rejects
        anything else before a board exists.

        Args:
            count: Number of hazards to place.
        """
        to_place = count
        while to_place:
            y = self.rng.randint(0, self.rows - 1)
            x = self.rng.randint(0, self.cols - 1)
            if self._grid[y][x].mark_hazard():
                to_place -= 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Cell]:
        """
        Get the cells around a position, clamped at the board edges.

        Args:
            x: Column index of center cell.
            y: Row index of center cell.

        Returns:
            Up to 8 neighboring cells, center excluded.
        """
        cells = []
        for row in range(max(y - 1, 0), min(y + 1, self.rows - 1) + 1):
            for col in range(max(x - 1, 0), min(x + 1, self.cols - 1) + 1):
                if row == y and col == x:
                    continue
                cells.append(self._grid[row][col])
        return cells

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= y < self.rows and 0 <= x < self.cols

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return len(self._grid)

    @property
    def cols(self) -> int:
        return len(self._grid[0]) if self._grid else 0

    @property
    def hazard_count(self) -> int:
        return self.config.hazard_count

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def cell_at(self, x: int, y: int) -> Cell:
        """Get cell at position, raising ``OutOfBounds`` if invalid."""
        if not self.is_valid_position(x, y):
            raise OutOfBounds(x, y, self.cols, self.rows)
        return self._grid[y][x]

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over all cells row by row."""
        for row in self._grid:
            yield from row

    def hazard_cells(self) -> List[Cell]:
        """Get every cell that holds a hazard."""
        return [cell for cell in self if cell.is_hazard]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for polling hosts.

        Returns:
            2D numpy array of shape (rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed hazard
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self:
            obs[cell.y, cell.x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (x, y) positions of hidden cells.
        """
        return [
            cell.position for cell in self
            if cell.state == CellState.HIDDEN
        ]
