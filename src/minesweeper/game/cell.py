"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their position,
state (hidden/revealed/flagged) and content (hazard/adjacency count).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
HAZARD_OBSERVATION = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        x: Column index, fixed at creation.
        y: Row index, fixed at creation.
        is_hazard: Whether this cell hides a hazard.
        adjacent_count: Hazards among the 8 neighbors (0-8), known once
            the cell is revealed.
        state: Current visual state (hidden, revealed, or flagged).
    """

    x: int
    y: int
    is_hazard: bool = False
    adjacent_count: int = 0
    state: CellState = CellState.HIDDEN

    def mark_hazard(self) -> bool:
        """
        Place a hazard in this cell.

        Returns:
            True if the hazard was placed, False if one was already here.
        """
        if self.is_hazard:
            return False
        self.is_hazard = True
        return True

    def reveal(self, adjacent_count: int) -> bool:
        """
        Reveal this cell and record its adjacency count.

        Args:
            adjacent_count: Number of hazards around this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.adjacent_count = adjacent_count
        self.state = CellState.REVEALED
        return True

    def expose(self) -> bool:
        """Show a hidden hazard at game over."""
        if not self.is_hazard or self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def position(self) -> Tuple[int, int]:
        """(x, y) coordinates of the cell."""
        return self.x, self.y

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for polling hosts.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent hazard count
            9: Revealed hazard (game over state)
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.state == CellState.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.is_hazard:
            return HAZARD_OBSERVATION
        return self.adjacent_count
