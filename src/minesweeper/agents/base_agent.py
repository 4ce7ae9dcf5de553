"""
Base agent interface for automated Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..game.cell import HIDDEN_OBSERVATION


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose
    which cell to reveal based on the current observation.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Initialize the agent.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
        """
        self.rows = rows
        self.cols = cols
        self.total_cells = rows * cols

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (y * cols + x).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return action % self.cols, action // self.cols

    def position_to_action(self, x: int, y: int) -> int:
        """Convert (x, y) position to flat action index."""
        return y * self.cols + x

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask where True = valid action.
        """
        return observation.flatten() == HIDDEN_OBSERVATION

    def reset(self) -> None:
        """Reset agent state for new episode."""
