"""
Random agent for Minesweeper.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals hidden cells uniformly at random.

    This provides a baseline for the environment and the evaluator.
    """

    def __init__(
        self,
        rows: int = 8,
        cols: int = 8,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(rows, cols)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            # Nothing left to reveal; the environment scores this as invalid
            return 0

        return int(self.rng.choice(valid_indices))
