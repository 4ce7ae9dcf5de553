"""
Gymnasium environment wrapper for Minesweeper.

Exposes a game session through the standard RL interface so that
agents can play it by polling observations.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, EASY
from .cell import FLAGGED_OBSERVATION, HAZARD_OBSERVATION, HIDDEN_OBSERVATION
from .session import GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent hazard count
        - 9 = revealed hazard

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals the cell at (x, y) = (i % cols, i // cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a hazard
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: easy preset).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or EASY
        self.render_mode = render_mode
        self._rng = random.Random()
        self.session = GameSession(self.config, rng=self._rng)

        self.observation_space = spaces.Box(
            low=FLAGGED_OBSERVATION,
            high=HAZARD_OBSERVATION,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible hazard placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng.seed(seed)
        self.session.new_session_from(self.config)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (y * cols + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.session.board.get_observation()
        terminated = self.session.is_finished

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.cols, int(action) // self.config.cols

    def _calculate_reward(self, x: int, y: int) -> float:
        """Reveal (x, y) and score the outcome."""
        if not self.session.reveal_request(x, y):
            return -0.1
        if self.session.is_won:
            return 10.0
        if self.session.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.session.revealed_count,
            "total_safe": self.session.cells_to_reveal,
            "game_state": self.session.state.name,
            "valid_actions": len(self.session.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.session.board.get_observation())
        if self.render_mode == "human":
            print(render_ansi(self.session.board.get_observation()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for x, y in self.session.board.get_valid_actions():
            mask[y * self.config.cols + x] = True
        return mask


def render_ansi(observation: np.ndarray) -> str:
    """Render an observation array as ASCII text, one line per row."""
    symbols = {HIDDEN_OBSERVATION: ".", FLAGGED_OBSERVATION: "F",
               HAZARD_OBSERVATION: "*", 0: " "}
    lines = []
    for row in observation:
        lines.append(" ".join(symbols.get(int(v), str(v)) for v in row))
    return "\n".join(lines)

