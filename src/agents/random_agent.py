"""
Random agent for Minesweeper.

Serves as a baseline by revealing random covered cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals cells uniformly at random.

    Never places flags. Provides a floor for comparing other drivers.
    """

    def __init__(
        self,
        board_height: int = 16,
        board_width: int = 16,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid reveal action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random reveal action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.where(valid_actions[: self.total_cells])[0]

        if len(valid_indices) == 0:
            # Nothing left to reveal, return any action (will be invalid)
            return 0

        return int(self.rng.choice(valid_indices))
