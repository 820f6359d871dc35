"""
Base agent interface for Minesweeper.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Actions follow the environment layout: indices below total_cells
    reveal a cell, the rest toggle a flag on the same cell.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

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
            Action index.
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert action index to the (x, y) cell it targets."""
        index = action % self.total_cells
        return index % self.board_width, index // self.board_width

    def reveal_action(self, x: int, y: int) -> int:
        """Action index revealing (x, y)."""
        return y * self.board_width + x

    def flag_action(self, x: int, y: int) -> int:
        """Action index toggling the flag on (x, y)."""
        return self.total_cells + self.reveal_action(x, y)

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask where True = valid action.
        """
        flat_obs = observation.flatten()
        # Hidden cells (-1) can be revealed, any covered cell flagged
        reveal = flat_obs == -1
        flag = (flat_obs == -1) | (flat_obs == -2)
        return np.concatenate([reveal, flag])

    def reset(self) -> None:
        """Reset agent state for new episode."""
