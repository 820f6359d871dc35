"""
Gymnasium environment wrapper for Minesweeper.

Drives the minefield engine through a flat action space and exposes
the grid as an observation array.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, DEFAULT_CONFIG


# ============================================================================
# Text Rendering
# ============================================================================

_SYMBOLS = {-1: ".", -2: "F", 9: "*", 0: " "}


def render_text(board: Board) -> str:
    """
    Render board as a plain-text grid.

    Hidden cells show '.', flags 'F', revealed mines '*', empty
    cells a blank and numbered cells their count.
    """
    lines = []
    obs = board.get_observation()

    for y in range(board.height):
        row_str = ""
        for x in range(board.width):
            val = int(obs[y, x])
            row_str += _SYMBOLS.get(val, str(val))
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array indexed [y, x] where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals cell (i % width, i // width);
        the second half toggles the flag on the same cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
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
            config: Board configuration (default: 16x16 with 40 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or DEFAULT_CONFIG
        self.board = Board(self.config)
        self.render_mode = render_mode
        self._total_cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # Reveal actions followed by flag actions
        self.action_space = spaces.Discrete(2 * self._total_cells)

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
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board.rng = self.np_random
        self.board.reset()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, x, y = self._decode_action(action)
        self._steps += 1

        if flag:
            reward = 0.0 if self.board.toggle_flag(x, y) else -0.1
        else:
            reward = self._reveal_reward(x, y)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, x, y)."""
        action = int(action)
        flag = action >= self._total_cells
        index = action % self._total_cells
        return flag, index % self.config.width, index // self.config.width

    def _reveal_reward(self, x: int, y: int) -> float:
        """
        Reveal a cell and score the result.

        Args:
            x: Column.
            y: Row.

        Returns:
            Reward value.
        """
        if not self.board.reveal(x, y):
            return -0.1

        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "covered": self.board.count_covered(),
            "mines_remaining": self.board.mines_remaining,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.board)
        if self.render_mode == "human":
            print(render_text(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Reveals are valid
            on covered, unflagged cells; flags on any covered cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.board.is_playing:
            return mask
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = self.board.get_cell(x, y)
                index = y * self.config.width + x
                if cell.covered:
                    mask[index + self._total_cells] = True
                    mask[index] = not cell.flagged
        return mask
