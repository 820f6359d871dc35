"""
Unit tests for the gymnasium environment and text rendering.
"""
import numpy as np
import pytest
from game import (
    Board,
    BoardConfig,
    DEFAULT_CONFIG,
    MinesweeperEnv,
    render_text,
)


@pytest.fixture
def env() -> MinesweeperEnv:
    """Create a default environment reset with a fixed seed."""
    environment = MinesweeperEnv()
    environment.reset(seed=3)
    return environment


@pytest.fixture
def empty_env() -> MinesweeperEnv:
    """Create a 4x4 environment without mines."""
    environment = MinesweeperEnv(BoardConfig(4, 4, 0))
    environment.reset(seed=0)
    return environment


# ============================================================================
# Space Tests
# ============================================================================

class TestSpaces:
    """Test observation and action spaces."""

    def test_default_config_is_fixed_game(self) -> None:
        """Without a config the env plays the 16x16, 40 mine game."""
        environment = MinesweeperEnv()
        assert environment.config is DEFAULT_CONFIG
        assert len(environment.board.mine_positions()) == 40

    def test_action_space_covers_reveal_and_flag(self, env: MinesweeperEnv) -> None:
        """One reveal and one flag action per cell."""
        assert env.action_space.n == 2 * 16 * 16

    def test_reset_observation(self, env: MinesweeperEnv) -> None:
        """Reset returns an all-hidden observation inside the space."""
        obs, info = env.reset(seed=3)
        assert obs.shape == (16, 16)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["game_state"] == "IN_PROGRESS"
        assert info["mines_remaining"] == 40

    def test_seeded_reset_is_reproducible(self, env: MinesweeperEnv) -> None:
        """The same seed yields the same layout."""
        env.reset(seed=11)
        first = env.board.mine_positions()
        env.reset(seed=11)
        assert env.board.mine_positions() == first


# ============================================================================
# Step Tests
# ============================================================================

class TestStep:
    """Test action execution and rewards."""

    def test_reveal_on_empty_board_wins(self, empty_env: MinesweeperEnv) -> None:
        """Clearing the board pays the win reward and terminates."""
        obs, reward, terminated, truncated, info = empty_env.step(5)
        assert reward == 10.0
        assert terminated is True
        assert truncated is False
        assert info["game_state"] == "WON"
        assert np.all(obs == 0)

    def test_flag_action_marks_cell(self, env: MinesweeperEnv) -> None:
        """Second-half actions toggle flags without reward."""
        action = 16 * 16 + 2 * 16 + 5
        obs, reward, terminated, _, info = env.step(action)
        assert reward == 0.0
        assert terminated is False
        assert obs[2, 5] == -2
        assert info["mines_remaining"] == 39

    def test_reveal_flagged_cell_is_invalid(self, env: MinesweeperEnv) -> None:
        """Revealing a flagged cell is penalised and changes nothing."""
        env.step(16 * 16)
        _, reward, terminated, _, _ = env.step(0)
        assert reward == pytest.approx(-0.1)
        assert terminated is False

    def test_reveal_mine_loses(self, env: MinesweeperEnv) -> None:
        """Hitting a mine pays the loss reward and terminates."""
        x, y = env.board.mine_positions()[0]
        _, reward, terminated, _, info = env.step(y * 16 + x)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"


# ============================================================================
# Action Mask Tests
# ============================================================================

class TestActionMask:
    """Test valid action masks."""

    def test_new_board_mask_is_all_valid(self, env: MinesweeperEnv) -> None:
        """Every reveal and flag is valid on a fresh board."""
        assert env.get_action_mask().all()

    def test_flagged_cell_only_allows_unflag(self, env: MinesweeperEnv) -> None:
        """A flagged cell cannot be revealed but can be unflagged."""
        env.step(16 * 16 + 7)
        mask = env.get_action_mask()
        assert not mask[7]
        assert mask[16 * 16 + 7]

    def test_finished_game_has_no_valid_actions(
        self, empty_env: MinesweeperEnv
    ) -> None:
        """No actions remain after the game ends."""
        empty_env.step(0)
        assert not empty_env.get_action_mask().any()


# ============================================================================
# Rendering Tests
# ============================================================================

class TestRender:
    """Test text rendering."""

    def test_render_text_symbols(self) -> None:
        """Hidden, flag, number, blank and mine symbols."""
        board = Board.from_layout([(2, 0)], width=3, height=2)
        board.toggle_flag(0, 1)
        board.reveal(1, 0)
        assert render_text(board) == ". 1 . \nF . . "

        board.reveal(2, 0)
        assert render_text(board).splitlines()[0] == ". 1 * "

    def test_ansi_render_mode(self) -> None:
        """ansi mode returns one line per row."""
        environment = MinesweeperEnv(BoardConfig(5, 3, 2), render_mode="ansi")
        environment.reset(seed=1)
        assert len(environment.render().splitlines()) == 3
