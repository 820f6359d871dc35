"""
Cell module for Minesweeper game.

Represents individual cells on the minefield with their adjacency
value and cover/flag state.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MINE = -1


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        value: Adjacent mine count (0-8), or MINE (-1) for a mine.
        covered: True until the cell is revealed.
        flagged: Player marker; only ever set while covered.
    """

    value: int = 0
    covered: bool = True
    flagged: bool = False

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.value == MINE

    def uncover(self) -> bool:
        """
        Uncover this cell.

        Returns:
            True if cell was uncovered, False if already uncovered
            or flagged.
        """
        if not self.covered or self.flagged:
            return False
        self.covered = False
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is uncovered.
        """
        if not self.covered:
            return False
        self.flagged = not self.flagged
        return True

    @property
    def state(self) -> CellState:
        """Visual state derived from the cover and flag bits."""
        if not self.covered:
            return CellState.REVEALED
        if self.flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.covered:
            return -2 if self.flagged else -1
        if self.is_mine:
            return 9
        return self.value
