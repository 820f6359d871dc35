"""
Board module for Minesweeper game.

Implements the minefield engine: mine generation with adjacency
counts, flood-fill revealing, flagging, and win/loss tracking.

Coordinates are (x, y) with x the column and y the row.
"""
import logging
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, MINE
from .errors import InvalidConfiguration, OutOfBounds

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 16
    height: int = 16
    num_mines: int = 40

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height


DEFAULT_CONFIG = BoardConfig(16, 16, 40)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and every state transition on it. A new
    board is generated immediately; call reset() to start over.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.IN_PROGRESS
    populate: InitVar[bool] = True

    def __post_init__(self, populate: bool) -> None:
        """Generate the first minefield, or leave an empty grid."""
        if populate:
            self.reset()
        else:
            self._init_grid()

    @classmethod
    def from_layout(
        cls,
        mines: Iterable[Tuple[int, int]],
        width: int = 16,
        height: int = 16,
    ) -> "Board":
        """
        Build a board with mines at fixed positions.

        Args:
            mines: (x, y) positions of the mines.
            width: Number of columns.
            height: Number of rows.

        Returns:
            Board in progress with the given layout.

        Raises:
            InvalidConfiguration: If a position repeats or lies off the grid.
        """
        positions = list(mines)
        if len(set(positions)) != len(positions):
            raise InvalidConfiguration("Duplicate mine positions in layout")
        for x, y in positions:
            if not (0 <= x < width and 0 <= y < height):
                raise InvalidConfiguration(
                    f"Mine position ({x}, {y}) is outside the grid"
                )

        board = cls(BoardConfig(width, height, len(positions)), populate=False)
        for x, y in positions:
            board._place_mine(x, y)
        return board

    # ========================================================================
    # Grid Generation (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of covered, zero-valued cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mine(self, x: int, y: int) -> None:
        """Turn a cell into a mine and bump its non-mine neighbors."""
        self._grid[y][x].value = MINE
        for nx, ny in self.neighbors(x, y):
            neighbor = self._grid[ny][nx]
            if not neighbor.is_mine:
                neighbor.value += 1

    def generate(self, num_mines: Optional[int] = None) -> None:
        """
        Fill a fresh grid with randomly placed mines and start a new game.

        Positions are drawn uniformly and redrawn when they already
        hold a mine, until exactly num_mines distinct mines exist.

        Args:
            num_mines: Mine count to use instead of the configured one.

        Raises:
            InvalidConfiguration: If the count does not fit the grid.
        """
        if num_mines is not None and num_mines != self.config.num_mines:
            self.config = BoardConfig(
                self.config.width, self.config.height, num_mines
            )

        self._init_grid()
        self._game_state = GameState.IN_PROGRESS
        placed = 0
        while placed < self.config.num_mines:
            x = int(self.rng.integers(0, self.config.width))
            y = int(self.rng.integers(0, self.config.height))
            if self._grid[y][x].is_mine:
                continue
            self._place_mine(x, y)
            placed += 1

        logger.debug(
            "Generated %dx%d board with %d mines",
            self.config.width, self.config.height, placed,
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for the up to 8 in-grid neighbors.
        """
        result = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self._is_valid_position(nx, ny):
                    result.append((nx, ny))
        return result

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _check_position(self, x: int, y: int) -> None:
        if not self._is_valid_position(x, y):
            raise OutOfBounds(x, y, self.config.width, self.config.height)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reset(self) -> None:
        """Start a new game on a freshly generated grid."""
        self.generate()
        logger.debug("Board reset")

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal a cell at the given position.

        Flagged and already uncovered cells are left alone. An empty
        cell (0 adjacent mines) floods out to its neighbors. Revealing
        a mine loses the game.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            True if at least one cell was uncovered, False otherwise.

        Raises:
            OutOfBounds: If (x, y) is not on the grid.
        """
        self._check_position(x, y)
        if self._game_state != GameState.IN_PROGRESS:
            return False

        uncovered, hit_mine = self._flood_fill([(x, y)])
        self._resolve(hit_mine)
        return uncovered > 0

    def _flood_fill(self, start: List[Tuple[int, int]]) -> Tuple[int, bool]:
        """
        Uncover cells from the given start positions.

        The covered bit is the visited marker, so every cell is
        uncovered at most once. Flagged cells are never uncovered.

        Returns:
            Tuple of (cells uncovered, whether a mine was uncovered).
        """
        stack = list(start)
        uncovered = 0
        hit_mine = False

        while stack:
            x, y = stack.pop()
            cell = self._grid[y][x]
            if not cell.uncover():
                continue
            uncovered += 1

            if cell.is_mine:
                hit_mine = True
            elif cell.value == 0:
                for nx, ny in self.neighbors(x, y):
                    if self._grid[ny][nx].covered:
                        stack.append((nx, ny))

        return uncovered, hit_mine

    def _resolve(self, hit_mine: bool) -> None:
        """Move to a terminal state if the last action ended the game."""
        if hit_mine:
            self._game_state = GameState.LOST
            self.reveal_all_mines()
            logger.info("Mine revealed, game lost")
        elif self.check_win():
            self._game_state = GameState.WON
            self.flag_all_mines()
            logger.info("All safe cells revealed, game won")

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if flag was toggled, False otherwise.

        Raises:
            OutOfBounds: If (x, y) is not on the grid.
        """
        self._check_position(x, y)
        if self._game_state != GameState.IN_PROGRESS:
            return False
        return self._grid[y][x].toggle_flag()

    def chord(self, x: int, y: int) -> bool:
        """
        Chord action: reveal all unflagged neighbors if flag count matches.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if any neighbor was uncovered, False otherwise.

        Raises:
            OutOfBounds: If (x, y) is not on the grid.
        """
        self._check_position(x, y)
        if not self._can_chord(x, y):
            return False

        targets = [
            (nx, ny) for nx, ny in self.neighbors(x, y)
            if self._grid[ny][nx].covered
        ]
        uncovered, hit_mine = self._flood_fill(targets)
        self._resolve(hit_mine)
        return uncovered > 0

    def _can_chord(self, x: int, y: int) -> bool:
        """Check if chord action is valid."""
        if self._game_state != GameState.IN_PROGRESS:
            return False
        cell = self._grid[y][x]
        if cell.covered or cell.value <= 0:
            return False
        return self._count_adjacent_flags(x, y) == cell.value

    def _count_adjacent_flags(self, x: int, y: int) -> int:
        """Count flagged cells adjacent to position."""
        return sum(
            1 for nx, ny in self.neighbors(x, y)
            if self._grid[ny][nx].flagged
        )

    def reveal_all_mines(self) -> None:
        """Uncover every mine, dropping flags from the mines it uncovers."""
        for row in self._grid:
            for cell in row:
                if cell.is_mine:
                    cell.flagged = False
                    cell.covered = False

    def flag_all_mines(self) -> None:
        """Flag every covered mine."""
        for row in self._grid:
            for cell in row:
                if cell.is_mine and cell.covered:
                    cell.flagged = True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def check_win(self) -> bool:
        """Check if exactly the mines remain covered."""
        return self.count_covered() == self.config.num_mines

    def count_covered(self) -> int:
        """Count cells that are still covered."""
        return sum(cell.covered for row in self._grid for cell in row)

    def count_flagged(self) -> int:
        """Count flagged cells."""
        return sum(cell.flagged for row in self._grid for cell in row)

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.config.num_mines - self.count_flagged()

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def get_cell(self, x: int, y: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBounds: If (x, y) is not on the grid.
        """
        self._check_position(x, y)
        return self._grid[y][x]

    def mine_positions(self) -> List[Tuple[int, int]]:
        """List (x, y) positions of every mine."""
        return [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if self._grid[y][x].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array, indexed [y, x].

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                obs[y, x] = self._grid[y][x].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that a reveal would act on.

        Returns:
            List of covered, unflagged (x, y) positions.
        """
        return [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if self._grid[y][x].covered and not self._grid[y][x].flagged
        ]
