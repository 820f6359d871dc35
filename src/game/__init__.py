"""
Minesweeper game module.

Provides the minefield engine, cell state and a gymnasium wrapper.
"""
from .cell import Cell, CellState, MINE
from .board import Board, BoardConfig, GameState, DEFAULT_CONFIG
from .errors import MinefieldError, InvalidConfiguration, OutOfBounds
from .environment import MinesweeperEnv, render_text

__all__ = [
    "Cell",
    "CellState",
    "MINE",
    "Board",
    "BoardConfig",
    "GameState",
    "DEFAULT_CONFIG",
    "MinefieldError",
    "InvalidConfiguration",
    "OutOfBounds",
    "MinesweeperEnv",
    "render_text",
]
