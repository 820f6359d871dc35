"""
Minesweeper agents module.

Provides agents that drive the game environment:
- RandomAgent: Baseline random reveals
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
