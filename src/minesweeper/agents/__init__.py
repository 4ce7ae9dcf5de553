"""
Automated Minesweeper players.

- BaseAgent: interface for observation-driven players
- RandomAgent: baseline random selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
