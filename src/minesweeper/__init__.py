"""
Minesweeper rule engine with host-side tooling.

Subpackages:
- game: cells, board, reveal cascade, sessions and the Gymnasium wrapper
- agents: automated players
- evaluation: batch play and metrics
"""
from .game import (
    Board,
    BoardConfig,
    Cell,
    CellState,
    EASY,
    EXPERT,
    GameSession,
    GameState,
    InvalidConfiguration,
    NORMAL,
    OutOfBounds,
    PRESETS,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardConfig",
    "Cell",
    "CellState",
    "EASY",
    "EXPERT",
    "GameSession",
    "GameState",
    "InvalidConfiguration",
    "NORMAL",
    "OutOfBounds",
    "PRESETS",
]
