"""
Minesweeper game module.

Provides the rule engine: cell and board state, hazard placement,
reveal cascade and game sessions, plus a Gymnasium wrapper.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    RandomSource,
    EASY,
    NORMAL,
    EXPERT,
    PRESETS,
)
from .errors import MinesweeperError, InvalidConfiguration, OutOfBounds
from .reveal import RevealEngine, count_adjacent_hazards
from .session import (
    GameSession,
    GameState,
    EventKind,
    CellView,
    SessionView,
    SessionEvent,
)
from .environment import MinesweeperEnv, render_ansi

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "RandomSource",
    "EASY",
    "NORMAL",
    "EXPERT",
    "PRESETS",
    "MinesweeperError",
    "InvalidConfiguration",
    "OutOfBounds",
    "RevealEngine",
    "count_adjacent_hazards",
    "GameSession",
    "GameState",
    "EventKind",
    "CellView",
    "SessionView",
    "SessionEvent",
    "MinesweeperEnv",
    "render_ansi",
]
