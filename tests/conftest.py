"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Add src and the project root (for main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

from minesweeper.game import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Deterministic Random Source
# ============================================================================

class ScriptedRandom:
    """Random source that replays a fixed sequence of integers."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values: List[int] = list(values)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        value = self.values[self.calls]
        self.calls += 1
        assert a <= value <= b
        return value


def hazards_at(*positions) -> ScriptedRandom:
    """Source that places hazards at the given (x, y) positions in order."""
    values = []
    for x, y in positions:
        values.extend((y, x))
    return ScriptedRandom(values)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 8x8 board with 10 hazards."""
    return Board.create(BoardConfig(), rng=random.Random(0))


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with its single hazard at (2, 2)."""
    return Board.create(BoardConfig(3, 3, 1), rng=hazards_at((2, 2)))


@pytest.fixture
def corner_board() -> Board:
    """5x5 board with one hazard in the top-left corner."""
    return Board.create(BoardConfig(5, 5, 1), rng=hazards_at((0, 0)))


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def small_session(clock: FakeClock) -> GameSession:
    """3x3 session with its single hazard at (2, 2)."""
    return GameSession(
        BoardConfig(3, 3, 1), rng=hazards_at((2, 2)), clock=clock
    )


@pytest.fixture
def two_hazard_session(clock: FakeClock) -> GameSession:
    """4x4 session with hazards at (3, 0) and (3, 3)."""
    return GameSession(
        BoardConfig(4, 4, 2), rng=hazards_at((3, 0), (3, 3)), clock=clock
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def hazard_cell() -> Cell:
    """Create a cell containing a hazard."""
    return Cell(1, 1, is_hazard=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(8, 8, 10)


# ============================================================================
# Factory Fixtures
# ============================================================================

@pytest.fixture
def scripted():
    """Factory for a source placing hazards at given (x, y) positions."""
    return hazards_at


@pytest.fixture
def make_session(clock: FakeClock):
    """Factory for sessions with hazards at fixed (x, y) positions."""
    def _make(rows: int, cols: int, *positions) -> GameSession:
        return GameSession(
            BoardConfig(rows, cols, len(positions)),
            rng=hazards_at(*positions),
            clock=clock,
        )
    return _make
