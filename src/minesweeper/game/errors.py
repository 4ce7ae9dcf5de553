"""
Exceptions raised by the Minesweeper rule engine.

Refused player actions (flagged target, finished session) are not errors
and are reported through boolean return values instead.
"""


class MinesweeperError(Exception):
    """Base class for all rule engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions or hazard count cannot form a playable board."""


class OutOfBounds(MinesweeperError, IndexError):
    """Coordinates fall outside the board."""

    def __init__(self, x: int, y: int, cols: int, rows: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside a {cols}x{rows} board"
        )
        self.x = x
        self.y = y
