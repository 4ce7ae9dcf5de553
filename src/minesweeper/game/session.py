"""
Game session module for Minesweeper.

Orchestrates one playthrough at a time: builds the board, routes player
reveal/flag requests, tracks counters and decides win or loss. Hosts
follow the game by subscribing to session events or by polling
``snapshot()``.
"""
import logging
import random
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterable, List, Optional, Tuple

from .board import Board, BoardConfig, EASY, RandomSource
from .cell import Cell
from .reveal import RevealEngine

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a session."""

    ACTIVE = auto()
    WON = auto()
    LOST = auto()


class EventKind(Enum):
    """Kinds of notifications published to subscribers."""

    NEW_SESSION = auto()
    CELLS_REVEALED = auto()
    FLAG_CHANGED = auto()
    FINISHED = auto()


# ============================================================================
# Views and Events
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    What a host may render for one cell.

    ``is_hazard`` is only reported for revealed cells or after a loss.
    """

    x: int
    y: int
    is_revealed: bool
    is_flagged: bool
    is_hazard: bool
    adjacent_count: int


@dataclass(frozen=True)
class SessionView:
    """Session-level counters for the host."""

    state: GameState
    revealed_count: int
    remaining_flags: int
    elapsed_seconds: float


@dataclass(frozen=True)
class SessionEvent:
    """
    A state change published to subscribers.

    Attributes:
        kind: What happened.
        session: Session counters after the change.
        cells: Cells whose view changed.
    """

    kind: EventKind
    session: SessionView
    cells: Tuple[CellView, ...] = ()


Listener = Callable[[SessionEvent], None]


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One Minesweeper playthrough and the rules around it.

    A session starts ``ACTIVE`` and ends exactly once as ``WON`` or
    ``LOST``; after that every reveal or flag request is ignored.
    Starting a new game always builds a new board.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[RandomSource] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """
        Initialize the session and start the first game.

        Args:
            config: Board configuration (default: easy preset).
            rng: Uniform integer source for hazard placement.
            clock: Monotonic clock in seconds for elapsed time.
        """
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock or time.monotonic
        self._listeners: List[Listener] = []
        self._start(config or EASY)

    # ========================================================================
    # Subscriptions
    # ========================================================================

    def subscribe(self, listener: Listener) -> None:
        """Register a callable that receives every ``SessionEvent``."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Stop delivering events to ``listener``."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _publish(self, kind: EventKind, cells: Iterable[Cell] = ()) -> None:
        event = SessionEvent(
            kind=kind,
            session=self.session_view(),
            cells=tuple(self.cell_view(cell) for cell in cells),
        )
        for listener in list(self._listeners):
            listener(event)

    # ========================================================================
    # Session Lifecycle
    # ========================================================================

    def new_session(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        hazard_count: Optional[int] = None,
    ) -> None:
        """
        Discard the current game and start a fresh one.

        Omitted arguments keep the current configuration, so calling
        this without arguments restarts the same difficulty.

        Raises:
            InvalidConfiguration: If the resulting board is not playable.
        """
        config = BoardConfig(
            rows=self.config.rows if rows is None else rows,
            cols=self.config.cols if cols is None else cols,
            hazard_count=(
                self.config.hazard_count if hazard_count is None
                else hazard_count
            ),
        )
        self.new_session_from(config)

    def new_session_from(self, config: BoardConfig) -> None:
        """Start a fresh game with an already validated configuration."""
        self._start(config)

    def _start(self, config: BoardConfig) -> None:
        self.config = config
        self.board = Board.create(config, self.rng)
        self.engine = RevealEngine(self.board)
        self._state = GameState.ACTIVE
        self.revealed_count = 0
        self.remaining_flags = config.hazard_count
        self._started_at: Optional[float] = None
        self._finished_at: Optional[float] = None

        logger.debug(
            "New session: %dx%d with %d hazards",
            config.rows, config.cols, config.hazard_count,
        )
        self._publish(EventKind.NEW_SESSION, self.board)

    def _finish(self, state: GameState) -> None:
        self._state = state
        self._finished_at = self.clock()
        logger.debug(
            "Session finished: %s after %d reveals",
            state.name, self.revealed_count,
        )

    def _start_clock(self) -> None:
        if self._started_at is None:
            self._started_at = self.clock()

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal_request(self, x: int, y: int) -> bool:
        """
        Reveal the cell at (x, y).

        Revealing a hazard loses the game and exposes every hidden
        hazard. Revealing the last safe cell wins it.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if any cell changed, False if the request was ignored
            (finished session, flagged or already revealed cell).

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        cell = self.board.cell_at(x, y)
        if self.is_finished or not cell.is_hidden:
            return False

        self._start_clock()
        changed = self.engine.reveal(cell)
        self.revealed_count += sum(1 for c in changed if not c.is_hazard)

        if cell.is_hazard:
            self._finish(GameState.LOST)
            changed += [c for c in self.board.hazard_cells() if c.expose()]
        elif self.revealed_count == self.cells_to_reveal:
            self._finish(GameState.WON)

        self._publish(EventKind.CELLS_REVEALED, changed)
        if self.is_finished:
            self._publish(EventKind.FINISHED, self.board)
        return True

    def flag_request(self, x: int, y: int) -> bool:
        """
        Toggle the flag on the cell at (x, y).

        Flags are limited to the hazard count: a new flag is refused
        once ``remaining_flags`` reaches zero.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if the flag was toggled, False otherwise.

        Raises:
            OutOfBounds: If (x, y) is not on the board.
        """
        cell = self.board.cell_at(x, y)
        if self.is_finished or cell.is_revealed:
            return False

        if cell.is_flagged:
            cell.toggle_flag()
            self.remaining_flags += 1
        elif self.remaining_flags > 0:
            cell.toggle_flag()
            self.remaining_flags -= 1
        else:
            return False

        self._start_clock()
        self._publish(EventKind.FLAG_CHANGED, [cell])
        return True

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def hazard_count(self) -> int:
        return self.config.hazard_count

    @property
    def cells_to_reveal(self) -> int:
        """Safe cells that must be revealed to win."""
        return self.config.cells_to_reveal

    @property
    def state(self) -> GameState:
        """Get current session state."""
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == GameState.ACTIVE

    @property
    def is_finished(self) -> bool:
        return self._state != GameState.ACTIVE

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.LOST

    @property
    def elapsed_seconds(self) -> float:
        """Seconds since the first action, frozen once finished."""
        if self._started_at is None:
            return 0.0
        end = self._finished_at if self._finished_at is not None else self.clock()
        return end - self._started_at

    def cell_view(self, cell: Cell) -> CellView:
        """Host-facing view of a single cell."""
        return CellView(
            x=cell.x,
            y=cell.y,
            is_revealed=cell.is_revealed,
            is_flagged=cell.is_flagged,
            is_hazard=cell.is_hazard and (cell.is_revealed or self.is_lost),
            adjacent_count=cell.adjacent_count if cell.is_revealed else 0,
        )

    def session_view(self) -> SessionView:
        """Host-facing session counters."""
        return SessionView(
            state=self._state,
            revealed_count=self.revealed_count,
            remaining_flags=self.remaining_flags,
            elapsed_seconds=self.elapsed_seconds,
        )

    def snapshot(self) -> Tuple[SessionView, List[CellView]]:
        """Poll the whole game: session counters and every cell."""
        return self.session_view(), [self.cell_view(c) for c in self.board]
