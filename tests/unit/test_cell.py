"""
Unit tests for Cell class.

Tests cell state management, hazard marking, reveal/flag behavior,
and observation conversion.
"""
import pytest
from minesweeper.game import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_cell_keeps_coordinates(self) -> None:
        """Cell should remember its column and row."""
        cell = Cell(3, 5)
        assert (cell.x, cell.y) == (3, 5)
        assert cell.position == (3, 5)

    def test_default_cell_is_not_hazard(self, hidden_cell: Cell) -> None:
        """New cell should not hold a hazard by default."""
        assert hidden_cell.is_hazard is False

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be hidden by default."""
        assert hidden_cell.state == CellState.HIDDEN
        assert hidden_cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_count(
        self, hidden_cell: Cell
    ) -> None:
        """New cell should have 0 adjacent hazards by default."""
        assert hidden_cell.adjacent_count == 0


# ============================================================================
# Hazard Marking Tests
# ============================================================================

class TestCellHazard:
    """Test hazard placement on a cell."""

    def test_mark_hazard_returns_true(self, hidden_cell: Cell) -> None:
        """First hazard placement should succeed."""
        assert hidden_cell.mark_hazard() is True
        assert hidden_cell.is_hazard is True

    def test_mark_hazard_twice_returns_false(self, hidden_cell: Cell) -> None:
        """Second hazard placement is rejected and changes nothing."""
        hidden_cell.mark_hazard()
        assert hidden_cell.mark_hazard() is False
        assert hidden_cell.is_hazard is True


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal(2) is True

    def test_reveal_stores_adjacent_count(self, hidden_cell: Cell) -> None:
        """Revealing a cell records its adjacency count."""
        hidden_cell.reveal(4)
        assert hidden_cell.state == CellState.REVEALED
        assert hidden_cell.is_revealed is True
        assert hidden_cell.adjacent_count == 4

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing twice fails and keeps the first count."""
        hidden_cell.reveal(1)
        assert hidden_cell.reveal(3) is False
        assert hidden_cell.adjacent_count == 1

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal(0) is False
        assert hidden_cell.is_flagged is True

    def test_expose_hidden_hazard(self, hazard_cell: Cell) -> None:
        """Game-over exposure reveals a hidden hazard."""
        assert hazard_cell.expose() is True
        assert hazard_cell.is_revealed is True

    def test_expose_ignores_safe_and_flagged_cells(
        self, hidden_cell: Cell, hazard_cell: Cell
    ) -> None:
        """Only hidden hazards are exposed."""
        hazard_cell.toggle_flag()
        assert hidden_cell.expose() is False
        assert hazard_cell.expose() is False
        assert hazard_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal(0)
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for polling hosts."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, hidden_cell: Cell, count: int
    ) -> None:
        """Revealed cell returns its adjacent hazard count."""
        hidden_cell.reveal(count)
        assert hidden_cell.to_observation() == count

    def test_revealed_hazard_observation_is_nine(
        self, hazard_cell: Cell
    ) -> None:
        hazard_cell.reveal(0)
        assert hazard_cell.to_observation() == 9
