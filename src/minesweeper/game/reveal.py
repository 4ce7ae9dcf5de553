"""
Reveal engine for Minesweeper.

Computes adjacency counts at reveal time and cascades reveals through
regions of zero-count cells.
"""
from collections import deque
from typing import Deque, List

from .board import Board
from .cell import Cell


def count_adjacent_hazards(board: Board, cell: Cell) -> int:
    """Count hazards in the clamped 3x3 neighborhood, center excluded."""
    return sum(1 for neighbor in board.neighbors(cell.x, cell.y)
               if neighbor.is_hazard)


# ============================================================================
# Reveal Engine
# ============================================================================

class RevealEngine:
    """
    Reveals cells on a board and expands empty regions.

    The cascade runs breadth-first over an explicit frontier, so board
    size never affects call-stack depth. A cell is enqueued only while
    hidden and is revealed before its neighbors are examined, which
    keeps the total work bounded by the number of cells.
    """

    def __init__(self, board: Board) -> None:
        self.board = board

    def reveal(self, cell: Cell) -> List[Cell]:
        """
        Reveal ``cell`` and cascade if it has no adjacent hazards.

        Flagged cells are never revealed, neither directly nor by the
        cascade. A hazard is revealed like any other cell but never
        expands.

        Args:
            cell: Cell to reveal.

        Returns:
            Cells revealed by this call, in reveal order. Empty if the
            target was flagged or already revealed.
        """
        revealed = []
        frontier: Deque[Cell] = deque([cell])

        while frontier:
            current = frontier.popleft()
            if not self._reveal_one(current):
                continue
            revealed.append(current)

            if current.is_hazard or current.adjacent_count:
                continue
            for neighbor in self.board.neighbors(current.x, current.y):
                if neighbor.is_hidden:
                    frontier.append(neighbor)

        return revealed

    def _reveal_one(self, cell: Cell) -> bool:
        """Reveal a single hidden cell with its computed count."""
        if not cell.is_hidden:
            return False
        return cell.reveal(count_adjacent_hazards(self.board, cell))
