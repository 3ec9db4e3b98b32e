"""
Chording engine.

Chording a revealed number opens all of its hidden neighbors at once,
but only when the player has flagged exactly that many neighbors.
"""
from typing import Optional, Set

from .board import Board, Position
from .cell import Visibility
from .errors import InvalidCell
from .outcomes import ChordOutcome, HitMine, Mismatch, Revealed
from .reveal import reveal


def count_flagged_neighbors(board: Board, position: Position) -> int:
    """Count flagged cells adjacent to position."""
    return sum(
        1 for neighbor in board.neighbors(position)
        if board.get_cell(neighbor).is_flagged
    )


def chord(board: Board, position: Position) -> ChordOutcome:
    """
    Reveal every hidden neighbor of a numbered cell if the flags match.

    Args:
        board: Board with mines already laid.
        position: (row, col) of a revealed numbered cell.

    Returns:
        Mismatch if the flag count differs from the number (nothing
        changes), HitMine identifying the first mine opened, or Revealed
        with every newly opened position.

    Raises:
        OutOfBounds: If position lies outside the board.
        InvalidCell: If the cell is not a revealed, non-zero number.
    """
    cell = board.get_cell(position)
    if cell.state != Visibility.REVEALED:
        raise InvalidCell(position, f"cannot chord a {cell.state.name} cell")
    if cell.is_mine:
        raise InvalidCell(position, "cannot chord a mine")
    if cell.adjacent_mines == 0:
        raise InvalidCell(position, "cannot chord a cell with no adjacent mines")

    flagged = count_flagged_neighbors(board, position)
    if flagged != cell.adjacent_mines:
        return Mismatch(flagged, cell.adjacent_mines)

    opened: Set[Position] = set()
    first_mine: Optional[Position] = None
    # Sorted so the reported mine does not depend on set ordering.
    for neighbor in sorted(board.neighbors(position)):
        outcome = reveal(board, neighbor)
        opened |= outcome.positions
        if isinstance(outcome, HitMine) and first_mine is None:
            first_mine = outcome.position

    if first_mine is not None:
        return HitMine(first_mine, frozenset(opened))
    return Revealed(frozenset(opened))
