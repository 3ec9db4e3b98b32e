"""
Reveal engine.

Opens a hidden cell and, when it has no adjacent mines, flood-fills the
connected zero region together with its numbered border. The fill uses
an explicit queue so large boards never hit the recursion limit.
"""
from collections import deque
from typing import Deque, Set

from .board import Board, Position
from .cell import Visibility
from .outcomes import HitMine, Revealed, RevealOutcome


def reveal(board: Board, position: Position) -> RevealOutcome:
    """
    Reveal a cell and propagate through zero-adjacency regions.

    Revealing a cell that is already revealed or flagged changes nothing
    and returns an empty Revealed outcome.

    Args:
        board: Board with mines already laid.
        position: (row, col) to reveal.

    Returns:
        HitMine if the cell is a mine, otherwise Revealed with every
        position this call opened.

    Raises:
        OutOfBounds: If position lies outside the board.
    """
    cell = board.get_cell(position)
    if cell.state != Visibility.HIDDEN:
        return Revealed()

    cell.state = Visibility.REVEALED
    if cell.is_mine:
        return HitMine(position, frozenset({position}))

    opened: Set[Position] = {position}
    queue: Deque[Position] = deque()
    if cell.adjacent_mines == 0:
        queue.append(position)

    while queue:
        current = queue.popleft()
        for neighbor in board.neighbors(current):
            neighbor_cell = board.get_cell(neighbor)
            if neighbor_cell.state != Visibility.HIDDEN:
                continue
            # Marked before enqueueing so each cell is visited once.
            neighbor_cell.state = Visibility.REVEALED
            opened.add(neighbor)
            if neighbor_cell.adjacent_mines == 0:
                queue.append(neighbor)

    return Revealed(frozenset(opened))
