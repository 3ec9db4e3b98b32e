"""
Board module for Minesweeper game.

A coordinate-indexed store of cells plus the adjacency geometry of the
grid. The board knows nothing about game rules; the reveal, chord and
session modules decide what may change.

Positions are (row, col) tuples with row in [0, height) and col in
[0, width).
"""
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Set, Tuple

import numpy as np

from .cell import Cell, Visibility
from .errors import GenerationError, OutOfBounds

Position = Tuple[int, int]


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    width: int
    height: int
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mines_laid: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        self._grid = [
            [Cell() for _ in range(self.width)]
            for _ in range(self.height)
        ]

    # ========================================================================
    # Geometry (Low-level)
    # ========================================================================

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def in_bounds(self, position: Position) -> bool:
        """Check if position is within board bounds."""
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def check_bounds(self, position: Position) -> None:
        """Raise OutOfBounds if position lies outside the board."""
        if not self.in_bounds(position):
            raise OutOfBounds(position, self.height, self.width)

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    def neighbors(self, position: Position) -> Set[Position]:
        """
        Get the grid-adjacent positions of a cell.

        Args:
            position: (row, col) of the center cell.

        Returns:
            Set of up to 8 positions, clipped at edges and corners.
        """
        self.check_bounds(position)
        row, col = position
        result = set()
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                neighbor = (row + delta_row, col + delta_col)
                if self.in_bounds(neighbor):
                    result.add(neighbor)
        return result

    # ========================================================================
    # Cell Access (Mid-level)
    # ========================================================================

    def get_cell(self, position: Position) -> Cell:
        """Get cell at position, raising OutOfBounds if invalid."""
        self.check_bounds(position)
        row, col = position
        return self._grid[row][col]

    def set_visibility(self, position: Position, visibility: Visibility) -> None:
        """Set the visibility of the cell at position."""
        self.get_cell(position).state = visibility

    def cells(self) -> Iterator[Tuple[Position, Cell]]:
        """Iterate over (position, cell) pairs in row-major order."""
        for position in self.positions():
            row, col = position
            yield position, self._grid[row][col]

    def count(self, visibility: Visibility) -> int:
        """Count cells currently in the given visibility."""
        return sum(1 for _, cell in self.cells() if cell.state == visibility)

    # ========================================================================
    # Mine Layout
    # ========================================================================

    @property
    def mines_laid(self) -> bool:
        """Whether a mine layout has been applied."""
        return self._mines_laid

    def lay_mines(self, mines: Iterable[Position]) -> None:
        """
        Place mines and compute adjacency counts for every safe cell.

        Args:
            mines: Positions to mark as mines.

        Raises:
            GenerationError: If mines were already laid on this board.
            OutOfBounds: If a mine position lies outside the board.
        """
        if self._mines_laid:
            raise GenerationError("Mines already laid on this board")
        mine_set = set(mines)
        for position in mine_set:
            self.check_bounds(position)

        for position in mine_set:
            self.get_cell(position).is_mine = True
        self._mines_laid = True
        self._calculate_adjacent_mines()

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for position, cell in self.cells():
            if cell.is_mine:
                cell.adjacent_mines = 0
                continue
            cell.adjacent_mines = sum(
                1 for neighbor in self.neighbors(position)
                if self.get_cell(neighbor).is_mine
            )

    def mine_positions(self) -> Set[Position]:
        """Positions of all mines (empty before generation)."""
        return {position for position, cell in self.cells() if cell.is_mine}

    # ========================================================================
    # Observation (High-level)
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for (row, col), cell in self.cells():
            obs[row, col] = cell.to_observation()
        return obs

