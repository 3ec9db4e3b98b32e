"""
Per-square state for the engine's board.

A cell starts hidden and mine-free; the generator marks mines and the
board fills in neighbor counts only once the first reveal has happened.
Visibility is changed by the reveal, chord and flag rules, never by the
cell itself. The OBS_* codes are shared by Board.get_observation, the
text renderer and the gymnasium observation space.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class Visibility(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Meaningless until
            mines have been laid on the board.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visibility (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: Visibility = Visibility.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == Visibility.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == Visibility.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == Visibility.FLAGGED

    def to_observation(self) -> int:
        """
        Encode what a player can see of this cell as one int8 code.

        Hidden and flagged cells never leak is_mine, so the code is safe
        to hand to a renderer or an agent mid-game.

        Returns:
            OBS_HIDDEN (-1) for a hidden cell, including unlaid boards.
            OBS_FLAGGED (-2) for a flag, right or wrong.
            0-8 for a revealed safe cell's neighbor count.
            OBS_MINE (9) for a mine revealed by a loss.
        """
        if self.state == Visibility.HIDDEN:
            return OBS_HIDDEN
        if self.state == Visibility.FLAGGED:
            return OBS_FLAGGED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
