"""
Game session module for Minesweeper.

GameSession is the engine's public surface. It owns the board and the
timer, drives the NOT_STARTED -> PLAYING -> WON/LOST state machine, and
answers the read-only queries a renderer or persistence layer needs.
A finished session is never reset; call new_game for another round.
"""
import logging
import random
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional

import numpy as np

from .board import Board, Position
from .cell import Visibility
from .chord import chord as chord_cell
from .difficulty import BestTimeRecord, BoardConfig, Difficulty
from .errors import ConfigurationError, InvalidCell, InvalidState
from .generator import place_mines
from .outcomes import ChordOutcome, HitMine, Mismatch, Revealed, RevealOutcome
from .reveal import reveal as reveal_cell
from .timer import GameTimer

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATES = frozenset({GameState.WON, GameState.LOST})


@dataclass(frozen=True)
class CellView:
    """
    What a renderer may know about a cell.

    Attributes:
        visibility: Hidden, revealed or flagged.
        adjacent_mines: Neighbor mine count, only for revealed safe cells.
        is_mine: Only known once revealed or after the game is over.
        misflagged: Flag placed on a safe cell, reported after a loss.
    """

    visibility: Visibility
    adjacent_mines: Optional[int] = None
    is_mine: Optional[bool] = None
    misflagged: bool = False


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game of Minesweeper from first click to win or loss.

    Mines are laid on the first reveal, keeping the clicked cell and its
    neighbors clear.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        difficulty: Optional[Difficulty] = None,
    ) -> None:
        """
        Initialize a session in the NOT_STARTED state.

        Args:
            config: Board configuration (default: the difficulty's board,
                else 9x9 with 10 mines).
            rng: Random source for mine placement.
            clock: Monotonic clock used by the timer.
            difficulty: Chosen difficulty; sets the best-time key. Looked
                up from config when omitted.

        Raises:
            ConfigurationError: If config and difficulty describe
                different boards.
        """
        if config is None and difficulty is not None:
            config = difficulty.config
        self.config = config or BoardConfig()
        if difficulty is None:
            difficulty = Difficulty.for_config(self.config)
        elif difficulty.config != self.config:
            raise ConfigurationError(
                f"Difficulty {difficulty.storage_value} does not match "
                f"board {self.config.width}x{self.config.height} "
                f"with {self.config.mine_count} mines"
            )
        self.difficulty = difficulty
        self._board = Board(self.config.width, self.config.height)
        self._rng = rng or random.Random()
        self._timer = GameTimer(clock)
        self._state = GameState.NOT_STARTED
        self._flags_placed = 0
        self._cells_revealed = 0
        self._losing_position: Optional[Position] = None

    # ========================================================================
    # Commands
    # ========================================================================

    def reveal(self, position: Position) -> RevealOutcome:
        """
        Reveal a cell.

        The first reveal lays the mines, starts the timer and moves the
        game to PLAYING. Revealing a non-hidden cell is a no-op.

        Args:
            position: (row, col) to reveal.

        Returns:
            Revealed with the opened positions, or HitMine.

        Raises:
            InvalidState: If the game is already over.
            OutOfBounds: If position lies outside the board.
        """
        self._require_active("reveal")
        cell = self._board.get_cell(position)
        if cell.state != Visibility.HIDDEN:
            return Revealed()

        if self._state == GameState.NOT_STARTED:
            self._start(position)

        outcome = reveal_cell(self._board, position)
        self._apply(outcome)
        return outcome

    def chord(self, position: Position) -> ChordOutcome:
        """
        Reveal the hidden neighbors of a revealed number.

        Returns:
            Mismatch when the flags around the cell do not match its
            number, otherwise the combined reveal outcome.

        Raises:
            InvalidState: If the game is already over.
            InvalidCell: If the cell is not a revealed non-zero number.
            OutOfBounds: If position lies outside the board.
        """
        self._require_active("chord")
        outcome = chord_cell(self._board, position)
        if isinstance(outcome, Mismatch):
            logger.debug(
                f"Chord at {position} ignored: "
                f"{outcome.flagged} flags, {outcome.expected} expected"
            )
            return outcome
        self._apply(outcome)
        return outcome

    def toggle_flag(self, position: Position) -> Visibility:
        """
        Toggle a flag on a hidden cell.

        Flagging before the first reveal is allowed and does not lay mines.

        Returns:
            The cell's new visibility.

        Raises:
            InvalidState: If the game is already over.
            InvalidCell: If the cell is revealed.
            OutOfBounds: If position lies outside the board.
        """
        self._require_active("flag")
        cell = self._board.get_cell(position)
        if cell.state == Visibility.REVEALED:
            raise InvalidCell(position, "cannot flag a revealed cell")

        if cell.state == Visibility.HIDDEN:
            cell.state = Visibility.FLAGGED
            self._flags_placed += 1
        else:
            cell.state = Visibility.HIDDEN
            self._flags_placed -= 1
        return cell.state

    # ========================================================================
    # Transitions (Low-level)
    # ========================================================================

    def _require_active(self, command: str) -> None:
        """Reject commands once the game has ended."""
        if self._state in TERMINAL_STATES:
            raise InvalidState(self._state, command)

    def _start(self, position: Position) -> None:
        """Lay mines around the first click and start the clock."""
        place_mines(self._board, self.config.mine_count, position, self._rng)
        self._timer.start()
        self._state = GameState.PLAYING
        logger.info(
            f"Game started: {self.difficulty.label} "
            f"{self.config.width}x{self.config.height}, "
            f"{self.config.mine_count} mines, first click {position}"
        )

    def _apply(self, outcome: RevealOutcome) -> None:
        """Update counters and state after a reveal or chord."""
        self._cells_revealed += sum(
            1 for position in outcome.positions
            if not self._board.get_cell(position).is_mine
        )
        if isinstance(outcome, HitMine):
            self._lose(outcome.position)
        elif self._cells_revealed == self.config.safe_cells:
            self._win()

    def _lose(self, position: Position) -> None:
        """End the game on a mine and expose every mine."""
        self._timer.stop()
        self._state = GameState.LOST
        self._losing_position = position
        for _, cell in self._board.cells():
            if cell.is_mine and cell.state == Visibility.HIDDEN:
                cell.state = Visibility.REVEALED
        logger.info(
            f"Game lost at {position} after {self._timer.elapsed:.1f}s"
        )

    def _win(self) -> None:
        """End the game as won and flag the remaining mines."""
        self._timer.stop()
        self._state = GameState.WON
        for _, cell in self._board.cells():
            if cell.is_mine and cell.state == Visibility.HIDDEN:
                cell.state = Visibility.FLAGGED
                self._flags_placed += 1
        logger.info(f"Game won in {self._timer.elapsed:.1f}s")

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._state in TERMINAL_STATES

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.LOST

    @property
    def board(self) -> Board:
        """The underlying board. Mutate it only through session commands."""
        return self._board

    @property
    def flags_placed(self) -> int:
        """Number of flagged cells."""
        return self._flags_placed

    @property
    def cells_revealed(self) -> int:
        """Number of safe cells revealed."""
        return self._cells_revealed

    @property
    def mines_remaining(self) -> int:
        """Mine count minus flags placed; negative when over-flagged."""
        return self.config.mine_count - self._flags_placed

    @property
    def losing_position(self) -> Optional[Position]:
        """The mine that ended the game, if it was lost."""
        return self._losing_position

    @property
    def elapsed(self) -> float:
        """Seconds since the first reveal, frozen once the game ends."""
        return self._timer.elapsed

    @property
    def elapsed_seconds(self) -> int:
        """Elapsed time in whole seconds."""
        return self._timer.elapsed_seconds

    @property
    def best_time_candidate(self) -> Optional[BestTimeRecord]:
        """Time record to offer the persistence layer, once won."""
        if self._state != GameState.WON:
            return None
        return BestTimeRecord(self.difficulty.best_key, self.elapsed_seconds)

    def cell_view(self, position: Position) -> CellView:
        """Get what a renderer may show for the cell at position."""
        cell = self._board.get_cell(position)
        adjacent = None
        if cell.is_revealed and not cell.is_mine:
            adjacent = cell.adjacent_mines
        is_mine = None
        if cell.is_revealed or self.is_over:
            is_mine = cell.is_mine
        misflagged = (
            self._state == GameState.LOST and cell.is_flagged and not cell.is_mine
        )
        return CellView(cell.state, adjacent, is_mine, misflagged)

    def snapshot(self) -> List[List[CellView]]:
        """Get a row-major grid of cell views."""
        return [
            [self.cell_view((row, col)) for col in range(self.config.width)]
            for row in range(self.config.height)
        ]

    def get_observation(self) -> np.ndarray:
        """Get board state as a numpy array (see Board.get_observation)."""
        return self._board.get_observation()


# ============================================================================
# Factory
# ============================================================================

def new_game(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
    clock: Callable[[], float] = time.monotonic,
    difficulty: Optional[Difficulty] = None,
) -> GameSession:
    """
    Start a new game.

    Pass difficulty to keep a custom choice's best-time key even when
    its board matches a preset.

    Raises:
        ConfigurationError: If the board size or mine count is invalid.
    """
    return GameSession(
        BoardConfig(width, height, mine_count), rng, clock, difficulty
    )
