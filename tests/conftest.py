"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Test Doubles
# ============================================================================

class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FixedLayout(random.Random):
    """Random source whose sample() always returns a chosen mine layout."""

    def __init__(self, mines: Iterable) -> None:
        super().__init__(0)
        self.mines = sorted(mines)

    def sample(self, population, k, **kwargs) -> List:
        assert k == len(self.mines)
        assert set(self.mines) <= set(population), "layout overlaps safe zone"
        return list(self.mines)


# Column 2 of a 5x5 board is solid mines.
WALL = frozenset((row, 2) for row in range(5))

# Column 2 rows 0-3 are mines; (4, 2) is a safe pocket.
PARTIAL_WALL = frozenset((row, 2) for row in range(4))


# ============================================================================
# Clock Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at t=100."""
    return FakeClock()


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines laid."""
    board = Board(5, 5)
    board.lay_mines([])
    return board


@pytest.fixture
def wall_board() -> Board:
    """Create a 5x5 board with a full column of mines."""
    board = Board(5, 5)
    board.lay_mines(WALL)
    return board


@pytest.fixture
def single_mine_board() -> Board:
    """Create a 3x3 board with a mine in the top-left corner."""
    board = Board(3, 3)
    board.lay_mines([(0, 0)])
    return board


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def default_session(clock: FakeClock) -> GameSession:
    """Create a beginner session with a seeded generator."""
    return GameSession(BoardConfig(9, 9, 10), rng=random.Random(7), clock=clock)


@pytest.fixture
def wall_session(clock: FakeClock) -> GameSession:
    """Create a 5x5 session whose mines form a wall at column 2."""
    return GameSession(
        BoardConfig(5, 5, len(WALL)), rng=FixedLayout(WALL), clock=clock
    )


@pytest.fixture
def pocket_session(clock: FakeClock) -> GameSession:
    """Create a 5x5 session with a partial wall and a safe pocket."""
    return GameSession(
        BoardConfig(5, 5, len(PARTIAL_WALL)),
        rng=FixedLayout(PARTIAL_WALL),
        clock=clock,
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def beginner_config() -> BoardConfig:
    """Beginner difficulty configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def expert_config() -> BoardConfig:
    """Expert difficulty configuration."""
    return BoardConfig(30, 16, 99)
