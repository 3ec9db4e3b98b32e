"""
Minesweeper game engine.

Provides board management, lazy mine generation, flood-fill reveals,
chording and the game session state machine.
"""
from .cell import Cell, Visibility
from .board import Board, Position
from .difficulty import (
    BestTimeRecord,
    BoardConfig,
    Difficulty,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .errors import (
    ConfigurationError,
    GenerationError,
    InvalidCell,
    InvalidState,
    MinesweeperError,
    OutOfBounds,
)
from .outcomes import HitMine, Mismatch, Revealed
from .session import CellView, GameSession, GameState, new_game
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Visibility",
    "Board",
    "Position",
    "BestTimeRecord",
    "BoardConfig",
    "Difficulty",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "ConfigurationError",
    "GenerationError",
    "InvalidCell",
    "InvalidState",
    "MinesweeperError",
    "OutOfBounds",
    "HitMine",
    "Mismatch",
    "Revealed",
    "CellView",
    "GameSession",
    "GameState",
    "new_game",
    "MinesweeperEnv",
]
