"""
Exceptions raised by the Minesweeper engine.

Every engine error derives from MinesweeperError so callers can catch
them in one place. HitMine and Mismatch are outcomes, not errors, and
live in the outcomes module.
"""
from typing import Any, Tuple


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class OutOfBounds(MinesweeperError, IndexError):
    """Position lies outside the board."""

    def __init__(self, position: Tuple[int, int], height: int, width: int) -> None:
        self.position = position
        super().__init__(
            f"Position {position} outside {height}x{width} board"
        )


class InvalidCell(MinesweeperError):
    """Command applied to a cell whose visibility forbids it."""

    def __init__(self, position: Tuple[int, int], reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid cell {position}: {reason}")


class InvalidState(MinesweeperError):
    """Command applied while the session does not accept it."""

    def __init__(self, state: Any, command: str) -> None:
        self.state = state
        self.command = command
        super().__init__(f"Cannot {command} while game is {state.name}")


class ConfigurationError(MinesweeperError, ValueError):
    """Board configuration is invalid."""


class GenerationError(MinesweeperError, RuntimeError):
    """Mine layout cannot be produced for the requested parameters."""
