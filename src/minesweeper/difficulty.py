"""
Board configuration and difficulty levels.

BoardConfig is the validated (width, height, mine_count) tuple a game is
built from. Difficulty attaches a label to a config and derives the
identifier strings a persistence layer uses to remember the last-used
difficulty and the best time for each difficulty.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import ConfigurationError


# ============================================================================
# Constants
# ============================================================================

CUSTOM_MIN_SIDE = 5
CUSTOM_MAX_SIDE = 50


def max_safe_zone(width: int, height: int) -> int:
    """Largest safe zone a first click can produce on this board."""
    return min(3, width) * min(3, height)


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.mine_count < 1:
            raise ConfigurationError("Mine count must be at least 1")
        max_mines = self.max_mines(self.width, self.height)
        if self.mine_count > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @staticmethod
    def max_mines(width: int, height: int) -> int:
        """Mine capacity left once the first-click safe zone is set aside."""
        return width * height - max_safe_zone(width, height)

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.mine_count


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)


# ============================================================================
# Difficulty
# ============================================================================

@dataclass(frozen=True)
class Difficulty:
    """
    A named or custom board configuration.

    Attributes:
        label: Display name ("Beginner", ..., "Custom").
        config: Board configuration for this difficulty.
    """

    label: str
    config: BoardConfig

    @classmethod
    def custom(cls, width: int, height: int, mine_count: int) -> "Difficulty":
        """
        Build a custom difficulty from user-entered dimensions.

        Raises:
            ConfigurationError: If a side is outside the allowed range or
                the mine count does not fit the board.
        """
        for name, value in (("Width", width), ("Height", height)):
            if not CUSTOM_MIN_SIDE <= value <= CUSTOM_MAX_SIDE:
                raise ConfigurationError(
                    f"{name} must be between {CUSTOM_MIN_SIDE} "
                    f"and {CUSTOM_MAX_SIDE}"
                )
        return cls("Custom", BoardConfig(width, height, mine_count))

    @classmethod
    def for_config(cls, config: BoardConfig) -> "Difficulty":
        """Return the preset matching config, or a custom difficulty."""
        for preset in PRESETS.values():
            if preset.config == config:
                return preset
        return cls("Custom", config)

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["Difficulty"]:
        """
        Parse a stored difficulty value.

        Accepts a preset name ("beginner") or "custom:W:H:M". Returns None
        for anything unknown or invalid.
        """
        if not raw:
            return None
        if raw in PRESETS:
            return PRESETS[raw]

        parts = raw.split(":")
        if len(parts) != 4 or parts[0] != "custom":
            return None
        try:
            width, height, mine_count = (int(part) for part in parts[1:])
            return cls.custom(width, height, mine_count)
        except ValueError:
            return None

    @property
    def is_preset(self) -> bool:
        """Whether this difficulty is one of the named presets."""
        return self.label != "Custom"

    @property
    def storage_value(self) -> str:
        """Value stored to remember this as the last-used difficulty."""
        if self.is_preset:
            return self.label.lower()
        config = self.config
        return f"custom:{config.width}:{config.height}:{config.mine_count}"

    @property
    def best_key(self) -> str:
        """Identifier best times are recorded under."""
        if self.is_preset:
            return self.label.lower()
        config = self.config
        return f"custom-{config.width}x{config.height}-{config.mine_count}"


PRESETS: Dict[str, Difficulty] = {
    "beginner": Difficulty("Beginner", BEGINNER),
    "intermediate": Difficulty("Intermediate", INTERMEDIATE),
    "expert": Difficulty("Expert", EXPERT),
}


# ============================================================================
# Best Time Record
# ============================================================================

@dataclass(frozen=True)
class BestTimeRecord:
    """
    A finished game's time, offered to the persistence layer.

    Attributes:
        difficulty_key: Difficulty.best_key of the game.
        elapsed_seconds: Whole seconds taken to win.
    """

    difficulty_key: str
    elapsed_seconds: int

    def beats(self, stored_seconds: Optional[int]) -> bool:
        """Whether this record improves on a stored best time."""
        return stored_seconds is None or self.elapsed_seconds < stored_seconds
