"""
Unit tests for board configuration and difficulty identifiers.
"""
import pytest
from minesweeper import (
    BEGINNER,
    EXPERT,
    INTERMEDIATE,
    PRESETS,
    BestTimeRecord,
    BoardConfig,
    ConfigurationError,
    Difficulty,
)


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, beginner_config: BoardConfig) -> None:
        """Beginner config keeps its values and has 71 safe cells."""
        assert beginner_config.width == 9
        assert beginner_config.height == 9
        assert beginner_config.mine_count == 10
        assert beginner_config.safe_cells == 71

    def test_zero_width_raises_error(self) -> None:
        """Width of 0 should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="dimensions must be positive"):
            BoardConfig(0, 9, 10)

    def test_zero_height_raises_error(self) -> None:
        """Height of 0 should raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="dimensions must be positive"):
            BoardConfig(9, 0, 10)

    def test_zero_mines_raises_error(self) -> None:
        """A board needs at least one mine."""
        with pytest.raises(ConfigurationError, match="at least 1"):
            BoardConfig(8, 8, 0)

    def test_mines_filling_board_raises_error(self) -> None:
        """Mines on every cell are rejected."""
        with pytest.raises(ConfigurationError, match="Too many mines"):
            BoardConfig(8, 8, 64)

    def test_mines_inside_safe_zone_capacity_raises_error(self) -> None:
        """Mines must leave room for the first-click safe zone."""
        # 64 cells minus a 3x3 safe zone leaves room for 55
        with pytest.raises(ConfigurationError, match="max 55"):
            BoardConfig(8, 8, 56)

    def test_max_mines_is_valid(self) -> None:
        """The largest allowed mine count is accepted."""
        assert BoardConfig(8, 8, 55).mine_count == 55

    def test_narrow_board_capacity(self) -> None:
        """The safe zone is clipped on a one-row board."""
        # A single row leaves a 1x3 safe zone
        assert BoardConfig.max_mines(10, 1) == 7

    def test_configuration_error_is_value_error(self) -> None:
        """ConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            BoardConfig(3, 3, 1)

    def test_presets(self, expert_config: BoardConfig) -> None:
        """Preset configs have the classic sizes and mine counts."""
        assert BEGINNER == BoardConfig(9, 9, 10)
        assert INTERMEDIATE == BoardConfig(16, 16, 40)
        assert EXPERT == expert_config


# ============================================================================
# Difficulty Tests
# ============================================================================

class TestDifficulty:
    """Test difficulty identifiers and parsing."""

    @pytest.mark.parametrize("name", ["beginner", "intermediate", "expert"])
    def test_preset_keys(self, name: str) -> None:
        """Presets store and record under their lowercase name."""
        difficulty = PRESETS[name]
        assert difficulty.is_preset is True
        assert difficulty.storage_value == name
        assert difficulty.best_key == name
        assert Difficulty.parse(name) is difficulty

    def test_custom_keys(self) -> None:
        """Custom difficulties encode size and mines in both keys."""
        difficulty = Difficulty.custom(20, 10, 30)
        assert difficulty.label == "Custom"
        assert difficulty.storage_value == "custom:20:10:30"
        assert difficulty.best_key == "custom-20x10-30"

    def test_parse_custom(self) -> None:
        """A stored custom value parses back to its config."""
        difficulty = Difficulty.parse("custom:20:10:30")
        assert difficulty.config == BoardConfig(20, 10, 30)

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            "",
            "insane",
            "custom:20:10",
            "custom:20:10:30:1",
            "custom:a:10:30",
            "custom:4:10:3",
            "custom:5:5:25",
            "custom:51:10:3",
        ],
    )
    def test_parse_rejects_invalid_values(self, raw) -> None:
        """Unknown or invalid stored values parse to None."""
        assert Difficulty.parse(raw) is None

    @pytest.mark.parametrize("width,height", [(4, 10), (10, 4), (51, 10)])
    def test_custom_side_bounds(self, width: int, height: int) -> None:
        """Custom sides outside 5-50 are rejected."""
        with pytest.raises(ConfigurationError, match="between 5 and 50"):
            Difficulty.custom(width, height, 3)

    def test_custom_largest_board_is_valid(self) -> None:
        """A 50x50 custom board is allowed."""
        assert Difficulty.custom(50, 50, 1).config.total_cells == 2500

    def test_for_config_finds_preset(self) -> None:
        """A preset-sized config resolves to the preset."""
        assert Difficulty.for_config(BoardConfig(30, 16, 99)) is PRESETS["expert"]

    def test_for_config_falls_back_to_custom(self) -> None:
        """Any other config resolves to a custom difficulty."""
        difficulty = Difficulty.for_config(BoardConfig(9, 9, 11))
        assert difficulty.is_preset is False
        assert difficulty.best_key == "custom-9x9-11"


# ============================================================================
# Best Time Record Tests
# ============================================================================

class TestBestTimeRecord:
    """Test best-time comparison."""

    def test_beats_missing_record(self) -> None:
        """Any time beats no recorded time."""
        assert BestTimeRecord("beginner", 42).beats(None) is True

    def test_beats_slower_record(self) -> None:
        """A faster time beats the stored one."""
        assert BestTimeRecord("beginner", 42).beats(50) is True

    def test_does_not_beat_equal_or_faster(self) -> None:
        """Ties and slower times are not records."""
        record = BestTimeRecord("beginner", 42)
        assert record.beats(42) is False
        assert record.beats(30) is False
