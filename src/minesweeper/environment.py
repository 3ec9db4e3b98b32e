"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameSession through the standard RL interface so scripted
players and learning agents can play the engine.
"""
import random
from typing import Any, Callable, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import OBS_FLAGGED, OBS_HIDDEN, OBS_MINE
from .difficulty import BoardConfig
from .outcomes import HitMine
from .session import GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (after a loss)

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        rng_factory: Callable[[int], random.Random] = random.Random,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
            rng_factory: Builds each game's mine-placement random source
                from a seed drawn from the environment's np_random.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode
        self.rng_factory = rng_factory

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = self.rng_factory(int(self.np_random.integers(2**32)))
        self.session = GameSession(self.config, rng=rng)
        self._steps = 0

        return self.session.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        position = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(position)
        terminated = self.session.is_over

        return (
            self.session.get_observation(),
            reward,
            terminated,
            False,
            self._get_info(),
        )

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.config.width, int(action) % self.config.width

    def _calculate_reward(self, position: Tuple[int, int]) -> float:
        """Perform the reveal and score its result."""
        if self.session.is_over:
            return -0.1
        if not self.session.board.get_cell(position).is_hidden:
            return -0.1

        outcome = self.session.reveal(position)
        if isinstance(outcome, HitMine):
            return -10.0
        if self.session.is_won:
            return 10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.session.cells_revealed,
            "total_safe": self.config.safe_cells,
            "game_state": self.session.state.name,
            "mines_remaining": self.session.mines_remaining,
            "elapsed": self.session.elapsed,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.session.get_observation())
        if self.render_mode == "human":
            print(render_text(self.session.get_observation()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell that may be revealed.
        """
        return (self.session.get_observation() == OBS_HIDDEN).flatten()


# ============================================================================
# Text Rendering
# ============================================================================

def render_text(obs: np.ndarray) -> str:
    """Render an observation array as ASCII rows."""
    symbols = {OBS_HIDDEN: ".", OBS_FLAGGED: "F", OBS_MINE: "*", 0: " "}
    lines = []
    for row in obs:
        lines.append(" ".join(symbols.get(int(val), str(int(val))) for val in row))
    return "\n".join(lines)
