"""
Game timer.

Measures elapsed time with a monotonic clock. The clock is injectable so
tests can drive it by hand.
"""
import time
from typing import Callable, Optional


class GameTimer:
    """Stopwatch that starts on the first reveal and freezes at game end."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    def start(self) -> None:
        """Start the timer. Ignored if already started."""
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        """Freeze the timer. Ignored if not running."""
        if self.is_running:
            self._stopped_at = self._clock()

    @property
    def is_running(self) -> bool:
        """Whether the timer has started and not yet stopped."""
        return self._started_at is not None and self._stopped_at is None

    @property
    def elapsed(self) -> float:
        """Elapsed seconds; 0.0 before start, constant after stop."""
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return max(0.0, end - self._started_at)

    @property
    def elapsed_seconds(self) -> int:
        """Elapsed time truncated to whole seconds."""
        return int(self.elapsed)
