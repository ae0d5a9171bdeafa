"""Deadline tracking for the receive loop."""

import time
from typing import Callable, Optional


class Deadline:
    """Wall-clock budget for a listen window.

    The receive loop asks for `remaining` before every blocking call so no
    single receive can run past the end of the window.
    """

    def __init__(self, timeout: float, clock: Callable[[], float] = time.monotonic):
        """Initialize and start the deadline.

        Args:
            timeout: Length of the window in seconds.
            clock: Monotonic time source. Default: time.monotonic.
        """
        self.timeout = timeout
        self._clock = clock
        self._start_time: Optional[float] = None
        self.start()

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since start."""
        if self._start_time is None:
            return 0.0
        return self._clock() - self._start_time

    @property
    def remaining(self) -> float:
        """Seconds remaining before the deadline."""
        return max(0.0, self.timeout - self.elapsed)

    @property
    def is_expired(self) -> bool:
        """Whether the deadline has passed."""
        return self.elapsed >= self.timeout

    def start(self) -> None:
        """(Re)start the window from now."""
        self._start_time = self._clock()
