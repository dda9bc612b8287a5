"""Monotonic time keeping and sleeping in nanoseconds."""

import time


class TimeSource:
    """Sleeps and measures elapsed time.

    1 second = 1000 milliseconds = 1 000 000 microseconds = 1 000 000 000 nanoseconds.
    """

    def __init__(self) -> None:
        self._last_time = time.monotonic_ns()

    def reset(self) -> None:
        """Reset the time delta to 0."""
        self._last_time = time.monotonic_ns()

    def delta(self) -> float:
        """Return nanoseconds passed since the last call to this method or reset()."""
        current_time = time.monotonic_ns()
        elapsed = current_time - self._last_time
        self._last_time = current_time
        return float(elapsed)

    def sleep(self, nanoseconds: float) -> None:
        """Sleep the current thread the given number of nanoseconds."""
        if nanoseconds > 0:
            time.sleep(nanoseconds / 1_000_000_000)