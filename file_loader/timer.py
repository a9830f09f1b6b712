"""Elapsed-time measurement for load operations."""

import time


class Timer:
    """Monotonic stopwatch.

    Example:
        timer = Timer(start=True)
        ...
        logger.debug(f"took {timer.elapsed():.1f}ms")
    """

    def __init__(self, start: bool = False):
        self._started_at: float | None = None
        if start:
            self.start()

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def elapsed(self) -> float:
        """Milliseconds since start(), or 0.0 if never started."""
        if self._started_at is None:
            return 0.0
        return (time.perf_counter() - self._started_at) * 1000.0
