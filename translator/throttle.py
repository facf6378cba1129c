from __future__ import annotations

import time
from typing import Callable, Optional


class NoThrottle:
    """Gate that never blocks."""

    def wait(self) -> None:
        return None


class FixedIntervalThrottle:
    """Blocking gate that spaces consecutive `wait()` returns by `interval` seconds.

    The first call passes immediately. Clock and sleep are injectable so the
    policy can be exercised without real delays.
    """

    def __init__(
        self,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval < 0:
            raise ValueError("interval must be non-negative")
        self.interval = float(interval)
        self._clock = clock
        self._sleep = sleep
        self._last: Optional[float] = None

    def wait(self) -> None:
        if self._last is not None:
            remaining = self.interval - (self._clock() - self._last)
            if remaining > 0:
                self._sleep(remaining)
        self._last = self._clock()
