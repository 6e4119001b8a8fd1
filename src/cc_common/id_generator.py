"""Time-based ID generator for players, team requests and bookings.

IDs are the decimal string of the current Unix time in milliseconds.
Two IDs requested within the same millisecond would collide, so the
generator bumps to last+1 instead; IDs are therefore unique and strictly
increasing within one generator.
"""

import threading
import time
from collections.abc import Callable


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


class TimeBasedIdGenerator:
    """Millisecond-timestamp IDs with a monotonic bump on collision."""

    def __init__(self, clock_ms: Callable[[], int] = _wall_clock_ms) -> None:
        self._clock_ms = clock_ms
        self._last = -1
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            ts = self._clock_ms()
            if ts <= self._last:
                ts = self._last + 1
            self._last = ts
            return str(ts)

