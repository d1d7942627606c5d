from __future__ import annotations

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], None]


class Timer:
    """A callback due after ``interval`` seconds of scheduler time.

    Repeating timers fire again every ``interval`` seconds until cancelled.
    """

    def __init__(self, interval: float, callback: TimerCallback, repeat: bool = False):
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}.")
        self.interval = float(interval)
        self.callback = callback
        self.repeat = repeat
        self._elapsed = 0.0
        self._cancelled = False
        self._fired = 0

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._cancelled or (not self.repeat and self._fired > 0)

    @property
    def fire_count(self) -> int:
        return self._fired

    @property
    def remaining(self) -> float:
        return max(0.0, self.interval - self._elapsed)

    def cancel(self) -> None:
        self._cancelled = True

    def advance(self, delta_time: float) -> None:
        if self.done:
            return
        self._elapsed += delta_time
        while not self.done and self._elapsed >= self.interval:
            self._elapsed -= self.interval
            self._fired += 1
            self.callback()


class Scheduler:
    """Single-threaded timer queue advanced by the game tick."""

    def __init__(self):
        self.time = 0.0
        self._timers: List[Timer] = []

    @property
    def timers(self) -> List[Timer]:
        return list(self._timers)

    def loop(self, interval: float, callback: TimerCallback) -> Timer:
        """Call ``callback`` every ``interval`` seconds, first after one interval."""
        return self._add(Timer(interval, callback, repeat=True))

    def wait(self, delay: float, callback: TimerCallback) -> Timer:
        """Call ``callback`` once after ``delay`` seconds."""
        return self._add(Timer(delay, callback, repeat=False))

    def step(self, delta_time: float) -> None:
        self.time += delta_time
        # Timers added by callbacks start counting on the next step
        for timer in tuple(self._timers):
            timer.advance(delta_time)
        self._timers = [timer for timer in self._timers if not timer.done]

    def clear(self) -> None:
        for timer in self._timers:
            timer.cancel()
        if self._timers:
            logger.debug("Cancelled %d pending timer(s)", len(self._timers))
        self._timers = []

    def _add(self, timer: Timer) -> Timer:
        self._timers.append(timer)
        return timer

    def __len__(self) -> int:
        return len(self._timers)

