"""
scheduler.py — Fixed-interval tick source.

Turns variable frame times into a whole number of simulation ticks.
Knows nothing about pygame clocks or the game itself; the controller
feeds it frame deltas and runs the ticks it reports as due.
"""

from .config import MAX_CATCH_UP_TICKS, TICK_INTERVAL


class TickScheduler:

    def __init__(self, interval: float = TICK_INTERVAL,
                 max_catch_up: int = MAX_CATCH_UP_TICKS):
        if interval <= 0:
            raise ValueError("tick interval must be positive")
        self.interval = interval
        self.max_catch_up = max_catch_up
        self._elapsed: float = 0.0
        self._running: bool = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._elapsed = 0.0
        self._running = True

    def stop(self) -> None:
        """Stop immediately; no further ticks are reported."""
        self._running = False
        self._elapsed = 0.0

    def advance(self, dt: float) -> int:
        """Add dt seconds and return how many ticks are now due."""
        if not self._running:
            return 0
        self._elapsed += dt
        due = int(self._elapsed // self.interval)
        self._elapsed -= due * self.interval
        if due > self.max_catch_up:
            # Drop the backlog after a long stall instead of fast-forwarding.
            due = self.max_catch_up
            self._elapsed = 0.0
        return due
