"""
clock.py — Tick pacing for the game loop.

Timestamps are integer nanoseconds of *process CPU time*, not wall
time: the clock only advances while the process is running, so time
spent asleep (or waiting on a busy CPU) does not count towards a tick.
Under load the loop therefore runs slower than TICK_MILLIS rather than
trying to catch up.
"""

import time

from dumbsnake.constants import NANOS_PER_SECOND, TICK_NANOS


def nano_diff(before: int, after: int) -> int:
    """Signed nanoseconds elapsed from *before* to *after*."""
    return after - before


class Clock:
    """
    Monotonic time source plus a sleep primitive.

    Both are injectable so the loop can be driven by a fake clock.
    """

    def __init__(self, now=time.process_time_ns, sleep=time.sleep):
        self._now   = now
        self._sleep = sleep

    def now(self) -> int:
        return self._now()

    def sleep_remaining(self, elapsed_ns: int, budget_ns: int = TICK_NANOS) -> int:
        """
        Block for whatever is left of *budget_ns* after *elapsed_ns*.

        Returns the nanoseconds slept, 0 if the budget was already spent.
        """
        remaining = budget_ns - elapsed_ns
        if remaining <= 0:
            return 0
        self._sleep(remaining / NANOS_PER_SECOND)
        return remaining
