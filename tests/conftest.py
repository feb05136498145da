"""
Shared fakes for the dumbsnake tests.

FakeScreen stands in for the curses screen and FakeClock for the CPU
clock, so the engine can be driven tick by tick without a terminal.
"""

import pytest

from dumbsnake.constants import NO_KEY


class FakeScreen:
    """Records what was drawn and hands out queued key codes."""

    def __init__(self, width=20, height=10):
        self.width   = width
        self.height  = height
        self.keys    = []
        self.frames  = []
        self.erased  = 0
        self.flushed = 0

    def size(self):
        return self.width, self.height

    def get_key(self):
        return self.keys.pop(0) if self.keys else NO_KEY

    def erase(self):
        self.erased += 1

    def write(self, text):
        self.frames.append(text)

    def refresh(self):
        self.flushed += 1


class FakeClock:
    """Clock whose readings come from a list; sleeps are only recorded."""

    def __init__(self, readings):
        self.readings = list(readings)
        self.slept    = []

    def now(self):
        return self.readings.pop(0)

    def sleep_remaining(self, elapsed_ns, budget_ns):
        remaining = budget_ns - elapsed_ns
        if remaining <= 0:
            return 0
        self.slept.append(remaining)
        return remaining


@pytest.fixture
def screen():
    return FakeScreen()
