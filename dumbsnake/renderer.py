"""
renderer.py — Terminal plumbing for dumbsnake.

CursesScreen adapts a curses window to the small screen interface the
engine uses.  TerminalSession owns the terminal mode: it switches to
non-canonical, no-echo, keypad, non-blocking input on start and makes
sure the previous mode comes back on every way out of the process.
"""

import atexit
import curses
import logging

from dumbsnake.constants import NO_KEY

logger = logging.getLogger(__name__)


class CursesScreen:
    """Screen backed by a curses window (normally stdscr)."""

    def __init__(self, window):
        self.window = window

    def size(self):
        """Current terminal size as (columns, lines)."""
        lines, cols = self.window.getmaxyx()
        return cols, lines

    def get_key(self) -> int:
        """Next pending key code, or NO_KEY when none is waiting."""
        key = self.window.getch()
        return NO_KEY if key == -1 else key

    def erase(self):
        self.window.erase()

    def write(self, text: str):
        try:
            self.window.addstr(0, 0, text)
        except curses.error:
            # Filling the bottom-right cell pushes the cursor off-screen.
            pass

    def refresh(self):
        self.window.refresh()


class TerminalSession:
    """
    Scoped ownership of the curses terminal mode.

    Use as a context manager, optionally after an explicit start() so
    setup errors can be told apart from errors during play.  The
    restore is also registered with atexit as soon as the screen
    exists, so an uncaught error still leaves a usable terminal behind.
    """

    def __init__(self):
        self.window = None
        self.screen = None
        self.active = False

    def start(self) -> CursesScreen:
        self.window = curses.initscr()
        self.active = True
        atexit.register(self.stop)

        curses.cbreak()
        curses.noecho()
        self.window.keypad(True)
        self.window.nodelay(True)
        self.window.refresh()
        self.screen = CursesScreen(self.window)
        logger.debug("Terminal session started")
        return self.screen

    def stop(self):
        """Restore the terminal; safe to call more than once."""
        if not self.active:
            return
        self.active = False
        atexit.unregister(self.stop)
        curses.endwin()
        logger.debug("Terminal session stopped")

    def __enter__(self) -> CursesScreen:
        return self.screen if self.active else self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
