#!/usr/bin/env python3
"""
main.py — Entry point for dumbsnake.

Run from the repository root:
    python main.py

Arrow keys steer, 'p' pauses, 'q' quits.  The game takes no arguments.
"""

import curses
import sys

from dumbsnake.engine import run
from dumbsnake.renderer import TerminalSession


def main():
    session = TerminalSession()
    try:
        session.start()
    except curses.error as exc:
        session.stop()
        print(f"Could not set up the terminal: {exc}", file=sys.stderr)
        sys.exit(1)

    with session as screen:
        run(screen)


if __name__ == "__main__":
    main()
