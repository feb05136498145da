"""
constants.py — Shared constants for dumbsnake.

Timing, snake length, grid characters, directional vectors and key
codes live here so every other module can import them from a single
authoritative source.
"""

import curses

# ═══════════════════════════════════════════════════════════════════════════
#  TIMING
# ═══════════════════════════════════════════════════════════════════════════

# Budget for one tick of the game loop.
TICK_MILLIS = 50
NANOS_PER_SECOND = 1000 * 1000 * 1000
TICK_NANOS = TICK_MILLIS * 1000 * 1000

# ═══════════════════════════════════════════════════════════════════════════
#  BOARD
# ═══════════════════════════════════════════════════════════════════════════

# Once this many segments exist, every move trims the tail.
FULL_GROWN_LEN = 15

CHAR_SNAKE_BODY = "X"
CHAR_FLOOR      = " "

HELP_TEXT = "Press 'q' to quit, 'p' to pause."

# ═══════════════════════════════════════════════════════════════════════════
#  DIRECTIONAL DATA
# ═══════════════════════════════════════════════════════════════════════════

# (dx, dy) deltas; y grows downwards like terminal rows.
UP    = ( 0, -1)
DOWN  = ( 0,  1)
LEFT  = (-1,  0)
RIGHT = ( 1,  0)

INITIAL_DIRECTION = UP

# ═══════════════════════════════════════════════════════════════════════════
#  GAME STATUS
# ═══════════════════════════════════════════════════════════════════════════

RUNNING    = "running"
PAUSED     = "paused"
TERMINATED = "terminated"

# ═══════════════════════════════════════════════════════════════════════════
#  KEYS
# ═══════════════════════════════════════════════════════════════════════════

NO_KEY    = -1
KEY_QUIT  = ord("q")
KEY_PAUSE = ord("p")

# Arrow key → direction it asks for.
ARROW_KEYS = {
    curses.KEY_UP:    UP,
    curses.KEY_DOWN:  DOWN,
    curses.KEY_LEFT:  LEFT,
    curses.KEY_RIGHT: RIGHT,
}
