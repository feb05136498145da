"""
controls.py — Keyboard handling for dumbsnake.

Keys are drained once per tick.  A key identical to the one right
before it in the same drain is dropped, which stops auto-repeat from
flooding a tick while still letting each new key through.
"""

import logging

from dumbsnake.constants import ARROW_KEYS, KEY_PAUSE, KEY_QUIT, NO_KEY

logger = logging.getLogger(__name__)


def apply_key(state, key: int):
    """Apply a single key press to *state*."""
    if key == KEY_QUIT:
        state.quit = True
        logger.debug("Quit requested")
    elif key == KEY_PAUSE:
        state.paused = not state.paused
        logger.debug("Paused" if state.paused else "Resumed")
    elif key in ARROW_KEYS:
        new_dx, new_dy = ARROW_KEYS[key]
        dx, dy = state.direction
        # Turning is only allowed across the current axis: no reversing
        # into the neck, no diagonals.
        if (new_dx != 0 and dx == 0) or (new_dy != 0 and dy == 0):
            state.direction = (new_dx, new_dy)


def drain_keys(state, poll) -> list:
    """
    Read keys from *poll* until it returns NO_KEY or a quit is seen.

    *poll* must never block.  Returns the keys that were applied, in
    order, after de-duplication.
    """
    applied  = []
    prev_key = NO_KEY
    while not state.quit:
        key = poll()
        if key == NO_KEY:
            break
        if key == prev_key:
            continue
        prev_key = key
        apply_key(state, key)
        applied.append(key)
    return applied
