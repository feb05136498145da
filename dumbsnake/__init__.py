"""
dumbsnake — A terminal snake that wraps around the screen edges.

Modules:

  constants  – timing, snake length, cell chars, directions, keys.
  board      – Board character grid.
  entities   – Snake class.
  clock      – CPU-time tick pacing.
  controls   – key handling with per-tick de-duplication.
  engine     – GameState and the tick loop.
  renderer   – curses screen adapter and terminal session.
"""
