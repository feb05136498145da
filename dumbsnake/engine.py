"""
engine.py — Core game loop for dumbsnake.

Each tick:
  1. recreate board and snake if the terminal changed size,
  2. move the snake unless paused, then redraw the board,
  3. drain pending keys,
  4. sleep for whatever is left of the tick budget.

The terminal is reached only through a *screen* object offering
size(), get_key(), erase(), write() and refresh(); renderer.CursesScreen
is the real one.  All mutable game data lives on a GameState so the
steps can be exercised without a terminal.
"""

import logging

from dumbsnake.board import Board
from dumbsnake.clock import Clock, nano_diff
from dumbsnake.constants import (
    INITIAL_DIRECTION, PAUSED, RUNNING, TERMINATED, TICK_NANOS,
)
from dumbsnake.controls import drain_keys
from dumbsnake.entities import Snake

logger = logging.getLogger(__name__)


class GameState:
    """
    Everything the loop carries from one tick to the next.

    Attributes
    ----------
    board, snake   : current Board and Snake.
    direction      : (dx, dy) the snake moves in on the next tick.
    paused, quit   : control flags set by the keyboard.
    width, height  : terminal size the board was built for.
    prev_timestamp : clock reading taken at the end of the last tick.
    ticks          : number of completed steps.
    """

    def __init__(self, board: Board, snake: Snake, direction=INITIAL_DIRECTION,
                 prev_timestamp: int = 0):
        self.board          = board
        self.snake          = snake
        self.direction      = direction
        self.paused         = False
        self.quit           = False
        self.width          = board.width
        self.height         = board.height
        self.prev_timestamp = prev_timestamp
        self.ticks          = 0

    @property
    def status(self) -> str:
        if self.quit:
            return TERMINATED
        return PAUSED if self.paused else RUNNING

    def __repr__(self):
        return (f"<GameState {self.status} direction={self.direction} "
                f"board={self.width}x{self.height} snake={self.snake!r}>")


def _fresh_board(width: int, height: int):
    """A new board with a one-segment snake at its center, not yet painted."""
    return Board(width, height), Snake(width // 2, height // 2)


def new_game(width: int, height: int, timestamp: int = 0) -> GameState:
    board, snake = _fresh_board(width, height)
    board.put_snake(snake)
    return GameState(board, snake, prev_timestamp=timestamp)


def reset_board(state: GameState, width: int, height: int):
    """
    Replace board and snake after a terminal resize.

    The direction and the pause flag are left as they were.  The new
    center segment is not painted, so that cell stays floor until the
    tail moves past it.
    """
    state.snake.destroy()
    state.board, state.snake = _fresh_board(width, height)
    state.width, state.height = width, height
    logger.debug("Terminal resized to %dx%d, board recreated", width, height)


def step(state: GameState, screen) -> list:
    """
    Run one tick minus the pacing.  Returns the keys applied.
    """
    width, height = screen.size()
    if (width, height) != (state.width, state.height):
        reset_board(state, width, height)

    if not state.paused:
        state.snake.move(state.board, *state.direction)
    state.board.render(screen)

    keys = drain_keys(state, screen.get_key)
    state.ticks += 1
    return keys


def pace(state: GameState, clock: Clock, budget_ns: int = TICK_NANOS) -> int:
    """
    Sleep out the rest of the tick.  Returns the nanoseconds slept.

    The timestamp kept for the next tick is the one read *before*
    sleeping.
    """
    timestamp = clock.now()
    slept = clock.sleep_remaining(
        nano_diff(state.prev_timestamp, timestamp), budget_ns)
    state.prev_timestamp = timestamp
    return slept


def run(screen, clock: Clock = None) -> GameState:
    """Play until the quit key is pressed; returns the final state."""
    clock = clock or Clock()
    width, height = screen.size()
    state = new_game(width, height, clock.now())

    while not state.quit:
        step(state, screen)
        pace(state, clock)

    logger.debug("Game over after %d ticks", state.ticks)
    return state
