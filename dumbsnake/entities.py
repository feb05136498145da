"""
entities.py — Game entity classes for dumbsnake.
"""

from collections import deque

from dumbsnake.constants import CHAR_FLOOR, CHAR_SNAKE_BODY, FULL_GROWN_LEN


def validate_direction(dx: int, dy: int):
    """Raise ValueError unless (dx, dy) is a single orthogonal unit step."""
    if dx not in (-1, 0, 1) or dy not in (-1, 0, 1) or (dx == 0) == (dy == 0):
        raise ValueError(f"Invalid direction ({dx}, {dy}): "
                         f"exactly one of dx, dy must be +1 or -1.")


class Snake:
    """
    The player's snake.

    Attributes
    ----------
    segments : deque  – [(x, y), ...] ordered **head → tail**.
                        segments[0] is always the HEAD.

    Only two operations ever touch the chain: prepend a head and drop
    the tail, so a deque covers it.
    """

    def __init__(self, x: int, y: int):
        self.segments = deque([(x, y)])

    @property
    def head(self):
        """The (x, y) of the snake's head."""
        return self.segments[0]

    @property
    def tail(self):
        return self.segments[-1]

    @property
    def length(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __len__(self):
        return len(self.segments)

    def move(self, board, dx: int, dy: int):
        """
        Advance one cell in direction (dx, dy), painting *board* as it goes.

        The new head wraps around the board edges.  Until the snake
        reaches FULL_GROWN_LEN it only grows; after that every move
        also drops the tail, so the body slides along its own path.
        Overlapping itself is allowed.

        Returns the new head position.
        """
        validate_direction(dx, dy)

        hx, hy = self.head
        head = ((hx + dx + board.width) % board.width,
                (hy + dy + board.height) % board.height)

        self.segments.appendleft(head)
        board.set_cell(*head, CHAR_SNAKE_BODY)

        if len(self.segments) > FULL_GROWN_LEN:
            tx, ty = self.segments.pop()
            board.set_cell(tx, ty, CHAR_FLOOR)

        return head

    def destroy(self):
        """Release every segment."""
        self.segments.clear()

    def __repr__(self):
        return f"<Snake head={self.head} length={self.length}>"
