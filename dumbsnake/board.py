"""
board.py — The character grid the snake is drawn on.
"""

from dumbsnake.constants import CHAR_FLOOR, CHAR_SNAKE_BODY, HELP_TEXT


class Board:
    """
    A width × height grid of single characters.

    Every cell starts as CHAR_FLOOR, then HELP_TEXT is written over the
    flat (row-major) text, wrapping onto following rows and cut off
    where the grid ends.  The snake overwrites help characters as it
    crosses them.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {width}x{height}.")
        self.width  = width
        self.height = height
        self.cells  = [[CHAR_FLOOR] * width for _ in range(height)]

        for i, ch in enumerate(HELP_TEXT[:width * height]):
            y, x = divmod(i, width)
            self.cells[y][x] = ch

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the "
                f"{self.width}x{self.height} board.")

    def get_cell(self, x: int, y: int) -> str:
        self._check_bounds(x, y)
        return self.cells[y][x]

    def set_cell(self, x: int, y: int, value: str):
        self._check_bounds(x, y)
        self.cells[y][x] = value

    def put_snake(self, snake):
        """Paint every segment of *snake* onto the grid."""
        for x, y in snake:
            self.set_cell(x, y, CHAR_SNAKE_BODY)

    def rows(self) -> list:
        return ["".join(row) for row in self.cells]

    @property
    def text(self) -> str:
        """The whole grid as one string, rows back to back."""
        return "".join(self.rows())

    def render(self, screen):
        """Clear *screen*, write the full grid and flush it."""
        screen.erase()
        screen.write(self.text)
        screen.refresh()

    def __repr__(self):
        return f"<Board {self.width}x{self.height}>"
