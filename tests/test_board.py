"""
Tests for board.py - the character grid.
"""

import pytest

from dumbsnake.board import Board
from dumbsnake.constants import CHAR_FLOOR, CHAR_SNAKE_BODY, HELP_TEXT
from dumbsnake.entities import Snake

from conftest import FakeScreen


class TestBoardCreation:
    """Tests for building a fresh board."""

    @pytest.mark.parametrize("width,height", [(1, 1), (10, 5), (80, 24), (3, 40)])
    def test_cell_count_matches_dimensions(self, width, height):
        """The grid holds exactly width*height cells."""
        board = Board(width, height)
        assert len(board.cells) == height
        assert all(len(row) == width for row in board.cells)
        assert len(board.text) == width * height

    @pytest.mark.parametrize("width,height", [(10, 5), (80, 24), (7, 7)])
    def test_help_prefix_then_floor(self, width, height):
        """Every cell is floor except the help text prefix."""
        board = Board(width, height)
        prefix = HELP_TEXT[:width * height]
        assert board.text.startswith(prefix)
        assert set(board.text[len(prefix):]) <= {CHAR_FLOOR}

    def test_help_wraps_onto_next_row(self):
        """Help text continues on the following row when a row is full."""
        board = Board(10, 5)
        assert board.rows()[0] == HELP_TEXT[:10]
        assert board.rows()[1] == HELP_TEXT[10:20]

    def test_help_truncated_to_capacity(self):
        """A grid smaller than the help text only shows what fits."""
        board = Board(4, 2)
        assert board.text == HELP_TEXT[:8]

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (0, 0), (-1, 3)])
    def test_non_positive_dimensions_rejected(self, width, height):
        """A board with no area is a programming error."""
        with pytest.raises(ValueError):
            Board(width, height)


class TestBoardCells:
    """Tests for reading and writing cells."""

    def test_set_then_get(self):
        board = Board(10, 5)
        board.set_cell(9, 4, CHAR_SNAKE_BODY)
        assert board.get_cell(9, 4) == CHAR_SNAKE_BODY
        assert board.rows()[4][9] == CHAR_SNAKE_BODY

    @pytest.mark.parametrize("x,y", [(10, 0), (0, 5), (-1, 0), (0, -1)])
    def test_out_of_bounds_rejected(self, x, y):
        """Writes outside the grid raise IndexError."""
        board = Board(10, 5)
        with pytest.raises(IndexError):
            board.set_cell(x, y, CHAR_SNAKE_BODY)
        with pytest.raises(IndexError):
            board.get_cell(x, y)

    def test_put_snake_paints_segments(self):
        """put_snake marks every segment as snake body."""
        board = Board(10, 5)
        board.put_snake(Snake(5, 2))
        assert board.get_cell(5, 2) == CHAR_SNAKE_BODY


class TestBoardRender:
    """Tests for drawing the board on a screen."""

    def test_render_erases_writes_and_flushes(self):
        """render() clears, writes the whole grid once, then refreshes."""
        board = Board(10, 5)
        screen = FakeScreen(10, 5)
        board.render(screen)
        assert screen.erased == 1
        assert screen.frames == [board.text]
        assert screen.flushed == 1
