"""
Tests for the terminal display adapter.
"""

from ..engine_core import Command, Direction, GameSession
from ..view import help_lines, parse_keys, render, status_line


class TestRender:
    """Tests for snapshot rendering."""

    def test_initial_board(self, session):
        lines = render(session.snapshot(), show_status=False)
        assert lines == ["#####", "#@$.#", "#####"]

    def test_solved_board(self, session):
        session.apply_move(Direction.RIGHT)
        lines = render(session.snapshot(level_number=1, level_count=2))
        assert lines[:3] == ["#####", "# @*#", "#####"]
        assert lines[-1] == status_line(session.snapshot(level_number=1, level_count=2))
        assert "SOLVED" in lines[-1]

    def test_status_line(self, session):
        line = status_line(session.snapshot(level_number=3, level_count=9))
        assert line.startswith("Level 3/9")
        assert "Moves: 0" in line
        assert "Boxes: 0/1" in line

    def test_ragged_board_trimmed(self):
        from ..level import parse_text_level

        grid = parse_text_level("  ####\n###  #\n#@$.##\n#####")
        lines = render(GameSession(grid).snapshot(), show_status=False)
        assert lines == ["  ####", "###  #", "#@$.##", "#####"]


class TestKeys:
    """Tests for key parsing."""

    def test_letter_keys(self):
        assert parse_keys("wasd") == [
            Command.MOVE_UP, Command.MOVE_LEFT, Command.MOVE_DOWN, Command.MOVE_RIGHT,
        ]
        assert parse_keys("hjkl") == [
            Command.MOVE_LEFT, Command.MOVE_DOWN, Command.MOVE_UP, Command.MOVE_RIGHT,
        ]

    def test_control_keys(self):
        assert parse_keys("urcq?") == [
            Command.UNDO, Command.REDO, Command.CANCEL_LEVEL, Command.QUIT, Command.HELP,
        ]

    def test_arrow_sequences(self):
        assert parse_keys("\x1b[A\x1b[D d") == [
            Command.MOVE_UP, Command.MOVE_LEFT, Command.MOVE_RIGHT,
        ]

    def test_uppercase_and_unknown(self):
        """Keys are case-insensitive; unknown keys are skipped."""
        assert parse_keys("D x U") == [Command.MOVE_RIGHT, Command.UNDO]

    def test_help_lines(self):
        assert any("undo" in line for line in help_lines())
