"""Unit tests for input parsing."""

import pytest

from tictactoe.cli.commands import CommandProcessor, CommandType
from tictactoe.core.board import Position


@pytest.fixture
def processor():
    return CommandProcessor()


def test_blank_line_is_noop(processor):
    result = processor.parse("   ")
    assert not result.ok
    assert result.error == ""


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 1", Position(1, 1)),
        ("3 2", Position(3, 2)),
        ("B2", Position(2, 2)),
        ("c3", Position(3, 3)),
        (" a 1 ", Position(1, 1)),
    ],
)
def test_positions(processor, text, expected):
    result = processor.parse(text)
    assert result.ok
    assert result.position == expected
    assert result.command is None


def test_position_index_is_row_major(processor):
    assert processor.parse("3 1").position.index == 2
    assert processor.parse("A3").position.index == 6


@pytest.mark.parametrize("text", ["0 1", "4 4", "D1", "A4", "A0"])
def test_out_of_bounds(processor, text):
    result = processor.parse(text)
    assert not result.ok
    assert result.error.startswith("Out of bounds")


@pytest.mark.parametrize(
    "text, ctype",
    [
        ("/quit", CommandType.QUIT),
        ("/Q", CommandType.QUIT),
        ("/help", CommandType.HELP),
        ("/reverse", CommandType.REVERSE),
        ("/restart", CommandType.RESTART),
    ],
)
def test_commands(processor, text, ctype):
    result = processor.parse(text)
    assert result.ok
    assert result.command.type == ctype
    assert result.command.arg is None


def test_jump_with_argument(processor):
    result = processor.parse("/jump 3")
    assert result.ok
    assert result.command.type == CommandType.JUMP
    assert result.command.arg == 3
    assert processor.parse("/j 0").command.arg == 0


@pytest.mark.parametrize("text", ["/jump", "/jump x", "/jump -1", "/jump 1 2"])
def test_jump_usage_errors(processor, text):
    result = processor.parse(text)
    assert not result.ok
    assert result.error.startswith("Usage: /jump")


def test_unknown_input(processor):
    assert processor.parse("/undo").error == "Unknown command: /undo"
    assert processor.parse("/").error == "Unknown command: /"
    assert processor.parse("/reverse now").error == "/reverse takes no arguments"
    assert processor.parse("hello").error.startswith("Invalid input")


@pytest.mark.parametrize("text", ["B²", "² 1", "1 ٣", "é2"])
def test_non_ascii_cells_are_errors(processor, text):
    result = processor.parse(text)
    assert not result.ok
    assert result.error.startswith("Invalid input")


def test_non_ascii_jump_is_usage_error(processor):
    result = processor.parse("/jump ²")
    assert not result.ok
    assert result.error.startswith("Usage: /jump")


def test_error_and_help_name_the_three_by_three_cells(processor):
    assert "A1-C3" in processor.parse("hello").error
    assert "A1-C3" in processor.help_text()
