"""Rendering tests for the terminal view."""

import io

from tictactoe.cli.view import CliView, Message, MessageType
from tictactoe.core.gamestate import GameState


def render(view: CliView, state: GameState) -> str:
    view.render(state)
    return view.out.getvalue()


def test_message_render():
    assert Message(MessageType.ERR, "boom").render() == "[ERR] boom"
    assert Message(MessageType.QUIT).render() == "[QUIT]"


def test_render_board_status_and_moves():
    state = GameState()
    state.play_move(0)
    state.play_move(4)
    view = CliView(clear=False, out=io.StringIO())
    view.set_error("Cell is already occupied.")

    text = render(view, state)

    lines = text.splitlines()
    assert lines[0] == "    A B C"
    assert lines[1] == " 1  X . ."
    assert lines[2] == " 2  . O ."
    assert lines[3] == " 3  . . ."
    assert "[ERR] Cell is already occupied." in lines
    assert "Next player: X" in lines
    assert text.endswith("> ")


def test_move_list_marks_current_entry():
    state = GameState()
    state.play_move(0)
    state.play_move(4)
    state.jump_to(1)
    view = CliView(clear=False, out=io.StringIO())

    assert view.build_move_list(state) == [
        "    /jump 0   Go to game start",
        "  > Go to move #1",
        "    /jump 2   Go to move #2",
    ]


def test_render_winner():
    state = GameState()
    for i in (0, 4, 1, 7, 2):
        state.play_move(i)
    view = CliView(clear=False, out=io.StringIO())

    assert "Winner: X" in render(view, state).splitlines()


def test_set_info_without_text_clears_message():
    view = CliView(clear=False, out=io.StringIO())
    view.set_error("x")
    view.set_info()
    assert view.message is None
