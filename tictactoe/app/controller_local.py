from __future__ import annotations

from dataclasses import dataclass

from tictactoe.app.controller_base import BaseController, InputFn, read_stdin_line
from tictactoe.cli.commands import Command, CommandProcessor, CommandType
from tictactoe.cli.view import CliView
from tictactoe.core.board import Position
from tictactoe.core.gamestate import GameState


@dataclass
class LocalConfig:
    clear_screen: bool = True
    prompt: str = "> "


class LocalController(BaseController):
    """
    Two players sharing one keyboard.

    - A position marks the cell for whoever is to move.
    - /jump N shows history entry N; playing from there drops later entries.
    - /reverse keeps entries up to the shown one, reversed, and shows the first.
    - /restart starts a fresh game.
    """

    def __init__(self, *, config: LocalConfig, input_fn: InputFn = read_stdin_line) -> None:
        self.cfg = config

        view = CliView(prompt=self.cfg.prompt, clear=self.cfg.clear_screen)
        super().__init__(
            state=GameState(),
            view=view,
            command_processor=CommandProcessor(),
            input_fn=input_fn,
        )

    # ============================================================
    # Base hooks
    # ============================================================

    def on_start(self) -> None:
        self.view.set_restart("New game. X moves first. Type /help for commands.")

    def on_stop(self) -> None:
        message = self.view.message
        if message is not None:
            print("", file=self.view.out)
            print(message.render(), file=self.view.out)

    # ============================================================
    # User commands
    # ============================================================

    def handle_command(self, command: Command) -> None:
        if command.type == CommandType.JUMP:
            self._jump(command.arg)
            return

        if command.type == CommandType.REVERSE:
            self._reverse()
            return

        if command.type == CommandType.RESTART:
            self.state.reset()
            self.view.set_restart("Game restarted.")
            return

        self.view.set_error("Unknown/unsupported command. Use /help")

    # ============================================================
    # User move
    # ============================================================

    def handle_move(self, pos: Position) -> None:
        result = self.state.play_move(pos.index)
        if not result.success:
            self.view.set_error(result.error_message)
            return

        text = str(result.move)
        if result.is_winning_move:
            text += " wins!"
        self.view.set_move(text)

    # ============================================================
    # Helpers
    # ============================================================

    def _jump(self, move) -> None:
        last_index = self.state.history_length() - 1
        if move is None or not 0 <= move <= last_index:
            self.view.set_error(f"No such move: {move} (choose 0..{last_index})")
            return

        self.state.jump_to(move)
        text = self.state.move_description(move)
        last_move = self.state.last_move()
        if last_move is not None:
            text += f" ({last_move})"
        self.view.set_jump(text)

    def _reverse(self) -> None:
        before = self.state.history_length()
        self.state.reverse_history_order()
        dropped = before - self.state.history_length()
        text = "History reversed."
        if dropped:
            text += f" Dropped {dropped} later move(s)."
        self.view.set_reverse(text)
