from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from tictactoe.cli.commands import Command, CommandProcessor, CommandType
from tictactoe.cli.view import CliView, Message, MessageType
from tictactoe.core.board import Position
from tictactoe.core.gamestate import GameState

logger = logging.getLogger(__name__)

# Returns the next input line, or None at end of input.
InputFn = Callable[[], Optional[str]]


def read_stdin_line() -> Optional[str]:
    try:
        return input()
    except EOFError:
        return None


# =========================
# Base Controller
# =========================

class BaseController(ABC):
    """
    Common controller loop:
      - render(board + message + status + move list)
      - read one input line
      - parse input into Command/Position
      - dispatch

    Concrete controllers implement:
      - handle_command()
      - handle_move()
      - on_quit_requested() (optional override)

    OOP rule:
      - Controller orchestrates.
      - GameState handles gameplay.
      - View renders only.
      - CommandProcessor parses only.
    """

    def __init__(
        self,
        *,
        state: GameState,
        view: CliView,
        command_processor: CommandProcessor,
        input_fn: InputFn = read_stdin_line,
    ) -> None:
        self.state = state
        self.view = view
        self.cmd = command_processor

        self._input = input_fn
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    # ---------- Main loop ----------

    def run(self) -> None:
        """
        Main loop:
          1) render
          2) read a line (None = end of input)
          3) handle parsed input
        """
        self.on_start()

        try:
            while self._running:
                self.view.render(self.state)

                line = self._input()
                if line is None:
                    logger.debug("End of input")
                    break

                self.handle_line(line)
        except KeyboardInterrupt:
            logger.debug("Interrupted")

        self.on_stop()

    def handle_line(self, line: str) -> None:
        parsed = self.cmd.parse(line)
        if not parsed.ok:
            # empty input is ok-noop
            if parsed.error:
                self.view.set_message(Message(MessageType.ERR, parsed.error))
            return

        if parsed.command is not None:
            self._handle_command(parsed.command)
        elif parsed.position is not None:
            self.handle_move(parsed.position)

    # ---------- Input dispatch ----------

    def _handle_command(self, command: Command) -> None:
        # Common /help handling
        if command.type == CommandType.HELP:
            self.view.set_info(self.cmd.help_text())
            return

        # Common /quit handling (controllers can override behavior)
        if command.type == CommandType.QUIT:
            self.on_quit_requested()
            self._running = False
            return

        self.handle_command(command)

    # =========================
    # Hooks / Abstract methods
    # =========================

    def on_start(self) -> None:
        """Optional hook before loop starts."""
        pass

    def on_stop(self) -> None:
        """Optional hook after loop ends."""
        pass

    def on_quit_requested(self) -> None:
        """Default quit behavior: just show message."""
        self.view.set_quit("Exiting...")

    @abstractmethod
    def handle_command(self, command: Command) -> None:
        """
        Handle commands except /help and /quit (already processed).
        """
        raise NotImplementedError

    @abstractmethod
    def handle_move(self, pos: Position) -> None:
        """Handle a user move input (Position)."""
        raise NotImplementedError
