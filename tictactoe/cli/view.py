from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TextIO

from tictactoe.core.gamestate import GameState


# =========================
# Message types
# =========================

class MessageType(Enum):
    ERR = "ERR"
    INFO = "INFO"
    MOVE = "MOVE"
    JUMP = "JUMP"
    REVERSE = "REVERSE"
    RESTART = "RESTART"
    QUIT = "QUIT"


@dataclass(frozen=True)
class Message:
    """
    A UI message shown between board and state.
    Examples:
      [ERR] Cell is already occupied.
      [MOVE] X at B2
    """
    type: MessageType
    text: str = ""

    def render(self) -> str:
        if self.text:
            return f"[{self.type.value}] {self.text}"
        return f"[{self.type.value}]"


# =========================
# Screen utils
# =========================

def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


# =========================
# View (board + message + status + move list)
# =========================

class CliView:
    """
    Responsible ONLY for rendering:
      1) board
      2) message
      3) status line
      4) move list

    It does NOT:
      - parse input
      - execute game logic
    """

    def __init__(
        self,
        *,
        prompt: str = "> ",
        clear: bool = True,
        out: Optional[TextIO] = None,
    ) -> None:
        self.prompt = prompt
        self.clear = clear
        self._out = out

        self._message: Optional[Message] = None

    @property
    def out(self) -> TextIO:
        # resolved late so redirected/captured stdout is honoured
        return self._out if self._out is not None else sys.stdout

    # ---------- Message API ----------

    @property
    def message(self) -> Optional[Message]:
        return self._message

    def set_message(self, msg: Optional[Message]) -> None:
        self._message = msg

    def set_error(self, text: str) -> None:
        self._message = Message(MessageType.ERR, text)

    def set_info(self, text: str = "") -> None:
        self._message = Message(MessageType.INFO, text) if text else None

    def set_move(self, text: str = "") -> None:
        self._message = Message(MessageType.MOVE, text) if text else None

    def set_jump(self, text: str = "") -> None:
        self._message = Message(MessageType.JUMP, text)

    def set_reverse(self, text: str = "") -> None:
        self._message = Message(MessageType.REVERSE, text)

    def set_restart(self, text: str = "") -> None:
        self._message = Message(MessageType.RESTART, text)

    def set_quit(self, text: str = "") -> None:
        self._message = Message(MessageType.QUIT, text)

    # ---------- Render ----------

    def render(self, state: GameState) -> None:
        """
        Render:
          - board
          - message
          - status
          - move list
          - prompt
        """
        if self.clear:
            clear_screen()

        out = self.out

        # 1) board
        print(state.current_snapshot().to_cli(), file=out)
        print("", file=out)

        # 2) message
        if self._message is None:
            print("", file=out)
        else:
            print(self._message.render(), file=out)

        # 3) status
        print(state.status_text(), file=out)
        print("", file=out)

        # 4) moves
        for line in self.build_move_list(state):
            print(line, file=out)
        print(self.prompt, end="", file=out, flush=True)

    def build_move_list(self, state: GameState) -> List[str]:
        """
        One line per history entry. The displayed entry is plain text,
        every other entry shows the command that jumps to it.
        """
        lines: List[str] = []
        for move, description in enumerate(state.move_descriptions()):
            if move == state.current_move:
                lines.append(f"  > {description}")
            else:
                jump = f"/jump {move}"
                lines.append(f"    {jump.ljust(9)} {description}")
        return lines
