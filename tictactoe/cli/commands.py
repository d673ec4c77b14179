from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from tictactoe.core.board import BOARD_SIZE, Position


def _is_number(text: str) -> bool:
    # ASCII only: str.isdigit also accepts characters int() rejects
    return text.isascii() and text.isdecimal()


class CommandType(Enum):
    QUIT = "quit"
    HELP = "help"
    JUMP = "jump"
    REVERSE = "reverse"
    RESTART = "restart"


@dataclass(frozen=True)
class Command:
    """Parsed command from user input."""
    type: CommandType
    raw: str
    arg: Optional[int] = None


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing one line input.
    Exactly one of (command, position) should be set on success.
    """
    command: Optional[Command] = None
    position: Optional[Position] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.error == "" and (self.command is not None or self.position is not None)


class CommandProcessor:
    """
    Parses user input line into:
      - Command (e.g. /jump 3, /reverse)
      - Position (e.g. '2 2' or 'B2')

    This class does NOT execute anything. Controllers decide what to do.
    """

    _ALIASES = {
        "quit": CommandType.QUIT,
        "q": CommandType.QUIT,
        "help": CommandType.HELP,
        "h": CommandType.HELP,
        "jump": CommandType.JUMP,
        "j": CommandType.JUMP,
        "reverse": CommandType.REVERSE,
        "restart": CommandType.RESTART,
    }

    def __init__(self, board_size: int = BOARD_SIZE) -> None:
        if board_size <= 0:
            raise ValueError("board_size must be positive")
        self.board_size = board_size

    @property
    def help_cmds(self) -> str:
        cmds = ["/help", "/quit", "/jump N", "/reverse", "/restart"]
        return ", ".join(cmds)

    def help_text(self) -> str:
        return (
            f"Cells: 'x y' (column row, 1-{self.board_size}) or {self._cell_range()}. "
            f"Commands: {self.help_cmds}"
        )

    # ---------- Public parse API ----------

    def parse(self, text: str) -> ParseResult:
        """
        Parse a raw input line.
        Returns ParseResult with either command or position on success.
        """
        raw = (text or "").strip()
        if not raw:
            return ParseResult(error="")  # treat as no-op line

        # slash commands
        if raw.startswith("/"):
            parts = raw[1:].split()
            if not parts:
                return ParseResult(error=f"Unknown command: {raw}")
            ctype = self._ALIASES.get(parts[0].lower())
            if ctype is None:
                return ParseResult(error=f"Unknown command: {raw}")

            if ctype == CommandType.JUMP:
                if len(parts) != 2 or not _is_number(parts[1]):
                    return ParseResult(error="Usage: /jump N (N = move number, 0 = game start)")
                return ParseResult(command=Command(ctype, raw, arg=int(parts[1])))

            if len(parts) != 1:
                return ParseResult(error=f"/{parts[0].lower()} takes no arguments")
            return ParseResult(command=Command(ctype, raw))

        position, error = self._parse_cell(raw)
        if position is None:
            return ParseResult(error=error)
        return ParseResult(position=position)

    # ---------- Helpers ----------

    def _parse_cell(self, raw: str) -> Tuple[Optional[Position], str]:
        """Cell as column then row: 'x y' numbers or a letter+number name."""
        parts = raw.split()
        name = "".join(parts)
        if len(parts) == 2 and _is_number(parts[0]) and _is_number(parts[1]):
            x, y = int(parts[0]), int(parts[1])
        elif self._is_cell_name(name):
            x, y = ord(name[0].upper()) - ord("A") + 1, int(name[1:])
        else:
            return None, f"Invalid input. Use 'x y' (1-{self.board_size}) or a cell name like {self._cell_range()}, or /help"

        if not self._is_in_bounds(x, y):
            return None, self._oob_msg(x, y)
        return Position(x, y), ""

    @staticmethod
    def _is_cell_name(name: str) -> bool:
        return len(name) >= 2 and name[0].isascii() and name[0].isalpha() and _is_number(name[1:])

    def _cell_range(self) -> str:
        col_end = chr(ord("A") + self.board_size - 1)
        return f"A1-{col_end}{self.board_size}"

    def _is_in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.board_size and 1 <= y <= self.board_size

    def _oob_msg(self, x: int, y: int) -> str:
        return f"Out of bounds: {x}, {y} (must be 1..{self.board_size})"
