from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from tictactoe.core.board import Position, Player

@dataclass(frozen=True)
class Move:
    """Represents a move on the board."""
    position: Position
    player: Player

    @property
    def index(self) -> int:
        return self.position.index

    def __str__(self) -> str:
        """String representation."""
        return f"{self.player} at {self.position}"

@dataclass
class MoveResult:
    """Result of executing a move."""
    success: bool
    is_winning_move: bool = False
    error_message: str = ""
    move: Optional[Move] = None

    @staticmethod
    def ok(*, is_winning_move: bool = False, move: Optional[Move] = None) -> "MoveResult":
        return MoveResult(
            success=True,
            is_winning_move=is_winning_move,
            error_message="",
            move=move,
        )

    @staticmethod
    def fail(msg: str) -> "MoveResult":
        return MoveResult(
            success=False,
            is_winning_move=False,
            error_message=msg,
        )
