from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from tictactoe.core.board import Board, Player

Line = Tuple[int, int, int]

# Rows, columns, diagonals (row-major cell indices)
WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Outcome(Enum):
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Evaluation:
    """Win-detection result for one board."""
    winner: Optional[Player] = None
    line: Optional[Line] = None

    @property
    def has_winner(self) -> bool:
        return self.winner is not None


NO_WINNER = Evaluation()


def evaluate(board: Board) -> Evaluation:
    """
    Report the winner of `board`, if any.

    A line wins only when its three cells hold the same non-empty mark.
    Pure: depends on the 9 cell values only.
    """
    for a, b, c in WINNING_LINES:
        first = board[a]
        if first != Player.EMPTY and first == board[b] and first == board[c]:
            return Evaluation(winner=first, line=(a, b, c))
    return NO_WINNER


def outcome(board: Board) -> Outcome:
    if evaluate(board).has_winner:
        return Outcome.WON
    if board.is_full():
        return Outcome.DRAW
    return Outcome.PLAYING
