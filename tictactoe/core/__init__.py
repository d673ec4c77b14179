"""Board, win detection and the move/history state machine."""

from tictactoe.core.board import Board, Player, Position
from tictactoe.core.gamestate import GameState
from tictactoe.core.move import Move, MoveResult
from tictactoe.core.windetector import Evaluation, Outcome, evaluate, outcome

__all__ = [
    "Board",
    "Player",
    "Position",
    "GameState",
    "Move",
    "MoveResult",
    "Evaluation",
    "Outcome",
    "evaluate",
    "outcome",
]
