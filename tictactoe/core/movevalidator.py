from __future__ import annotations

from tictactoe.core.board import Board, Player
from tictactoe.core.move import MoveResult
from tictactoe.core.windetector import evaluate


class MoveValidator:
    """
    Validates moves according to tic-tac-toe rules:
      - No move once the board already has a winner
      - Only empty cells can be marked
    Index bounds are the caller's concern.
    """

    def validate(self, board: Board, index: int, player: Player) -> MoveResult:
        if evaluate(board).has_winner:
            return MoveResult.fail("Game is already over.")

        if not board.is_empty(index):
            return MoveResult.fail("Cell is already occupied.")

        # virtual placement, board itself is immutable
        winning = evaluate(board.with_mark(index, player)).winner == player
        return MoveResult.ok(is_winning_move=winning)
