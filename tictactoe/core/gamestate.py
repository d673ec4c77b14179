from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from tictactoe.core.board import Board, Player, Position
from tictactoe.core.move import Move, MoveResult
from tictactoe.core.movevalidator import MoveValidator
from tictactoe.core.windetector import Evaluation, Outcome, evaluate, outcome

logger = logging.getLogger(__name__)


class GameState:
    """
    Move/history state machine.

    Owns:
      - history: list of Board snapshots, history[0] is always the empty board
      - current_move: pointer to the displayed snapshot

    Whose turn it is comes from the pointer parity (X on even, O on odd).
    There is no stored game-over flag; win/draw is derived from the
    current snapshot on every call.
    """

    def __init__(self) -> None:
        self.validator = MoveValidator()
        self._history: List[Board] = [Board.empty()]
        self._current_move: int = 0

    # -------------------------
    # Read-only views
    # -------------------------

    @property
    def history(self) -> Tuple[Board, ...]:
        return tuple(self._history)

    @property
    def current_move(self) -> int:
        return self._current_move

    def history_length(self) -> int:
        return len(self._history)

    def current_snapshot(self) -> Board:
        return self._history[self._current_move]

    def turn(self) -> Player:
        """Player who makes the next move from the current snapshot."""
        return Player.X if self._current_move % 2 == 0 else Player.O

    @staticmethod
    def move_description(move: int) -> str:
        if move > 0:
            return f"Go to move #{move}"
        return "Go to game start"

    def move_descriptions(self) -> List[str]:
        return [self.move_description(m) for m in range(len(self._history))]

    def last_move(self) -> Optional[Move]:
        """
        The move that produced the current snapshot, or None at the start
        (or when the previous entry is not a single-mark predecessor, which
        can happen after reverse_history_order).
        """
        if self._current_move == 0:
            return None
        prev = self._history[self._current_move - 1]
        cur = self.current_snapshot()
        changed = cur.diff(prev)
        if len(changed) != 1 or not prev.is_empty(changed[0]):
            return None
        idx = changed[0]
        return Move(position=Position.from_index(idx), player=cur.get(idx))

    # -------------------------
    # Win / status
    # -------------------------

    def evaluate(self) -> Evaluation:
        return evaluate(self.current_snapshot())

    def outcome(self) -> Outcome:
        return outcome(self.current_snapshot())

    def status_text(self) -> str:
        result = self.evaluate()
        if result.winner is not None:
            return f"Winner: {result.winner}"
        if self.current_snapshot().is_full():
            return "Draw"
        return f"Next player: {self.turn()}"

    # -------------------------
    # Transitions
    # -------------------------

    def play_move(self, index: int) -> MoveResult:
        """
        Mark `index` for the player to move.

        Occupied cell or already-won board: rejected, state unchanged.
        Otherwise any snapshots after the current pointer are discarded
        before the new one is appended.

        Raises:
            ValueError if index is not in 0..8.
        """
        if not Board.in_bounds(index):
            raise ValueError(f"Cell index out of range: {index}")

        board = self.current_snapshot()
        player = self.turn()
        result = self.validator.validate(board, index, player)
        if not result.success:
            logger.info("Rejected move %s at %s: %s", player, Position.from_index(index), result.error_message)
            return result

        move = Move(position=Position.from_index(index), player=player)
        next_history = self._history[: self._current_move + 1]
        next_history.append(board.with_mark(index, player))
        self._history = next_history
        self._current_move = len(next_history) - 1
        logger.debug("Move #%d: %s", self._current_move, move)

        return MoveResult.ok(is_winning_move=result.is_winning_move, move=move)

    def jump_to(self, move: int) -> None:
        """
        Point at history[move]. History is kept, so later entries stay reachable.

        Raises:
            ValueError if move is not a valid history index.
        """
        if not isinstance(move, int) or not 0 <= move < len(self._history):
            raise ValueError(f"History index out of range: {move} (history has {len(self._history)} entries)")
        self._current_move = move
        logger.debug("Jumped to move #%d", move)

    def reverse_history_order(self) -> None:
        """
        Keep history[0..current_move], reverse it and point at index 0.

        Everything after the current pointer is dropped, and the snapshot that
        was current becomes the first entry of the new timeline.
        """
        dropped = len(self._history) - (self._current_move + 1)
        kept = self._history[: self._current_move + 1]
        kept.reverse()
        self._history = kept
        self._current_move = 0
        logger.debug("Reversed history: kept %d, dropped %d", len(kept), dropped)

    def reset(self) -> None:
        """Reset game to initial state."""
        self._history = [Board.empty()]
        self._current_move = 0
        logger.debug("Game reset")
