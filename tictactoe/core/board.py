from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

import numpy as np

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Player(Enum):
    """Cell values / player marks."""
    EMPTY = 0
    X = 1
    O = 2

    def symbol(self) -> str:
        return {0: ".", 1: "X", 2: "O"}[self.value]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Position:
    """
    Immutable position on the board.
    Coordinates are 1-based: x is the column (1..3), y is the row (1..3).
    """
    x: int
    y: int

    def __post_init__(self):
        if not isinstance(self.x, int) or not isinstance(self.y, int):
            raise TypeError("Position coordinates must be integers")
        if not (1 <= self.x <= BOARD_SIZE and 1 <= self.y <= BOARD_SIZE):
            raise ValueError(f"Position coordinates must be 1..{BOARD_SIZE}")

    def __str__(self) -> str:
        """Return human-readable form like B2."""
        col = chr(ord("A") + self.x - 1)
        return f"{col}{self.y}"

    @property
    def index(self) -> int:
        """Row-major cell index (0..8)."""
        return (self.y - 1) * BOARD_SIZE + (self.x - 1)

    @staticmethod
    def from_index(index: int) -> "Position":
        if not 0 <= index < CELL_COUNT:
            raise ValueError(f"Cell index out of range: {index}")
        row, col = divmod(index, BOARD_SIZE)
        return Position(col + 1, row + 1)


class Board:
    """
    One immutable board snapshot.

    - 9 cells, row-major (row = index // 3, col = index % 3).
    - Backed by a read-only numpy array of Player values.
    - Placing a mark returns a new Board; the original is never touched.
    """

    def __init__(self, cells=None) -> None:
        if cells is None:
            grid = np.zeros(CELL_COUNT, dtype=np.int8)
        else:
            grid = np.array([Player(c).value for c in cells], dtype=np.int8)
            if grid.shape != (CELL_COUNT,):
                raise ValueError(f"Board needs exactly {CELL_COUNT} cells")
        grid.setflags(write=False)
        self._grid: np.ndarray = grid

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    # ---------- Cell access ----------

    @staticmethod
    def in_bounds(index: int) -> bool:
        return 0 <= index < CELL_COUNT

    def _check(self, index: int) -> int:
        if not isinstance(index, (int, np.integer)) or not self.in_bounds(int(index)):
            raise ValueError(f"Cell index out of range: {index}")
        return int(index)

    def get(self, index: int) -> Player:
        return Player(int(self._grid[self._check(index)]))

    def __getitem__(self, index: int) -> Player:
        return self.get(index)

    def __len__(self) -> int:
        return CELL_COUNT

    def __iter__(self) -> Iterator[Player]:
        for v in self._grid:
            yield Player(int(v))

    def is_empty(self, index: int) -> bool:
        return self.get(index) == Player.EMPTY

    def with_mark(self, index: int, player: Player) -> "Board":
        """
        Return a new board with `player` placed at `index`.

        Raises:
            ValueError if out of bounds, occupied, or player is EMPTY.
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place EMPTY")
        i = self._check(index)
        if self._grid[i] != Player.EMPTY.value:
            raise ValueError(f"Cell occupied at {Position.from_index(i)}")
        grid = np.copy(self._grid)
        grid[i] = player.value
        grid.setflags(write=False)
        new_board = Board.__new__(Board)
        new_board._grid = grid
        return new_board

    # ---------- Queries ----------

    @property
    def moves(self) -> int:
        """Number of placed marks."""
        return int(np.count_nonzero(self._grid))

    def is_full(self) -> bool:
        return self.moves == CELL_COUNT

    def cells(self) -> Tuple[Player, ...]:
        return tuple(self)

    def diff(self, other: "Board") -> List[int]:
        """Indices where the two boards hold different values."""
        return [int(i) for i in np.flatnonzero(self._grid != other._grid)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __repr__(self) -> str:
        return f"Board({''.join(p.symbol() for p in self)})"

    # ---------- Rendering ----------

    def to_cli(self) -> str:
        letters = [chr(ord("A") + i) for i in range(BOARD_SIZE)]
        lines = []
        lines.append("    " + " ".join(letters))
        for y in range(BOARD_SIZE):
            row = [Player(int(self._grid[y * BOARD_SIZE + x])).symbol() for x in range(BOARD_SIZE)]
            lines.append(f"{str(y + 1).rjust(2)}  " + " ".join(row))
        return "\n".join(lines)
