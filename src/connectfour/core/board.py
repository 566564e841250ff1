# src/connectfour/core/board.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from connectfour.config import ROWS, COLS
from connectfour.errors import ColumnFull, InvalidInput
from connectfour.types import Cell, Coord, Move, Player

logger = logging.getLogger(__name__)

_SYMBOLS = {".": None, "_": None, "A": Player.A, "B": Player.B}


@dataclass(slots=True)
class Board:
    grid: List[List[Cell]] = field(default_factory=list)
    rows: int = field(default=ROWS, init=False)
    cols: int = field(default=COLS, init=False)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
            return
        if len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError(f"Board must be {self.rows}x{self.cols}.")

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from one string per row, top row first.
        'A' and 'B' are pieces, '.' or '_' is empty. No gravity is applied.
        """
        grid: List[List[Cell]] = []
        for line in rows:
            try:
                grid.append([_SYMBOLS[ch] for ch in line.strip()])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r}.") from None
        return cls(grid)

    def copy(self) -> "Board":
        return Board([row[:] for row in self.grid])

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        # Whole grid, not just the top row: boards built by hand may have gaps.
        return all(p is not None for row in self.grid for p in row)

    def place(self, col: Move, player: Player) -> Coord:
        c = int(col)
        if c < 0 or c >= self.cols:
            logger.debug("Rejected column %d for %s: out of range", c, player.value)
            raise InvalidInput(f"Column must be between 1 and {self.cols}.")

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = player
                logger.debug("Player %s placed at (%d, %d)", player.value, r, c)
                return r, c

        logger.debug("Rejected column %d for %s: full", c, player.value)
        raise ColumnFull(f"Column {c + 1} is full.")
