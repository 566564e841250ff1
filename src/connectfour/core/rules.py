# src/connectfour/core/rules.py

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from connectfour.config import ROWS, COLS, CONNECT_N
from connectfour.core.board import Board
from connectfour.types import Coord, Player

logger = logging.getLogger(__name__)

N = CONNECT_N


class Status(Enum):
    OPEN = "open"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[Player] = None
    line: Tuple[Coord, ...] = ()

    @property
    def is_over(self) -> bool:
        return self.status is not Status.OPEN

    @property
    def message(self) -> str:
        if self.status is Status.WIN:
            return f"Player {self.winner.value} wins"
        if self.status is Status.DRAW:
            return "Draw"
        return ""


OPEN = Outcome(Status.OPEN)
DRAW = Outcome(Status.DRAW)


def _run(board: Board, r: int, c: int, dr: int, dc: int) -> Optional[Tuple[Player, Tuple[Coord, ...]]]:
    g = board.grid
    p = g[r][c]
    if p is None:
        return None
    line = tuple((r + i * dr, c + i * dc) for i in range(N))
    if all(g[rr][cc] == p for rr, cc in line[1:]):
        return p, line
    return None


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, Tuple[Coord, ...]]]:
    # Vertical
    for c in range(COLS):
        for r in range(ROWS - N + 1):
            hit = _run(board, r, c, 1, 0)
            if hit:
                return hit

    # Horizontal
    for r in range(ROWS):
        for c in range(COLS - N + 1):
            hit = _run(board, r, c, 0, 1)
            if hit:
                return hit

    # Diagonal down-right
    for r in range(ROWS - N + 1):
        for c in range(COLS - N + 1):
            hit = _run(board, r, c, 1, 1)
            if hit:
                return hit

    # Diagonal up-right
    for r in range(N - 1, ROWS):
        for c in range(COLS - N + 1):
            hit = _run(board, r, c, -1, 1)
            if hit:
                return hit

    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None


def evaluate(board: Board) -> Outcome:
    """
    Classify the board as won, drawn or still open.

    Emptiness comes from a scan of the whole grid, so an empty cell that no
    alignment run starts from still keeps the game open.
    """
    hit = check_winner_with_line(board)
    if hit:
        player, line = hit
        outcome = Outcome(Status.WIN, player, line)
    elif board.is_full():
        outcome = DRAW
    else:
        outcome = OPEN
    logger.debug("Evaluated board: %s", outcome.status.value)
    return outcome
