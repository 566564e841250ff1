# src/connectfour/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType, Optional, Tuple


class Player(str, Enum):
    A = "A"
    B = "B"

    @property
    def other(self) -> "Player":
        return Player.B if self is Player.A else Player.A


Cell = Optional[Player]        # None is an empty cell
Move = NewType("Move", int)    # column index 0..6
Coord = Tuple[int, int]        # (row, col), row 0 at the top
