from __future__ import annotations
from typing import Dict

from connectfour import config
from connectfour.types import Cell, Player

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

PIECE_COLORS: Dict[Player, str] = {
    Player.A: FG_RED,
    Player.B: FG_YELLOW,
}


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"


def piece(cell: Cell) -> str:
    """One board cell as a single coloured character; '_' when empty."""
    if cell is None:
        return c("_", FG_GRAY)
    return c(cell.value, PIECE_COLORS[cell])


def reverse(s: str) -> str:
    return c(s, REVERSE)
