from __future__ import annotations
from typing import Iterable, List, Optional, Set

from connectfour import config
from connectfour.core.board import Board
from connectfour.types import Coord
from connectfour.ui.colors import c, piece, reverse, BOLD, DIM, FG_CYAN

ROW_LABELS = "ABCDEF"


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def format_board(board: Board, highlight: Optional[Iterable[Coord]] = None) -> str:
    """
    Text grid with column numbers across the top and row letters down the side:

        #   1 2 3 4 5 6 7
        A | _ _ _ _ _ _ _ |
        ...
        F | _ _ _ A B _ _ |
    """
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines: List[str] = [c("#   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = []
        for col in range(board.cols):
            p = piece(board.grid[r][col])
            if (r, col) in hl:
                p = reverse(p)
            parts.append(p)
        lines.append(f"{ROW_LABELS[r]} | " + " ".join(parts) + " |")
    return "\n".join(lines)


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT FOUR", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(format_board(board, highlight))
    print(c(f"    Enter 1-{board.cols} to drop a piece.", DIM))
