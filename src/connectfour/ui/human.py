from __future__ import annotations
from typing import Callable, Optional

from connectfour.game.state import GameState
from connectfour.types import Move
from connectfour.ui.prompts import parse_move


class HumanPlayer:
    name = "Human"

    def __init__(self, read: Optional[Callable[[str], str]] = None) -> None:
        self._read = read if read is not None else input

    def choose_move(self, state: GameState) -> Move:
        raw = self._read(f"Player {state.current.value}, enter a column (1-{state.board.cols}): ")
        return parse_move(raw, state.board.cols)
