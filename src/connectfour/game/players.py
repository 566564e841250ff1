from __future__ import annotations
from typing import Protocol

from connectfour.game.state import GameState
from connectfour.types import Move


class MoveSource(Protocol):
    """
    Anything that can pick a column for the player to move.

    choose_move may raise InvalidInput for unusable input; the turn loop
    reports it and asks the same source again.
    """

    name: str

    def choose_move(self, state: GameState) -> Move:
        ...
