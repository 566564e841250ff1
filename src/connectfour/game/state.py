from __future__ import annotations
from dataclasses import dataclass, field

from connectfour.core.board import Board
from connectfour.types import Player


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = Player.A
    last_status: str = "Player A starts."
