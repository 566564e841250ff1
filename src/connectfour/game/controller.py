from __future__ import annotations
import logging
from typing import Callable, Iterable, Optional

from connectfour.core.board import Board
from connectfour.core.rules import Outcome, evaluate
from connectfour.errors import GameError
from connectfour.game.players import MoveSource
from connectfour.game.state import GameState
from connectfour.types import Coord, Player
from connectfour.ui.render import render

logger = logging.getLogger(__name__)

Show = Callable[[Board, str, Optional[Iterable[Coord]]], None]


def _status_with_turn(status: str, current: Player) -> str:
    header = f"Turn: Player {current.value}"
    if status:
        return f"{header}\n{status}"
    return header


def run_game(
    player_a: MoveSource,
    player_b: MoveSource,
    board: Optional[Board] = None,
    first: Player = Player.A,
    show: Show = render,
) -> Outcome:
    """
    Alternate turns until the board is won or full and return the outcome.

    Bad columns (out of range, full, unparseable) are shown as the status line
    and the same player is asked again.
    """
    state = GameState(
        board=board if board is not None else Board(),
        current=first,
        last_status=f"Player {first.value} starts.",
    )

    while True:
        outcome = evaluate(state.board)
        if outcome.is_over:
            show(state.board, outcome.message, outcome.line)
            logger.info("Game over: %s", outcome.message)
            return outcome

        show(state.board, _status_with_turn(state.last_status, state.current), None)

        source = player_a if state.current is Player.A else player_b
        try:
            move = source.choose_move(state)
            _, col = state.board.place(move, state.current)
        except GameError as e:
            logger.info("Player %s move rejected: %s", state.current.value, e)
            state.last_status = str(e)
            continue

        state.last_status = (
            f"Player {state.current.value} dropped in column {col + 1}."
            f" Player {state.current.other.value}'s turn."
        )
        state.current = state.current.other
        logger.debug("Turn passes to Player %s", state.current.value)
