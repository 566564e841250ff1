from __future__ import annotations

import pytest

from connectfour import config
from connectfour.core.board import Board
from connectfour.errors import InvalidInput
from connectfour.types import Player
from connectfour.ui.colors import FG_RED, FG_YELLOW, REVERSE, piece
from connectfour.ui.prompts import parse_move
from connectfour.ui.render import format_board, render


@pytest.mark.parametrize("raw, expected", [("1", 0), ("7", 6), (" 4 \n", 3)])
def test_parse_move_converts_to_zero_based(raw, expected):
    assert parse_move(raw, 7) == expected


@pytest.mark.parametrize("raw", ["0", "8", "-1", "", "abc", "3.5", "²", "--5", "+-3", "-+2", "+"])
def test_parse_move_rejects_bad_input(raw):
    with pytest.raises(InvalidInput):
        parse_move(raw, 7)


def test_format_board_labels_rows_and_columns():
    board = Board.from_rows(["......."] * 5 + ["AB....."])
    lines = format_board(board).splitlines()
    assert lines[0] == "#   1 2 3 4 5 6 7"
    assert lines[1] == "A | _ _ _ _ _ _ _ |"
    assert lines[6] == "F | A B _ _ _ _ _ |"
    assert len(lines) == 7


def test_highlight_uses_reverse_video_when_colored(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", True)
    board = Board.from_rows(["......."] * 5 + ["AAAA..."])
    text = format_board(board, highlight=[(5, 0), (5, 1), (5, 2), (5, 3)])
    assert text.splitlines()[6].count(REVERSE) == 4


def test_render_prints_status_and_grid(capsys):
    render(Board(), "Player A starts.")
    out = capsys.readouterr().out
    assert "CONNECT FOUR" in out
    assert "Player A starts." in out
    assert "F | _ _ _ _ _ _ _ |" in out
    assert "\033[" not in out


def test_single_leading_sign_is_allowed():
    assert parse_move("+3", 7) == 2


def test_piece_colors_follow_player(monkeypatch):
    assert [piece(None), piece(Player.A), piece(Player.B)] == ["_", "A", "B"]
    monkeypatch.setattr(config, "USE_COLOR", True)
    assert piece(Player.A).startswith(FG_RED)
    assert piece(Player.B).startswith(FG_YELLOW)
