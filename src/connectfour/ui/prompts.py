from __future__ import annotations

from connectfour.errors import InvalidInput
from connectfour.types import Move


def parse_move(raw: str, cols: int) -> Move:
    """Turn a 1-based column typed by a person into a 0-based Move."""
    s = raw.strip()
    digits = s[1:] if s[:1] in ("+", "-") else s
    if not digits.isdecimal():
        raise InvalidInput(f"Invalid input. Enter a number from 1 to {cols}.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise InvalidInput(f"Column must be between 1 and {cols}.")
    return Move(col)
