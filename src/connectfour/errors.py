# src/connectfour/errors.py

from __future__ import annotations


class GameError(ValueError):
    """Base for recoverable gameplay errors. The turn loop re-prompts on these."""


class InvalidInput(GameError):
    pass


class ColumnFull(GameError):
    pass
