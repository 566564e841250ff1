from __future__ import annotations

import argparse
import logging
import sys

from connectfour import config
from connectfour.game.controller import run_game
from connectfour.ui.human import HumanPlayer


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour", description="Two-player Connect Four in the terminal.")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        default=config.LOG_LEVEL,
        choices=config.LOG_LEVELS,
        help="Logging level for diagnostics on stderr",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT, stream=sys.stderr)
    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False

    print("Welcome to Connect Four!")
    try:
        outcome = run_game(HumanPlayer(), HumanPlayer())
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        return 1

    print(outcome.message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
