# src/connectfour/config.py

from __future__ import annotations

import os
from typing import Mapping

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None and os.environ.get("TERM") != "dumb"
CLEAR_SCREEN = True

# Logging
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


def log_level_from_env(environ: Mapping[str, str] = os.environ) -> str:
    # Unknown names fall back to the default instead of failing at startup.
    level = environ.get("CONNECTFOUR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


LOG_LEVEL = log_level_from_env()
