from __future__ import annotations

import pytest

from connectfour import config


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


@pytest.fixture
def draw_rows():
    # Full board with no four-in-a-row in any direction.
    return [
        "AABBAAB",
        "BBAABBA",
        "AABBAAB",
        "BBAABBA",
        "AABBAAB",
        "BBAABBA",
    ]
