"""Shared fixtures for hand tests."""

import pytest

from hand.output import CapturedSink, LiveSink, Printer

INFO_HEAD = "\x1b[1;94mℹ\x1b[0m"
WARN_HEAD = "\x1b[1;33m⚠️\x1b[0m"
ERROR_HEAD = "\x1b[1;91m❌\x1b[0m"
SUCCESS_HEAD = "\x1b[1;92m✅\x1b[0m"
WAIT_HEAD = "\x1b[1;35m⌛\x1b[0m"
INPUT_HEAD = "⌨️"

HEADS = {
    "info": INFO_HEAD,
    "warn": WARN_HEAD,
    "error": ERROR_HEAD,
    "success": SUCCESS_HEAD,
    "wait": WAIT_HEAD,
    "input": INPUT_HEAD,
}


def dim(text):
    return f"\x1b[2m{text}\x1b[0m"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's color and mode settings out of the tests."""
    for var in ("NO_COLOR", "FORCE_COLOR", "HAND_OUTPUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def captured():
    """A printer that returns rendered lines, with styling on."""
    return Printer(CapturedSink(), config={"colors": True})


@pytest.fixture
def live():
    """A printer that writes rendered lines to stderr, with styling on."""
    return Printer(LiveSink(), config={"colors": True})
