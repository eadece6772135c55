"""Tests for the mark registry and styles."""

import dataclasses

import pytest

import hand
from hand.errors import UnknownMarkError
from hand.output import CapturedSink, Printer
from hand.output.marks import MARKS, Mark, MarkKind, lookup
from hand.output.styles import DIM, Style, format_text, get_color_code

from .conftest import ERROR_HEAD, HEADS, INFO_HEAD, INPUT_HEAD, SUCCESS_HEAD, WAIT_HEAD, WARN_HEAD


@pytest.mark.parametrize("kind", list(MarkKind))
def test_lookup_is_total(kind):
    """Every kind has a registered mark."""
    mark = lookup(kind)
    assert mark.kind is kind
    assert mark.head == HEADS[kind.value]


def test_lookup_by_name_is_case_insensitive():
    """Names resolve to the same registered mark."""
    assert lookup("info") is MARKS[MarkKind.INFO]
    assert lookup("WARN") is MARKS[MarkKind.WARN]


def test_lookup_unknown_name():
    """An unknown name raises a KeyError-compatible error."""
    with pytest.raises(UnknownMarkError) as exc_info:
        lookup("debug")
    assert isinstance(exc_info.value, KeyError)
    assert "debug" in str(exc_info.value)


def test_head_constants():
    """The exported heads carry the exact SGR sequences."""
    assert hand.INFO == INFO_HEAD
    assert hand.WARN == WARN_HEAD
    assert hand.ERROR == ERROR_HEAD
    assert hand.SUCCESS == SUCCESS_HEAD
    assert hand.WAIT == WAIT_HEAD
    assert hand.INPUT == INPUT_HEAD


def test_input_mark_has_no_style():
    """The input glyph is emitted without escape codes."""
    mark = MARKS[MarkKind.INPUT]
    assert mark.style is None
    assert "\x1b" not in mark.head


def test_registry_is_read_only():
    """Neither the mapping nor the marks can be modified."""
    with pytest.raises(TypeError):
        MARKS[MarkKind.INFO] = Mark(MarkKind.INFO, "i")  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        MARKS[MarkKind.INFO].glyph = "i"  # type: ignore[misc]


def test_mark_render_without_colors():
    """With styling disabled a mark renders as its bare glyph."""
    assert MARKS[MarkKind.ERROR].render(colors=False) == "❌"
    assert str(MARKS[MarkKind.SUCCESS]) == SUCCESS_HEAD


def test_style_combines_codes():
    """Attributes and color share one escape sequence."""
    assert Style("bright_blue", bold=True).apply("x") == "\x1b[1;94mx\x1b[0m"
    assert DIM("[scope]") == "\x1b[2m[scope]\x1b[0m"
    assert Style().apply("plain") == "plain"


def test_format_text():
    """format_text is a shortcut for building custom heads."""
    assert format_text("#", color="bright_yellow", bold=True) == "\x1b[1;93m#\x1b[0m"
    assert format_text("#", color="bright_yellow", bold=True, colors=False) == "#"


def test_format_text_follows_no_color(monkeypatch):
    """Custom heads stay plain under NO_COLOR, like the marks on the same line."""
    monkeypatch.setenv("NO_COLOR", "1")
    printer = Printer(CapturedSink())

    line = printer.scopecustomln("task", format_text("#", color="bright_yellow", bold=True), "x")

    assert line == "[task] # x\n"
    assert "\x1b" not in line
    assert format_text("#", bold=True, colors=True) == "\x1b[1m#\x1b[0m"


def test_format_text_force_color(monkeypatch):
    """FORCE_COLOR wins over NO_COLOR."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert format_text("#", color="bright_yellow", bold=True) == "\x1b[1;93m#\x1b[0m"


def test_unknown_color():
    """Unknown color names are rejected."""
    assert get_color_code(None) == ""
    with pytest.raises(ValueError):
        get_color_code("chartreuse")
