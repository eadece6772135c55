"""Tests for the emission sinks."""

import io
import logging

import pytest

from hand.errors import SinkWriteError
from hand.output import Printer
from hand.output.sinks import CapturedSink, LiveSink


def test_captured_sink_returns_text():
    """The captured sink performs no I/O."""
    assert CapturedSink().emit("\x1b[2m[s]\x1b[0m text\n") == "\x1b[2m[s]\x1b[0m text\n"


def test_live_sink_writes_once(mocker):
    """A line is handed to the stream in a single write."""
    stream = mocker.MagicMock()
    LiveSink(stream).emit("one line\n")
    stream.write.assert_called_once_with("one line\n")


def test_live_sink_keeps_escape_codes():
    """Styling survives even though the stream is not a terminal."""
    stream = io.StringIO()
    assert LiveSink(stream).emit("\x1b[1;94mℹ\x1b[0m x") is None
    assert stream.getvalue() == "\x1b[1;94mℹ\x1b[0m x"


def test_live_sink_defaults_to_stderr(capsys):
    """Without a file the sink writes to stderr."""
    LiveSink().emit("to stderr\n")
    captured = capsys.readouterr()
    assert captured.err == "to stderr\n"
    assert captured.out == ""


def test_live_sink_uses_click_echo(mocker):
    """Writes go through click with colors forced on and no extra newline."""
    mock_echo = mocker.patch("hand.output.sinks.click.echo")
    LiveSink().emit("text")
    mock_echo.assert_called_once_with("text", file=None, nl=False, err=True, color=True)


def test_broken_stream_raises(caplog, mocker):
    """A failing stream is reported to the caller, not retried."""
    stream = mocker.MagicMock()
    stream.write.side_effect = BrokenPipeError("pipe closed")

    with caplog.at_level(logging.ERROR, logger="hand.output.sinks"):
        with pytest.raises(SinkWriteError) as exc_info:
            LiveSink(stream).emit("lost\n")

    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, BrokenPipeError)
    assert stream.write.call_count == 1
    assert "Failed to write status line" in caplog.text


def test_closed_stream_raises():
    """Writing to a closed file surfaces as SinkWriteError."""
    stream = io.StringIO()
    stream.close()
    printer = Printer(LiveSink(stream), config={"colors": True})
    with pytest.raises(SinkWriteError):
        printer.errorln("nowhere to go")
