"""
Status line output for hand.

This module provides the mark registry, the rendering functions and the
Printer that binds them to a sink.
"""

from .formatters import (
    format_message,
    format_scope,
    render,
    render_scoped,
    render_scopedln,
    renderln,
    with_newline,
    wrap_scope,
)
from .manager import Printer, sink_for_mode
from .marks import MARKS, Mark, MarkKind, lookup
from .sinks import CapturedSink, LiveSink, Sink
from .styles import Style, format_text

__all__ = [
    'CapturedSink',
    'LiveSink',
    'MARKS',
    'Mark',
    'MarkKind',
    'Printer',
    'Sink',
    'Style',
    'format_message',
    'format_scope',
    'format_text',
    'lookup',
    'render',
    'render_scoped',
    'render_scopedln',
    'renderln',
    'sink_for_mode',
    'with_newline',
    'wrap_scope',
]
