"""
Printer for status lines.

This module provides the Printer class, which binds the rendering
functions to a sink and exposes one entry point per mark kind, scope
and newline variant.
"""

import logging
from typing import Any, Dict, Optional

from hand.config import OutputMode, Settings, load_settings

from .formatters import Head, render, render_scoped, renderln, render_scopedln
from .marks import MARKS, MarkKind
from .sinks import CapturedSink, LiveSink, Sink

logger = logging.getLogger(__name__)


def sink_for_mode(mode: OutputMode) -> Sink:
    """Build the sink matching an output mode."""
    if mode is OutputMode.CAPTURED:
        return CapturedSink()
    return LiveSink()


class Printer:
    """Render status lines and hand them to a sink.

    With a LiveSink every method writes to stderr and returns None; with a
    CapturedSink every method returns the rendered string instead.
    """

    def __init__(self, sink: Optional[Sink] = None, config: Optional[Dict[str, Any]] = None):
        """Initialize the printer.

        Args:
            sink: Destination for rendered lines; defaults to the sink for the
                configured mode
            config: Optional configuration ("mode", "colors"), see load_settings
        """
        self.settings: Settings = load_settings(config)
        self.sink: Sink = sink if sink is not None else sink_for_mode(self.settings.mode)
        logger.debug("Printer created with %r (colors=%s)", self.sink, self.settings.colors)

    @property
    def colors(self) -> bool:
        return self.settings.colors

    def _emit(self, text: str):
        return self.sink.emit(text)

    # Generic entry points

    def custom(self, head: Head, template, *args: Any):
        """Print ``head message`` with no trailing newline.

        Args:
            head: Glyph text (styled or not), a Mark or a MarkKind
            template: Message template, ``{}`` placeholders
            *args: Placeholder values
        """
        return self._emit(render(head, template, *args, colors=self.colors))

    def customln(self, head: Head, template, *args: Any):
        """Print ``head message`` followed by a newline."""
        return self._emit(renderln(head, template, *args, colors=self.colors))

    def scopecustom(self, scope, head: Head, template, *args: Any):
        """Print ``[scope] head message`` with no trailing newline.

        Args:
            scope: Label shown dimmed in brackets
            head: Glyph text (styled or not), a Mark or a MarkKind
            template: Message template, ``{}`` placeholders
            *args: Placeholder values
        """
        return self._emit(render_scoped(scope, head, template, *args, colors=self.colors))

    def scopecustomln(self, scope, head: Head, template, *args: Any):
        """Print ``[scope] head message`` followed by a newline."""
        return self._emit(render_scopedln(scope, head, template, *args, colors=self.colors))

    # Info

    def info(self, template, *args: Any):
        """Print an info line."""
        return self.custom(MARKS[MarkKind.INFO], template, *args)

    def infoln(self, template, *args: Any):
        """Print an info line followed by a newline."""
        return self.customln(MARKS[MarkKind.INFO], template, *args)

    def scopeinfo(self, scope, template, *args: Any):
        """Print an info line under a scope label, with no trailing newline."""
        return self.scopecustom(scope, MARKS[MarkKind.INFO], template, *args)

    def scopeinfoln(self, scope, template, *args: Any):
        """Print an info line under a scope label, followed by a newline."""
        return self.scopecustomln(scope, MARKS[MarkKind.INFO], template, *args)

    # Warn

    def warn(self, template, *args: Any):
        """Print a warning line."""
        return self.custom(MARKS[MarkKind.WARN], template, *args)

    def warnln(self, template, *args: Any):
        """Print a warning line followed by a newline."""
        return self.customln(MARKS[MarkKind.WARN], template, *args)

    def scopewarn(self, scope, template, *args: Any):
        """Print a warning line under a scope label, with no trailing newline."""
        return self.scopecustom(scope, MARKS[MarkKind.WARN], template, *args)

    def scopewarnln(self, scope, template, *args: Any):
        """Print a warning line under a scope label, followed by a newline."""
        return self.scopecustomln(scope, MARKS[MarkKind.WARN], template, *args)

    # Error

    def error(self, template, *args: Any):
        """Print an error line."""
        return self.custom(MARKS[MarkKind.ERROR], template, *args)

    def errorln(self, template, *args: Any):
        """Print an error line followed by a newline."""
        return self.customln(MARKS[MarkKind.ERROR], template, *args)

    def scopeerror(self, scope, template, *args: Any):
        """Print an error line under a scope label, with no trailing newline."""
        return self.scopecustom(scope, MARKS[MarkKind.ERROR], template, *args)

    def scopeerrorln(self, scope, template, *args: Any):
        """Print an error line under a scope label, followed by a newline."""
        return self.scopecustomln(scope, MARKS[MarkKind.ERROR], template, *args)

    # Success

    def success(self, template, *args: Any):
        """Print a success line."""
        return self.custom(MARKS[MarkKind.SUCCESS], template, *args)

    def successln(self, template, *args: Any):
        """Print a success line followed by a newline."""
        return self.customln(MARKS[MarkKind.SUCCESS], template, *args)

    def scopesuccess(self, scope, template, *args: Any):
        """Print a success line under a scope label, with no trailing newline."""
        return self.scopecustom(scope, MARKS[MarkKind.SUCCESS], template, *args)

    def scopesuccessln(self, scope, template, *args: Any):
        """Print a success line under a scope label, followed by a newline."""
        return self.scopecustomln(scope, MARKS[MarkKind.SUCCESS], template, *args)

    # Wait

    def wait(self, template, *args: Any):
        """Print a waiting line, typically left open for a later result."""
        return self.custom(MARKS[MarkKind.WAIT], template, *args)

    def waitln(self, template, *args: Any):
        """Print a waiting line followed by a newline."""
        return self.customln(MARKS[MarkKind.WAIT], template, *args)

    def scopewait(self, scope, template, *args: Any):
        """Print a waiting line under a scope label, with no trailing newline."""
        return self.scopecustom(scope, MARKS[MarkKind.WAIT], template, *args)

    def scopewaitln(self, scope, template, *args: Any):
        """Print a waiting line under a scope label, followed by a newline."""
        return self.scopecustomln(scope, MARKS[MarkKind.WAIT], template, *args)

    # Input

    def input(self, template, *args: Any):
        """Print an input prompt line. Does not read anything."""
        return self.custom(MARKS[MarkKind.INPUT], template, *args)

    def inputln(self, template, *args: Any):
        """Print an input prompt line followed by a newline."""
        return self.customln(MARKS[MarkKind.INPUT], template, *args)

    def scopeinput(self, scope, template, *args: Any):
        """Print an input prompt line under a scope label, with no trailing newline."""
        return self.scopecustom(scope, MARKS[MarkKind.INPUT], template, *args)

    def scopeinputln(self, scope, template, *args: Any):
        """Print an input prompt line under a scope label, followed by a newline."""
        return self.scopecustomln(scope, MARKS[MarkKind.INPUT], template, *args)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(sink={self.sink!r}, settings={self.settings!r})"
