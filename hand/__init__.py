"""
hand: styled status lines for command-line tools.

Every entry point renders ``[scope] <mark> <message>`` and sends it to the
default printer's sink: written to stderr in live mode, returned as a string
in captured mode. The mode is read once from HAND_OUTPUT when the package is
imported; ``configure`` rebuilds the default printer.
"""

import logging
from typing import Any, Dict, Optional

from .config import OutputMode, Settings, load_settings
from .errors import (
    ConfigError,
    HandError,
    SinkWriteError,
    TemplateArityError,
    TemplateError,
    UnknownMarkError,
)
from .output import MARKS, Mark, MarkKind, Printer, Style, format_text, lookup
from .output.marks import ERROR, INFO, INPUT, SUCCESS, WAIT, WARN
from .output.sinks import CapturedSink, LiveSink

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.2.0"

# Printers for each mode, independent of the configured default
live = Printer(LiveSink())
captured = Printer(CapturedSink())

# Default printer for the module-level functions
printer = Printer()

custom = printer.custom
customln = printer.customln
scopecustom = printer.scopecustom
scopecustomln = printer.scopecustomln

info = printer.info
infoln = printer.infoln
scopeinfo = printer.scopeinfo
scopeinfoln = printer.scopeinfoln

warn = printer.warn
warnln = printer.warnln
scopewarn = printer.scopewarn
scopewarnln = printer.scopewarnln

error = printer.error
errorln = printer.errorln
scopeerror = printer.scopeerror
scopeerrorln = printer.scopeerrorln

success = printer.success
successln = printer.successln
scopesuccess = printer.scopesuccess
scopesuccessln = printer.scopesuccessln

wait = printer.wait
waitln = printer.waitln
scopewait = printer.scopewait
scopewaitln = printer.scopewaitln

input = printer.input
inputln = printer.inputln
scopeinput = printer.scopeinput
scopeinputln = printer.scopeinputln

_ENTRY_POINTS = (
    "custom", "customln", "scopecustom", "scopecustomln",
    "info", "infoln", "scopeinfo", "scopeinfoln",
    "warn", "warnln", "scopewarn", "scopewarnln",
    "error", "errorln", "scopeerror", "scopeerrorln",
    "success", "successln", "scopesuccess", "scopesuccessln",
    "wait", "waitln", "scopewait", "scopewaitln",
    "input", "inputln", "scopeinput", "scopeinputln",
)


def configure(config: Optional[Dict[str, Any]] = None) -> Printer:
    """Rebuild the default printer and rebind the module-level functions.

    Names imported with ``from hand import info`` before the call keep the
    previous printer.

    Args:
        config: Optional configuration ("mode", "colors"); unset keys fall
            back to the environment

    Returns:
        Printer: The new default printer
    """
    global printer

    printer = Printer(config=config)
    globals().update({name: getattr(printer, name) for name in _ENTRY_POINTS})
    return printer


__all__ = [
    "CapturedSink",
    "ConfigError",
    "ERROR",
    "HandError",
    "INFO",
    "INPUT",
    "LiveSink",
    "MARKS",
    "Mark",
    "MarkKind",
    "OutputMode",
    "Printer",
    "SUCCESS",
    "Settings",
    "SinkWriteError",
    "Style",
    "TemplateArityError",
    "TemplateError",
    "UnknownMarkError",
    "WAIT",
    "WARN",
    "captured",
    "configure",
    "format_text",
    "live",
    "load_settings",
    "lookup",
    "printer",
    *_ENTRY_POINTS,
]
