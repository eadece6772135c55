"""
Emission sinks for rendered status lines.

A sink decides where a fully rendered line goes: the live sink writes it to
the diagnostic stream, the captured sink hands it back to the caller.
"""

import logging
from typing import IO, Optional

import click
from typing_extensions import Protocol

from hand.errors import SinkWriteError

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """Destination for rendered text."""

    def emit(self, text: str) -> Optional[str]:
        ...


class LiveSink:
    """Write each line to stderr (or the given file) in a single write."""

    def __init__(self, file: Optional[IO[str]] = None):
        self.file = file

    def emit(self, text: str) -> None:
        try:
            # color=True keeps the SGR codes even when stderr is not a terminal
            click.echo(text, file=self.file, nl=False, err=True, color=True)
        except (OSError, ValueError) as e:
            logger.error("Failed to write status line", extra={"error": str(e)}, exc_info=e)
            raise SinkWriteError(f"Failed to write to diagnostic stream: {e}") from e
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(file={self.file!r})"


class CapturedSink:
    """Return each line to the caller instead of writing it."""

    def emit(self, text: str) -> str:
        return text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
