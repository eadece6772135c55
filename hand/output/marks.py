"""
Mark registry.

Each mark kind is bound once, at import time, to a glyph and an optional
style. The registry is read-only.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from hand.errors import UnknownMarkError

from .styles import Style


class MarkKind(Enum):
    """Severity/category of a status line."""
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    SUCCESS = "success"
    WAIT = "wait"
    INPUT = "input"


@dataclass(frozen=True)
class Mark:
    """A glyph and the style it is rendered with."""

    kind: MarkKind
    glyph: str
    style: Optional[Style] = None

    def render(self, colors: bool = True) -> str:
        """Render the glyph, styled unless colors are disabled."""
        if self.style is None:
            return self.glyph
        return self.style.apply(self.glyph, colors=colors)

    @property
    def head(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.head


MARKS: Mapping[MarkKind, Mark] = MappingProxyType(
    {
        MarkKind.INFO: Mark(MarkKind.INFO, "ℹ", Style("bright_blue", bold=True)),
        MarkKind.WARN: Mark(MarkKind.WARN, "⚠️", Style("yellow", bold=True)),
        MarkKind.ERROR: Mark(MarkKind.ERROR, "❌", Style("bright_red", bold=True)),
        MarkKind.SUCCESS: Mark(MarkKind.SUCCESS, "✅", Style("bright_green", bold=True)),
        MarkKind.WAIT: Mark(MarkKind.WAIT, "⌛", Style("magenta", bold=True)),
        MarkKind.INPUT: Mark(MarkKind.INPUT, "⌨️"),
    }
)


def lookup(kind: Union[MarkKind, str]) -> Mark:
    """Look up the mark for a kind.

    Args:
        kind: A MarkKind or its name, case-insensitive ("info", "WARN", ...)

    Returns:
        The registered Mark

    Raises:
        UnknownMarkError: If a name does not match any kind
    """
    if isinstance(kind, MarkKind):
        return MARKS[kind]
    try:
        return MARKS[MarkKind(str(kind).lower())]
    except ValueError:
        raise UnknownMarkError(f"Unknown mark kind: {kind!r}") from None


# Rendered heads, as emitted with styling enabled
INFO = MARKS[MarkKind.INFO].head
WARN = MARKS[MarkKind.WARN].head
ERROR = MARKS[MarkKind.ERROR].head
SUCCESS = MARKS[MarkKind.SUCCESS].head
WAIT = MARKS[MarkKind.WAIT].head
INPUT = MARKS[MarkKind.INPUT].head
