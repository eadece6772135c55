"""Error types for hand."""

from typing import Optional


class HandError(Exception):
    """Base class for all hand errors."""


class TemplateError(HandError, ValueError):
    """Raised when a message template cannot be rendered."""

    def __init__(self, message: str, template: Optional[str] = None):
        self.template = template
        super().__init__(message)


class TemplateArityError(TemplateError):
    """Raised when placeholders and arguments do not line up."""

    def __init__(self, template: str, expected: int, received: int, unused: int = 0):
        self.expected = expected
        self.received = received
        self.unused = unused
        message = f"Template {template!r} expects {expected} argument(s), got {received}"
        if unused:
            message += f" ({unused} placeholder index(es) never referenced)"
        super().__init__(message, template=template)


class UnknownMarkError(HandError, KeyError):
    """Raised when a mark is looked up by a name that does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0]) if self.args else ""


class SinkWriteError(HandError, OSError):
    """Raised when the live sink fails to write to the diagnostic stream."""


class ConfigError(HandError, ValueError):
    """Raised for an invalid explicit configuration value."""
