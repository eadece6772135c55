"""Configuration type definitions for hand."""

from dataclasses import dataclass
from enum import Enum


class OutputMode(Enum):
    """Where the default printer sends rendered lines."""

    LIVE = "live"  # write to stderr, return None
    CAPTURED = "captured"  # return the rendered string


@dataclass(frozen=True)
class Settings:
    """Resolved output settings."""

    mode: OutputMode = OutputMode.LIVE
    colors: bool = True
