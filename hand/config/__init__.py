"""Configuration for hand."""

from .parser import MODE_ENV_VAR, load_settings, parse_mode, should_use_colors
from .types import OutputMode, Settings

__all__ = ["MODE_ENV_VAR", "OutputMode", "Settings", "load_settings", "parse_mode", "should_use_colors"]
