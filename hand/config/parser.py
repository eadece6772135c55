"""Settings resolution for hand.

Settings come from an explicit mapping, falling back to environment
variables and then to the defaults in ``Settings``.
"""

import logging
import os
from typing import Any, Mapping, Optional

from hand.errors import ConfigError

from .types import OutputMode, Settings

logger = logging.getLogger(__name__)

MODE_ENV_VAR = "HAND_OUTPUT"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def should_use_colors(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Determine if SGR styling should be emitted.

    Styling is on unless NO_COLOR is set; FORCE_COLOR turns it back on.
    """
    env = os.environ if environ is None else environ

    if "FORCE_COLOR" in env:
        return True

    if "NO_COLOR" in env:
        return False

    return True


def parse_mode(value: Any) -> OutputMode:
    """Parse an output mode from an OutputMode or its name.

    Raises:
        ConfigError: If the value is not a known mode
    """
    if isinstance(value, OutputMode):
        return value
    try:
        return OutputMode(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in OutputMode)
        raise ConfigError(f"Invalid output mode {value!r}, expected one of: {choices}") from None


def parse_bool(value: Any, key: str) -> bool:
    """Parse a boolean setting given as a bool or a string like "yes"/"off"."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"Invalid value for {key}: {value!r}")


def _mode_from_env(env: Mapping[str, str]) -> OutputMode:
    raw = env.get(MODE_ENV_VAR)
    if not raw:
        return OutputMode.LIVE
    try:
        return parse_mode(raw)
    except ConfigError as e:
        logger.warning("Ignoring %s: %s", MODE_ENV_VAR, e)
        return OutputMode.LIVE


def load_settings(
    config: Optional[Mapping[str, Any]] = None, environ: Optional[Mapping[str, str]] = None
) -> Settings:
    """Resolve output settings.

    Args:
        config: Optional mapping with "mode" and/or "colors" keys
        environ: Environment to read instead of os.environ

    Returns:
        Settings: The resolved settings

    Raises:
        ConfigError: If the mapping holds an unknown key or an invalid value
    """
    config = dict(config or {})
    env = os.environ if environ is None else environ

    unknown = set(config) - {"mode", "colors"}
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    if "mode" in config:
        mode = parse_mode(config["mode"])
    else:
        mode = _mode_from_env(env)

    if "colors" in config:
        colors = parse_bool(config["colors"], "colors")
    else:
        colors = should_use_colors(env)

    settings = Settings(mode=mode, colors=colors)
    logger.debug("Output settings resolved: %s", settings)
    return settings
