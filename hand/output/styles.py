"""
Style definitions for status output.

This module defines the SGR codes and the Style type used to decorate
mark glyphs and scope labels.
"""

from dataclasses import dataclass
from typing import List, Optional

from hand.config import should_use_colors

ESC = "\x1b"


class Color:
    """SGR parameter codes for terminal output."""
    RESET = "0"
    BOLD = "1"
    DIM = "2"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    GRAY = "90"
    BRIGHT_RED = "91"
    BRIGHT_GREEN = "92"
    BRIGHT_YELLOW = "93"
    BRIGHT_BLUE = "94"
    BRIGHT_MAGENTA = "95"
    BRIGHT_CYAN = "96"


RESET = f"{ESC}[{Color.RESET}m"


def get_color_code(color_name: Optional[str]) -> str:
    """Get the SGR code for a named color, e.g. ``"bright_blue"``."""
    if not color_name:
        return ""
    code = getattr(Color, color_name.upper(), None)
    if code is None:
        raise ValueError(f"Unknown color: {color_name}")
    return code


@dataclass(frozen=True)
class Style:
    """An immutable SGR style: optional color plus bold/dim attributes."""

    color: Optional[str] = None
    bold: bool = False
    dim: bool = False

    @property
    def codes(self) -> List[str]:
        codes = []
        if self.bold:
            codes.append(Color.BOLD)
        if self.dim:
            codes.append(Color.DIM)
        if self.color:
            codes.append(get_color_code(self.color))
        return codes

    @property
    def prefix(self) -> str:
        """The opening escape sequence, or an empty string for a plain style."""
        codes = self.codes
        return f"{ESC}[{';'.join(codes)}m" if codes else ""

    def apply(self, text, colors: bool = True) -> str:
        """Wrap text in this style's escape sequence and a reset.

        Args:
            text: The text to style
            colors: When False the text is returned undecorated

        Returns:
            Styled text
        """
        prefix = self.prefix
        if not colors or not prefix:
            return str(text)
        return f"{prefix}{text}{RESET}"

    __call__ = apply


DIM = Style(dim=True)


def format_text(
    text, color: Optional[str] = None, bold: bool = False, dim: bool = False, colors: Optional[bool] = None
) -> str:
    """Format text with a color and attributes.

    Args:
        text: The text to format
        color: Color name (e.g., "bright_red", "yellow")
        bold: Whether to make the text bold
        dim: Whether to make the text dim
        colors: Whether SGR styling is enabled; None follows NO_COLOR/FORCE_COLOR

    Returns:
        Formatted text
    """
    if colors is None:
        colors = should_use_colors()
    return Style(color=color, bold=bold, dim=dim).apply(text, colors=colors)
