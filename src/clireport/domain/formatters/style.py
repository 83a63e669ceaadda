"""ANSI style wrapping for rendered lines."""

from typing import Any, List, Optional

from clireport.domain.formatters.report_elements import Color

ANSI_BOLD = "\x1b[1m"
ANSI_RESET = "\x1b[0m"


def color_code(color: Color) -> str:
    """Return the SGR escape sequence for a foreground color."""
    return f"\x1b[{color.value}m"


class StyleWrapper:
    """Wrap lines in ANSI bold/color escape sequences."""

    def __init__(self, enabled: bool = True):
        """Initialize the wrapper.

        Args:
            enabled: When False, colors are still validated but lines are
                returned without escape sequences
        """
        self.enabled = enabled

    def wrap(self, line: str, color: Optional[Any] = None, bold: bool = False) -> str:
        """Apply bold and/or color to a line.

        Bold precedes color and a single reset terminates the sequence.

        Args:
            line: Already padded line
            color: Color member or name, or None
            bold: Whether to render bold

        Returns:
            Styled line, or the line unchanged when no style is requested

        Raises:
            ConfigurationError: If color does not name a known color
        """
        resolved = Color.parse(color) if color is not None else None
        if not self.enabled or (resolved is None and not bold):
            return line

        codes: List[str] = []
        if bold:
            codes.append(ANSI_BOLD)
        if resolved is not None:
            codes.append(color_code(resolved))
        return f"{''.join(codes)}{line}{ANSI_RESET}"
