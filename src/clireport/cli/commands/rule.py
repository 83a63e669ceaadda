"""CLI command printing a single horizontal rule."""

import sys
from typing import Optional

from clireport.domain.exceptions import ReportError
from clireport.services.composite.reporter import Reporter


def cmd_rule(
    reporter: Reporter,
    char: Optional[str] = None,
    width: Optional[int] = None,
    color: Optional[str] = None,
    bold: bool = False,
) -> int:
    """Print a horizontal rule.

    Args:
        reporter: Reporter writing to the output sink
        char: Rule character, or None for the configured default
        width: Rule width, or None for the configured default
        color: Optional color name
        bold: Whether to render bold

    Returns:
        Exit code (0 for success, 1 for invalid options)
    """
    options = {"color": color, "bold": bold}
    if char is not None:
        options["char"] = char
    if width is not None:
        options["width"] = width

    try:
        reporter.horizontal_rule(**options)
        return 0
    except ReportError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
