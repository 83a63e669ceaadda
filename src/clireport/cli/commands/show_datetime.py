"""CLI command printing the current date and time."""

import sys
from typing import Optional

from clireport.domain.exceptions import ReportError
from clireport.services.composite.reporter import Reporter


def cmd_datetime(
    reporter: Reporter,
    fmt: Optional[str] = None,
    align: str = "left",
    width: Optional[int] = None,
    color: Optional[str] = None,
    bold: bool = False,
) -> int:
    """Print the current time as an aligned line.

    Args:
        reporter: Reporter writing to the output sink
        fmt: strftime pattern, or None for the configured default
        align: left, right or center
        width: Line width, or None for the configured default
        color: Optional color name
        bold: Whether to render bold

    Returns:
        Exit code (0 for success, 1 for invalid options)
    """
    options = {"align": align, "color": color, "bold": bold}
    if fmt is not None:
        options["format"] = fmt
    if width is not None:
        options["width"] = width

    try:
        reporter.datetime(**options)
        return 0
    except ReportError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
