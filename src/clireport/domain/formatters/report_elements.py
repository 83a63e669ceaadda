"""Report elements shared by the layout, table and section formatters.

These classes describe what is rendered (text, widths, alignment, styling)
without any rendering logic. The layout engine and table engine know how to
turn them into terminal lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from clireport.domain.constants import DEFAULT_WIDTH
from clireport.domain.exceptions import ConfigurationError


class Alignment(Enum):
    """Horizontal placement of text inside a fixed width."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, value: Any) -> Alignment:
        """Resolve an alignment from an enum member or a case-insensitive name.

        Args:
            value: Alignment member or string such as "Center"

        Returns:
            Matching Alignment member

        Raises:
            ConfigurationError: If the value does not name an alignment
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(member.value for member in cls)
        raise ConfigurationError(f"Invalid align value {value!r}, expected one of: {valid}")


class Color(Enum):
    """Named foreground colors, valued by their ANSI SGR code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37

    @classmethod
    def parse(cls, value: Any) -> Color:
        """Resolve a color from an enum member or a case-insensitive name.

        Raises:
            ConfigurationError: If the value does not name a known color
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        valid = ", ".join(name.lower() for name in cls.__members__)
        raise ConfigurationError(f"Invalid color {value!r}, expected one of: {valid}")


@dataclass(frozen=True)
class LineSpec:
    """A single line of text to be aligned inside a width.

    Attributes:
        text: The text content
        width: Target width in characters
        align: Placement of the text inside the width
        color: Optional foreground color
        bold: Whether the line is rendered bold
    """

    text: str
    width: int = DEFAULT_WIDTH
    align: Alignment = Alignment.LEFT
    color: Optional[Color] = None
    bold: bool = False


@dataclass(frozen=True)
class Column:
    """A table cell as appended by the caller.

    A column without a width is implicit: its width is derived from the
    table width left over after explicit columns, split evenly.

    Attributes:
        content: Cell text
        width: Explicit width, or None for an implicit column
        align: Placement of the text inside the cell
        color: Optional foreground color
        bold: Whether the cell is rendered bold
        padding: Spaces kept on each side of the content inside the width
    """

    content: str
    width: Optional[int] = None
    align: Alignment = Alignment.LEFT
    color: Optional[Color] = None
    bold: bool = False
    padding: int = 0

    @property
    def is_implicit(self) -> bool:
        return self.width is None


@dataclass(frozen=True)
class ReportSection:
    """An entered report section.

    Attributes:
        title: Section message as written when the section was entered
        depth: Nesting level, 0 for a top-level section
    """

    title: str
    depth: int = 0
