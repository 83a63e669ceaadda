"""Option types accepted by the public render operations.

Each render operation takes a closed set of keyword options. The set is declared
once as a dataclass; parse_options rejects any key the dataclass does not
declare and the dataclass validates and normalizes the values.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from clireport.domain.constants import DEFAULT_SPACING, DEFAULT_TITLE
from clireport.domain.exceptions import ConfigurationError
from clireport.domain.formatters.report_elements import Alignment, Color

T = TypeVar("T")


def parse_options(option_type: Type[T], options: Mapping[str, Any], operation: str) -> T:
    """Build an option object, rejecting keys the operation does not know.

    Args:
        option_type: Dataclass declaring the recognized options
        options: Caller-supplied option mapping
        operation: Operation name used in error messages

    Returns:
        Validated option object

    Raises:
        ConfigurationError: If an unknown key is present or a value is invalid
    """
    allowed = [f.name for f in fields(option_type)]
    unknown = sorted(str(key) for key in options if key not in allowed)
    if unknown:
        raise ConfigurationError(
            f"Invalid option(s) for {operation}: {', '.join(unknown)}. "
            f"Valid options: {', '.join(allowed)}"
        )
    return option_type(**options)


def validate_width(value: Any, name: str = "width") -> int:
    """Ensure a width is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    return value


def validate_count(value: Any, name: str) -> int:
    """Ensure a count (spacing, padding, indent) is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def validate_flag(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{name} must be true or false, got {value!r}")
    return value


def validate_text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{name} must be a string, got {value!r}")
    return value


def validate_rule_char(value: Any, name: str = "char") -> str:
    """Ensure a rule character is exactly one printable character."""
    if not isinstance(value, str) or len(value) != 1 or not value.isprintable():
        raise ConfigurationError(f"{name} must be a single printable character, got {value!r}")
    return value


def optional_color(value: Any) -> Optional[Color]:
    if value is None:
        return None
    return Color.parse(value)


@dataclass
class StyleOptions:
    """Styling shared by every option type."""

    color: Optional[Union[str, Color]] = None
    bold: bool = False

    def __post_init__(self):
        self.color = optional_color(self.color)
        self.bold = validate_flag(self.bold, "bold")


@dataclass
class LineOptions(StyleOptions):
    """Options for a single aligned line."""

    width: Optional[int] = None
    align: Union[str, Alignment] = Alignment.LEFT

    def __post_init__(self):
        super().__post_init__()
        if self.width is not None:
            self.width = validate_width(self.width)
        self.align = Alignment.parse(self.align)


@dataclass
class RuleOptions(StyleOptions):
    """Options for horizontal_rule."""

    char: Optional[str] = None
    width: Optional[int] = None

    def __post_init__(self):
        super().__post_init__()
        if self.char is not None:
            self.char = validate_rule_char(self.char)
        if self.width is not None:
            self.width = validate_width(self.width)


@dataclass
class DatetimeOptions(LineOptions):
    """Options for datetime."""

    format: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if self.format is not None:
            self.format = validate_text(self.format, "format")


@dataclass
class HeaderOptions(LineOptions):
    """Options shared by header and footer."""

    title: Optional[str] = DEFAULT_TITLE
    spacing: int = DEFAULT_SPACING
    timestamp: bool = False
    rule: Union[bool, str] = False

    def __post_init__(self):
        super().__post_init__()
        if self.title is not None:
            self.title = validate_text(self.title, "title")
        self.spacing = validate_count(self.spacing, "spacing")
        self.timestamp = validate_flag(self.timestamp, "timestamp")
        if isinstance(self.rule, str):
            self.rule = validate_rule_char(self.rule, "rule")
        else:
            self.rule = validate_flag(self.rule, "rule")


@dataclass
class TableOptions:
    """Options for a table."""

    width: Optional[int] = None
    border: bool = False

    def __post_init__(self):
        if self.width is not None:
            self.width = validate_width(self.width)
        self.border = validate_flag(self.border, "border")


@dataclass
class RowOptions:
    """Options for a table row. color/bold become defaults for its columns."""

    header: bool = False
    color: Optional[Union[str, Color]] = None
    bold: Optional[bool] = None

    def __post_init__(self):
        self.header = validate_flag(self.header, "header")
        self.color = optional_color(self.color)
        if self.bold is not None:
            self.bold = validate_flag(self.bold, "bold")


@dataclass
class ColumnOptions:
    """Options for a table column.

    color and bold stay None when not given so row defaults can apply.
    """

    width: Optional[int] = None
    align: Union[str, Alignment] = Alignment.LEFT
    color: Optional[Union[str, Color]] = None
    bold: Optional[bool] = None
    padding: int = 0

    def __post_init__(self):
        if self.width is not None:
            self.width = validate_width(self.width)
        self.align = Alignment.parse(self.align)
        self.color = optional_color(self.color)
        if self.bold is not None:
            self.bold = validate_flag(self.bold, "bold")
        self.padding = validate_count(self.padding, "padding")


@dataclass
class NestedOptions(StyleOptions):
    """Options for a nested report section."""

    message: Optional[str] = None
    type: Optional[str] = None
    complete: Optional[str] = None
    indent_size: Optional[int] = None

    def __post_init__(self):
        super().__post_init__()
        if self.message is not None:
            self.message = validate_text(self.message, "message")
        if self.type is not None and self.type != "inline":
            raise ConfigurationError(f"type must be 'inline' when given, got {self.type!r}")
        if self.complete is not None:
            self.complete = validate_text(self.complete, "complete")
        if self.indent_size is not None:
            self.indent_size = validate_count(self.indent_size, "indent_size")


@dataclass
class ProgressOptions(StyleOptions):
    """Options for a progress report section."""

    indicator: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if self.indicator is not None:
            self.indicator = validate_text(self.indicator, "indicator")
