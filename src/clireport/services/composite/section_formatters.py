"""Section formatters for report bodies.

A section formatter wraps a unit of work (a zero-argument callable) and
decides how the section is marked in the output:

- nested: writes a message line before the body and a completion line after
  it, indenting inner sections by their depth
- progress: lets the body write progress indicators on a single line

Exceptions raised by the body are never caught here.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from clireport.domain.constants import (
    DEFAULT_COMPLETE,
    DEFAULT_INDENT_SIZE,
    DEFAULT_INDICATOR,
    DEFAULT_MESSAGE,
    FORMATTER_NESTED,
    FORMATTER_PROGRESS,
    INLINE_SUFFIX,
)
from clireport.domain.exceptions import ConfigurationError
from clireport.domain.formatters.options import NestedOptions, ProgressOptions, parse_options
from clireport.domain.formatters.report_elements import ReportSection
from clireport.domain.formatters.style import StyleWrapper
from clireport.infrastructure.output import OutputSink


logger = logging.getLogger(__name__)


class SectionFormatter(ABC):
    """Abstract base class for section formatters."""

    name: str = ""

    def __init__(self, sink: OutputSink, style: Optional[StyleWrapper] = None):
        self.sink = sink
        self.style = style or StyleWrapper()

    @staticmethod
    def _require_callable(body: Any) -> None:
        if not callable(body):
            raise ConfigurationError("A report section requires a callable body")

    @abstractmethod
    def run_section(self, body: Callable[[], Any], title: Optional[str] = None, **options) -> Any:
        """Run body as one report section.

        Args:
            body: Zero-argument callable producing the section's output
            title: Section title
            **options: Formatter-specific options

        Returns:
            Whatever body returns
        """
        pass


class NestedFormatter(SectionFormatter):
    """Mark sections with indented message and completion lines."""

    name = FORMATTER_NESTED

    def __init__(
        self,
        sink: OutputSink,
        style: Optional[StyleWrapper] = None,
        indent_size: int = DEFAULT_INDENT_SIZE,
        message: str = DEFAULT_MESSAGE,
        complete: str = DEFAULT_COMPLETE,
    ):
        super().__init__(sink, style)
        self.indent_size = indent_size
        self.message = message
        self.complete = complete
        self._sections: List[ReportSection] = []

    @property
    def depth(self) -> int:
        """Number of sections currently entered."""
        return len(self._sections)

    @property
    def sections(self) -> List[ReportSection]:
        return list(self._sections)

    def run_section(self, body: Callable[[], Any], title: Optional[str] = None, **options) -> Any:
        opts = parse_options(NestedOptions, options, "nested report")
        self._require_callable(body)

        indent_size = opts.indent_size if opts.indent_size is not None else self.indent_size
        depth = self.depth
        padding = " " * (depth * indent_size)
        message = opts.message or title or self.message
        complete = opts.complete or self.complete

        self._sections.append(ReportSection(title=message, depth=depth))
        try:
            if opts.type == "inline":
                self.sink.write(self._styled(f"{padding}{message}{INLINE_SUFFIX}", opts))
                result = body()
                self.sink.write_line(self._styled(complete, opts))
            else:
                self.sink.write_line(self._styled(f"{padding}{message}", opts))
                result = body()
                self.sink.write_line(self._styled(f"{padding}{complete}", opts))
        finally:
            self._sections.pop()
        return result

    def _styled(self, text: str, opts: NestedOptions) -> str:
        return self.style.wrap(text, color=opts.color, bold=opts.bold)


class ProgressFormatter(SectionFormatter):
    """Keep a section on one line of progress indicators."""

    name = FORMATTER_PROGRESS

    def __init__(
        self,
        sink: OutputSink,
        style: Optional[StyleWrapper] = None,
        indicator: str = DEFAULT_INDICATOR,
    ):
        super().__init__(sink, style)
        self.indicator = indicator
        self._options = ProgressOptions()

    def run_section(self, body: Callable[[], Any], title: Optional[str] = None, **options) -> Any:
        opts = parse_options(ProgressOptions, options, "progress report")
        self._require_callable(body)

        previous = self._options
        self._options = opts
        try:
            if title:
                self.sink.write_line(self.style.wrap(title, color=opts.color, bold=opts.bold))
            result = body()
            self.sink.write_line("")
        finally:
            self._options = previous
        return result

    def progress(self, indicator: Optional[str] = None) -> None:
        """Write one progress indicator without ending the line.

        Args:
            indicator: Text to write instead of the section's indicator
        """
        text = indicator or self._options.indicator or self.indicator
        self.sink.write(self.style.wrap(text, color=self._options.color, bold=self._options.bold))


FORMATTERS = {
    FORMATTER_NESTED: NestedFormatter,
    FORMATTER_PROGRESS: ProgressFormatter,
}


def select_formatter(
    name: str,
    sink: OutputSink,
    style: Optional[StyleWrapper] = None,
    indent_size: int = DEFAULT_INDENT_SIZE,
) -> SectionFormatter:
    """Create the section formatter registered under name.

    Args:
        name: "progress" or "nested"
        sink: Destination for the formatter's output
        style: Style wrapper shared with the rest of the report
        indent_size: Indentation step for nested sections

    Returns:
        A new formatter instance

    Raises:
        ConfigurationError: If name is not a known formatter
    """
    formatter_class = FORMATTERS.get(name) if isinstance(name, str) else None
    if formatter_class is None:
        raise ConfigurationError(
            f"Unknown formatter {name!r}, expected one of: {', '.join(sorted(FORMATTERS))}"
        )
    logger.debug("Selected %s formatter", name)
    if formatter_class is NestedFormatter:
        return NestedFormatter(sink, style, indent_size=indent_size)
    return formatter_class(sink, style)
