"""Core service for composite report lines.

Produces headers, footers, timestamps, horizontal rules, aligned text and
vertical spacing by sequencing LayoutEngine calls. Every operation validates
its options and builds all of its output before the first write, so an
error never leaves partial output behind.
"""

import logging
from typing import List, Optional

from clireport.domain.constants import DEFAULT_DATETIME_FORMAT, DEFAULT_RULE_CHAR
from clireport.domain.exceptions import ConfigurationError
from clireport.domain.formatters.layout import LayoutEngine
from clireport.domain.formatters.options import (
    DatetimeOptions,
    HeaderOptions,
    RuleOptions,
    parse_options,
    validate_count,
)
from clireport.infrastructure.clock import Clock, SystemClock
from clireport.infrastructure.output import OutputSink


logger = logging.getLogger(__name__)


class ReportComposer:
    """Core service for writing composite report lines to a sink."""

    def __init__(
        self,
        sink: OutputSink,
        layout: Optional[LayoutEngine] = None,
        clock: Optional[Clock] = None,
        rule_char: str = DEFAULT_RULE_CHAR,
        datetime_format: str = DEFAULT_DATETIME_FORMAT,
    ):
        """Initialize the composer

        Args:
            sink: Destination for rendered lines
            layout: Layout engine for aligned lines
            clock: Source of the current time for timestamp lines
            rule_char: Character used by rules when none is given
            datetime_format: strftime pattern used when none is given
        """
        self.sink = sink
        self.layout = layout or LayoutEngine()
        self.clock = clock or SystemClock()
        self.rule_char = rule_char
        self.datetime_format = datetime_format

    @property
    def default_width(self) -> int:
        return self.layout.default_width

    # Public API methods

    def emit(self, lines: List[str]) -> None:
        """Write already-rendered lines to the sink, in order."""
        for line in lines:
            self.sink.write_line(line)

    def horizontal_rule(self, **options) -> None:
        """Write one line of a repeated rule character.

        Args:
            **options: char, width, color, bold
        """
        opts = parse_options(RuleOptions, options, "horizontal_rule")
        line = self._rule_line(
            opts.char or self.rule_char,
            opts.width or self.default_width,
            opts.color,
            opts.bold,
        )
        self.emit([line])

    def datetime(self, **options) -> None:
        """Write the current time as an aligned line.

        Args:
            **options: format, align, width, color, bold

        Raises:
            ConfigurationError: If the formatted timestamp exceeds the width
        """
        opts = parse_options(DatetimeOptions, options, "datetime")
        self.emit([self._timestamp_line(opts.format, opts.width, opts.align, opts.color, opts.bold)])

    def aligned(self, text: str, **options) -> None:
        """Write one aligned line of text.

        Args:
            text: Line content
            **options: align, width, color, bold
        """
        self.emit([self.layout.render_line(text, **options)])

    def header(self, **options) -> None:
        """Write a header: title, optional timestamp and rule, then spacing.

        Args:
            **options: title, width, align, spacing, timestamp, rule, color, bold
        """
        opts = parse_options(HeaderOptions, options, "header")
        lines = self._heading_lines(opts)
        self.emit(lines)
        if opts.spacing:
            self.sink.write_line("\n" * opts.spacing)

    def footer(self, **options) -> None:
        """Write a footer: spacing first, then title, timestamp and rule.

        Args:
            **options: title, width, align, spacing, timestamp, rule, color, bold
        """
        opts = parse_options(HeaderOptions, options, "footer")
        lines = self._heading_lines(opts)
        if opts.spacing:
            self.sink.write_line("\n" * opts.spacing)
        self.emit(lines)

    def vertical_spacing(self, lines: int = 1) -> None:
        """Write blank-line spacing.

        Zero lines still performs an empty raw write.

        Args:
            lines: Number of newlines
        """
        count = validate_count(lines, "lines")
        if count == 0:
            self.sink.write("")
            return
        self.sink.write_line("\n" * count)

    # Private helper methods

    def _rule_line(self, char: str, width: int, color, bold: bool) -> str:
        return self.layout.style.wrap(char * width, color=color, bold=bold)

    def _timestamp_line(self, fmt: Optional[str], width: Optional[int], align, color, bold: bool) -> str:
        width = width or self.default_width
        stamp = self.clock.strftime(fmt or self.datetime_format)
        if len(stamp) > width:
            raise ConfigurationError(
                f"Timestamp '{stamp}' ({len(stamp)} characters) too large for width {width}"
            )
        return self.layout.render_line(stamp, width=width, align=align, color=color, bold=bold)

    def _heading_lines(self, opts: HeaderOptions) -> List[str]:
        """Build the content lines shared by header and footer."""
        width = opts.width or self.default_width
        lines: List[str] = []

        if opts.title is not None:
            if len(opts.title) > width:
                raise ConfigurationError(
                    f"Title too large for width: {len(opts.title)} characters exceed width {width}"
                )
            lines.append(
                self.layout.render_line(
                    opts.title, width=width, align=opts.align, color=opts.color, bold=opts.bold
                )
            )

        if opts.timestamp:
            lines.append(self._timestamp_line(None, width, opts.align, opts.color, opts.bold))

        if opts.rule:
            char = opts.rule if isinstance(opts.rule, str) else self.rule_char
            lines.append(self._rule_line(char, width, opts.color, opts.bold))

        logger.debug("Composed %d heading line(s) at width %d", len(lines), width)
        return lines
