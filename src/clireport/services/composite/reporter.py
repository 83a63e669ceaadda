"""Composite service exposing the full reporting API.

Wires the style wrapper, layout engine, report composer, table engine and
section formatters around one output sink, using ReporterSettings for every
default an operation leaves out.
"""

from typing import Any, Callable, Optional, Union

from clireport.domain.config import ReporterSettings
from clireport.domain.exceptions import ConfigurationError
from clireport.domain.formatters.layout import LayoutEngine
from clireport.domain.formatters.style import StyleWrapper
from clireport.domain.formatters.table_formatter import Table, TableLayoutEngine
from clireport.infrastructure.clock import Clock
from clireport.infrastructure.output import OutputSink, StreamSink
from clireport.services.composite.section_formatters import SectionFormatter, select_formatter
from clireport.services.core.report_composer import ReportComposer


class Reporter:
    """Render headers, footers, rules, timestamps, tables and report sections.

    Example:
        reporter = Reporter()
        reporter.header(title="Nightly build", align="center", rule=True)

        def build(table):
            row = table.row(header=True)
            row.column("Step", width=20)
            row.column("Status")

        reporter.table(build, border=True, width=40)
        reporter.footer(timestamp=True)
    """

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        clock: Optional[Clock] = None,
        settings: Optional[ReporterSettings] = None,
    ):
        self.settings = settings or ReporterSettings()
        self.sink = sink if sink is not None else StreamSink()
        self.style = StyleWrapper(enabled=self.settings.color)
        self.layout = LayoutEngine(self.style, default_width=self.settings.width)
        self.composer = ReportComposer(
            self.sink,
            layout=self.layout,
            clock=clock,
            rule_char=self.settings.rule_char,
            datetime_format=self.settings.datetime_format,
        )
        self.tables = TableLayoutEngine(self.layout)
        self._formatter: Optional[SectionFormatter] = None

    @property
    def formatter(self) -> Optional[SectionFormatter]:
        """The active section formatter, None until set or first used."""
        return self._formatter

    @formatter.setter
    def formatter(self, value: Union[str, SectionFormatter]) -> None:
        if isinstance(value, SectionFormatter):
            self._formatter = value
            return
        self._formatter = select_formatter(
            value, self.sink, self.style, indent_size=self.settings.indent_size
        )

    def report(self, body: Callable[[], Any], title: Optional[str] = None, **options) -> Any:
        """Run body as a report section using the active formatter.

        Falls back to the configured default formatter when none is set.
        Errors raised by body propagate unchanged.
        """
        if self._formatter is None:
            self.formatter = self.settings.formatter
        return self._formatter.run_section(body, title, **options)

    def progress(self, indicator: Optional[str] = None) -> None:
        """Write a progress indicator through the active formatter."""
        progress = getattr(self._formatter, "progress", None)
        if progress is None:
            raise ConfigurationError("The active formatter does not support progress indicators")
        progress(indicator)

    def header(self, **options) -> None:
        self.composer.header(**options)

    def footer(self, **options) -> None:
        self.composer.footer(**options)

    def horizontal_rule(self, **options) -> None:
        self.composer.horizontal_rule(**options)

    def datetime(self, **options) -> None:
        self.composer.datetime(**options)

    def aligned(self, text: str, **options) -> None:
        self.composer.aligned(text, **options)

    def vertical_spacing(self, lines: int = 1) -> None:
        self.composer.vertical_spacing(lines)

    def table(self, build: Callable[[Table], Any], **options) -> None:
        """Build a table through a callback, then render it.

        Args:
            build: Callback receiving the Table; append rows with
                table.row() and columns with row.column()
            **options: width, border
        """
        self.composer.emit(self.tables.build(build, **options))
