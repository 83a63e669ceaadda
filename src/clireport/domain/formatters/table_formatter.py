"""Table building and rendering for terminal reports"""

import logging
from enum import Enum
from typing import Any, Callable, List, Optional

from clireport.domain.constants import DEFAULT_WIDTH, TABLE_BORDER_CHAR, TABLE_RULE_CHAR
from clireport.domain.exceptions import ConfigurationError
from clireport.domain.formatters.layout import LayoutEngine, pad_to_width
from clireport.domain.formatters.options import (
    ColumnOptions,
    RowOptions,
    TableOptions,
    parse_options,
)
from clireport.domain.formatters.report_elements import Alignment, Color, Column, LineSpec


logger = logging.getLogger(__name__)


class TableState(Enum):
    """Lifecycle of a Table within one table operation."""

    EMPTY = "empty"
    BUILDING = "building"
    RENDERING = "rendering"
    DONE = "done"


class Row:
    """An ordered set of columns appended to a table."""

    def __init__(self, header: bool = False, color: Optional[Color] = None, bold: Optional[bool] = None):
        """Initialize a row.

        Args:
            header: Whether this is the table's header row
            color: Default color for columns that do not set one
            bold: Default bold flag for columns that do not set one.
                When unset, header rows are bold and body rows are not.
        """
        self.header = header
        self.color = color
        self.bold = bold
        self.columns: List[Column] = []

    def column(self, content: Any, **options) -> Column:
        """Append a column to the row.

        Args:
            content: Cell content (converted to a string)
            **options: width, align, color, bold, padding

        Returns:
            The appended Column

        Raises:
            ConfigurationError: On unknown options or invalid values
        """
        opts = parse_options(ColumnOptions, options, "column")
        if opts.bold is not None:
            bold = opts.bold
        elif self.bold is not None:
            bold = self.bold
        else:
            bold = self.header
        column = Column(
            content=str(content),
            width=opts.width,
            align=opts.align,
            color=opts.color if opts.color is not None else self.color,
            bold=bold,
            padding=opts.padding,
        )
        self.columns.append(column)
        return column

    def is_empty(self) -> bool:
        return len(self.columns) == 0


class Table:
    """A table being built inside a single table operation."""

    def __init__(self, width: int = DEFAULT_WIDTH, border: bool = False):
        self.width = width
        self.border = border
        self.header_row: Optional[Row] = None
        self.rows: List[Row] = []
        self.state = TableState.EMPTY

    def row(self, **options) -> Row:
        """Append a row to the table.

        Args:
            **options: header, color, bold

        Returns:
            The new Row, to which columns are appended

        Raises:
            ConfigurationError: On unknown options, a second header row, or
                when the table is no longer being built
        """
        if self.state not in (TableState.EMPTY, TableState.BUILDING):
            raise ConfigurationError(f"Cannot add rows to a table in state '{self.state.value}'")
        opts = parse_options(RowOptions, options, "row")
        row = Row(header=opts.header, color=opts.color, bold=opts.bold)
        if row.header:
            if self.header_row is not None:
                raise ConfigurationError("Table already has a header row")
            self.header_row = row
        else:
            self.rows.append(row)
        self.state = TableState.BUILDING
        return row

    def row_count(self) -> int:
        return len(self.rows) + (1 if self.header_row is not None else 0)


class TableLayoutEngine:
    """Resolve column widths and render tables into lines."""

    def __init__(self, layout: Optional[LayoutEngine] = None):
        self.layout = layout or LayoutEngine()

    def build(self, build: Callable[[Table], Any], **options) -> List[str]:
        """Run a building callback against a new table and render it.

        The table only exists for the duration of this call. If the callback
        raises, the error propagates and nothing is rendered.

        Args:
            build: Callback receiving the Table to append rows to
            **options: width, border

        Returns:
            Rendered table lines

        Raises:
            ConfigurationError: On invalid options or an unrenderable table
        """
        if not callable(build):
            raise ConfigurationError("A table requires a building callback")
        opts = parse_options(TableOptions, options, "table")
        width = opts.width if opts.width is not None else self.layout.default_width
        table = Table(width=width, border=opts.border)
        table.state = TableState.BUILDING
        build(table)
        return self.render(table)

    def resolve_widths(self, row: Row, table_width: int) -> List[int]:
        """Compute the effective width of each column in a row.

        Implicit columns share the width left after explicit columns,
        rounded down. Each row is resolved on its own.

        Args:
            row: Row to resolve
            table_width: Width available to the row

        Returns:
            Width per column, in column order

        Raises:
            ConfigurationError: If explicit widths exceed the table width or
                nothing is left for implicit columns
        """
        explicit_total = sum(column.width for column in row.columns if not column.is_implicit)
        implicit_count = sum(1 for column in row.columns if column.is_implicit)

        if explicit_total > table_width:
            raise ConfigurationError(
                f"Column widths ({explicit_total}) exceed the table width ({table_width})"
            )

        implicit_width = 0
        if implicit_count:
            implicit_width = (table_width - explicit_total) // implicit_count
            if implicit_width <= 0:
                raise ConfigurationError(
                    f"No width left for {implicit_count} implicit column(s) "
                    f"in a table of width {table_width}"
                )

        logger.debug(
            "Resolved row widths: explicit=%d implicit_count=%d implicit_width=%d",
            explicit_total,
            implicit_count,
            implicit_width,
        )
        return [implicit_width if column.is_implicit else column.width for column in row.columns]

    def render(self, table: Table) -> List[str]:
        """Render a built table into lines.

        Raises:
            ConfigurationError: If the table has no rows or a cell does not fit
        """
        table.state = TableState.RENDERING
        if table.row_count() == 0:
            raise ConfigurationError("Table has no rows defined")

        lines: List[str] = []
        if table.header_row is not None and not table.header_row.is_empty():
            header_line, header_width = self._render_row(table.header_row, table)
            lines.append(header_line)
            lines.append(TABLE_RULE_CHAR * header_width)

        last_width = 0
        for row in table.rows:
            if row.is_empty():
                continue
            line, last_width = self._render_row(row, table)
            lines.append(line)

        if table.border and last_width:
            lines.append(TABLE_RULE_CHAR * last_width)

        table.state = TableState.DONE
        return lines

    def _render_row(self, row: Row, table: Table):
        """Render one row, returning the line and its unstyled width."""
        widths = self.resolve_widths(row, table.width)
        cells = [self._render_cell(column, width) for column, width in zip(row.columns, widths)]

        if table.border:
            line = TABLE_BORDER_CHAR + TABLE_BORDER_CHAR.join(cells) + TABLE_BORDER_CHAR
            return line, sum(widths) + len(widths) + 1
        return "".join(cells), sum(widths)

    def _render_cell(self, column: Column, width: int) -> str:
        inner_width = width - 2 * column.padding
        if inner_width <= 0:
            raise ConfigurationError(
                f"Column padding {column.padding} leaves no room in a column of width {width}"
            )
        spec = self.layout.build_spec(column.content, width=inner_width, align=column.align)
        gap = " " * column.padding
        cell = gap + pad_to_width(spec.text, inner_width, spec.align, fill=True) + gap
        return self.layout.render(
            LineSpec(text=cell, width=width, align=Alignment.LEFT, color=column.color, bold=column.bold),
            fill=True,
        )
