"""Layout, styling and table formatting for terminal reports"""

from clireport.domain.formatters.report_elements import (
    Alignment,
    Color,
    LineSpec,
    Column,
    ReportSection,
)
from clireport.domain.formatters.options import parse_options
from clireport.domain.formatters.style import StyleWrapper
from clireport.domain.formatters.layout import LayoutEngine, pad_to_width
from clireport.domain.formatters.table_formatter import (
    Row,
    Table,
    TableLayoutEngine,
    TableState,
)

__all__ = [
    # Report elements
    "Alignment",
    "Color",
    "LineSpec",
    "Column",
    "ReportSection",
    # Options
    "parse_options",
    # Formatters
    "StyleWrapper",
    "LayoutEngine",
    "pad_to_width",
    "Row",
    "Table",
    "TableLayoutEngine",
    "TableState",
]
