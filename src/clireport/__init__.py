"""clireport - terminal text layout and report rendering"""

from clireport.domain.config import ReporterSettings, load_settings
from clireport.domain.exceptions import ConfigurationError, ReportError
from clireport.domain.formatters import (
    Alignment,
    Color,
    LayoutEngine,
    StyleWrapper,
    Table,
    TableLayoutEngine,
)
from clireport.infrastructure.clock import FixedClock, SystemClock
from clireport.infrastructure.output import BufferSink, StreamSink
from clireport.services import (
    NestedFormatter,
    ProgressFormatter,
    ReportComposer,
    Reporter,
    select_formatter,
)

__all__ = [
    "Alignment",
    "BufferSink",
    "Color",
    "ConfigurationError",
    "FixedClock",
    "LayoutEngine",
    "NestedFormatter",
    "ProgressFormatter",
    "ReportComposer",
    "ReportError",
    "Reporter",
    "ReporterSettings",
    "StreamSink",
    "StyleWrapper",
    "SystemClock",
    "Table",
    "TableLayoutEngine",
    "load_settings",
    "select_formatter",
]
