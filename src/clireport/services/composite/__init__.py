"""Composite services - Higher-level services that use core services."""
from clireport.services.composite.section_formatters import (
    SectionFormatter,
    NestedFormatter,
    ProgressFormatter,
    select_formatter,
)
from clireport.services.composite.reporter import Reporter

__all__ = [
    "SectionFormatter",
    "NestedFormatter",
    "ProgressFormatter",
    "select_formatter",
    "Reporter",
]
