"""Service Layer - Organized by architectural role

Core: Foundational services writing composite report lines
Composite: Higher-level services combining core services and formatters
"""
# Re-export all services for convenience
from clireport.services.core import ReportComposer
from clireport.services.composite import (
    Reporter,
    SectionFormatter,
    NestedFormatter,
    ProgressFormatter,
    select_formatter,
)

__all__ = [
    # Core
    "ReportComposer",
    # Composite
    "Reporter",
    "SectionFormatter",
    "NestedFormatter",
    "ProgressFormatter",
    "select_formatter",
]
