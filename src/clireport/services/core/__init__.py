"""Core services - Foundational services writing composite report lines."""
from clireport.services.core.report_composer import ReportComposer

__all__ = [
    "ReportComposer",
]
