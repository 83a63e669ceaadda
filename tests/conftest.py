"""Common pytest fixtures for clireport tests

This module provides shared fixtures used across the test suite.
Fixtures are organized by category: output, clock, rendering and files.
"""

from datetime import datetime

import pytest

from clireport.domain.config import ReporterSettings
from clireport.domain.formatters.layout import LayoutEngine
from clireport.domain.formatters.style import StyleWrapper
from clireport.domain.formatters.table_formatter import TableLayoutEngine
from clireport.infrastructure.clock import FixedClock
from clireport.infrastructure.output import BufferSink
from clireport.services.composite.reporter import Reporter
from clireport.services.core.report_composer import ReportComposer
from tests.builders import DocumentBuilder, SettingsBuilder


# ==============================================================================
# Output and Clock Fixtures
# ==============================================================================


@pytest.fixture
def sink():
    """Fixture providing an in-memory output sink"""
    return BufferSink()


@pytest.fixture
def fixed_moment():
    """Fixture providing the moment returned by the fixed clock

    Returns:
        datetime for 2024-03-05 14:07:09 (afternoon, single-digit hour)
    """
    return datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def fixed_clock(fixed_moment):
    """Fixture providing a clock frozen at fixed_moment"""
    return FixedClock(fixed_moment)


# ==============================================================================
# Rendering Fixtures
# ==============================================================================


@pytest.fixture
def style():
    """Fixture providing an enabled style wrapper"""
    return StyleWrapper()


@pytest.fixture
def layout(style):
    """Fixture providing a layout engine with the default width of 100"""
    return LayoutEngine(style)


@pytest.fixture
def table_engine(layout):
    """Fixture providing a table layout engine"""
    return TableLayoutEngine(layout)


@pytest.fixture
def composer(sink, layout, fixed_clock):
    """Fixture providing a report composer writing to the buffer sink"""
    return ReportComposer(sink, layout=layout, clock=fixed_clock)


@pytest.fixture
def reporter(sink, fixed_clock):
    """Fixture providing a reporter with default settings"""
    return Reporter(sink=sink, clock=fixed_clock, settings=ReporterSettings())


# ==============================================================================
# File Fixtures
# ==============================================================================


@pytest.fixture
def sample_settings_file(tmp_path):
    """Fixture providing a settings.yml file with narrow width and '=' rules

    Returns:
        Path to the settings file
    """
    return (SettingsBuilder()
            .with_width(40)
            .with_rule_char("=")
            .with_formatter("progress")
            .write_to(tmp_path))


@pytest.fixture
def sample_document_file(tmp_path):
    """Fixture providing a report document with a header, table and footer

    Returns:
        Path to the report document
    """
    return (DocumentBuilder()
            .add_header(title="Inventory", width=40, align="center")
            .add_table(
                rows=[
                    {"options": {"header": True}, "columns": [{"text": "Item", "width": 20}, "Qty"]},
                    {"columns": [{"text": "bolts", "width": 20}, {"text": "12", "align": "right"}]},
                ],
                width=40,
                border=True,
            )
            .add_footer(title="end", width=40, spacing=0)
            .write_to(tmp_path))
