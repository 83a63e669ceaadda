"""Test data builders for clireport tests

This module provides builder pattern helpers for creating settings files
and report documents. Builders simplify test setup and improve readability
by providing fluent interfaces with sensible defaults.

Example usage:
    path = SettingsBuilder()
        .with_width(60)
        .write_to(tmp_path)
"""

from tests.builders.settings_builder import SettingsBuilder
from tests.builders.document_builder import DocumentBuilder

__all__ = [
    "SettingsBuilder",
    "DocumentBuilder",
]
