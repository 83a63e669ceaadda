"""CLI command rendering a YAML report document.

A report document is a list of single-key mappings, rendered in order:

    - header: {title: Nightly build, align: center, rule: true}
    - table:
        options: {border: true, width: 40}
        rows:
          - options: {header: true}
            columns: [{text: Step, width: 20}, Status]
          - columns: [compile, ok]
    - section:
        title: Publishing
        body:
          - aligned: {text: uploaded, align: right, width: 40}
    - footer: {timestamp: true}
"""

import logging
import sys
from typing import Any, Dict, List

from clireport.domain.config import load_document
from clireport.domain.exceptions import ConfigurationError, ReportError
from clireport.domain.formatters.table_formatter import Table
from clireport.services.composite.reporter import Reporter


logger = logging.getLogger(__name__)


def cmd_render(reporter: Reporter, document_path: str) -> int:
    """Render every element of a report document.

    Args:
        reporter: Reporter writing to the output sink
        document_path: Path to the YAML report document

    Returns:
        Exit code (0 for success, 1 for an invalid document)
    """
    try:
        elements = load_document(document_path)
        logger.debug("Rendering %d element(s) from %s", len(elements), document_path)
        render_elements(reporter, elements)
        return 0
    except ReportError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


def render_elements(reporter: Reporter, elements: List[Dict[str, Any]]) -> None:
    for element in elements:
        render_element(reporter, element)


def render_element(reporter: Reporter, element: Dict[str, Any]) -> None:
    """Render one single-key document element.

    Raises:
        ConfigurationError: If the element kind is unknown or malformed
    """
    if not isinstance(element, dict) or len(element) != 1:
        raise ConfigurationError(f"Document element must have exactly one key, got {element!r}")
    kind, value = next(iter(element.items()))

    if kind == "header":
        reporter.header(**_mapping(value, kind))
    elif kind == "footer":
        reporter.footer(**_mapping(value, kind))
    elif kind == "rule":
        reporter.horizontal_rule(**_mapping(value, kind))
    elif kind == "datetime":
        reporter.datetime(**_mapping(value, kind))
    elif kind == "aligned":
        if isinstance(value, str):
            reporter.aligned(value)
        else:
            options = dict(_mapping(value, kind))
            text = options.pop("text", "")
            reporter.aligned(text, **options)
    elif kind == "spacing":
        reporter.vertical_spacing(1 if value is None else value)
    elif kind == "formatter":
        reporter.formatter = value
    elif kind == "progress":
        reporter.progress(value)
    elif kind == "table":
        _render_table(reporter, _mapping(value, kind))
    elif kind == "section":
        _render_section(reporter, _mapping(value, kind))
    else:
        raise ConfigurationError(f"Unknown document element '{kind}'")


def _mapping(value: Any, kind: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"Options for '{kind}' must be a mapping, got {value!r}")
    return value


def _render_table(reporter: Reporter, spec: Dict[str, Any]) -> None:
    _reject_unknown(spec, {"options", "rows"}, "table")
    rows = spec.get("rows") or []

    def build(table: Table) -> None:
        for row_spec in rows:
            row_spec = _mapping(row_spec, "row")
            _reject_unknown(row_spec, {"options", "columns"}, "row")
            row = table.row(**_mapping(row_spec.get("options"), "row"))
            for column_spec in row_spec.get("columns") or []:
                if isinstance(column_spec, dict):
                    options = dict(column_spec)
                    text = options.pop("text", "")
                    row.column(text, **options)
                else:
                    row.column(column_spec)

    reporter.table(build, **_mapping(spec.get("options"), "table"))


def _render_section(reporter: Reporter, spec: Dict[str, Any]) -> None:
    _reject_unknown(spec, {"title", "options", "body"}, "section")
    body = spec.get("body") or []
    if not isinstance(body, list):
        raise ConfigurationError("Section body must be a list of elements")

    reporter.report(
        lambda: render_elements(reporter, body),
        spec.get("title"),
        **_mapping(spec.get("options"), "section"),
    )


def _reject_unknown(spec: Dict[str, Any], allowed: set, kind: str) -> None:
    unknown = sorted(str(key) for key in spec if key not in allowed)
    if unknown:
        raise ConfigurationError(f"Invalid key(s) for {kind}: {', '.join(unknown)}")
