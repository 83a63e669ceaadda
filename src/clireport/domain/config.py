"""Reporter settings and report document loading

Settings are read from a YAML mapping whose keys mirror ReporterSettings
fields. Report documents are YAML lists of render elements consumed by the
render command.
"""

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

import yaml

from clireport.domain.constants import (
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_FORMATTER,
    DEFAULT_INDENT_SIZE,
    DEFAULT_RULE_CHAR,
    DEFAULT_WIDTH,
    FORMATTER_NESTED,
    FORMATTER_PROGRESS,
)
from clireport.domain.exceptions import ConfigurationError, FileNotFoundError
from clireport.domain.formatters.options import (
    parse_options,
    validate_count,
    validate_flag,
    validate_rule_char,
    validate_text,
    validate_width,
)


logger = logging.getLogger(__name__)


@dataclass
class ReporterSettings:
    """Defaults applied by a Reporter when an operation omits them"""

    width: int = DEFAULT_WIDTH
    rule_char: str = DEFAULT_RULE_CHAR
    datetime_format: str = DEFAULT_DATETIME_FORMAT
    formatter: str = DEFAULT_FORMATTER
    indent_size: int = DEFAULT_INDENT_SIZE
    color: bool = True

    def __post_init__(self):
        self.width = validate_width(self.width)
        self.rule_char = validate_rule_char(self.rule_char, "rule_char")
        self.datetime_format = validate_text(self.datetime_format, "datetime_format")
        if self.formatter not in (FORMATTER_NESTED, FORMATTER_PROGRESS):
            raise ConfigurationError(
                f"formatter must be '{FORMATTER_NESTED}' or '{FORMATTER_PROGRESS}', "
                f"got {self.formatter!r}"
            )
        self.indent_size = validate_count(self.indent_size, "indent_size")
        self.color = validate_flag(self.color, "color")

    @classmethod
    def from_yaml_string(cls, content: str, source_name: str = "settings") -> "ReporterSettings":
        """Factory: Parse settings from YAML content

        Args:
            content: YAML content as string
            source_name: Name of the source (for error messages)

        Returns:
            ReporterSettings with file values over defaults
        """
        data = _load_yaml(content, source_name)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings in {source_name} must be a mapping")
        return parse_options(cls, data, source_name)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _load_yaml(content: str, source_name: str) -> Any:
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {source_name}: {str(e)}")


def _read_file(file_path: str) -> str:
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def load_settings(file_path: str) -> ReporterSettings:
    """Load reporter settings from a YAML file

    Args:
        file_path: Path to YAML settings file (.yml or .yaml)

    Returns:
        Parsed settings

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigurationError: If file is invalid YAML or contains unknown keys
    """
    logger.debug("Loading reporter settings from %s", file_path)
    return ReporterSettings.from_yaml_string(_read_file(file_path), file_path)


def load_settings_from_string(content: str, source_name: str = "settings") -> ReporterSettings:
    return ReporterSettings.from_yaml_string(content, source_name)


def load_document(file_path: str) -> List[Dict[str, Any]]:
    """Load a report document from a YAML file

    Args:
        file_path: Path to the report document

    Returns:
        List of single-key element mappings

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigurationError: If the document is not a list of mappings
    """
    return load_document_from_string(_read_file(file_path), file_path)


def load_document_from_string(content: str, source_name: str = "document") -> List[Dict[str, Any]]:
    data = _load_yaml(content, source_name)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigurationError(f"Report document {source_name} must be a list of elements")
    for index, element in enumerate(data):
        if not isinstance(element, dict) or len(element) != 1:
            raise ConfigurationError(
                f"Element {index} in {source_name} must be a mapping with exactly one key"
            )
    return data
