from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import (
    DEFAULT_ENCLOSURE,
    DEFAULT_ENCODING,
    DEFAULT_ESCAPE,
    DialectConfig,
    HeaderConfig,
    ReaderConfig,
)

"""Reader config loader.

Responsibilities:
- Load a YAML reader config (dialect / header / indexing sections)
- Validate it against the bundled JSON schema (reader_config_schema.json)
- Apply defaults (enclosure '"', escape '\\', encoding UTF-8, no delimiter
  meaning auto-detection)

Example::

    dialect:
      delimiter: ";"
    header:
      columns: [name, role, age]
      trim: true
      case_insensitive: true
    indexing:
      name: full_name
"""

SCHEMA_PATH = Path(__file__).parent / "reader_config_schema.json"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: the schema file is missing or broken, or the config data
            fails schema validation (unknown keys, wrong types, too long
            dialect characters)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def parse_config(data: dict[str, Any]) -> ReaderConfig:
    """Build a ReaderConfig from an already decoded mapping."""
    _validate_config_schema(data)

    dialect_raw = data.get("dialect", {})
    try:
        dialect = DialectConfig(
            delimiter=dialect_raw.get("delimiter", ""),
            enclosure=dialect_raw.get("enclosure", DEFAULT_ENCLOSURE),
            escape=dialect_raw.get("escape", DEFAULT_ESCAPE),
            encoding=dialect_raw.get("encoding", DEFAULT_ENCODING),
        )
    except ValueError as e:
        raise ConfigError(f"invalid dialect: {e}") from e
    header_raw = data.get("header", {})
    # HeaderConfig / ReaderConfig raise IndexingError on repeated names
    header = HeaderConfig(
        columns=list(header_raw.get("columns", [])),
        trim=header_raw.get("trim", False),
        case_insensitive=header_raw.get("case_insensitive", False),
    )
    return ReaderConfig(dialect=dialect, header=header, indexing=data.get("indexing", []))


def load_config(path: Path) -> ReaderConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")
    return parse_config(data)
