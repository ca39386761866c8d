from __future__ import annotations

import codecs
import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader.

Responsibilities:
- Load the YAML config (default location ``config/gtin_merge.yml``)
- Validate it against the bundled ``config_schema.json``
- Apply defaults for every key left out
- Apply ``GTIN_MERGE_*`` environment overrides (``.env`` is loaded by the CLI)
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/gtin_merge.yml")

DEFAULT_SOURCE_DIRECTORY = "./arquivos"
DEFAULT_OUTPUT_FILE = "./produtos_com_gtin.csv"
DEFAULT_ENCODING = "utf-8"
DEFAULT_ERROR_LOG_DIRECTORY = "./logs"

ENV_SOURCE_DIRECTORY = "GTIN_MERGE_SOURCE_DIRECTORY"
ENV_OUTPUT_FILE = "GTIN_MERGE_OUTPUT_FILE"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ExtractConfig:
    source_directory: str
    output_file: str
    encoding: str = DEFAULT_ENCODING
    error_log_directory: str = DEFAULT_ERROR_LOG_DIRECTORY


def default_config() -> ExtractConfig:
    return ExtractConfig(
        source_directory=DEFAULT_SOURCE_DIRECTORY,
        output_file=DEFAULT_OUTPUT_FILE,
    )


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or unreadable, or the data violates
            the schema (unknown keys, wrong types, empty strings)
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


def _check_encoding(name: str) -> None:
    try:
        codecs.lookup(name)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {name}") from e


def apply_env_overrides(cfg: ExtractConfig) -> ExtractConfig:
    """Override directory / output path from the environment when set."""
    source = os.getenv(ENV_SOURCE_DIRECTORY)
    output = os.getenv(ENV_OUTPUT_FILE)
    if source:
        cfg = replace(cfg, source_directory=source)
    if output:
        cfg = replace(cfg, output_file=output)
    return cfg


def load_config(path: Path) -> ExtractConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    encoding = data.get("encoding", DEFAULT_ENCODING)
    _check_encoding(encoding)

    return ExtractConfig(
        source_directory=data.get("source_directory", DEFAULT_SOURCE_DIRECTORY),
        output_file=data.get("output_file", DEFAULT_OUTPUT_FILE),
        encoding=encoding,
        error_log_directory=data.get("error_log_directory", DEFAULT_ERROR_LOG_DIRECTORY),
    )


def resolve_config(path: Path = DEFAULT_CONFIG_PATH) -> ExtractConfig:
    """Load ``path`` if present (built-in defaults otherwise), then env overrides."""
    if path.exists():
        cfg = load_config(path)
    else:
        cfg = default_config()
    return apply_env_overrides(cfg)
