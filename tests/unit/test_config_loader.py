from __future__ import annotations
import pytest
from pathlib import Path
from gtin_merge.config.loader import (
    ConfigError,
    ExtractConfig,
    default_config,
    load_config,
    resolve_config,
)


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.source_directory == "./data"
    assert cfg.output_file == "./out/produtos_com_gtin.csv"
    assert cfg.encoding == "utf-8"
    assert cfg.error_log_directory == "./logs"


def test_load_config_defaults_for_missing_keys(write_config: Path):
    write_config.write_text("source_directory: ./in\n", encoding="utf-8")
    cfg = load_config(write_config)
    assert cfg == ExtractConfig(
        source_directory="./in",
        output_file="./produtos_com_gtin.csv",
        encoding="utf-8",
        error_log_directory="./logs",
    )


def test_load_config_empty_file_gives_defaults(write_config: Path):
    write_config.write_text("", encoding="utf-8")
    assert load_config(write_config) == default_config()


def test_load_config_missing_file(temp_workdir: Path):
    missing = temp_workdir / "config" / "not_exists.yml"
    with pytest.raises(ConfigError, match="config file not found"):
        load_config(missing)


def test_load_config_invalid_yaml(write_config: Path):
    write_config.write_text("source_directory: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(write_config)


def test_load_config_root_not_mapping(write_config: Path):
    write_config.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(write_config)


def test_load_config_extra_field(write_config: Path):
    text = write_config.read_text(encoding="utf-8") + "\nextra_field: not_allowed\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_load_config_wrong_type(write_config: Path):
    write_config.write_text("output_file: 42\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_load_config_unknown_encoding(write_config: Path):
    write_config.write_text("encoding: not-a-codec\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="unknown encoding"):
        load_config(write_config)


def test_resolve_config_falls_back_to_defaults(temp_workdir: Path):
    cfg = resolve_config(temp_workdir / "config" / "absent.yml")
    assert cfg == default_config()


def test_resolve_config_env_overrides(write_config: Path, monkeypatch):
    monkeypatch.setenv("GTIN_MERGE_SOURCE_DIRECTORY", "/srv/exports")
    monkeypatch.setenv("GTIN_MERGE_OUTPUT_FILE", "/srv/merged.csv")
    cfg = resolve_config(write_config)
    assert cfg.source_directory == "/srv/exports"
    assert cfg.output_file == "/srv/merged.csv"
    assert cfg.encoding == "utf-8"
