# Shared pytest fixtures
from __future__ import annotations
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

from gtin_merge.logging.init import reset_logging

CANONICAL_HEADER = '"Código (SKU)","Descrição","GTIN/EAN"'


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("GTIN_MERGE_SOURCE_DIRECTORY", raising=False)
        monkeypatch.delenv("GTIN_MERGE_OUTPUT_FILE", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
output_file: ./out/produtos_com_gtin.csv
encoding: utf-8
error_log_directory: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "gtin_merge.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def write_csv(temp_workdir: Path) -> Callable[[str, str], Path]:
    """Write raw CSV text into ./data (no newline translation)."""
    def _write(name: str, content: str) -> Path:
        f = temp_workdir / "data" / name
        f.write_bytes(content.encode("utf-8"))
        return f
    return _write


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()
