from __future__ import annotations

from pathlib import Path

from .parser import Row, parse

"""Whole-file CSV reading: decode the file, then tokenize the text.

Files are buffered entirely in memory; vendor exports are small enough.
"""

__all__ = [
    "read_csv_text",
    "read_csv_rows",
]

DEFAULT_ENCODING = "utf-8"


def read_csv_text(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the full file as text.

    A byte order mark is kept unless ``utf-8-sig`` is requested, so the
    first header cell is compared exactly as stored.

    Raises:
        OSError: File cannot be opened or read
        UnicodeDecodeError: Content is not valid for ``encoding``
    """
    # newline="" keeps \r\n / \r intact for the tokenizer
    with path.open("r", encoding=encoding, newline="") as f:
        return f.read()


def read_csv_rows(path: Path, encoding: str = DEFAULT_ENCODING) -> list[Row]:
    return parse(read_csv_text(path, encoding=encoding))
