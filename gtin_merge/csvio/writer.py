from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..models.column_schema import REQUIRED_COLUMNS
from ..models.product_record import ProductRecord

"""Serializer for the consolidated output file.

Every field is always wrapped in double quotes and inner quotes are doubled,
so the text parses back to the same cells with ``csvio.parser.parse`` even
when descriptions carry commas or line breaks.
"""

__all__ = [
    "quote_field",
    "serialize",
    "write_output",
]

LINE_TERMINATOR = "\n"


def quote_field(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _format_line(fields: Iterable[str]) -> str:
    return ",".join(quote_field(f) for f in fields) + LINE_TERMINATOR


def serialize(records: Iterable[ProductRecord]) -> str:
    """Render records as quoted CSV text with the fixed three-column header.

    Args:
        records: Records in output order

    Returns:
        Full file content; one ``\\n``-terminated line per record after the header
    """
    parts = [_format_line(REQUIRED_COLUMNS)]
    for record in records:
        parts.append(_format_line(record.as_row()))
    return "".join(parts)


def write_output(path: Path, text: str, encoding: str = "utf-8") -> Path:
    """Write serialized text to ``path`` without newline translation."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=encoding, newline="") as f:
        f.write(text)
    return path
