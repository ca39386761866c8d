"""CSV tokenizer, file reader and output serializer."""

from .parser import Row, parse
from .reader import read_csv_rows, read_csv_text
from .writer import quote_field, serialize, write_output

__all__ = [
    "Row",
    "parse",
    "quote_field",
    "read_csv_rows",
    "read_csv_text",
    "serialize",
    "write_output",
]
