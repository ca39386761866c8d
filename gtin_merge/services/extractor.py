from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models.column_schema import ColumnIndexSet
from ..models.product_record import ProductRecord

"""Row filter: keep only data rows with a populated GTIN/EAN."""

__all__ = [
    "extract_record",
    "extract_records",
]


def extract_record(row: Sequence[str], indices: ColumnIndexSet) -> ProductRecord | None:
    """Build a ProductRecord from one data row, or None when the row is skipped.

    A row is skipped when it is too short to hold every required column, or
    when its GTIN cell is blank after stripping whitespace. Neither case is
    an error.
    """
    if len(row) <= indices.span:
        return None

    gtin = row[indices.gtin].strip()
    if not gtin:
        return None

    return ProductRecord(
        sku=row[indices.sku],
        description=row[indices.description],
        gtin=gtin,
    )


def extract_records(rows: Iterable[Sequence[str]], indices: ColumnIndexSet) -> list[ProductRecord]:
    """Filter data rows (header already removed) in row order."""
    records: list[ProductRecord] = []
    for row in rows:
        record = extract_record(row, indices)
        if record is not None:
            records.append(record)
    return records
