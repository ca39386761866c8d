from __future__ import annotations

from dataclasses import dataclass

"""ProductRecord model: one extracted (SKU, description, GTIN) triple."""

__all__ = [
    "ProductRecord",
]


@dataclass(frozen=True)
class ProductRecord:
    """A catalog row that carries a populated GTIN/EAN.

    ``sku`` and ``description`` are kept exactly as read. ``gtin`` is always
    the stripped, non-empty form of the source cell.
    """
    sku: str
    description: str
    gtin: str

    def as_row(self) -> tuple[str, str, str]:
        return (self.sku, self.description, self.gtin)
