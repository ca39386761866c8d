from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

"""Named-column schema and header resolution.

Header names are matched exactly: case-sensitive, no trimming, no
normalization. When a name occurs more than once the first occurrence wins.
"""

__all__ = [
    "SKU_COLUMN",
    "DESCRIPTION_COLUMN",
    "GTIN_COLUMN",
    "REQUIRED_COLUMNS",
    "ColumnIndexSet",
    "MissingColumns",
    "ColumnSchema",
    "DEFAULT_SCHEMA",
]

SKU_COLUMN = "Código (SKU)"
DESCRIPTION_COLUMN = "Descrição"
GTIN_COLUMN = "GTIN/EAN"

REQUIRED_COLUMNS: tuple[str, str, str] = (SKU_COLUMN, DESCRIPTION_COLUMN, GTIN_COLUMN)


@dataclass(frozen=True)
class ColumnIndexSet:
    """Resolved offsets of the three required columns in one file."""
    sku: int
    description: int
    gtin: int

    @property
    def span(self) -> int:
        """Highest required offset; a row needs more cells than this."""
        return max(self.sku, self.description, self.gtin)


@dataclass(frozen=True)
class MissingColumns:
    """Resolution failure listing the absent column names (schema order)."""
    names: tuple[str, ...]

    def __str__(self) -> str:
        return ", ".join(self.names)


@dataclass(frozen=True)
class ColumnSchema:
    sku: str = SKU_COLUMN
    description: str = DESCRIPTION_COLUMN
    gtin: str = GTIN_COLUMN

    @property
    def names(self) -> tuple[str, str, str]:
        return (self.sku, self.description, self.gtin)

    def resolve(self, header: Sequence[str]) -> ColumnIndexSet | MissingColumns:
        """Map the header row to column offsets.

        Args:
            header: First row of the file

        Returns:
            ColumnIndexSet when all three names are present, otherwise
            MissingColumns enumerating every absent name
        """
        positions: dict[str, int] = {}
        for index, name in enumerate(header):
            # first occurrence wins
            positions.setdefault(name, index)

        missing = tuple(n for n in self.names if n not in positions)
        if missing:
            return MissingColumns(missing)
        return ColumnIndexSet(
            sku=positions[self.sku],
            description=positions[self.description],
            gtin=positions[self.gtin],
        )


DEFAULT_SCHEMA = ColumnSchema()
