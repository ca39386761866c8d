from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .product_record import ProductRecord

"""Cross-file record accumulator.

The aggregate is a value: ``extend`` returns a new instance and the orchestrator
threads it through the file loop, so no module-level state is involved.
"""

__all__ = [
    "Aggregate",
]


@dataclass(frozen=True)
class Aggregate:
    records: tuple[ProductRecord, ...] = ()

    def extend(self, records: Iterable[ProductRecord]) -> Aggregate:
        """Append records in order. No deduplication across files."""
        return Aggregate(self.records + tuple(records))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(self.records)
