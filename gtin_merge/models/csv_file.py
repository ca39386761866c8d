from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .product_record import ProductRecord

"""Per-file outcome model for the CSV extraction run.

A FileOutcome is the isolation boundary of the run: every input file ends
in exactly one of success / skipped / failed, and nothing raised while
handling one file reaches the next.
"""


class FileStatus(Enum):
    """Final status of one CSV file.

    - SUCCESS: header resolved and rows filtered (possibly zero records)
    - SKIPPED: empty file, or header missing a required column
    - FAILED: read / decode / parse error
    """
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    status: FileStatus
    records: tuple[ProductRecord, ...] = ()
    reason: str | None = None  # skip reason or error message
    elapsed_seconds: float = 0.0
    missing_columns: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def matched(self) -> int:
        """Number of rows with a populated GTIN."""
        return len(self.records)
