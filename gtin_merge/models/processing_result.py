from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .aggregate import Aggregate
from .csv_file import FileOutcome, FileStatus

"""Run report models for the CSV extraction run.

RunReport collects every FileOutcome in processing order together with the
final Aggregate, and derives the counters rendered on the SUMMARY line.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file statistics line (kept small for logs and tests)."""
    file_name: str  # base name
    status: str  # success/skipped/failed
    records: int  # GTIN matches in this file
    elapsed_seconds: float

    @staticmethod
    def from_outcome(outcome: FileOutcome) -> FileStat:
        return FileStat(
            file_name=outcome.name,
            status=outcome.status.value,
            records=outcome.matched,
            elapsed_seconds=outcome.elapsed_seconds,
        )


@dataclass(frozen=True)
class RunReport:
    """Aggregated result of one run over the source directory."""
    start_time: datetime
    end_time: datetime
    aggregate: Aggregate = field(default_factory=Aggregate)
    outcomes: tuple[FileOutcome, ...] = ()

    def _count(self, status: FileStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def total_files(self) -> int:
        return len(self.outcomes)

    @property
    def success_files(self) -> int:
        return self._count(FileStatus.SUCCESS)

    @property
    def skipped_files(self) -> int:
        return self._count(FileStatus.SKIPPED)

    @property
    def failed_files(self) -> int:
        return self._count(FileStatus.FAILED)

    @property
    def total_records(self) -> int:
        return len(self.aggregate)

    @property
    def elapsed_seconds(self) -> float:
        return (self.end_time - self.start_time).total_seconds()

    @property
    def throughput_records_per_sec(self) -> float:
        # avoid division by zero
        elapsed = self.elapsed_seconds
        if elapsed > 0:
            return self.total_records / elapsed
        return 0.0

    @property
    def file_stats(self) -> list[FileStat]:
        return [FileStat.from_outcome(o) for o in self.outcomes]
