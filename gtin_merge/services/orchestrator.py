from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ExtractConfig
from ..csvio.reader import read_csv_rows
from ..logging.error_log import ErrorLogBuffer
from ..models.aggregate import Aggregate
from ..models.column_schema import DEFAULT_SCHEMA, ColumnSchema, MissingColumns
from ..models.csv_file import FileOutcome, FileStatus
from ..models.error_record import (
    DECODE_ERROR,
    MISSING_COLUMNS,
    PROCESSING_ERROR,
    READ_ERROR,
    ErrorRecord,
)
from ..models.processing_result import RunReport
from .extractor import extract_records
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Run orchestration for the GTIN extraction tool.

Scans the source directory for CSV files, processes each file in isolation
(read -> parse -> resolve columns -> filter rows), folds accepted records
into one Aggregate in file order and returns a RunReport.
"""

CSV_SUFFIX = ".csv"


class ProcessingError(Exception):
    """Fatal-to-run error (source directory missing or unreadable)."""
    pass


def scan_csv_files(directory: Path) -> list[Path]:
    """List ``*.csv`` files in ``directory`` (non-recursive).

    The extension match is case-insensitive. Files are returned sorted by name
    so record order does not depend on the filesystem.

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        files = [p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == CSV_SUFFIX]
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e
    return sorted(files, key=lambda p: p.name)


def process_file(
    file_path: Path,
    error_log: ErrorLogBuffer,
    *,
    encoding: str = "utf-8",
    schema: ColumnSchema = DEFAULT_SCHEMA,
) -> FileOutcome:
    """Extract GTIN records from one CSV file.

    Never raises: read, decode and parse failures become a FAILED outcome,
    a header without the required columns becomes a SKIPPED outcome.
    """
    name = file_path.name
    logger.info(f"Reading file: {name}")
    started = time.perf_counter()

    def _elapsed() -> float:
        return time.perf_counter() - started

    try:
        rows = read_csv_rows(file_path, encoding=encoding)

        if not rows:
            logger.debug(f"  {name}: empty file")
            return FileOutcome(
                path=file_path,
                status=FileStatus.SKIPPED,
                reason="empty file",
                elapsed_seconds=_elapsed(),
            )

        resolved = schema.resolve(rows[0])
        if isinstance(resolved, MissingColumns):
            reason = f"required columns not found: {resolved}"
            logger.warning(f"  File {name} skipped: {reason}")
            error_log.append(ErrorRecord.create(name, -1, MISSING_COLUMNS, reason))
            return FileOutcome(
                path=file_path,
                status=FileStatus.SKIPPED,
                reason=reason,
                elapsed_seconds=_elapsed(),
                missing_columns=resolved.names,
            )

        records = extract_records(rows[1:], resolved)
        logger.info(f"  -> {len(records)} products with GTIN found.")
        return FileOutcome(
            path=file_path,
            status=FileStatus.SUCCESS,
            records=tuple(records),
            elapsed_seconds=_elapsed(),
        )

    except UnicodeDecodeError as e:
        error_type = DECODE_ERROR
        message = str(e)
    except OSError as e:
        error_type = READ_ERROR
        message = str(e)
    except Exception as e:
        error_type = PROCESSING_ERROR
        message = str(e)

    logger.error(f"  Failed to process {name}: {message}")
    error_log.append(ErrorRecord.create(name, -1, error_type, message))
    return FileOutcome(
        path=file_path,
        status=FileStatus.FAILED,
        reason=message,
        elapsed_seconds=_elapsed(),
    )


def process_all(config: ExtractConfig, schema: ColumnSchema = DEFAULT_SCHEMA) -> RunReport:
    """Process every CSV file in the configured source directory.

    Files are handled one at a time; the Aggregate is threaded through the
    loop and grows in file order, then row order.

    Raises:
        ProcessingError: source directory missing or unreadable
    """
    start_time = datetime.now(UTC)
    error_log = ErrorLogBuffer(Path(config.error_log_directory))

    file_paths = scan_csv_files(Path(config.source_directory))
    logger.info(f"Found {len(file_paths)} CSV files.")

    aggregate = Aggregate()
    outcomes: list[FileOutcome] = []
    skipped = 0
    failed = 0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)

            outcome = process_file(file_path, error_log, encoding=config.encoding, schema=schema)
            outcomes.append(outcome)
            aggregate = aggregate.extend(outcome.records)

            if outcome.status is FileStatus.SKIPPED:
                skipped += 1
            elif outcome.status is FileStatus.FAILED:
                failed += 1
            progress.set_postfix(records=len(aggregate), skipped=skipped, failed=failed)
            progress.finish_file()

    logger.info(f"Total products found: {len(aggregate)}")

    try:
        written = error_log.flush()
    except OSError as e:
        # the error log must not fail the run
        logger.warning(f"could not write error log: {e}")
    else:
        if written is not None:
            logger.info(f"Error log written: {written}")

    report = RunReport(
        start_time=start_time,
        end_time=datetime.now(UTC),
        aggregate=aggregate,
        outcomes=tuple(outcomes),
    )
    for stat in report.file_stats:
        logger.debug(
            f"  {stat.file_name}: status={stat.status} records={stat.records} "
            f"elapsed_sec={stat.elapsed_seconds:.3f}"
        )
    return report
