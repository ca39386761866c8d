from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for the structured error log.

Each skipped or failed file produces one record. ``row`` is -1 for
file-level entries where no specific row applies.
"""

__all__ = [
    "ErrorRecord",
    "MISSING_COLUMNS",
    "READ_ERROR",
    "DECODE_ERROR",
    "PROCESSING_ERROR",
]

MISSING_COLUMNS = "MISSING_COLUMNS"
READ_ERROR = "READ_ERROR"
DECODE_ERROR = "DECODE_ERROR"
PROCESSING_ERROR = "PROCESSING_ERROR"


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: CSV file name being processed
        row: Always -1; every entry describes a whole file
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Human readable description
    """
    timestamp: str
    file: str
    row: int
    error_type: str
    message: str

    @staticmethod
    def create(file: str, row: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            row=row,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        # fixed key set: dataclass fields only
        return json.dumps(asdict(self), ensure_ascii=False)
