"""Domain models for the GTIN extraction tool.

Records, the named-column schema, per-file outcomes and the run report.
"""

from .aggregate import Aggregate
from .column_schema import (
    DEFAULT_SCHEMA,
    REQUIRED_COLUMNS,
    ColumnIndexSet,
    ColumnSchema,
    MissingColumns,
)
from .csv_file import FileOutcome, FileStatus
from .error_record import ErrorRecord
from .processing_result import FileStat, RunReport
from .product_record import ProductRecord

__all__ = [
    # Extraction models
    "ProductRecord",
    "Aggregate",
    # Column resolution
    "ColumnSchema",
    "ColumnIndexSet",
    "MissingColumns",
    "DEFAULT_SCHEMA",
    "REQUIRED_COLUMNS",
    # Run bookkeeping
    "ErrorRecord",
    "FileOutcome",
    "FileStatus",
    "FileStat",
    "RunReport",
]
