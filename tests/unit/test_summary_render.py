from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from pathlib import Path

from gtin_merge.models.aggregate import Aggregate
from gtin_merge.models.csv_file import FileOutcome, FileStatus
from gtin_merge.models.processing_result import RunReport
from gtin_merge.models.product_record import ProductRecord
from gtin_merge.services.summary import render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+files=([0-9]+)/(\1)\s+success=([0-9]+)\s+skipped=([0-9]+)\s+"
    r"failed=([0-9]+)\s+records=([0-9]+)\s+elapsed_sec=([0-9]+\.?[0-9]*)\s+"
    r"throughput_rps=([0-9]+\.?[0-9]*)$"
)

START = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


def _records(n: int) -> tuple[ProductRecord, ...]:
    return tuple(ProductRecord(f"S{i}", "d", str(i)) for i in range(n))


def _report(seconds: float, outcomes: list[FileOutcome]) -> RunReport:
    aggregate = Aggregate()
    for o in outcomes:
        aggregate = aggregate.extend(o.records)
    return RunReport(
        start_time=START,
        end_time=START + timedelta(seconds=seconds),
        aggregate=aggregate,
        outcomes=tuple(outcomes),
    )


def test_render_summary_line_mixed_outcomes():
    report = _report(
        2.0,
        [
            FileOutcome(Path("a.csv"), FileStatus.SUCCESS, records=_records(600)),
            FileOutcome(Path("b.csv"), FileStatus.SUCCESS, records=_records(400)),
            FileOutcome(Path("c.csv"), FileStatus.SKIPPED, reason="required columns not found: GTIN/EAN"),
            FileOutcome(Path("d.csv"), FileStatus.FAILED, reason="boom"),
        ],
    )

    line = render_summary_line(report)

    match = SUMMARY_PATTERN.match(line)
    assert match, f"SUMMARY line should match regex: {line}"
    assert match.group(1) == "4"
    assert match.group(3) == "2"
    assert match.group(4) == "1"
    assert match.group(5) == "1"
    assert match.group(6) == "1000"
    assert match.group(7) == "2"
    assert match.group(8) == "500"


def test_render_summary_line_fractional_throughput():
    report = _report(3.0, [FileOutcome(Path("a.csv"), FileStatus.SUCCESS, records=_records(500))])
    line = render_summary_line(report)
    assert line.endswith("elapsed_sec=3 throughput_rps=166.67")


def test_render_summary_line_zero_files():
    line = render_summary_line(_report(0.0, []))
    assert line == (
        "SUMMARY files=0/0 success=0 skipped=0 failed=0 records=0 "
        "elapsed_sec=0 throughput_rps=0"
    )


def test_render_summary_line_tiny_elapsed_has_no_exponent():
    line = render_summary_line(_report(0.000123, []))
    assert "e-" not in line
    assert "elapsed_sec=0.000123" in line
    assert SUMMARY_PATTERN.match(line)


def test_run_report_file_stats():
    report = _report(
        1.0,
        [
            FileOutcome(Path("/x/a.csv"), FileStatus.SUCCESS, records=_records(2), elapsed_seconds=0.5),
            FileOutcome(Path("/x/b.csv"), FileStatus.SKIPPED),
        ],
    )
    stats = report.file_stats
    assert [(s.file_name, s.status, s.records) for s in stats] == [
        ("a.csv", "success", 2),
        ("b.csv", "skipped", 0),
    ]
