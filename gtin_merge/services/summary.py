from __future__ import annotations

from ..models.processing_result import RunReport

"""SUMMARY line rendering.

Format:
SUMMARY files={n}/{n} success={s} skipped={k} failed={f} records={r}
elapsed_sec={e} throughput_rps={t}
"""


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation
        return f"{value:.6f}".rstrip('0').rstrip('.')
    return str(round(value, 2))


def render_summary_line(report: RunReport) -> str:
    """Render the SUMMARY line for a finished run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> render_summary_line(RunReport(start_time=start, end_time=end))
        'SUMMARY files=0/0 success=0 skipped=0 failed=0 records=0 elapsed_sec=2 throughput_rps=0'
    """
    elapsed_str = _format_number(report.elapsed_seconds)
    throughput_str = _format_number(report.throughput_records_per_sec)

    return (
        f"SUMMARY files={report.total_files}/{report.total_files} "
        f"success={report.success_files} "
        f"skipped={report.skipped_files} "
        f"failed={report.failed_files} "
        f"records={report.total_records} "
        f"elapsed_sec={elapsed_str} "
        f"throughput_rps={throughput_str}"
    )
