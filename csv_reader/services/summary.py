from __future__ import annotations

from ..models.load_statistics import LoadStatistics

"""SUMMARY line rendering for a load call."""


def render_summary_line(stats: LoadStatistics) -> str:
    """Render the SUMMARY line for one load.

    Format:
    SUMMARY read={read} processed={processed} invalid={invalid} rows={rows}

    Examples:
        >>> render_summary_line(LoadStatistics(read_lines=3, processed_lines=2, rows=1))
        'SUMMARY read=3 processed=2 invalid=0 rows=1'
    """
    return (
        f"SUMMARY read={stats.read_lines} "
        f"processed={stats.processed_lines} "
        f"invalid={stats.invalid_count} "
        f"rows={stats.rows}"
    )
