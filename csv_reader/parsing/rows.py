from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..models.load_statistics import LoadStatsAccumulator

"""Row validation and mapping.

Each data record is checked against the resolved header width. Mismatched
records are not emitted; their line numbers are collected so that the caller
can report all of them at once after the pass.
"""

__all__ = [
    "Row",
    "RowPass",
    "is_blank_record",
    "map_records",
]

Row = dict[str, str] | list[str]


@dataclass
class RowPass:
    rows: list[Row] = field(default_factory=list)
    invalid_lines: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.invalid_lines


def is_blank_record(fields: Sequence[str]) -> bool:
    """A record is blank when every field is empty or whitespace only."""
    return all(not f.strip() for f in fields)


def map_records(
    records: Iterable[Sequence[str]],
    header: Sequence[str] | None,
    stats: LoadStatsAccumulator,
) -> RowPass:
    """Validate and map the data records following the header line.

    With a header every record must have exactly len(header) fields and is
    turned into a dict keyed by column name. Without one, records are kept as
    plain lists of any width.
    """
    result = RowPass()
    width = len(header) if header else None
    for fields in records:
        line_number = stats.mark_read()
        if is_blank_record(fields):
            continue
        if width is None:
            result.rows.append(list(fields))
        elif len(fields) != width:
            stats.mark_invalid(line_number)
            result.invalid_lines.append(line_number)
            continue
        else:
            result.rows.append(dict(zip(header, fields)))
        stats.mark_processed()
    return result
