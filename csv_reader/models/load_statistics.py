from __future__ import annotations

from dataclasses import dataclass

"""Load statistics models.

LoadStatistics is the immutable snapshot exposed after a load, successful or
not. LoadStatsAccumulator is the mutable counterpart fed while the records are
walked, so a failed load still reports how far it got.
"""

__all__ = [
    "LoadStatistics",
    "LoadStatsAccumulator",
]


@dataclass(frozen=True)
class LoadStatistics:
    """Line counters for one load call.

    read_lines counts every record handed over by the tokenizer, blank or not.
    processed_lines counts the header line plus every emitted row.
    invalid_lines holds the 1-based line numbers whose value count did not
    match the header width, in encounter order.
    """
    read_lines: int = 0
    processed_lines: int = 0
    invalid_lines: tuple[int, ...] = ()
    rows: int = 0  # emitted output rows

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_lines)


class LoadStatsAccumulator:
    """Collects line counters during a single pass over the records."""

    def __init__(self) -> None:
        self.read_lines = 0
        self.processed_lines = 0
        self.invalid_lines: list[int] = []
        self.rows = 0

    def mark_read(self) -> int:
        """Count one more read line and return its 1-based number."""
        self.read_lines += 1
        return self.read_lines

    def mark_processed(self, emitted: bool = True) -> None:
        self.processed_lines += 1
        if emitted:
            self.rows += 1

    def mark_invalid(self, line_number: int) -> None:
        self.invalid_lines.append(line_number)

    def snapshot(self) -> LoadStatistics:
        return LoadStatistics(
            read_lines=self.read_lines,
            processed_lines=self.processed_lines,
            invalid_lines=tuple(self.invalid_lines),
            rows=self.rows,
        )

