from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import pandas as pd

from ..logging.init import SUMMARY_LEVEL
from ..models.config_models import DEFAULT_ENCLOSURE, DEFAULT_ESCAPE, Indexing, ReaderConfig
from ..models.error_record import ErrorRecord
from ..models.load_statistics import LoadStatistics, LoadStatsAccumulator
from ..parsing.delimiter import detect_delimiter, first_content_line
from ..parsing.errors import CSVReaderError, EmptyInputError, InvalidLineError
from ..parsing.header import ResolvedHeader, apply_aliases, positional_aliases, reconcile_header
from ..parsing.rows import Row, is_blank_record, map_records
from ..parsing.tokenizer import tokenize
from .frame import rows_to_frame
from .summary import render_summary_line

"""CSV reader facade.

Flow of a load call:
1. Reset per-load state (rows, resolved header, statistics)
2. Detect the column delimiter when none is configured
3. Tokenize the content into records
4. Reconcile the first non-blank record with the expected header (if any)
5. Validate / map every following record; line count mismatches are
   collected and reported together once the whole content was scanned

Configuration (dialect, header, indexing) survives between loads until
reset() is called. A reader instance is not meant to be shared by
concurrent loads.
"""

logger = logging.getLogger(__name__)

__all__ = [
    "CSVReader",
]


class CSVReader:
    def __init__(self, config: ReaderConfig | None = None) -> None:
        self._config = config or ReaderConfig()
        self._lines: list[Row] = []
        self._resolved = ResolvedHeader(columns=[])
        self._statistics = LoadStatistics()

    @classmethod
    def from_config(cls, config: ReaderConfig) -> CSVReader:
        """Build a reader from a ReaderConfig, typically the result of load_config()."""
        return cls(config)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def config(self) -> ReaderConfig:
        return self._config

    def set_header(self, header: Sequence[str], trim: bool = False, case_insensitive: bool = False) -> CSVReader:
        """Declare the columns expected in the first non-blank line.

        The columns may show up in any order in the file and declared columns
        may be missing from it. ``trim`` and ``case_insensitive`` only affect
        how names are compared; rows are keyed by the declared spelling.

        Raises:
            IndexingError: ``header`` repeats a name
        """
        self._config = self._config.with_header(header, trim=trim, case_insensitive=case_insensitive)
        return self

    @property
    def header(self) -> list[str]:
        return list(self._config.header.columns)

    def set_indexing(self, indexing: Sequence[str] | Mapping[str, str]) -> CSVReader:
        """Declare column names for the rows.

        Without a header, a list names the columns positionally. With a
        header, a mapping renames header columns ({header column: alias}).

        Raises:
            IndexingError: the indexing repeats a name
        """
        self._config = self._config.with_indexing(indexing)
        return self

    @property
    def indexing(self) -> Indexing:
        indexing = self._config.indexing
        return dict(indexing) if isinstance(indexing, Mapping) else list(indexing)

    def set_column_delimiter(self, delimiter: str) -> CSVReader:
        self._config = self._config.with_dialect(delimiter=delimiter)
        return self

    @property
    def delimiter(self) -> str:
        return self._config.dialect.delimiter

    def set_enclosure(self, enclosure: str) -> CSVReader:
        self._config = self._config.with_dialect(enclosure=enclosure)
        return self

    @property
    def enclosure(self) -> str:
        return self._config.dialect.enclosure

    def set_escape(self, escape: str) -> CSVReader:
        self._config = self._config.with_dialect(escape=escape)
        return self

    @property
    def escape(self) -> str:
        return self._config.dialect.escape

    def set_encoding(self, encoding: str) -> CSVReader:
        self._config = self._config.with_dialect(encoding=encoding)
        return self

    @property
    def encoding(self) -> str:
        return self._config.dialect.encoding

    def reset_delimiters(self) -> CSVReader:
        """Forget the delimiter (detected again on next load) and restore default enclosure/escape."""
        self._config = self._config.with_dialect(delimiter="", enclosure=DEFAULT_ENCLOSURE, escape=DEFAULT_ESCAPE)
        return self

    def reset(self) -> CSVReader:
        """Drop every setting and every load result."""
        self._config = ReaderConfig()
        self._pre_load_reset()
        return self

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    @property
    def lines(self) -> list[Row]:
        """Rows of the last successful load."""
        return list(self._lines)

    @property
    def resolved_header(self) -> list[str]:
        return list(self._resolved.columns)

    @property
    def statistics(self) -> LoadStatistics:
        return self._statistics

    @property
    def amount_read_lines(self) -> int:
        return self._statistics.read_lines

    @property
    def amount_processed_lines(self) -> int:
        return self._statistics.processed_lines

    @property
    def lines_invalid_size(self) -> list[int]:
        return list(self._statistics.invalid_lines)

    def original_field_name(self, name: str | int) -> str | int | None:
        """Return the declared column name behind a resolved column name.

        Aliases built by the last load are looked up first, then the indexing
        itself (key lookup for a mapping, position lookup for a list).
        Returns None when nothing is known about ``name``.
        """
        if isinstance(name, str) and name in self._resolved.aliases:
            return self._resolved.aliases[name]
        indexing = self._config.indexing
        if isinstance(indexing, Mapping):
            return indexing.get(name)  # type: ignore[arg-type]
        if isinstance(name, int) and 0 <= name < len(indexing):
            return indexing[name]
        return None

    def original_field_names(self, names: Sequence[str | int]) -> list[str | int | None]:
        return [self.original_field_name(name) for name in names]

    def to_frame(self) -> pd.DataFrame:
        """Return the rows of the last successful load as a DataFrame."""
        return rows_to_frame(self._lines, self._resolved.columns or None)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(
        self,
        content: str,
        delimiter: str | None = None,
        enclosure: str | None = None,
        escape: str | None = None,
    ) -> list[Row]:
        """Load CSV content and return its rows.

        Rows are dicts keyed by the resolved header when a header or an
        indexing is declared, plain lists otherwise. ``delimiter``,
        ``enclosure`` and ``escape`` override the configured values and are
        kept for the following loads.

        Raises:
            CSVReaderError: any subclass, see parsing.errors
        """
        self._pre_load_reset()
        if delimiter:
            self.set_column_delimiter(delimiter)
        if enclosure is not None:
            self.set_enclosure(enclosure)
        if escape is not None:
            self.set_escape(escape)

        stats = LoadStatsAccumulator()
        try:
            self._lines = self._load(content, stats)
        except CSVReaderError as e:
            logger.error("CSV load failed: %s", ErrorRecord.from_error(e).to_json_line())
            raise
        finally:
            self._statistics = stats.snapshot()
            logger.log(SUMMARY_LEVEL, render_summary_line(self._statistics))
        return list(self._lines)

    def _load(self, content: str, stats: LoadStatsAccumulator) -> list[Row]:
        if first_content_line(content) is None:
            raise EmptyInputError("empty CSV content")

        if not self.delimiter:
            self.set_column_delimiter(detect_delimiter(content))
            logger.debug("detected column delimiter %r", self.delimiter)

        dialect = self._config.dialect
        records = tokenize(content, dialect.delimiter, dialect.enclosure, dialect.escape, dialect.encoding)

        first = next((i for i, fields in enumerate(records) if not is_blank_record(fields)), None)
        if first is None:
            for _ in records:
                stats.mark_read()
            raise EmptyInputError("empty CSV content")
        for _ in range(first):
            stats.mark_read()

        header_cfg = self._config.header
        body_start = first
        columns: list[str] | None = None
        if header_cfg.columns:
            stats.mark_read()
            columns = reconcile_header(
                records[first], header_cfg.columns, header_cfg.trim, header_cfg.case_insensitive
            )
            stats.mark_processed(emitted=False)
            body_start = first + 1

        if columns is not None:
            if self._config.renames:
                self._resolved = apply_aliases(columns, self._config.renames)
            elif self._config.indexing_names:
                self._resolved = positional_aliases(columns, self._config.indexing_names)
            else:
                self._resolved = ResolvedHeader(columns=columns)
        elif self._config.indexing_names:
            self._resolved = ResolvedHeader(columns=self._config.indexing_names)

        result = map_records(records[body_start:], self._resolved.columns or None, stats)
        if not result.ok:
            for line_number in result.invalid_lines:
                logger.warning("line %d: value count does not match the %d columns", line_number, len(self._resolved))
            raise InvalidLineError(
                "the following lines have an incompatible number of values: "
                + ", ".join(str(n) for n in result.invalid_lines),
                details={"lines": list(result.invalid_lines)},
            )
        logger.debug("loaded %d rows", len(result.rows))
        return result.rows

    def _pre_load_reset(self) -> None:
        self._lines = []
        self._resolved = ResolvedHeader(columns=[])
        self._statistics = LoadStatistics()
