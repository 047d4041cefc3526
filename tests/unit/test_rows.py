from __future__ import annotations

from csv_reader.models.load_statistics import LoadStatsAccumulator
from csv_reader.parsing.rows import is_blank_record, map_records


def test_is_blank_record():
    assert is_blank_record([""])
    assert is_blank_record(["  ", "\t", ""])
    assert not is_blank_record(["", "x"])


def test_map_records_keyed_rows():
    stats = LoadStatsAccumulator()
    result = map_records([["a", "b"], ["c", "d"]], ["x", "y"], stats)
    assert result.ok
    assert result.rows == [{"x": "a", "y": "b"}, {"x": "c", "y": "d"}]
    assert stats.read_lines == 2
    assert stats.processed_lines == 2


def test_map_records_collects_every_mismatch():
    stats = LoadStatsAccumulator()
    stats.mark_read()  # header line
    records = [["a", "b", "c"], ["d", "e"], [""], ["f", "g", "h"], ["i"]]
    result = map_records(records, ["x", "y", "z"], stats)
    assert not result.ok
    assert result.invalid_lines == [3, 6]
    assert len(result.rows) == 2
    assert stats.read_lines == 6
    assert stats.snapshot().invalid_lines == (3, 6)


def test_map_records_positional_rows_have_no_fixed_width():
    stats = LoadStatsAccumulator()
    result = map_records([["a", "b"], ["c"], ["  "]], None, stats)
    assert result.ok
    assert result.rows == [["a", "b"], ["c"]]
    assert stats.read_lines == 3
    assert stats.processed_lines == 2
