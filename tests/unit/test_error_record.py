from __future__ import annotations

import json

import pytest

from csv_reader.models.error_record import ErrorRecord
from csv_reader.parsing.errors import InvalidLineError, UnexpectedHeaderColumnError


def test_error_record_from_error():
    err = InvalidLineError("bad lines: 3, 5", details={"lines": [3, 5]})
    rec = ErrorRecord.from_error(err)
    assert rec.error_type == "INVALID_LINE_ERROR"
    assert rec.code == 3
    assert rec.message == "bad lines: 3, 5"
    assert rec.details == {"lines": [3, 5]}
    assert rec.timestamp.endswith("Z")


def test_error_record_json_line_has_fixed_keys():
    err = UnexpectedHeaderColumnError("unexpected: é", details={"columns": ["é"]})
    line = ErrorRecord.from_error(err).to_json_line()
    data = json.loads(line)
    assert set(data.keys()) == {"timestamp", "error_type", "code", "message", "details"}
    assert data["error_type"] == "UNEXPECTED_HEADER_COLUMN"
    # ensure_ascii=False keeps non ascii characters readable
    assert "é" in line


def test_error_record_immutable():
    rec = ErrorRecord.from_error(InvalidLineError("x"))
    with pytest.raises(AttributeError):
        rec.code = 1  # type: ignore[misc]
