from __future__ import annotations

import pytest

from csv_reader.parsing import tokenizer
from csv_reader.parsing.errors import BackendError, ErrorCode
from csv_reader.parsing.tokenizer import escape_to_doubled_enclosure, tokenize


def test_tokenize_quoted_fields():
    records = tokenize('name,role,age\n"Tony Farney","Developer",30\n', ",")
    assert records == [["name", "role", "age"], ["Tony Farney", "Developer", "30"]]


def test_tokenize_keeps_delimiter_inside_quotes():
    records = tokenize('"a,b";"c;d";e\n', ";")
    assert records == [["a,b", "c;d", "e"]]


def test_tokenize_embedded_line_break():
    records = tokenize('"line1\nline2",x\ny,z\n', ",")
    assert records == [["line1\nline2", "x"], ["y", "z"]]


def test_tokenize_escape_and_doubled_enclosure():
    records = tokenize('"say \\"hi\\"","a ""b"""\n', ",")
    assert records == [['say "hi"', 'a "b"']]


def test_tokenize_blank_lines_yield_single_empty_field():
    records = tokenize("a,b\n\nc,d\n", ",")
    assert records == [["a", "b"], [""], ["c", "d"]]


def test_tokenize_unterminated_quote_runs_to_end():
    records = tokenize('x,"abc,def', ",")
    assert records == [["x", "abc,def"]]


def test_tokenize_custom_enclosure_and_no_enclosure():
    assert tokenize("'a|b'|c\n", "|", enclosure="'") == [["a|b", "c"]]
    assert tokenize('"a",b\n', ",", enclosure="") == [['"a"', "b"]]


def test_tokenize_scratch_file_failure(monkeypatch):
    def boom(*args, **kwargs):
        raise OSError("no space left on device")

    monkeypatch.setattr(tokenizer.tempfile, "TemporaryFile", boom)
    with pytest.raises(BackendError) as e:
        tokenize("a,b\n", ",")
    assert e.value.code == ErrorCode.FAILED_TO_CREATE_TMP_FILE
    assert isinstance(e.value.__cause__, OSError)


def test_tokenize_unencodable_content():
    with pytest.raises(BackendError) as e:
        tokenize("nome,função\n", ",", encoding="ascii")
    assert e.value.details["encoding"] == "ascii"


def test_tokenize_keeps_backslash_outside_quotes():
    assert tokenize("C:\\temp,x\n", ",") == [["C:\\temp", "x"]]
    assert tokenize("a\\,b\n", ",") == [["a\\", "b"]]


def test_tokenize_keeps_backslash_before_other_characters_in_quotes():
    assert tokenize('"a\\nb",x\n', ",") == [["a\\nb", "x"]]
    assert tokenize('"C:\\data\\",y\n', ",") == [['C:\\data",y\n']]


def test_escape_rewrite_only_touches_quoted_fields():
    assert escape_to_doubled_enclosure('"a\\"b",c\\"d\n', ",", '"', "\\") == '"a""b",c\\"d\n'
    assert escape_to_doubled_enclosure('"a\\"b"\n', ",", '"', "") == '"a\\"b"\n'
    assert tokenize('x\\"y,"q\\"r"\n', ",") == [['x\\"y', 'q"r']]
