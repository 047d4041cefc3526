from __future__ import annotations

import pytest

from csv_reader.parsing.errors import DuplicateColumnError, HeaderMismatchError, UnexpectedHeaderColumnError
from csv_reader.parsing.header import apply_aliases, match_column, normalize_column, reconcile_header


def test_reconcile_keeps_file_order_and_declared_spelling():
    resolved = reconcile_header(["name", "role", "age"], ["role", "name", "age", "extra"])
    assert resolved == ["name", "role", "age"]


def test_reconcile_unexpected_columns_listed_in_order():
    with pytest.raises(UnexpectedHeaderColumnError) as e:
        reconcile_header(["name", "role", "age", "city"], ["role", "name"])
    assert e.value.columns == ["age", "city"]
    assert "age, city" in str(e.value)
    assert HeaderMismatchError is UnexpectedHeaderColumnError


def test_reconcile_trim_and_case_insensitive():
    resolved = reconcile_header([" name ", "ROLE"], ["Name", "Role"], trim=True, case_insensitive=True)
    assert resolved == ["Name", "Role"]


def test_reconcile_exact_match_by_default():
    with pytest.raises(UnexpectedHeaderColumnError):
        reconcile_header([" name"], ["name"])
    with pytest.raises(UnexpectedHeaderColumnError):
        reconcile_header(["NAME"], ["name"], trim=True)


def test_reconcile_duplicate_after_normalization():
    with pytest.raises(DuplicateColumnError) as e:
        reconcile_header(["name", "NAME"], ["name"], case_insensitive=True)
    assert e.value.details["columns"] == ["name"]


def test_normalize_and_match_column():
    assert normalize_column("  Ab ", trim=True, case_insensitive=True) == "ab"
    assert normalize_column("  Ab ") == "  Ab "
    assert match_column("AGE", ["name", "Age"], case_insensitive=True) == "Age"
    assert match_column("age", ["name"]) is None


def test_apply_aliases_renames_and_builds_reverse_map():
    header = apply_aliases(["name", "role", "age"], {"name": "full_name", "missing": "gone"})
    assert header.columns == ["full_name", "role", "age"]
    assert header.aliases == {"full_name": "name", "gone": "missing"}
    assert len(header) == 3


def test_apply_aliases_collision():
    with pytest.raises(DuplicateColumnError):
        apply_aliases(["name", "role"], {"name": "role"})
