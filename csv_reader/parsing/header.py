from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .errors import DuplicateColumnError, UnexpectedHeaderColumnError

"""Header reconciliation against the caller declared column set.

The header line read from the file is matched column by column against the
expected header. Matching optionally trims and case-folds both sides, but the
resolved header always keeps the expected (declared) spelling. Declared
columns missing from the file are allowed; file columns that were not
declared are not.
"""

__all__ = [
    "ResolvedHeader",
    "normalize_column",
    "match_column",
    "reconcile_header",
    "apply_aliases",
    "positional_aliases",
]


@dataclass(frozen=True)
class ResolvedHeader:
    columns: list[str]
    aliases: dict[str, str | int] = field(default_factory=dict)  # alias -> declared column or position

    def __len__(self) -> int:
        return len(self.columns)


def normalize_column(column: str, trim: bool = False, case_insensitive: bool = False) -> str:
    if trim:
        column = column.strip()
    if case_insensitive:
        column = column.casefold()
    return column


def match_column(
    column: str, expected: Sequence[str], trim: bool = False, case_insensitive: bool = False
) -> str | None:
    """Return the expected column matching ``column`` as declared, or None."""
    wanted = normalize_column(column, trim, case_insensitive)
    for candidate in expected:
        if wanted == normalize_column(candidate, trim, case_insensitive):
            return candidate
    return None


def reconcile_header(
    columns_read: Sequence[str],
    expected: Sequence[str],
    trim: bool = False,
    case_insensitive: bool = False,
) -> list[str]:
    """Map the columns of the file header line onto the expected header.

    Raises:
        UnexpectedHeaderColumnError: some columns were not declared
        DuplicateColumnError: two file columns matched the same declared column
    """
    resolved: list[str] = []
    unexpected: list[str] = []
    for column in columns_read:
        matched = match_column(column, expected, trim, case_insensitive)
        if matched is None:
            unexpected.append(column)
        else:
            resolved.append(matched)
    if unexpected:
        raise UnexpectedHeaderColumnError(
            "the following columns are not expected in the header: " + ", ".join(unexpected),
            details={"columns": unexpected},
        )
    repeated = [name for name, count in Counter(resolved).items() if count > 1]
    if repeated:
        raise DuplicateColumnError(
            "the CSV header contains repeated columns: " + ", ".join(repeated),
            details={"columns": repeated},
        )
    return resolved


def apply_aliases(columns: Sequence[str], renames: Mapping[str, str]) -> ResolvedHeader:
    """Rename resolved columns through the indexing map.

    The alias table maps every rename back to the declared column it replaces,
    whether or not that column showed up in the file.
    """
    aliased = [renames.get(column, column) for column in columns]
    repeated = [name for name, count in Counter(aliased).items() if count > 1]
    if repeated:
        raise DuplicateColumnError(
            "the CSV header contains repeated columns after aliasing: " + ", ".join(repeated),
            details={"columns": repeated},
        )
    return ResolvedHeader(
        columns=aliased,
        aliases={alias: original for original, alias in renames.items()},
    )


def positional_aliases(columns: Sequence[str], names: Sequence[str]) -> ResolvedHeader:
    """Keep the resolved columns as they are and map each positional label to its index."""
    return ResolvedHeader(columns=list(columns), aliases={name: i for i, name in enumerate(names)})
