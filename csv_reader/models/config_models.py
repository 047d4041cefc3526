from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace

from ..parsing.errors import IndexingError

"""Config dataclasses for the CSV reader.

ReaderConfig is immutable: every setter on the reader builds a new value with
dataclasses.replace, so a load always sees one consistent configuration.
"""

__all__ = [
    "DEFAULT_ENCLOSURE",
    "DEFAULT_ESCAPE",
    "DEFAULT_ENCODING",
    "Indexing",
    "DialectConfig",
    "HeaderConfig",
    "ReaderConfig",
    "check_unique",
]

DEFAULT_ENCLOSURE = '"'
DEFAULT_ESCAPE = "\\"
DEFAULT_ENCODING = "UTF-8"

# Positional labels (list) or a header rename table {file column: alias}
Indexing = list[str] | dict[str, str]


def check_unique(names: Sequence[str], what: str) -> None:
    """Raise IndexingError if ``names`` repeats any value."""
    duplicates = [name for name, count in Counter(names).items() if count > 1]
    if duplicates:
        raise IndexingError(
            f"columns with the same name are not allowed in the {what}: " + ", ".join(duplicates),
            details={"duplicates": duplicates},
        )


@dataclass(frozen=True)
class DialectConfig:
    """How the CSV content is split into fields.

    An empty delimiter means "detect it from the first non-blank line".
    """
    delimiter: str = ""
    enclosure: str = DEFAULT_ENCLOSURE
    escape: str = DEFAULT_ESCAPE
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        for name in ("delimiter", "enclosure", "escape"):
            value = getattr(self, name)
            if len(value) > 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
        if self.delimiter and self.delimiter in ("\n", "\r"):
            raise ValueError(f"delimiter cannot be a line break, got {self.delimiter!r}")
        if self.delimiter and self.delimiter == self.enclosure:
            raise ValueError(f"delimiter and enclosure must differ, got {self.delimiter!r}")


@dataclass(frozen=True)
class HeaderConfig:
    """Expected header columns and how file columns are compared with them."""
    columns: list[str] = field(default_factory=list)
    trim: bool = False  # strip whitespace before comparing
    case_insensitive: bool = False  # case-fold before comparing

    def __post_init__(self) -> None:
        check_unique(self.columns, "header")


@dataclass(frozen=True)
class ReaderConfig:
    dialect: DialectConfig = field(default_factory=DialectConfig)
    header: HeaderConfig = field(default_factory=HeaderConfig)
    indexing: Indexing = field(default_factory=list)

    def __post_init__(self) -> None:
        names = list(self.indexing.values()) if isinstance(self.indexing, Mapping) else list(self.indexing)
        check_unique(names, "indexing")

    @property
    def indexing_names(self) -> list[str]:
        """Labels declared by the indexing map, in declaration order."""
        if isinstance(self.indexing, Mapping):
            return list(self.indexing.values())
        return list(self.indexing)

    @property
    def renames(self) -> dict[str, str]:
        """Header rename table; empty for positional indexing."""
        if isinstance(self.indexing, Mapping):
            return dict(self.indexing)
        return {}

    def with_dialect(self, **changes: str) -> ReaderConfig:
        return replace(self, dialect=replace(self.dialect, **changes))

    def with_header(self, columns: Sequence[str], trim: bool = False, case_insensitive: bool = False) -> ReaderConfig:
        return replace(
            self, header=HeaderConfig(columns=list(columns), trim=trim, case_insensitive=case_insensitive)
        )

    def with_indexing(self, indexing: Sequence[str] | Mapping[str, str]) -> ReaderConfig:
        if isinstance(indexing, Mapping):
            return replace(self, indexing=dict(indexing))
        return replace(self, indexing=list(indexing))
