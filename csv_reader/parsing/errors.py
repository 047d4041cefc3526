from __future__ import annotations

from enum import IntEnum
from typing import Any

"""Error taxonomy for CSV loading.

Every failure raised by the reader derives from CSVReaderError and carries a
human readable message, a numeric ErrorCode (useful for customized error
messages on the caller side) and an optional details dict with the structured
data behind the message (offending columns, line numbers, ...).
"""

__all__ = [
    "ErrorCode",
    "CSVReaderError",
    "IndexingError",
    "EmptyInputError",
    "InvalidLineError",
    "UnexpectedHeaderColumnError",
    "HeaderMismatchError",
    "DuplicateColumnError",
    "DetectionError",
    "BackendError",
]


class ErrorCode(IntEnum):
    INDEXING_ERROR = 1
    EMPTY_CSV_ERROR = 2
    INVALID_LINE_ERROR = 3
    UNEXPECTED_HEADER_COLUMN = 4
    FAILED_TO_DETECT_COLUMN_DELIMITER = 5
    FAILED_TO_CREATE_TMP_FILE = 6
    DUPLICATE_HEADER_COLUMN = 7


class CSVReaderError(Exception):
    """Base exception for CSV loading errors."""

    code: ErrorCode

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    @property
    def error_type(self) -> str:
        return self.code.name


class IndexingError(CSVReaderError):
    """Raised when the expected header or the indexing map repeats a name."""

    code = ErrorCode.INDEXING_ERROR


class EmptyInputError(CSVReaderError):
    """Raised when the CSV content has no non-blank line."""

    code = ErrorCode.EMPTY_CSV_ERROR


class InvalidLineError(CSVReaderError):
    """Raised after a full pass when some lines have a wrong number of values."""

    code = ErrorCode.INVALID_LINE_ERROR

    @property
    def lines(self) -> list[int]:
        return list(self.details.get("lines", []))


class UnexpectedHeaderColumnError(CSVReaderError):
    """Raised when the header line holds columns that were not declared."""

    code = ErrorCode.UNEXPECTED_HEADER_COLUMN

    @property
    def columns(self) -> list[str]:
        return list(self.details.get("columns", []))


HeaderMismatchError = UnexpectedHeaderColumnError


class DuplicateColumnError(CSVReaderError):
    """Raised when two header columns resolve to the same name."""

    code = ErrorCode.DUPLICATE_HEADER_COLUMN


class DetectionError(CSVReaderError):
    """Raised when no candidate column delimiter is found."""

    code = ErrorCode.FAILED_TO_DETECT_COLUMN_DELIMITER


class BackendError(CSVReaderError):
    """Raised when the tokenizer scratch file cannot be created, written or read."""

    code = ErrorCode.FAILED_TO_CREATE_TMP_FILE
