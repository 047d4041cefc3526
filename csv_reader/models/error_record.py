from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from typing import Any

from ..parsing.errors import CSVReaderError

"""ErrorRecord model for structured error logging.

Turns a CSVReaderError into a flat record that serializes to one JSON line.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        error_type: Error classification in UPPER_SNAKE_CASE format
        code: Numeric error code
        message: Human readable message
        details: Structured data attached to the error
    """
    timestamp: str
    error_type: str
    code: int
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_error(error: CSVReaderError) -> ErrorRecord:
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            error_type=error.error_type,
            code=int(error.code),
            message=error.message,
            details=dict(error.details),
        )

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
