from __future__ import annotations

from .errors import DetectionError

"""Column delimiter auto-detection by character frequency on the first non-blank line.

Only a fixed set of common delimiters is considered. When two candidates
occur the same number of times the first one in CANDIDATE_DELIMITERS wins
(comma > semicolon > pipe > tab).
"""

__all__ = [
    "CANDIDATE_DELIMITERS",
    "first_content_line",
    "count_candidates",
    "detect_delimiter",
]

CANDIDATE_DELIMITERS: tuple[str, ...] = (",", ";", "|", "\t")


def first_content_line(text: str) -> str | None:
    """Return the first line that is not blank after stripping whitespace."""
    for line in text.split("\n"):
        if line.strip():
            return line
    return None


def count_candidates(line: str) -> dict[str, int]:
    return {delimiter: line.count(delimiter) for delimiter in CANDIDATE_DELIMITERS}


def detect_delimiter(text: str) -> str:
    """Pick the most frequent candidate delimiter of the first non-blank line.

    Raises:
        DetectionError: no non-blank line exists or no candidate occurs in it
    """
    line = first_content_line(text)
    if line is None:
        raise DetectionError("unable to detect column delimiter: content has no non-blank line")
    counts = count_candidates(line)
    # max() keeps the first of equal counts, so the tuple order is the tie-break
    best = max(CANDIDATE_DELIMITERS, key=lambda d: counts[d])
    if counts[best] == 0:
        raise DetectionError(
            "unable to detect column delimiter",
            details={"line": line, "candidates": list(CANDIDATE_DELIMITERS)},
        )
    return best
