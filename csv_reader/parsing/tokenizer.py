from __future__ import annotations

import csv
import tempfile

from .errors import BackendError

"""Field tokenizer backed by the standard csv module.

The content is materialized into an anonymous temporary file which is then
read back through csv.reader. The scratch file only lives for the duration of
one tokenize() call and is closed on every exit path.

Quoting rules:
- a field wrapped in the enclosure may contain the delimiter, line breaks
  and doubled enclosures
- inside a quoted field the escape character makes the next enclosure literal
  (the escape itself is dropped); before any other character, or outside a
  quoted field, the escape character is plain text
- an unterminated quoted field runs to the end of the input
- a blank physical line yields a record with a single empty field
"""

__all__ = [
    "escape_to_doubled_enclosure",
    "tokenize",
]


def escape_to_doubled_enclosure(text: str, delimiter: str, enclosure: str, escape: str) -> str:
    """Rewrite escape+enclosure inside quoted fields as a doubled enclosure.

    csv.reader reads a doubled enclosure as one literal enclosure, so the
    escape sequence keeps its meaning without handing escapechar to csv,
    which would drop the escape character everywhere.
    """
    if not enclosure or not escape or escape == enclosure or escape not in text:
        return text
    out: list[str] = []
    in_quotes = False
    field_start = True
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        nxt = text[i + 1] if i + 1 < n else ""
        if in_quotes:
            if c == escape and nxt == enclosure:
                out.append(enclosure * 2)
                i += 2
                continue
            if c == enclosure:
                if nxt == enclosure:
                    out.append(enclosure * 2)
                    i += 2
                    continue
                in_quotes = False
            out.append(c)
        else:
            if c == enclosure and field_start:
                in_quotes = True
            field_start = c in (delimiter, "\n", "\r")
            out.append(c)
        i += 1
    return "".join(out)


def _reader_options(delimiter: str, enclosure: str) -> dict[str, object]:
    options: dict[str, object] = {
        "delimiter": delimiter,
        "doublequote": True,
        "strict": False,
        "skipinitialspace": False,
    }
    if enclosure:
        options["quotechar"] = enclosure
        options["quoting"] = csv.QUOTE_MINIMAL
    else:
        options["quoting"] = csv.QUOTE_NONE
    return options


def tokenize(
    text: str,
    delimiter: str,
    enclosure: str = '"',
    escape: str = "\\",
    encoding: str = "UTF-8",
) -> list[list[str]]:
    """Split CSV content into records of string fields.

    Raises:
        BackendError: the scratch file could not be created, written or read back
    """
    content = escape_to_doubled_enclosure(text, delimiter, enclosure, escape)
    options = _reader_options(delimiter, enclosure)
    try:
        with tempfile.TemporaryFile(mode="w+", encoding=encoding, newline="") as scratch:
            scratch.write(content)
            scratch.seek(0)
            records: list[list[str]] = []
            for fields in csv.reader(scratch, **options):
                records.append(fields if fields else [""])
            return records
    except (OSError, UnicodeError, LookupError) as e:
        raise BackendError(
            f"failed to use temporary file for CSV processing: {e}",
            details={"encoding": encoding},
        ) from e
