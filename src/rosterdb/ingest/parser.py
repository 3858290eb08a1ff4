"""Line-oriented parser for quoted, delimited roster sheets.

Quoted fields may contain the separator and doubled quotes (``""``) for a
literal quote. Quote state does not carry across lines, so a field cannot span
multiple lines: an unbalanced quote swallows the rest of its own line into one
field and nothing more. Malformed input never raises.
"""

from __future__ import annotations

from typing import List

DEFAULT_SEPARATOR = ","
QUOTE = '"'


def split_line(line: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")

    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == separator and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current))
    return fields


def parse_rows(text: str, separator: str = DEFAULT_SEPARATOR) -> List[List[str]]:
    """Split raw text into rows of string fields.

    Rows with one field or fewer (blank lines, stray notes) are dropped.
    """

    rows: List[List[str]] = []
    for raw in text.strip("\r\n").split("\n"):
        fields = split_line(raw.rstrip("\r"), separator)
        if len(fields) > 1:
            rows.append(fields)
    return rows
