"""
Quote-aware CSV line splitting.
"""

from __future__ import annotations

from typing import Iterable, List

_QUOTE = '"'
_SEPARATOR = ","


def parse_line(line: str) -> List[str]:
    """
    Split one CSV line into fields.

    Commas inside double quotes are literal and a doubled quote inside a
    quoted field yields one quote character. Unbalanced quotes are not an
    error: the rest of the line is read as part of the open field.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        ch = line[i]
        if ch == _QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == _QUOTE:
                current.append(_QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == _SEPARATOR and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1

    # The trailing field is always emitted, even when empty.
    fields.append("".join(current))
    return fields


def _needs_quotes(field: str) -> bool:
    return _SEPARATOR in field or _QUOTE in field or field != field.strip()


def format_line(fields: Iterable[str]) -> str:
    """Join fields into a line that `parse_line` splits back into the same fields."""
    out = []
    for field in fields:
        if _needs_quotes(field):
            field = _QUOTE + field.replace(_QUOTE, _QUOTE * 2) + _QUOTE
        out.append(field)
    return _SEPARATOR.join(out)
