# src/roster_parser/parsers/tokenizer.py

from __future__ import annotations

from typing import List


def split_lines(text: str) -> List[str]:
    """
    Split CSV text into its non-blank lines.

    Quoted fields spanning several physical lines are not supported; every
    newline ends a record.
    """
    return [line for line in text.strip().split("\n") if line.strip()]


def tokenize_line(line: str) -> List[str]:
    """
    Split one CSV line into trimmed field values.

    Rules:
        - a double quote toggles quoted mode
        - ``""`` inside a quoted field is a literal quote
        - commas separate fields only outside quotes

    Examples:
        'a,b'            -> ["a", "b"]
        '"Acme, Inc",x'  -> ["Acme, Inc", "x"]
        'x,"a ""b"" c"'   -> ["x", 'a "b" c']
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    i = 0
    length = len(line)
    while i < length:
        char = line[i]
        next_char = line[i + 1] if i + 1 < length else ""

        if char == '"' and in_quotes and next_char == '"':
            current.append('"')
            i += 1
        elif char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


__all__ = ["split_lines", "tokenize_line"]
