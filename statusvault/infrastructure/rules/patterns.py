"""
Pattern Library.

Primitives for locating tokens in unstructured OCR text: first regex
match, the value printed next to a label, and the date printed near a
label. Every primitive is total: "not found" is None, never an error.
"""

import re
from collections.abc import Sequence
from datetime import date

from statusvault.infrastructure.rules.date_parser import parse_date_from_line


def as_lines(text) -> list[str]:
    """
    Normalize recognized text to its lines.

    Accepts one string or a sequence of strings. Anything else (None,
    bytes, numbers) degrades to no lines.
    """
    if isinstance(text, str):
        return text.splitlines()
    if isinstance(text, (bytes, bytearray)) or not isinstance(text, Sequence):
        return []
    lines: list[str] = []
    for item in text:
        if isinstance(item, str):
            lines.extend(item.splitlines() or [""])
    return lines


def as_text(text) -> str:
    return "\n".join(as_lines(text))


def find_first(text, pattern: str) -> str | None:
    """First substring matching `pattern` (case-sensitive), or None."""
    try:
        match = re.search(pattern, as_text(text))
    except re.error:
        return None
    return match.group(0) if match else None


def _inline_value(line: str) -> str | None:
    parts = line.split(":")
    if len(parts) > 1:
        value = parts[1].strip()
        if value:
            return value
    return None


def value_after_label(text, label: str) -> str | None:
    """
    Value printed next to `label`.

    First matching line that yields a value wins: its inline
    "Label: value" text, else the line below it.
    """
    lines = as_lines(text)
    needle = label.lower()

    for i, line in enumerate(lines):
        if needle not in line.lower():
            continue
        value = _inline_value(line)
        if value is not None:
            return value
        if i + 1 < len(lines):
            next_line = lines[i + 1].strip()
            if next_line:
                return next_line
    return None


def line_after_label(text, label: str) -> str | None:
    """First non-empty line after the first line containing `label`."""
    lines = as_lines(text)
    needle = label.lower()
    for i, line in enumerate(lines):
        if needle in line.lower():
            for candidate in lines[i + 1:]:
                if candidate.strip():
                    return candidate.strip()
            return None
    return None


def date_near(text, label: str) -> date | None:
    """Date on the first line containing `label`, else on the line below it."""
    lines = as_lines(text)
    needle = label.lower()
    for i, line in enumerate(lines):
        if needle in line.lower():
            found = parse_date_from_line(line)
            if found is None and i + 1 < len(lines):
                found = parse_date_from_line(lines[i + 1])
            return found
    return None
