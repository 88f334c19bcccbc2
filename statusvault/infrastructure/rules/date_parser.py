"""
Date Parser.

Finds the first date printed in a line of OCR text. Formats are tried
in a fixed order; for each format every window of 1-4 consecutive words
is tried left to right and the first window that parses wins.

Known limitation: numeric dates are ambiguous between month-first and
day-first. "03/04/2025" is always read as March 4 because MM/dd/yyyy
comes first in DATE_FORMATS; no locale inference is attempted.
"""

import re
from datetime import date, datetime

# (printed form, strptime format), in priority order
DATE_FORMATS: list[tuple[str, str]] = [
    ("MM/dd/yyyy", "%m/%d/%Y"),
    ("MM-dd-yyyy", "%m-%d-%Y"),
    ("dd/MM/yyyy", "%d/%m/%Y"),
    ("dd-MM-yyyy", "%d-%m-%Y"),
    ("MMM dd, yyyy", "%b %d, %Y"),
    ("MMMM dd, yyyy", "%B %d, %Y"),
    ("dd MMM yyyy", "%d %b %Y"),
    ("dd MMMM yyyy", "%d %B %Y"),
    ("yyyy-MM-dd", "%Y-%m-%d"),
]

MAX_WINDOW_WORDS = 4

_NOISE = re.compile(r"[^A-Za-z0-9/\-,\s]")


def clean_line(line: str) -> str:
    """Drop every character a date token cannot contain."""
    return _NOISE.sub("", line)


def _windows(words: list[str]):
    for start in range(len(words)):
        for length in range(1, min(MAX_WINDOW_WORDS, len(words) - start) + 1):
            yield " ".join(words[start:start + length])


def parse_date_from_line(line) -> date | None:
    """First date found in `line`, or None. Never raises."""
    if not isinstance(line, str):
        return None
    words = clean_line(line).split()
    if not words:
        return None

    for _, fmt in DATE_FORMATS:
        for candidate in _windows(words):
            try:
                return datetime.strptime(candidate, fmt).date()
            except ValueError:
                continue
    return None
