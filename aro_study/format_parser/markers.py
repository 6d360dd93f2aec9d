"""Line markers shared by the splitter, the detector and both extractors."""
from __future__ import annotations

import re

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
SECTION_HEADING_RE = re.compile(r"^#{1,3}\s+(.+)$")
INLINE_Q_RE = re.compile(r"^(?:\*\*)?[Qq][.:)：][ \t]*(.*)$")
INLINE_A_RE = re.compile(r"^(?:\*\*)?A[.:)：][ \t]*(.*)$")
INLINE_Q_LINE_RE = re.compile(r"^[ \t]*(?:\*\*)?[Qq][.:)：]", re.MULTILINE)
SAME_LINE_A_RE = re.compile(r"[ \t]+(?:\*\*)?A[.:)：][ \t]+")

_DELIMITER_RE = re.compile(r"(?<!#)###(?!#)(?![ \t]++(?!(?:Q|A|TAGS|LEVEL):)\S)")


def find_delimiters(text: str, start: int = 0) -> list[tuple[int, int]]:
    """Return ``(start, end)`` spans of block delimiters at or after ``start``.

    A ``###`` followed by spaces and ordinary text on the same line is a
    markdown heading, not a delimiter, unless that text opens a block field.
    """
    return [match.span() for match in _DELIMITER_RE.finditer(text, start)]


def first_delimiter(text: str, start: int = 0) -> int | None:
    match = _DELIMITER_RE.search(text, start)
    return match.start() if match else None


def has_delimiter(text: str) -> bool:
    return first_delimiter(text) is not None


def first_question_marker(text: str, start: int = 0) -> int | None:
    match = INLINE_Q_LINE_RE.search(text, start)
    return match.start() if match else None


def has_question_marker(text: str) -> bool:
    return first_question_marker(text) is not None


def strip_emphasis(value: str) -> str:
    cleaned = value.strip()
    if cleaned.startswith("**"):
        cleaned = cleaned[2:]
    if cleaned.endswith("**"):
        cleaned = cleaned[:-2]
    return cleaned.strip()
