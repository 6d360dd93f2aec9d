"""Locating the summary and Q&A regions of a sanitized study dump."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .markers import HEADING_RE, first_delimiter, first_question_marker
from .models import Summary
from .sanitizer import ENVELOPE_END, ENVELOPE_START

logger = logging.getLogger(__name__)

SUMMARY_LABELS = ["정리", "요약", "학습 정리", "내용 정리", "summary", "explanation"]
QA_LABELS = ["Q&A", "문제", "퀴즈", "quiz"]

ENVELOPE_START_RE = re.compile(rf"^{re.escape(ENVELOPE_START)}", re.MULTILINE)
ENVELOPE_END_RE = re.compile(rf"^{re.escape(ENVELOPE_END)}", re.MULTILINE)
SUMMARY_MARKER_RE = re.compile(r"^[ \t]*<1>[^\n]*$", re.MULTILINE)
QA_MARKER_RE = re.compile(r"^[ \t]*<2>[^\n]*$", re.MULTILINE)


def _heading_pattern(label: str) -> re.Pattern[str]:
    return re.compile(
        rf"^#{{1,2}}[ \t]+[^\n]*?{re.escape(label)}[^\n]*$",
        re.IGNORECASE | re.MULTILINE,
    )


SUMMARY_PATTERNS = [_heading_pattern(label) for label in SUMMARY_LABELS] + [SUMMARY_MARKER_RE]
QA_PATTERNS = [_heading_pattern(label) for label in QA_LABELS] + [QA_MARKER_RE]


@dataclass(frozen=True)
class Sections:
    summary: str | None
    qa: str | None


def extract_envelope(text: str) -> str:
    """Return the text inside the ARO envelope, or ``text`` when there is none."""
    start = ENVELOPE_START_RE.search(text)
    if start is None:
        return text
    body_start = start.end()
    end = ENVELOPE_END_RE.search(text, body_start)
    if end is None:
        logger.debug("Envelope start marker without end marker; reading to end of text")
        return text[body_start:]
    return text[body_start : end.start()]


def _is_qa_heading(line: str) -> bool:
    return any(pattern.fullmatch(line) for pattern in QA_PATTERNS)


def find_heading(
    text: str,
    patterns: list[re.Pattern[str]],
    start: int = 0,
    *,
    skip_qa_headings: bool = False,
) -> re.Match[str] | None:
    """Return the first match of the highest-priority pattern that matches."""
    for pattern in patterns:
        for match in pattern.finditer(text, start):
            if skip_qa_headings and _is_qa_heading(match.group(0).strip()):
                continue
            return match
    return None


def _present(region: str) -> str | None:
    stripped = region.strip()
    return stripped or None


def split_sections(text: str) -> Sections:
    body = extract_envelope(text)
    summary_heading = find_heading(body, SUMMARY_PATTERNS, skip_qa_headings=True)
    qa_search_from = summary_heading.end() if summary_heading else 0
    qa_heading = find_heading(body, QA_PATTERNS, qa_search_from)
    question_at = first_question_marker(body)
    delimiter_at = first_delimiter(body)

    summary: str | None = None
    if summary_heading is not None:
        start = summary_heading.end()
        stops = [
            position
            for position in (
                qa_heading.start() if qa_heading else None,
                first_question_marker(body, start),
                first_delimiter(body, start),
            )
            if position is not None
        ]
        summary = _present(body[start : min(stops, default=len(body))])
    elif question_at is None and delimiter_at is None:
        summary = _present(body)

    qa: str | None = None
    if qa_heading is not None:
        qa = _present(body[qa_heading.end() :])
    else:
        starts = [position for position in (question_at, delimiter_at) if position is not None]
        if starts:
            qa = _present(body[min(starts) :])

    logger.debug(
        "Split sections: summary=%s qa=%s",
        "present" if summary else "absent",
        "present" if qa else "absent",
    )
    return Sections(summary=summary, qa=qa)


def build_summary(region: str) -> Summary:
    """Title is the first non-blank line of the region, without heading marks."""
    first_line = next(line.strip() for line in region.splitlines() if line.strip())
    heading = HEADING_RE.match(first_line)
    title = heading.group(2).strip() if heading else first_line
    return Summary(title=title, content=region)
