"""Entry point turning a pasted study dump into a :class:`ParseResult`."""
from __future__ import annotations

import logging
import os

from .clipboard import html_to_text, looks_like_html
from .dialects import extract_entries
from .models import ParseResult, classify
from .sanitizer import sanitize
from .sections import build_summary, split_sections

logger = logging.getLogger(__name__)

MAX_ENTRIES = 200


def resolve_max_entries(value: int | None) -> int:
    if value is not None:
        if value < 0:
            raise ValueError("max_entries must be >= 0")
        return min(value, MAX_ENTRIES)
    env_value = os.environ.get("ARO_MAX_ENTRIES")
    if env_value:
        try:
            return min(max(int(env_value), 0), MAX_ENTRIES)
        except ValueError:
            logger.debug("Invalid ARO_MAX_ENTRIES value: %s", env_value)
    return MAX_ENTRIES


def parse(raw_text: str, *, max_entries: int | None = None) -> ParseResult:
    """Extract the summary and Q&A entries from ``raw_text``.

    Malformed or partial input never raises; it yields fewer entries, no
    summary, or an ``unknown`` result. Entries beyond the cap are discarded.
    """
    limit = resolve_max_entries(max_entries)
    text = raw_text
    if looks_like_html(text):
        text = html_to_text(text)
    sections = split_sections(sanitize(text))

    summary = build_summary(sections.summary) if sections.summary else None
    entries = extract_entries(sections.qa)
    if len(entries) > limit:
        logger.debug("Truncating %d entries to %d", len(entries), limit)
        entries = entries[:limit]

    result_entries = tuple(entries)
    result = ParseResult(
        summary=summary,
        entries=result_entries,
        detected_dialect=classify(summary, result_entries),
    )
    logger.debug(
        "Parsed study dump: %s with %d entries",
        result.detected_dialect.value,
        result.entry_count,
    )
    return result
