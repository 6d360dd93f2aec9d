"""Choosing the grammar for a Q&A region."""
from __future__ import annotations

import logging
from collections.abc import Callable

from . import block, inline
from .markers import has_delimiter, has_question_marker
from .models import Dialect, QAEntry

logger = logging.getLogger(__name__)

# Evaluated in order; the first matching rule picks the dialect.
DIALECT_RULES: list[tuple[Dialect, Callable[[str], bool]]] = [
    (Dialect.BLOCK, has_delimiter),
    (Dialect.INLINE, has_question_marker),
]

EXTRACTORS: dict[Dialect, Callable[[str], list[QAEntry]]] = {
    Dialect.BLOCK: block.extract_blocks,
    Dialect.INLINE: inline.extract_inline,
}


def detect_dialect(region: str) -> Dialect | None:
    for dialect, matches in DIALECT_RULES:
        if matches(region):
            return dialect
    return None


def extract_entries(region: str | None) -> list[QAEntry]:
    if region is None:
        return []
    dialect = detect_dialect(region)
    if dialect is None:
        logger.debug("Q&A region matched no dialect; discarding %d chars", len(region))
        return []
    entries = EXTRACTORS[dialect](region)
    logger.debug("Extracted %d entries with %s dialect", len(entries), dialect.value)
    return entries
