"""Advisory structural checks over a parse result."""
from __future__ import annotations

from .models import ParseResult

EMPTY_RESULT_ISSUE = "neither a summary nor any Q&A pairs were found."


def validate(result: ParseResult) -> list[str]:
    issues: list[str] = []
    if result.summary is None and not result.entries:
        issues.append(EMPTY_RESULT_ISSUE)
    for position, entry in enumerate(result.entries, start=1):
        if not entry.question.strip():
            issues.append(f"entry {position}: question is empty.")
        if not entry.answer.strip():
            issues.append(f"entry {position}: answer is empty.")
    return issues
