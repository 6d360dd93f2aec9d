"""Structured records produced by the study-dump parser."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class Level(str, Enum):
    """Difficulty of an entry; ``basic`` unless a block says otherwise."""

    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class SummaryKind(str, Enum):
    MARKDOWN = "markdown"


class DetectedDialect(str, Enum):
    """Terminal outcome of a parse."""

    SUMMARY_AND_QA = "summary_and_qa"
    SUMMARY_ONLY = "summary_only"
    QA_ONLY = "qa_only"
    UNKNOWN = "unknown"


class Dialect(Enum):
    """Grammar used for the Q&A region."""

    BLOCK = "block"
    INLINE = "inline"


@dataclass(frozen=True)
class Summary:
    """Explanatory part of a dump; ``title`` is its first line without heading marks."""

    title: str
    content: str
    kind: SummaryKind = SummaryKind.MARKDOWN


@dataclass(frozen=True)
class QAEntry:
    """One question-answer pair with its tags in source order."""

    question: str
    answer: str
    tags: tuple[str, ...] = ()
    level: Level = Level.BASIC


@dataclass(frozen=True)
class ParseResult:
    """Immutable output of :func:`format_parser.parser.parse`."""

    summary: Summary | None
    entries: tuple[QAEntry, ...] = field(default_factory=tuple)
    detected_dialect: DetectedDialect = DetectedDialect.UNKNOWN

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["detected_dialect"] = self.detected_dialect.value
        data["entry_count"] = self.entry_count
        if self.summary is not None:
            data["summary"]["kind"] = self.summary.kind.value
        data["entries"] = [
            {
                "question": entry.question,
                "answer": entry.answer,
                "tags": list(entry.tags),
                "level": entry.level.value,
            }
            for entry in self.entries
        ]
        return data


def classify(summary: Summary | None, entries: tuple[QAEntry, ...]) -> DetectedDialect:
    if summary is not None and entries:
        return DetectedDialect.SUMMARY_AND_QA
    if summary is not None:
        return DetectedDialect.SUMMARY_ONLY
    if entries:
        return DetectedDialect.QA_ONLY
    return DetectedDialect.UNKNOWN
