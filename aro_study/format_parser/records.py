"""Conversion of parsed entries into flashcard study records."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass
from hashlib import sha1

from .models import QAEntry

ARCHIVE_BOOK_NAME = "Archive"
DEFAULT_SUBJECT = "기타"
CHAPTER_TITLE_LENGTH = 20

KNOWN_SUBJECTS = [
    "수학",
    "영어",
    "국어",
    "물리",
    "화학",
    "생물",
    "지구과학",
    "한국사",
    "세계사",
    "사회",
    "과학",
    "음악",
    "미술",
    "체육",
    "정보",
    "컴퓨터",
    "프로그래밍",
    "JavaScript",
    "Python",
    "Java",
    "데이터베이스",
    "알고리즘",
    "자료구조",
    "운영체제",
    "네트워크",
]


@dataclass
class FlashcardRecord:
    record_id: str
    question: str
    correct_answer: str
    wrong_answer: str | None
    explanation: str | None
    subject_name: str
    book_name: str
    chapter_name: str
    is_resolved: bool
    fingerprint: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def normalize_key(value: str) -> str:
    return " ".join(value.lower().strip().split())


def entry_fingerprint(entry: QAEntry) -> str:
    payload = normalize_key(entry.question) + "|" + normalize_key(entry.answer)
    return sha1(payload.encode("utf-8")).hexdigest()


def chapter_name(title: str) -> str:
    return f"{title[:CHAPTER_TITLE_LENGTH]}..."


def to_flashcards(
    entries: Iterable[QAEntry],
    title: str,
    conversation_id: str,
) -> list[FlashcardRecord]:
    records: list[FlashcardRecord] = []
    for index, entry in enumerate(entries):
        explanation = f"Tags: {', '.join(entry.tags)}" if entry.tags else None
        records.append(
            FlashcardRecord(
                record_id=f"archive-{conversation_id}-{index}",
                question=entry.question,
                correct_answer=entry.answer,
                wrong_answer=None,
                explanation=explanation,
                subject_name=title,
                book_name=ARCHIVE_BOOK_NAME,
                chapter_name=chapter_name(title),
                is_resolved=False,
                fingerprint=entry_fingerprint(entry),
            )
        )
    return records


def count_valid(entries: Iterable[QAEntry]) -> int:
    return sum(1 for entry in entries if entry.question.strip() and entry.answer.strip())


def extract_subject(title: str) -> str:
    lowered = title.lower()
    for subject in KNOWN_SUBJECTS:
        if subject.lower() in lowered:
            return subject
    words = title.split()
    return words[0] if words else DEFAULT_SUBJECT
