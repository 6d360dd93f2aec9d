"""Extractor for delimiter-separated ``Q:``/``A:``/``TAGS:``/``LEVEL:`` blocks."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from .markers import find_delimiters
from .models import Level, QAEntry

logger = logging.getLogger(__name__)

TAG_SPLIT_RE = re.compile(r"[,\n]")
LEVELS = {level.value: level for level in Level}


class _State(Enum):
    IDLE = "idle"
    IN_QUESTION = "in_question"
    IN_ANSWER = "in_answer"
    IN_TAGS_OR_LEVEL = "in_tags_or_level"


FIELD_PREFIXES: list[tuple[str, str, _State]] = [
    ("Q:", "question", _State.IN_QUESTION),
    ("A:", "answer", _State.IN_ANSWER),
    ("TAGS:", "tags", _State.IN_TAGS_OR_LEVEL),
    ("LEVEL:", "level", _State.IN_TAGS_OR_LEVEL),
]


@dataclass
class _BlockFields:
    question: str = ""
    answer: str = ""
    tags: list[str] = field(default_factory=list)
    level: Level = Level.BASIC

    def commit(self, name: str, content: str) -> None:
        value = content.strip()
        if not value:
            return
        if name == "question":
            self.question = value
        elif name == "answer":
            self.answer = value
        elif name == "tags":
            self.tags = split_tags(value)
        elif name == "level":
            level = LEVELS.get(value.lower())
            if level is not None:
                self.level = level
            else:
                logger.debug("Ignoring unknown level %r", value)

    def to_entry(self) -> QAEntry | None:
        if not self.question or not self.answer:
            return None
        return QAEntry(
            question=self.question,
            answer=self.answer,
            tags=tuple(self.tags),
            level=self.level,
        )


def split_tags(value: str) -> list[str]:
    return [part.strip() for part in TAG_SPLIT_RE.split(value) if part.strip()]


def split_blocks(region: str) -> list[str]:
    blocks: list[str] = []
    cursor = 0
    for start, end in find_delimiters(region):
        blocks.append(region[cursor:start])
        cursor = end
    blocks.append(region[cursor:])
    return [block for block in blocks if block.strip()]


def _match_prefix(line: str) -> tuple[str, str, _State] | None:
    for prefix, name, state in FIELD_PREFIXES:
        if line.startswith(prefix):
            return name, line[len(prefix) :], state
    return None


def parse_block(block: str) -> QAEntry | None:
    fields = _BlockFields()
    state = _State.IDLE
    current_name: str | None = None
    current_lines: list[str] = []
    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        matched = _match_prefix(line)
        if matched is not None:
            if current_name is not None:
                fields.commit(current_name, "\n".join(current_lines))
            current_name, content, state = matched
            current_lines = [content.strip()]
            continue
        if state is _State.IDLE:
            continue
        current_lines.append(line)
    if current_name is not None:
        fields.commit(current_name, "\n".join(current_lines))
    return fields.to_entry()


def extract_blocks(region: str) -> list[QAEntry]:
    entries: list[QAEntry] = []
    for index, block in enumerate(split_blocks(region), start=1):
        entry = parse_block(block)
        if entry is None:
            logger.debug("Dropping block %d: question or answer missing", index)
            continue
        entries.append(entry)
    return entries
