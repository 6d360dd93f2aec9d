"""Extractor for loosely punctuated ``Q.``/``A.`` lines."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .markers import INLINE_A_RE, INLINE_Q_RE, SAME_LINE_A_RE, SECTION_HEADING_RE, strip_emphasis
from .models import Level, QAEntry

logger = logging.getLogger(__name__)


class _State(Enum):
    IDLE = "idle"
    IN_QUESTION = "in_question"
    IN_ANSWER = "in_answer"


@dataclass
class InlineScan:
    """Line-by-line scanner state.

    ``section_tags`` holds the text of the nearest preceding level 1-3
    heading. A pending question is abandoned when another question starts
    before its answer was found.
    """

    entries: list[QAEntry] = field(default_factory=list)
    section_tags: tuple[str, ...] = ()
    state: _State = _State.IDLE
    question_lines: list[str] = field(default_factory=list)
    answer_lines: list[str] = field(default_factory=list)
    dropped: int = 0

    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()
        if not line:
            return

        heading = SECTION_HEADING_RE.match(line)
        if heading:
            if self.state is _State.IN_ANSWER:
                self._emit()
            self.section_tags = (strip_emphasis(heading.group(1)),)
            return

        question = INLINE_Q_RE.match(line)
        if question:
            self._close()
            self._open_question(question.group(1))
            return

        answer = INLINE_A_RE.match(line)
        if answer and self.state is _State.IN_QUESTION:
            self.answer_lines = [answer.group(1)]
            self.state = _State.IN_ANSWER
            return

        if self.state is _State.IN_QUESTION:
            self.question_lines.append(line)
        elif self.state is _State.IN_ANSWER:
            self.answer_lines.append(line)

    def finish(self) -> list[QAEntry]:
        self._close()
        if self.dropped:
            logger.debug("Dropped %d unanswered questions", self.dropped)
        return self.entries

    def _open_question(self, text: str) -> None:
        same_line = SAME_LINE_A_RE.search(text)
        if same_line:
            self.question_lines = [text[: same_line.start()]]
            self.answer_lines = [text[same_line.end() :]]
            self.state = _State.IN_ANSWER
            return
        self.question_lines = [text]
        self.answer_lines = []
        self.state = _State.IN_QUESTION

    def _close(self) -> None:
        if self.state is _State.IN_ANSWER:
            self._emit()
        elif self.state is _State.IN_QUESTION:
            self.dropped += 1
            self._reset()

    def _emit(self) -> None:
        question = strip_emphasis("\n".join(self.question_lines))
        answer = strip_emphasis("\n".join(self.answer_lines))
        if question and answer:
            self.entries.append(
                QAEntry(
                    question=question,
                    answer=answer,
                    tags=self.section_tags,
                    level=Level.BASIC,
                )
            )
        else:
            self.dropped += 1
        self._reset()

    def _reset(self) -> None:
        self.question_lines = []
        self.answer_lines = []
        self.state = _State.IDLE


def extract_inline(region: str) -> list[QAEntry]:
    scan = InlineScan()
    for raw_line in region.splitlines():
        scan.feed(raw_line)
    return scan.finish()
