from __future__ import annotations

import pytest

from aro_study.format_parser import DetectedDialect, Level, parse, validate
from aro_study.format_parser.parser import MAX_ENTRIES, resolve_max_entries
from aro_study.format_parser.sanitizer import sanitize
from aro_study.format_parser.validator import EMPTY_RESULT_ISSUE

SAMPLES = [
    "",
    "   \r\n  ",
    "## 정리\n커패시터는 전하를 저장한다.\n\n두 도체판 사이에 유전체가 있다.",
    "Q: 커패시터란?\nA: 전하를 저장하는 소자\n###Q: 저항이란?\nA: 전류를 제한하는 소자",
    "Q. 질문\nA. 답변\n\nQ. 다음 질문",
    "###\nQ: \nA: 답만 있음\n###\nQ: 질문만 있음\n",
    "\\===ARO START===\r\n<1> 설명문\r\n내용\r\n<2> Q\\&A\r\nQ. 하나?\r\nA. 둘\r\n\\===ARO END===",
    "## 퀴즈\n### 1장\n**Q. 굵은 질문?**\nA. 답\nQ. 답 없음",
]


@pytest.fixture()
def summary_and_qa_text() -> str:
    return "\n".join(
        [
            "## 학습 정리",
            "옴의 법칙 요약",
            "전압은 전류와 저항의 곱이다.",
            "",
            "## Q&A",
            "### 기본 개념",
            "Q. 옴의 법칙이란?",
            "A. V = IR",
            "### 응용",
            "Q. 저항이 두 배가 되면?",
            "A. 전류가 절반이 된다.",
        ]
    )


def test_summary_only_heading() -> None:
    text = "## 정리\n커패시터는 전하를 저장한다.\n\n두 도체판 사이에 유전체가 있다."
    result = parse(text)
    assert result.detected_dialect is DetectedDialect.SUMMARY_ONLY
    assert result.entries == ()
    assert result.summary is not None
    assert result.summary.title == "커패시터는 전하를 저장한다."
    assert result.summary.content == (
        "커패시터는 전하를 저장한다.\n\n두 도체판 사이에 유전체가 있다."
    )


def test_block_dialect_two_blocks() -> None:
    text = "Q: 커패시터란?\nA: 전하를 저장하는 소자\n###Q: 저항이란?\nA: 전류를 제한하는 소자"
    result = parse(text)
    assert result.detected_dialect is DetectedDialect.QA_ONLY
    assert [entry.question for entry in result.entries] == ["커패시터란?", "저항이란?"]
    assert [entry.answer for entry in result.entries] == [
        "전하를 저장하는 소자",
        "전류를 제한하는 소자",
    ]
    assert all(entry.level is Level.BASIC for entry in result.entries)
    assert result.entry_count == 2


def test_unanswered_trailing_question_is_dropped() -> None:
    result = parse("Q. 질문\nA. 답변\n\nQ. 다음 질문")
    assert result.detected_dialect is DetectedDialect.QA_ONLY
    assert result.entry_count == 1
    assert result.entries[0].question == "질문"
    assert result.entries[0].answer == "답변"


def test_block_tags_are_trimmed_in_order() -> None:
    text = "###\nQ: 소득세란?\nA: 개인 소득에 부과되는 세금\nTAGS:  세법 , 기초 ,\nLEVEL: Intermediate\n###"
    result = parse(text)
    assert result.entry_count == 1
    assert result.entries[0].tags == ("세법", "기초")
    assert result.entries[0].level is Level.INTERMEDIATE


def test_empty_input_is_unknown() -> None:
    result = parse("")
    assert result.detected_dialect is DetectedDialect.UNKNOWN
    assert result.entries == ()
    assert result.summary is None
    assert validate(result) == [EMPTY_RESULT_ISSUE]


def test_entries_are_capped() -> None:
    text = "\n".join(f"Q. 질문 {index}\nA. 답변 {index}" for index in range(250))
    result = parse(text)
    assert result.entry_count == MAX_ENTRIES
    assert result.entries[0].question == "질문 0"
    assert result.entries[-1].question == "질문 199"


def test_summary_and_inline_qa_with_section_tags(summary_and_qa_text: str) -> None:
    result = parse(summary_and_qa_text)
    assert result.detected_dialect is DetectedDialect.SUMMARY_AND_QA
    assert result.summary is not None
    assert result.summary.title == "옴의 법칙 요약"
    assert "## Q&A" not in result.summary.content
    assert [entry.tags for entry in result.entries] == [("기본 개념",), ("응용",)]
    assert result.entries[1].answer == "전류가 절반이 된다."


def test_summary_heading_with_blocks() -> None:
    text = "# 요약\n세법 기초 노트\n###\nQ: 하나\nA: 일\n###\nQ: 둘\nA: 이"
    result = parse(text)
    assert result.detected_dialect is DetectedDialect.SUMMARY_AND_QA
    assert result.summary is not None
    assert result.summary.content == "세법 기초 노트"
    assert [entry.answer for entry in result.entries] == ["일", "이"]


def test_envelope_limits_parsed_text() -> None:
    text = "\n".join(
        [
            "앞부분 잡담",
            "\\===ARO START===",
            "<1> 설명문",
            "내용입니다",
            "<2> Q\\&A",
            "Q. 질문?",
            "A. 답변",
            "\\===ARO END===",
            "Q. 바깥 질문",
            "A. 바깥 답",
        ]
    )
    result = parse(text)
    assert result.detected_dialect is DetectedDialect.SUMMARY_AND_QA
    assert result.summary is not None
    assert result.summary.content == "내용입니다"
    assert [entry.question for entry in result.entries] == ["질문?"]


def test_noise_qa_region_keeps_summary() -> None:
    result = parse("## 정리\n내용\n## Q&A\n질문이 없습니다")
    assert result.detected_dialect is DetectedDialect.SUMMARY_ONLY
    assert result.summary is not None
    assert result.summary.content == "내용"


def test_only_unanswered_questions_is_unknown() -> None:
    result = parse("Q. 답 없는 질문")
    assert result.detected_dialect is DetectedDialect.UNKNOWN
    assert result.summary is None
    assert len(validate(result)) == 1


def test_plain_note_becomes_summary() -> None:
    result = parse("  오늘 배운 것\n열역학 제1법칙  ")
    assert result.detected_dialect is DetectedDialect.SUMMARY_ONLY
    assert result.summary is not None
    assert result.summary.title == "오늘 배운 것"


def test_clipboard_html_is_flattened() -> None:
    html = (
        "<h2>정리</h2><p>요약 본문</p><h2>Q&amp;A</h2>"
        "<p>Q. 질문?</p><p>A. 답변</p>"
    )
    result = parse(html)
    assert result.detected_dialect is DetectedDialect.SUMMARY_AND_QA
    assert result.summary is not None
    assert result.summary.content == "요약 본문"
    assert result.entries[0].answer == "답변"


def test_plain_dump_about_html_tags_is_not_flattened() -> None:
    text = "Q. 줄바꿈 태그는?\nA. <br>\nQ. 문단 태그는?\nA. <p>와 </p>"
    result = parse(text)
    assert result.detected_dialect is DetectedDialect.QA_ONLY
    assert [(entry.question, entry.answer) for entry in result.entries] == [
        ("줄바꿈 태그는?", "<br>"),
        ("문단 태그는?", "<p>와 </p>"),
    ]


def test_clipboard_html_keeps_source_line_breaks() -> None:
    result = parse("<div>Q. 하나?\nA. 일\nQ. 둘?\nA. 이</div>")
    assert [(entry.question, entry.answer) for entry in result.entries] == [
        ("하나?", "일"),
        ("둘?", "이"),
    ]


def test_max_entries_argument_lowers_cap() -> None:
    text = "Q. 하나\nA. 1\nQ. 둘\nA. 2"
    assert parse(text, max_entries=1).entry_count == 1


def test_resolve_max_entries_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARO_MAX_ENTRIES", "5")
    assert resolve_max_entries(None) == 5
    monkeypatch.setenv("ARO_MAX_ENTRIES", "500")
    assert resolve_max_entries(None) == MAX_ENTRIES
    monkeypatch.setenv("ARO_MAX_ENTRIES", "many")
    assert resolve_max_entries(None) == MAX_ENTRIES
    assert resolve_max_entries(3) == 3


def test_negative_max_entries_rejected() -> None:
    with pytest.raises(ValueError, match="max_entries must be >= 0"):
        parse("Q. a\nA. b", max_entries=-1)


def test_to_dict_is_json_ready() -> None:
    data = parse("Q. 하나?\nA. 일").to_dict()
    assert data["detected_dialect"] == "qa_only"
    assert data["entry_count"] == 1
    assert data["summary"] is None
    assert data["entries"] == [
        {"question": "하나?", "answer": "일", "tags": [], "level": "basic"}
    ]


@pytest.mark.parametrize("text", SAMPLES)
def test_sanitize_is_idempotent(text: str) -> None:
    once = sanitize(text)
    assert sanitize(once) == once


@pytest.mark.parametrize("text", SAMPLES)
def test_result_invariants(text: str) -> None:
    result = parse(text)
    assert result.entry_count == len(result.entries) <= MAX_ENTRIES
    for entry in result.entries:
        assert entry.question.strip() and entry.answer.strip()
    if result.detected_dialect is DetectedDialect.UNKNOWN:
        assert result.summary is None and result.entries == ()
