"""Instruction text the learner hands to an external assistant."""
from __future__ import annotations

from .sanitizer import ENVELOPE_END, ENVELOPE_START

_KR_PROMPT = f"""당신은 선생님이다. 내가 방금 공부한 주제를 ARO 앱에 저장해 복습하려고 한다. 아래 형식을 그대로 지켜라. 반드시 '{ENVELOPE_START}'로 시작하고 '{ENVELOPE_END}'로 끝내라. 한국어로 작성.

{ENVELOPE_START}
## 학습 정리
{{주제명}}
- 핵심 개념: 한 줄 요약 3개.
- 상세 설명: 5~10문장. 예시 1개 포함.
- 체크리스트: 5개 항목. 각 항목은 동사로 시작.

## Q&A
Q. 핵심 개념 1을 설명하라.
A. 정의와 포인트 2~3개.

Q. 예시 상황에서 어떻게 적용하나.
A. 단계 3단계로 설명.

Q. 흔한 오해 1가지와 교정법은.
A. 오해 서술 후 정정 포인트.
{ENVELOPE_END}"""

_EN_PROMPT = f"""You are a teacher. I will save this topic into the ARO app for spaced review. Keep exactly the layout below. Start with '{ENVELOPE_START}' and end with '{ENVELOPE_END}'. Write in English.

{ENVELOPE_START}
## Summary
{{topic}}
- Key ideas: three one-liners.
- Detailed notes: 5-10 sentences, include one example.
- Checklist: 5 action items, start with verbs.

## Q&A
Q. Explain key idea 1.
A. Definition plus 2-3 bullet points.

Q. Apply it in an example case.
A. Describe in 3 steps.

Q. One common misconception and fix?
A. State the misconception and the correction.
{ENVELOPE_END}"""

PROMPTS = {"KR": _KR_PROMPT, "EN": _EN_PROMPT}


def teacher_prompt(language: str) -> str:
    try:
        return PROMPTS[language.upper()]
    except KeyError:
        raise ValueError(f"Unsupported prompt language: {language}") from None
