"""Normalisation of pasted study dumps."""
from __future__ import annotations

import re

ENVELOPE_START = "===ARO START==="
ENVELOPE_END = "===ARO END==="

_ESCAPED_START_RE = re.compile(r"^[ \t]*\\*===[ \t]*ARO[ \t]*START[ \t]*===", re.IGNORECASE | re.MULTILINE)
_ESCAPED_END_RE = re.compile(r"^[ \t]*\\*===[ \t]*ARO[ \t]*END[ \t]*===", re.IGNORECASE | re.MULTILINE)
_ESCAPED_QA_LABEL_RE = re.compile(r"Q\\+&A")
_ESCAPED_AMPERSAND_RE = re.compile(r"\\+&")
_ESCAPED_HEADING_RE = re.compile(r"^[ \t]*\\+(?=#)", re.MULTILINE)
_ESCAPED_DELIMITER_RE = re.compile(r"[\\#]*###[\\#]*")


def normalise_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _unescape_hash_run(match: re.Match[str]) -> str:
    # Unescapes the whole run of hashes and backslashes in one step.
    return match.group().replace("\\", "")


def sanitize(text: str) -> str:
    """Return ``text`` with line endings unified and copy/paste artefacts repaired.

    The transformation is idempotent and never fails.
    """
    cleaned = normalise_line_endings(text).strip()
    cleaned = _ESCAPED_START_RE.sub(ENVELOPE_START, cleaned)
    cleaned = _ESCAPED_END_RE.sub(ENVELOPE_END, cleaned)
    cleaned = _ESCAPED_QA_LABEL_RE.sub("Q&A", cleaned)
    cleaned = _ESCAPED_AMPERSAND_RE.sub("&", cleaned)
    cleaned = _ESCAPED_HEADING_RE.sub("", cleaned)
    cleaned = _ESCAPED_DELIMITER_RE.sub(_unescape_hash_run, cleaned)
    return cleaned
