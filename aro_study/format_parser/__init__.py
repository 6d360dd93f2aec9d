"""Study-dump format parser package."""
from __future__ import annotations

from . import block, clipboard, dialects, inline, markers, parser, records, sanitizer, sections, validator
from .models import DetectedDialect, Dialect, Level, ParseResult, QAEntry, Summary, SummaryKind
from .parser import parse
from .prompts import teacher_prompt
from .sanitizer import sanitize
from .validator import validate

__all__ = [
    "block",
    "clipboard",
    "dialects",
    "inline",
    "markers",
    "parser",
    "records",
    "sanitizer",
    "sections",
    "validator",
    "DetectedDialect",
    "Dialect",
    "Level",
    "ParseResult",
    "QAEntry",
    "Summary",
    "SummaryKind",
    "parse",
    "sanitize",
    "teacher_prompt",
    "validate",
]
