"""Flattening of rich-text clipboard content into plain study text."""
from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

logger = logging.getLogger(__name__)

HTML_START_RE = re.compile(r"^\s*<(?:!--|!doctype\b|[a-z][a-z0-9]*(?:[\s/>]|$))", re.IGNORECASE)
HTML_HINT_RE = re.compile(r"</(?:p|div|li|h[1-6]|ul|ol|table|section|article|blockquote|pre)>|<br\s*/?>", re.IGNORECASE)
HEADING_TAGS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}
BLOCK_TAGS = {"p", "div", "section", "article", "blockquote", "pre", "tr", "ul", "ol", "table"}


def looks_like_html(text: str) -> bool:
    """Tell editor HTML apart from plain text that merely mentions tags.

    The text must open with markup and contain a block element or a line break.
    """
    return bool(HTML_START_RE.match(text) and HTML_HINT_RE.search(text))


def html_to_text(text: str) -> str:
    """Convert editor HTML into the line-oriented markdown the parser reads.

    Headings keep their level as ``#`` prefixes, list items become ``- `` lines
    and block elements are separated by line breaks.
    """
    soup = BeautifulSoup(text, "lxml")
    root = soup.body or soup
    lines: list[str] = []
    buffer: list[str] = []

    def flush() -> None:
        line = "".join(buffer).strip()
        buffer.clear()
        if line and line != "-":
            lines.append(line)

    def walk(node: Tag) -> None:
        for child in node.children:
            if isinstance(child, Comment):
                continue
            if isinstance(child, NavigableString):
                for index, piece in enumerate(str(child).split("\n")):
                    if index and "".join(buffer).strip() not in ("", "-"):
                        flush()
                    buffer.append(piece)
                continue
            if not isinstance(child, Tag):
                continue
            name = child.name.lower()
            if name in {"script", "style"}:
                continue
            if name == "br":
                flush()
                continue
            if name in HEADING_TAGS:
                flush()
                heading = child.get_text(" ", strip=True)
                if heading:
                    lines.append(f"{'#' * HEADING_TAGS[name]} {heading}")
                continue
            if name == "li":
                flush()
                buffer.append("- ")
                walk(child)
                flush()
                continue
            if name in BLOCK_TAGS:
                flush()
                walk(child)
                flush()
                continue
            walk(child)

    walk(root)
    flush()
    logger.debug("Flattened clipboard HTML into %d lines", len(lines))
    return "\n".join(lines)
