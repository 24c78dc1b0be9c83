"""Parsed-document capability used by the fact extractor."""
from __future__ import annotations

from typing import Any, Protocol

from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString

# Elements whose text is code, not page copy
_RAW_TEXT_TAGS = frozenset({"script", "style"})


class ParsedDocument(Protocol):
    """Minimal DOM query capability.

    Anything that can select elements by CSS pattern and read their text and
    attributes can be analyzed; tests may pass a fake.
    """

    def select_all(self, pattern: str) -> list[Any]:
        ...

    def text(self, ref: Any) -> str:
        ...

    def attr(self, ref: Any, name: str) -> str | None:
        ...


class SoupDocument:
    """ParsedDocument backed by BeautifulSoup with the lxml tree builder.

    lxml recovers from malformed markup instead of raising, so any string
    yields a queryable document.
    """

    def __init__(self, html: str):
        self._soup = BeautifulSoup(html or "", "lxml")

    def select_all(self, pattern: str) -> list[Tag]:
        return self._soup.select(pattern)

    def text(self, ref: Tag) -> str:
        if ref.name in _RAW_TEXT_TAGS:
            return "".join(str(child) for child in ref.contents if isinstance(child, NavigableString))

        parts = []
        for string in ref.find_all(string=True):
            # Comments, doctypes and CDATA
            if isinstance(string, PreformattedString):
                continue
            if string.parent is not None and string.parent.name in _RAW_TEXT_TAGS:
                continue
            stripped = string.strip()
            if stripped:
                parts.append(stripped)
        return " ".join(parts)

    def attr(self, ref: Tag, name: str) -> str | None:
        value = ref.get(name)
        if value is None:
            return None
        # Multi-valued attributes (rel, class) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return value
