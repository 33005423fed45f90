from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from twitter_card.domain.errors import SelectorError

_HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)
_OPEN_TAG_RE = re.compile(r"<[^>]*>")


def _offset(markup: str, line: int, pos: int) -> int:
    """Absolute offset of a 1-based line / 0-based column position."""
    start = 0
    for _ in range(line - 1):
        start = markup.index("\n", start) + 1
    return start + pos


class SoupDocument:
    """
    DomDocument backed by BeautifulSoup.

    The tree is only used for queries and to locate <head>. Inserted markup is
    spliced into the source text, so the rest of the page stays byte-identical.
    html.parser records where each start tag begins, which is what the splice
    positions are computed from.
    """

    def __init__(self, markup: str) -> None:
        self._markup = markup
        self._soup = BeautifulSoup(markup, "html.parser")

    def select_first(self, selector: str) -> Optional[Tag]:
        try:
            return self._soup.select_one(selector)
        except SelectorSyntaxError as e:
            raise SelectorError(selector) from e

    def append_to_head(self, markup: str) -> None:
        head = self._soup.head
        if head is not None:
            start = self._start_of(head)
            close = _HEAD_CLOSE_RE.search(self._markup, start)
            # Unclosed <head>: put the markup right after its start tag
            at = close.start() if close else self._end_of_start_tag(head)
        else:
            markup = f"<head>{markup}</head>"
            root = self._soup.html
            at = self._end_of_start_tag(root) if root is not None else 0

        self._markup = self._markup[:at] + markup + self._markup[at:]
        self._soup = BeautifulSoup(self._markup, "html.parser")

    def serialize(self) -> str:
        return self._markup

    def _start_of(self, tag: Tag) -> int:
        return _offset(self._markup, tag.sourceline, tag.sourcepos)

    def _end_of_start_tag(self, tag: Tag) -> int:
        m = _OPEN_TAG_RE.match(self._markup, self._start_of(tag))
        return m.end() if m else self._start_of(tag)


@dataclass(frozen=True, slots=True)
class SoupHtmlParser:
    """
    HtmlParser using BeautifulSoup's html.parser tree builder.
    """

    def parse(self, markup: str) -> SoupDocument:
        return SoupDocument(markup)
