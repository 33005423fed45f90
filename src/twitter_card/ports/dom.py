from __future__ import annotations

from typing import Optional, Protocol


class DomElement(Protocol):
    """
    An element found by a selector query.
    """

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        ...

    def get_text(self) -> str:
        ...


class DomDocument(Protocol):
    """
    A parsed, queryable document.

    append_to_head inserts markup verbatim inside <head>; serialize returns the
    original markup plus whatever was inserted.
    """

    def select_first(self, selector: str) -> Optional[DomElement]:
        ...

    def append_to_head(self, markup: str) -> None:
        ...

    def serialize(self) -> str:
        ...


class HtmlParser(Protocol):
    """
    Turns markup into a DomDocument.
    """

    def parse(self, markup: str) -> DomDocument:
        ...
