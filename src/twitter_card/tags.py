from __future__ import annotations

from typing import Mapping

from twitter_card.ports.dom import DomDocument


def create_tag(prop: str, value: str) -> str:
    """Meta tag markup; `value` must already be escaped."""
    return f'<meta name="twitter:{prop}" content="{value}" />'


def insert_tags(document: DomDocument, resolved: Mapping[str, str]) -> str:
    """Append one meta tag per resolved property to the document head and serialize it."""
    markup = "".join(create_tag(prop, value) for prop, value in resolved.items())
    document.append_to_head(markup)
    return document.serialize()
