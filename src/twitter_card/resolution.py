from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from functools import partial
from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import urljoin

from twitter_card.domain.errors import UnresolvedPropertyValue
from twitter_card.domain.models import GlobalOptions, ResolutionContext
from twitter_card.domain.schema import PROPS_WITH_PATH
from twitter_card.ports.dom import DomDocument

logger = logging.getLogger(__name__)

# "#id" or ".class": a letter first, then letters, digits, '-', '_', '.', ':'
_SELECTOR_RE = re.compile(r"[#.][A-Za-z][0-9A-Za-z\-._:]*")


def is_selector(value: str) -> bool:
    return _SELECTOR_RE.fullmatch(value) is not None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True, slots=True)
class PropertyLookup:
    """
    Finds the value of a known property for one document.

    Layers are searched in order: the document's twitter overrides, the document's
    own fields, then the global defaults. An override that names itself
    (`title: title`) is skipped so the lookup reaches the document field.
    """
    overrides: Mapping[str, Any]
    metadata: Mapping[str, Any]
    defaults: Mapping[str, Any]

    def __call__(self, name: str) -> Any:
        override = self.overrides.get(name)
        if override and override != name:
            return override
        for layer in (self.metadata, self.defaults):
            value = layer.get(name)
            if value:
                return value
        return None


def build_context(
    document: DomDocument,
    *,
    overrides: Mapping[str, Any],
    metadata: Mapping[str, Any],
    options: GlobalOptions,
) -> ResolutionContext:
    lookup = PropertyLookup(
        overrides=MappingProxyType(dict(overrides)),
        metadata=MappingProxyType(dict(metadata)),
        defaults=options.defaults,
    )
    return ResolutionContext(
        document=document,
        lookup=lookup,
        make_absolute=partial(urljoin, options.site_url),
    )


def _select_content(selector: str, document: DomDocument) -> str:
    el = document.select_first(selector)
    if el is None:
        return ""
    src = el.get("src")
    if src:
        return _as_text(src)
    return el.get_text()


def resolve_content(prop: str, raw: Any, context: ResolutionContext) -> str:
    """
    Turn a raw property value into escaped tag content.

    Sources, first match wins:
      - selector ("#id" / ".class"): first matching element's src, else its text
      - indirection: the value of the known property named by `raw` (used as-is)
      - literal: `raw` itself

    Properties needing an absolute url are joined against the site url.
    """
    value = _as_text(raw)
    logger.debug("prepare meta tag content: %s", value)

    if is_selector(value):
        content = _select_content(value, context.document)
    else:
        target = context.lookup(value) if value else None
        content = _as_text(target) if target else value

    if not content:
        raise UnresolvedPropertyValue(prop)

    if prop in PROPS_WITH_PATH:
        content = context.make_absolute(content)

    return html.escape(content, quote=True)


def resolve_all(tags: Mapping[str, Any], context: ResolutionContext) -> dict[str, str]:
    """Resolve every property, keeping property order."""
    return {prop: resolve_content(prop, raw, context) for prop, raw in tags.items()}
