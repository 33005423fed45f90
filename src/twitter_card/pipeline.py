from __future__ import annotations

import logging
import re
from collections.abc import Mapping, MutableMapping
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Any

from twitter_card.domain.errors import MissingSiteBaseURL
from twitter_card.domain.models import GlobalOptions, ProcessReport, SourceFile
from twitter_card.domain.schema import DEFAULT_CARD_TYPE, META_CARD, META_SITEURL, META_TWITTER, is_card_type
from twitter_card.ports.dom import HtmlParser
from twitter_card.resolution import build_context, resolve_all
from twitter_card.tags import insert_tags
from twitter_card.validation import validate_metadata

logger = logging.getLogger(__name__)

_HTML_EXT_RE = re.compile(r"\.html")


def normalize_options(options: Mapping[str, Any]) -> GlobalOptions:
    """
    Validate engine options and split them into site url, card type and defaults.

    An unknown configured card type falls back to the summary card.
    """
    site_url = options.get(META_SITEURL)
    if not site_url:
        raise MissingSiteBaseURL()

    card = options.get(META_CARD)
    if not is_card_type(card):
        if card:
            logger.warning("Unknown card type %r in options, using %r", card, DEFAULT_CARD_TYPE)
        card = DEFAULT_CARD_TYPE

    defaults = {k: v for k, v in options.items() if k != META_SITEURL}
    defaults[META_CARD] = card

    return GlobalOptions(site_url=str(site_url), card=card, defaults=MappingProxyType(defaults))


def is_html(path: str) -> bool:
    return _HTML_EXT_RE.search(PurePosixPath(path).suffix) is not None


def has_card_metadata(metadata: Mapping[str, Any]) -> bool:
    value = metadata.get(META_TWITTER)
    return bool(value) and isinstance(value, (Mapping, bool))


def card_overrides(metadata: Mapping[str, Any]) -> Mapping[str, Any]:
    value = metadata.get(META_TWITTER)
    return value if isinstance(value, Mapping) else {}


class TwitterCard:
    """
    Adds twitter card meta tags to every HTML file carrying `twitter` metadata.

    Calling the instance processes the files in order and stops at the first
    error; files processed before it keep their tags.
    """

    def __init__(self, options: Mapping[str, Any], *, parser: HtmlParser) -> None:
        self.options = normalize_options(options)
        self.parser = parser

    def __call__(self, files: MutableMapping[str, SourceFile]) -> ProcessReport:
        processed: list[str] = []
        skipped: list[str] = []

        for path, source in files.items():
            logger.debug("checking file: %s", path)

            if not is_html(path) or not has_card_metadata(source.metadata):
                skipped.append(path)
                continue

            self.process_file(source)
            processed.append(path)

        return ProcessReport(processed=tuple(processed), skipped=tuple(skipped))

    def process_file(self, source: SourceFile) -> None:
        overrides = card_overrides(source.metadata)
        tags = validate_metadata({**self.options.defaults, **overrides})

        document = self.parser.parse(source.contents)
        context = build_context(
            document,
            overrides=overrides,
            metadata=source.metadata,
            options=self.options,
        )

        logger.debug("inserting meta tags to file contents: %s", tags)
        source.contents = insert_tags(document, resolve_all(tags, context))
