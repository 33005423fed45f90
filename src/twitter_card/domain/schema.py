from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from twitter_card.domain.models import CardSpec

# Canonical metadata keys used across the system
META_TWITTER: Final[str] = "twitter"
META_SITEURL: Final[str] = "siteurl"
META_CARD: Final[str] = "card"

DEFAULT_CARD_TYPE: Final[str] = "summary"

# Card types with required and allowed properties,
# see https://developer.x.com/en/docs/x-for-websites/cards/overview/markup
CARD_PROPS: Final[Mapping[str, CardSpec]] = MappingProxyType(
    {
        spec.card_type: spec
        for spec in (
            CardSpec.build(
                "summary",
                required=("card", "site", "title", "description"),
                optional=("image", "image:alt", "creator"),
            ),
            CardSpec.build(
                "summary_large_image",
                required=("card", "site", "title", "description"),
                optional=("image", "image:alt", "creator"),
            ),
            CardSpec.build(
                "app",
                required=("card", "site", "description", "app:id:iphone", "app:id:ipad", "app:id:googleplay"),
                optional=("creator", "app:url:iphone", "app:url:ipad", "app:url:googleplay", "app:country"),
            ),
            CardSpec.build(
                "player",
                required=("card", "site", "title", "player", "player:width", "player:height", "image"),
                optional=("creator", "description", "image:alt", "player:stream", "player:stream:content_type"),
            ),
        )
    }
)

# Properties whose content must be an absolute url.
PROPS_WITH_PATH: Final[frozenset[str]] = frozenset({"image"})

# Properties holding a twitter username.
USERNAME_PROPS: Final[frozenset[str]] = frozenset({"site", "creator"})


def is_card_type(value: object) -> bool:
    return isinstance(value, str) and value in CARD_PROPS


def lookup_card(card_type: object) -> CardSpec:
    """Card spec for `card_type`, falling back to the summary card."""
    if is_card_type(card_type):
        return CARD_PROPS[card_type]  # type: ignore[index]
    return CARD_PROPS[DEFAULT_CARD_TYPE]
