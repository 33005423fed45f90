from __future__ import annotations

from typing import Any, Mapping

from twitter_card.domain.errors import MissingRequiredProperty, UnknownCardType
from twitter_card.domain.schema import META_CARD, USERNAME_PROPS, is_card_type, lookup_card


def normalize_username(value: Any) -> Any:
    """Prefix a twitter username with '@' unless it already has one."""
    if not value:
        return value
    text = value if isinstance(value, str) else str(value)
    return text if text.startswith("@") else f"@{text}"


def validate_metadata(tags: Mapping[str, Any]) -> dict[str, Any]:
    """
    Check merged card properties against their card type.

    Returns a new mapping restricted to the properties allowed for the card type
    (input order kept), with usernames normalized. Raises UnknownCardType or
    MissingRequiredProperty.
    """
    card = tags.get(META_CARD)
    if card and not is_card_type(card):
        raise UnknownCardType(card)

    spec = lookup_card(card)

    for prop in spec.required:
        if not tags.get(prop):
            raise MissingRequiredProperty(prop, spec.card_type)

    validated: dict[str, Any] = {}
    for prop, value in tags.items():
        # Disallowed properties are dropped.
        if prop not in spec.allowed:
            continue
        if prop in USERNAME_PROPS:
            value = normalize_username(value)
        validated[prop] = value

    return validated
