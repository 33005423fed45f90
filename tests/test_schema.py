"""Tests for the card type table and lookup."""

import pytest

from twitter_card.domain.models import CardSpec
from twitter_card.domain.schema import CARD_PROPS, DEFAULT_CARD_TYPE, is_card_type, lookup_card


class TestCardTable:
    def test_supported_types(self):
        assert set(CARD_PROPS) == {"summary", "summary_large_image", "app", "player"}

    @pytest.mark.parametrize("card_type", sorted(CARD_PROPS))
    def test_required_subset_of_allowed(self, card_type):
        spec = CARD_PROPS[card_type]
        assert set(spec.required) <= spec.allowed
        assert "card" in spec.required
        assert "site" in spec.required

    def test_summary_required_order(self):
        assert CARD_PROPS["summary"].required == ("card", "site", "title", "description")

    def test_app_requires_store_ids(self):
        required = CARD_PROPS["app"].required
        assert {"app:id:iphone", "app:id:ipad", "app:id:googleplay"} <= set(required)

    def test_player_requires_dimensions(self):
        required = CARD_PROPS["player"].required
        assert {"player", "player:width", "player:height", "image"} <= set(required)

    def test_spec_rejects_required_outside_allowed(self):
        with pytest.raises(ValueError):
            CardSpec(card_type="broken", required=("card", "x"), allowed=frozenset({"card"}))


class TestLookup:
    def test_known_type(self):
        assert lookup_card("player").card_type == "player"

    @pytest.mark.parametrize("value", [None, "", "gallery", 3])
    def test_fallback_to_summary(self, value):
        assert lookup_card(value).card_type == DEFAULT_CARD_TYPE

    def test_is_card_type(self):
        assert is_card_type("app")
        assert not is_card_type("photo")
        assert not is_card_type(None)
