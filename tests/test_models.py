# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the content models:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Content is immutable
# =============================================================================

import pytest
from pydantic import ValidationError

from core.content import FAQ_ITEMS, HERO
from core.models import FAQItem, HeroContent, ToggleRequest


class TestFAQItem:
    """Tests for FAQItem model."""

    def test_valid_item(self):
        item = FAQItem(question="Is it safe?", answer="Yes.")

        assert item.question == "Is it safe?"
        assert item.answer == "Yes."

    def test_empty_fields_rejected(self):
        with pytest.raises(ValidationError):
            FAQItem(question="", answer="Yes.")

    def test_item_is_frozen(self):
        item = FAQItem(question="Is it safe?", answer="Yes.")

        with pytest.raises(ValidationError):
            item.answer = "No."


class TestToggleRequest:
    """Tests for ToggleRequest model."""

    def test_open_index_defaults_to_none(self):
        request = ToggleRequest(index=1)

        assert request.open_index is None
        assert request.index == 1

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            ToggleRequest(index=-1)


class TestHeroContent:
    """Tests for HeroContent model."""

    def test_headline_needs_a_line(self):
        data = HERO.model_dump()
        data["headline"] = []

        with pytest.raises(ValidationError):
            HeroContent(**data)

    def test_stat_is_optional(self):
        data = HERO.model_dump()
        data.pop("stat")

        assert HeroContent(**data).stat is None


class TestStaticContent:
    """The shipped FAQ list."""

    def test_four_items_in_display_order(self):
        assert len(FAQ_ITEMS) == 4
        assert FAQ_ITEMS[0].question == "How do I get started with Nestera?"
        assert FAQ_ITEMS[3].question == "What stablecoins does Nestera currently support?"
