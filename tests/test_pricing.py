"""Tests for the static pricing catalog."""

from decimal import Decimal

import pytest

from tokencost.models import PricingTier
from tokencost.services.pricing import (
    DEFAULT_TIER_ID,
    PRICE_TABLE,
    StaticPricingCatalog,
    UnknownTierError,
)


def test_catalog_has_three_tiers_in_order():
    catalog = StaticPricingCatalog()
    assert catalog.ids() == [
        "gemini-2.0-flash",
        "gemini-2.0-flash-lite",
        "gemini-1.5-flash",
    ]
    assert catalog.default_id == DEFAULT_TIER_ID == "gemini-2.0-flash"


def test_flash_rates():
    tier = StaticPricingCatalog().get("gemini-2.0-flash")
    assert tier.display_name == "Gemini 2.0 Flash"
    assert tier.input_per_1k == Decimal("0.0001")
    assert tier.output_per_1k == Decimal("0.0004")


def test_all_rates_non_negative():
    for tier in PRICE_TABLE.values():
        assert tier.input_per_1k >= 0
        assert tier.output_per_1k >= 0


def test_unknown_tier_raises_key_error():
    catalog = StaticPricingCatalog()
    with pytest.raises(UnknownTierError):
        catalog.get("gpt-4o")
    with pytest.raises(KeyError):
        catalog.get("")


def test_unknown_default_rejected():
    with pytest.raises(UnknownTierError):
        StaticPricingCatalog(default_id="nope")


def test_price_table_is_read_only():
    with pytest.raises(TypeError):
        PRICE_TABLE["cheap"] = PricingTier("cheap", "Cheap", Decimal(0), Decimal(0))


def test_tier_is_frozen_and_rejects_negative_rates():
    tier = PRICE_TABLE["gemini-1.5-flash"]
    with pytest.raises(AttributeError):
        tier.input_per_1k = Decimal(1)
    with pytest.raises(ValueError):
        PricingTier("bad", "Bad", Decimal("-0.1"), Decimal(0))


def test_custom_table():
    tier = PricingTier("x", "X", Decimal(1), Decimal(2))
    catalog = StaticPricingCatalog({"x": tier}, default_id="x")
    assert catalog.tiers() == [tier]
    assert catalog.display_name("x") == "X"
