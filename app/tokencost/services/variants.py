"""
Purpose: The three calculator variants.
They differ only in configuration: which scenarios are shown, the
chars-per-token ratio, and whether a JPY figure is exposed.
"""

from __future__ import annotations
from decimal import Decimal
from typing import Optional

from ..config import Settings, get_settings
from ..models import Scenario, Variant, VariantConfig

JA_CHARS_PER_TOKEN = Decimal("1.5")
EN_CHARS_PER_TOKEN = Decimal(4)

_SHAPES = {
    Variant.SIMPLE: (EN_CHARS_PER_TOKEN, (Scenario.INTERNAL,), False),
    Variant.JAPANESE: (JA_CHARS_PER_TOKEN, (Scenario.INTERNAL,), True),
    Variant.DUAL: (JA_CHARS_PER_TOKEN, (Scenario.INTERNAL, Scenario.CUSTOMER), True),
}


def variant_config(
    variant: Variant | str, settings: Optional[Settings] = None
) -> VariantConfig:
    """Build the config for a variant, taking month length and FX rate from settings."""
    settings = settings or get_settings()
    variant = Variant(variant)
    chars_per_token, scenarios, show_jpy = _SHAPES[variant]
    return VariantConfig(
        variant=variant,
        chars_per_token=chars_per_token,
        scenarios=scenarios,
        show_jpy=show_jpy,
        days_per_month=settings.days_per_month,
        usd_to_jpy_rate=settings.usd_to_jpy_rate,
    )
