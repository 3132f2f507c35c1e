"""
Purpose: The static pricing catalog.
Central rate table so estimator/controller/UI never duplicate prices.
Rates are USD per 1,000 tokens.
"""

from __future__ import annotations
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from ..models import PricingTier


DEFAULT_TIER_ID = "gemini-2.0-flash"

PRICE_TABLE: Mapping[str, PricingTier] = MappingProxyType(
    {
        # $0.10 / $0.40 per 1M
        "gemini-2.0-flash": PricingTier(
            "gemini-2.0-flash",
            "Gemini 2.0 Flash",
            Decimal("0.00010"),
            Decimal("0.00040"),
        ),
        # $0.075 / $0.30 per 1M
        "gemini-2.0-flash-lite": PricingTier(
            "gemini-2.0-flash-lite",
            "Gemini 2.0 Flash-Lite",
            Decimal("0.000075"),
            Decimal("0.00030"),
        ),
        "gemini-1.5-flash": PricingTier(
            "gemini-1.5-flash",
            "Gemini 1.5 Flash",
            Decimal("0.000075"),
            Decimal("0.00030"),
        ),
    }
)


class UnknownTierError(KeyError):
    """Raised when a tier id is not a key of the catalog."""


class StaticPricingCatalog:
    def __init__(
        self,
        table: Mapping[str, PricingTier] = PRICE_TABLE,
        default_id: Optional[str] = None,
    ) -> None:
        self._table = MappingProxyType(dict(table))
        self.default_id = default_id or DEFAULT_TIER_ID
        if self.default_id not in self._table:
            raise UnknownTierError(self.default_id)

    def get(self, tier_id: str) -> PricingTier:
        try:
            return self._table[tier_id]
        except KeyError:
            raise UnknownTierError(tier_id) from None

    def ids(self) -> list[str]:
        return list(self._table.keys())

    def tiers(self) -> list[PricingTier]:
        return list(self._table.values())

    def display_name(self, tier_id: str) -> str:
        return self.get(tier_id).display_name
