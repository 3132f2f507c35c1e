"""
Abstractions for pluggable collaborators. The controller depends on the
PricingCatalog protocol, not on the static table, so tests can hand it a
fake catalog with arbitrary rates.

Common protocols:
- PricingCatalog.get(tier_id) -> PricingTier
- PricingCatalog.ids() / tiers() / default_id
"""

from __future__ import annotations
from typing import Protocol
from .models import PricingTier


class PricingCatalog(Protocol):
    default_id: str

    def get(self, tier_id: str) -> PricingTier: ...

    def ids(self) -> list[str]: ...

    def tiers(self) -> list[PricingTier]: ...
