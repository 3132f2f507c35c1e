"""
Purpose: The single orchestration point for a calculator session. Owns the
editable state (usage per scenario, selected tier) and the derived
estimates. Prevents the UI from knowing how pricing/estimation work.

Key responsibilities:
- Hold one usage record per scenario of the active variant.
- Accept raw text from input fields; empty means unset, junk is ignored.
- Hold the selected tier (always a catalog key).
- Recompute every CostEstimate from scratch after any change.
- reset() clears inputs back to unset.

Scenarios share only the tier selection; editing one scenario never
touches another scenario's usage or estimate.

Testing: Pure unit tests, no Streamlit needed. Pass a fake PricingCatalog
to control rates.
"""

from __future__ import annotations
from dataclasses import replace
from decimal import Decimal
from typing import Optional

from .interfaces import PricingCatalog
from .models import (
    CostEstimate,
    PricingTier,
    Scenario,
    SCENARIO_DEFAULTS,
    Usage,
    VariantConfig,
    blank_usage,
)
from .services.estimator import estimate
from .services.pricing import StaticPricingCatalog
from .utils.logging import get_logger
from .utils.numbers import InvalidNumberError, format_input, parse_numeric_input

logger = get_logger(__name__)


class EstimatorController:
    def __init__(
        self,
        config: VariantConfig,
        catalog: Optional[PricingCatalog] = None,
        tier_id: Optional[str] = None,
    ):
        self.config: VariantConfig = config
        self.catalog: PricingCatalog = catalog or StaticPricingCatalog()
        self.tier_id: str = self.catalog.get(tier_id or self.catalog.default_id).id
        self.usage: dict[Scenario, Usage] = {
            s: blank_usage(s) for s in config.scenarios
        }
        self.estimates: dict[Scenario, CostEstimate] = {}
        self.recompute()

    @property
    def scenarios(self) -> tuple[Scenario, ...]:
        return self.config.scenarios

    @property
    def tier(self) -> PricingTier:
        return self.catalog.get(self.tier_id)

    def defaults_for(self, scenario: Scenario) -> Usage:
        return SCENARIO_DEFAULTS[scenario]

    def field_names(self, scenario: Scenario) -> list[str]:
        return self.usage[scenario].field_names()

    def select_tier(self, tier_id: str) -> None:
        """Switch the shared tier; unknown ids raise UnknownTierError."""
        tier = self.catalog.get(tier_id)
        if tier.id != self.tier_id:
            logger.info("Tier changed: %s -> %s", self.tier_id, tier.id)
        self.tier_id = tier.id
        self.recompute()

    def set_value(
        self, scenario: Scenario, field: str, value: Optional[Decimal]
    ) -> None:
        """Store a parsed value (None = unset) and recompute."""
        usage = self.usage[scenario]
        if field not in usage.field_names():
            raise ValueError(f"Unknown field {field!r} for scenario {scenario.value}.")
        self.usage[scenario] = replace(usage, **{field: value})
        self.recompute()

    def set_field(self, scenario: Scenario, field: str, text: str) -> bool:
        """
        Apply raw text from an input field.
        Returns False (and keeps the previous value) when the text is not a
        number; that case is not surfaced to the user.
        """
        try:
            value = parse_numeric_input(text)
        except InvalidNumberError as e:
            logger.debug("Ignored input for %s.%s: %s", scenario.value, field, e)
            return False
        self.set_value(scenario, field, value)
        return True

    def field_text(self, scenario: Scenario, field: str) -> str:
        """Current text for an input field ('' when unset)."""
        return format_input(getattr(self.usage[scenario], field))

    def estimate_for(self, scenario: Scenario) -> CostEstimate:
        return self.estimates[scenario]

    def recompute(self) -> None:
        """Rebuild every estimate from the current inputs."""
        tier = self.tier
        self.estimates = {
            s: estimate(usage, tier, self.config, self.defaults_for(s))
            for s, usage in self.usage.items()
        }
        logger.debug(
            "Recomputed %d scenario(s) for tier %s", len(self.estimates), tier.id
        )

    def reset(self) -> None:
        """Clear every input back to unset; the tier selection is kept."""
        self.usage = {s: blank_usage(s) for s in self.config.scenarios}
        self.recompute()
