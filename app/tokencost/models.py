"""
Canonical data shapes, shared truth for typing between layers.

Typical contents:
- PricingTier (id, display name, per-1K input/output rates).
- PerUserUsage / InquiryUsage (raw user inputs, each optionally unset).
- CostEstimate (derived output, recomputed on every input change).
- VariantConfig (chars-per-token ratio, scenarios, currency display).

Usage fields are Optional[Decimal]: None means "unset, use the scenario
default". Defaulting happens at the start of the estimate, not on storage,
so a blank field and a typed default stay distinguishable.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from decimal import Decimal
from typing import Optional, Union
from enum import Enum


class Scenario(str, Enum):
    INTERNAL = "internal"
    CUSTOMER = "customer"


class Variant(str, Enum):
    SIMPLE = "simple"
    JAPANESE = "japanese"
    DUAL = "dual"


class Locale(str, Enum):
    JA = "ja"
    EN = "en"


@dataclass(frozen=True)
class PricingTier:
    id: str
    display_name: str
    input_per_1k: Decimal
    output_per_1k: Decimal

    def __post_init__(self) -> None:
        if self.input_per_1k < 0 or self.output_per_1k < 0:
            raise ValueError(f"Tier {self.id!r} has a negative rate.")


class _Usage:
    """Shared helpers for the usage records below."""

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def is_unset(self, name: str) -> bool:
        return getattr(self, name) is None

    def with_defaults(self, defaults):
        """Fill every unset field from `defaults`, field by field."""
        filled = {
            name: getattr(defaults, name)
            for name in self.field_names()
            if getattr(self, name) is None
        }
        return replace(self, **filled)


@dataclass(frozen=True)
class PerUserUsage(_Usage):
    prompt_chars_per_message: Optional[Decimal] = None
    output_chars_per_message: Optional[Decimal] = None
    messages_per_user_per_day: Optional[Decimal] = None
    number_of_users: Optional[Decimal] = None


@dataclass(frozen=True)
class InquiryUsage(_Usage):
    prompt_chars_per_inquiry: Optional[Decimal] = None
    output_chars_per_inquiry: Optional[Decimal] = None
    inquiries_per_day: Optional[Decimal] = None
    ai_handled_fraction: Optional[Decimal] = None


Usage = Union[PerUserUsage, InquiryUsage]


@dataclass(frozen=True)
class CostEstimate:
    prompt_tokens_per_interaction: int
    output_tokens_per_interaction: int
    interactions_per_month: Decimal
    monthly_input_tokens: Decimal
    monthly_output_tokens: Decimal
    monthly_input_cost_usd: Decimal
    monthly_output_cost_usd: Decimal
    monthly_cost_usd: Decimal
    monthly_cost_jpy: Optional[Decimal] = None


@dataclass(frozen=True)
class VariantConfig:
    variant: Variant
    chars_per_token: Decimal
    scenarios: tuple[Scenario, ...]
    show_jpy: bool
    days_per_month: int = 30
    usd_to_jpy_rate: Decimal = Decimal(150)


PER_USER_DEFAULTS = PerUserUsage(
    prompt_chars_per_message=Decimal(2000),
    output_chars_per_message=Decimal(2000),
    messages_per_user_per_day=Decimal(10),
    number_of_users=Decimal(1000),
)

INQUIRY_DEFAULTS = InquiryUsage(
    prompt_chars_per_inquiry=Decimal(1000),
    output_chars_per_inquiry=Decimal(1500),
    inquiries_per_day=Decimal(500),
    ai_handled_fraction=Decimal("0.7"),
)

SCENARIO_DEFAULTS: dict[Scenario, Usage] = {
    Scenario.INTERNAL: PER_USER_DEFAULTS,
    Scenario.CUSTOMER: INQUIRY_DEFAULTS,
}


def blank_usage(scenario: Scenario) -> Usage:
    """An all-unset usage record of the shape the scenario expects."""
    return type(SCENARIO_DEFAULTS[scenario])()
