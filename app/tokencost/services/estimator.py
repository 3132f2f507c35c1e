"""
Purpose: Token math & monthly cost estimation.
Pure functions: usage + tier + variant config in, CostEstimate out. No I/O,
no state; the controller calls `estimate` again on every input change.

Rounding discipline: only the per-interaction chars -> tokens conversion is
rounded (half-up). Interaction counts and monthly token totals are carried
as exact Decimals, so the inquiry scenario can yield fractional totals.

Inputs are assumed finite and non-negative; callers own the sign check.
"""

from __future__ import annotations
from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext

from ..models import (
    CostEstimate,
    InquiryUsage,
    PerUserUsage,
    PricingTier,
    Scenario,
    SCENARIO_DEFAULTS,
    Usage,
    VariantConfig,
)
from ..utils.numbers import round_half_up

TOKENS_PER_RATE_UNIT = Decimal(1000)


def chars_to_tokens(chars: Decimal, chars_per_token: Decimal) -> int:
    return round_half_up(Decimal(chars) / Decimal(chars_per_token))


def estimate_tokens_from_text(text: str, chars_per_token: Decimal) -> int:
    """Character-ratio heuristic for a sample text."""
    t = (text or "").strip()
    if not t:
        return 0

    return chars_to_tokens(Decimal(len(t)), chars_per_token)


def price_tokens(
    tier: PricingTier, tokens_in: Decimal, tokens_out: Decimal
) -> tuple[Decimal, Decimal]:
    """(input cost, output cost) in USD."""
    return (
        tokens_in / TOKENS_PER_RATE_UNIT * tier.input_per_1k,
        tokens_out / TOKENS_PER_RATE_UNIT * tier.output_per_1k,
    )


def _per_user_volume(usage: PerUserUsage, config: VariantConfig):
    interactions = (
        usage.messages_per_user_per_day
        * usage.number_of_users
        * config.days_per_month
    )
    return usage.prompt_chars_per_message, usage.output_chars_per_message, interactions


def _inquiry_volume(usage: InquiryUsage, config: VariantConfig):
    interactions = (
        usage.inquiries_per_day * usage.ai_handled_fraction * config.days_per_month
    )
    return usage.prompt_chars_per_inquiry, usage.output_chars_per_inquiry, interactions


def estimate(
    usage: Usage,
    tier: PricingTier,
    config: VariantConfig,
    defaults: Usage | None = None,
) -> CostEstimate:
    """
    Monthly token and cost projection for one scenario.
    Unset usage fields are replaced by `defaults` (the scenario defaults
    matching the usage shape when omitted) before anything is computed.
    Runs with an unbounded exponent range so huge finite inputs never overflow.
    """
    if isinstance(usage, PerUserUsage):
        scenario, volume = Scenario.INTERNAL, _per_user_volume
    elif isinstance(usage, InquiryUsage):
        scenario, volume = Scenario.CUSTOMER, _inquiry_volume
    else:
        raise TypeError(f"Unsupported usage record: {type(usage).__name__}")

    if defaults is None:
        defaults = SCENARIO_DEFAULTS[scenario]
    usage = usage.with_defaults(defaults)

    with localcontext() as ctx:
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        prompt_chars, output_chars, interactions = volume(usage, config)

        prompt_tokens = chars_to_tokens(prompt_chars, config.chars_per_token)
        output_tokens = chars_to_tokens(output_chars, config.chars_per_token)

        monthly_in = prompt_tokens * interactions
        monthly_out = output_tokens * interactions
        cost_in, cost_out = price_tokens(tier, monthly_in, monthly_out)
        total = cost_in + cost_out
        jpy = total * config.usd_to_jpy_rate if config.show_jpy else None

    return CostEstimate(
        prompt_tokens_per_interaction=prompt_tokens,
        output_tokens_per_interaction=output_tokens,
        interactions_per_month=interactions,
        monthly_input_tokens=monthly_in,
        monthly_output_tokens=monthly_out,
        monthly_input_cost_usd=cost_in,
        monthly_output_cost_usd=cost_out,
        monthly_cost_usd=total,
        monthly_cost_jpy=jpy,
    )
