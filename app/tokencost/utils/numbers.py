"""Parsing of free-text numeric fields, rounding, and display formatting of results."""

from __future__ import annotations
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

_CENTS = Decimal("0.01")
_TOKEN_FRACTION = Decimal("0.001")

# Largest finite double; text beyond it is not a finite number in a browser field.
MAX_INPUT = Decimal("1.7976931348623157e308")

# From 1e21 up, figures are shown in exponent notation instead of grouped digits.
_SCIENTIFIC_FROM = 21


class InvalidNumberError(ValueError):
    """Raised for non-empty text that is not a finite number."""


def round_half_up(value: Decimal) -> int:
    """Nearest integer, ties away from zero."""
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))


def parse_numeric_input(text: Optional[str]) -> Optional[Decimal]:
    """
    Parse a numeric text field.
    - Empty text returns None ("unset, use the default").
    - Whitespace-only text is 0, like any other blank-padded number.
    - Anything else must be a finite decimal literal within double range,
      else InvalidNumberError.
    No sign check: negative values parse fine and are the caller's problem.
    """
    if text is None or text == "":
        return None
    t = text.strip()
    if not t:
        return Decimal(0)
    if "_" in t:
        raise InvalidNumberError(f"Not a number: {text!r}")
    try:
        value = Decimal(t)
    except InvalidOperation:
        raise InvalidNumberError(f"Not a number: {text!r}") from None
    if not value.is_finite() or value.copy_abs() > MAX_INPUT:
        raise InvalidNumberError(f"Not a finite number: {text!r}")
    return value


def format_input(value: Optional[Decimal]) -> str:
    """Inverse of parse_numeric_input for refilling a text field."""
    if value is None:
        return ""
    return f"{value:f}"


def _is_huge(value: Decimal) -> bool:
    return value.is_finite() and value != 0 and value.adjusted() >= _SCIENTIFIC_FROM


def _scientific(value: Decimal) -> str:
    """3.99900E+25 -> '3.999E+25'; no context rounding, so no overflow."""
    mantissa, exponent = f"{value:E}".split("E")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return f"{mantissa}E{exponent}"


def format_usd(value: Decimal) -> str:
    if _is_huge(value):
        return f"${_scientific(value)}"
    return f"${value.quantize(_CENTS, rounding=ROUND_HALF_UP)}"


def format_jpy(value: Decimal) -> str:
    if _is_huge(value):
        return f"¥{_scientific(value)}"
    return f"¥{round_half_up(value):,}"


def format_tokens(value: Decimal) -> str:
    """Digit-grouped; up to three fraction digits, only when fractional."""
    value = Decimal(value)
    if _is_huge(value):
        return _scientific(value)
    q = value.quantize(_TOKEN_FRACTION, rounding=ROUND_HALF_UP)
    text = f"{q:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
