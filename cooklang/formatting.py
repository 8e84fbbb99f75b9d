"""Display formatting and parsing of quantity values.

Numbers are shown as common fractions where one fits (``0.5`` is ``1/2``,
``1.5`` is ``1 1/2``). Tiny floating point errors, such as those left by
scaling, are rounded away.
"""

from __future__ import annotations

import math
from typing import Optional

from cooklang.model import Amount, Empty, Number, Range, Text, Value

__all__ = [
    "format_number",
    "decimal_to_fraction",
    "format_value",
    "format_amount",
    "parse_value",
    "parse_number_or_fraction",
    "parse_fraction",
]

_EPSILON = 0.0001

_COMMON_FRACTIONS = (
    (0.125, "1/8"),
    (0.25, "1/4"),
    (0.333333, "1/3"),
    (0.375, "3/8"),
    (0.5, "1/2"),
    (0.625, "5/8"),
    (0.666667, "2/3"),
    (0.75, "3/4"),
    (0.875, "7/8"),
)


def _round(x: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if not math.isfinite(x):
        return x
    return math.copysign(float(math.floor(abs(x) + 0.5)), x)


def _fract(x: float) -> float:
    """The fractional part of ``x``, keeping its sign."""
    if not math.isfinite(x):
        return math.nan
    return x - math.trunc(x)


def _parse_float(text: str) -> Optional[float]:
    """Parse a plain float literal; surrounding whitespace is not allowed."""
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def decimal_to_fraction(value: float) -> Optional[str]:
    """Return ``value`` as a common fraction string, or ``None`` if none fits."""
    if not math.isfinite(value):
        return None
    whole = math.floor(value)
    fract = value - whole
    for decimal, fraction in _COMMON_FRACTIONS:
        if abs(fract - decimal) < _EPSILON:
            if whole > 0:
                return f"{whole} {fraction}"
            return fraction
    return None


def format_number(value: float) -> str:
    """Format a number, preferring whole numbers and common fractions."""
    if math.isnan(value):
        return "NaN"
    rounded = _round(value * 1_000_000.0) / 1_000_000.0

    if abs(_fract(rounded)) < 0.0000001:
        return f"{rounded:.0f}"

    fraction = decimal_to_fraction(rounded)
    if fraction is not None:
        return fraction

    rounded_to_3 = _round(rounded * 1000.0) / 1000.0
    if abs(_fract(rounded_to_3 * 100.0)) < 0.001:
        result = f"{rounded_to_3:.2f}"
    else:
        result = f"{rounded_to_3:.3f}"

    if "." in result:
        result = result.rstrip("0").rstrip(".")
    return result


def format_value(value: Value) -> Optional[str]:
    """Format a quantity value for display; ``None`` for an empty value."""
    match value:
        case Empty():
            return None
        case Number(value=number):
            return format_number(number)
        case Range(start=start, end=end):
            return f"{format_number(start)} - {format_number(end)}"
        case Text(value=text):
            return text
    raise TypeError(f"not a quantity value: {value!r}")


def format_amount(amount: Amount) -> str:
    """Format an amount as its quantity followed by its units."""
    quantity = format_value(amount.quantity)
    if quantity is None:
        return amount.units or ""
    if amount.units is not None:
        return f"{quantity} {amount.units}"
    return quantity


def parse_fraction(text: str) -> Optional[float]:
    """Parse a simple fraction such as ``1/2``; ``None`` if it is not one."""
    numerator_text, slash, denominator_text = text.partition("/")
    if not slash:
        return None
    numerator = _parse_float(numerator_text)
    denominator = _parse_float(denominator_text)
    if numerator is None or denominator is None or denominator == 0.0:
        return None
    return numerator / denominator


def parse_number_or_fraction(text: str) -> Optional[float]:
    """Parse a number, a fraction or a mixed number such as ``1 1/2``."""
    number = _parse_float(text)
    if number is not None:
        return number

    whole_text, space, fract_text = text.partition(" ")
    if space:
        whole = _parse_float(whole_text)
        if whole is not None:
            fract = parse_fraction(fract_text)
            if fract is not None:
                return whole + fract

    return parse_fraction(text)


def parse_value(text: str) -> Value:
    """Parse a number, fraction, mixed number or range; otherwise text."""
    number = _parse_float(text)
    if number is not None:
        return Number(number)

    start_text, dash, end_text = text.partition(" - ")
    if dash:
        start = parse_number_or_fraction(start_text.strip())
        end = parse_number_or_fraction(end_text.strip())
        if start is not None and end is not None:
            return Range(start, end)

    number = parse_number_or_fraction(text)
    if number is not None:
        return Number(number)

    return Text(text)