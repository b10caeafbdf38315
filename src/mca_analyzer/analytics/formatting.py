"""Display formatting for rupee amounts and ratios.

Amounts use the Indian convention: one crore is 1,00,00,000 and one lakh is
1,00,000. Non-finite values render as ``NaN``, ``Infinity`` and
``-Infinity`` so degenerate ratios stay visible instead of raising.
"""

from __future__ import annotations

import math

RUPEE = "₹"
CRORE = 10_000_000
LAKH = 100_000


def format_number(value: float, decimals: int = 2) -> str:
    """Fixed-precision text for ``value``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.{decimals}f}"


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{format_number(value, decimals)}%"


def format_days(value: float) -> str:
    return f"{format_number(value, 0)} days"


def _group_digits(amount: float) -> str:
    """Thousands-grouped text with at most three fraction digits."""
    if not math.isfinite(amount):
        return format_number(amount)
    text = f"{amount:,.3f}"
    return text.rstrip("0").rstrip(".")


def format_inr(amount: float) -> str:
    """Format a rupee amount, abbreviating crores ("Cr") and lakhs ("L").

    Examples:
        >>> format_inr(12_345_678)
        '₹1.23 Cr'
        >>> format_inr(250_000)
        '₹2.50 L'
        >>> format_inr(5_000)
        '₹5,000'
    """
    if abs(amount) >= CRORE:
        return f"{RUPEE}{format_number(amount / CRORE, 2)} Cr"
    if abs(amount) >= LAKH:
        return f"{RUPEE}{format_number(amount / LAKH, 2)} L"
    return f"{RUPEE}{_group_digits(amount)}"


__all__ = [
    "RUPEE",
    "CRORE",
    "LAKH",
    "format_number",
    "format_percent",
    "format_days",
    "format_inr",
]
