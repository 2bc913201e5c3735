"""Helper utilities for formatting numeric outputs."""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def format_quantity(value: object) -> str:
    try:
        amount = to_decimal(value)
    except Exception:
        return "—"
    if amount.is_nan() or amount.is_infinite():
        return "—"
    return f"{amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP):,.0f}"


def format_money(value: object, currency: str = "") -> str:
    """Format *value* with two decimals and an optional currency prefix."""

    try:
        amount = to_decimal(value)
    except Exception:
        return "—"
    if amount.is_nan() or amount.is_infinite():
        return "—"
    amount = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    prefix = f"{currency} " if currency else ""
    return f"{prefix}{amount:,.2f}"


def format_factor(value: object) -> str:
    """Render a seasonal factor as a whole percentage, e.g. ``1.425`` -> ``143%``."""

    try:
        factor = to_decimal(value)
    except Exception:
        return "—"
    if factor.is_nan() or factor.is_infinite():
        return "—"
    percent = (factor * Decimal("100")).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{percent}%"


def format_percentage(value: object) -> str:
    try:
        ratio = to_decimal(value)
    except Exception:
        return "—"
    if ratio.is_nan() or ratio.is_infinite():
        return "—"
    return f"{ratio:.2f}%"


__all__ = [
    "format_factor",
    "format_money",
    "format_percentage",
    "format_quantity",
    "to_decimal",
]
