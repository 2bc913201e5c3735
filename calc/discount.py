"""Discount lookups for category/brand combinations."""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from models import DiscountRule

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


def _round_currency(value: float) -> float:
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def find_rule(rules: Iterable[DiscountRule], category: str, brand: str) -> DiscountRule | None:
    """Return the first active rule for *category* and *brand*, if any.

    Matching ignores case and surrounding whitespace. A rule without a brand
    applies to every brand in its category.
    """

    return next((rule for rule in rules if rule.matches(category, brand)), None)


def discount_multiplier(rules: Iterable[DiscountRule], category: str, brand: str) -> float:
    rule = find_rule(rules, category, brand)
    if rule is None:
        logger.debug("No discount rule found for %s/%s", category, brand)
        return 1.0
    return 1 - rule.discount_percentage


def discount_amount(base_value: float, rules: Iterable[DiscountRule], category: str, brand: str) -> float:
    multiplier = discount_multiplier(rules, category, brand)
    return _round_currency(base_value * (1 - multiplier))


def discounted_value(base_value: float, rules: Iterable[DiscountRule], category: str, brand: str) -> float:
    multiplier = discount_multiplier(rules, category, brand)
    return _round_currency(base_value * multiplier)


def discount_percentage(rules: Iterable[DiscountRule], category: str, brand: str) -> float:
    """Return the matching discount as a percentage (0 when no rule applies)."""

    rule = find_rule(rules, category, brand)
    return rule.discount_percentage * 100 if rule else 0.0


__all__ = [
    "discount_amount",
    "discount_multiplier",
    "discount_percentage",
    "discounted_value",
    "find_rule",
]
