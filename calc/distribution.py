"""Monthly distribution engine behind the "Set Distribution" action.

Three strategies spread an annual figure over the calendar months:

* ``equal`` splits an integer quantity evenly, front-loading the remainder.
* ``percentage`` takes a share of each item's annual budget and splits it equally.
* ``seasonal`` weights the months by the combined seasonal factor of the
  item's category and reconciles rounding against the requested total.

All functions are pure; the factor tables are read-only module constants.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Literal, Sequence

from models import (
    BUSINESS_ACTIVITY,
    DEFAULT_INDUSTRY_CATEGORY,
    HOLIDAY_IMPACT,
    MONTH_CODES,
    DistributionFilter,
    LineItem,
    MonthlyAllocation,
    MonthlyBudget,
)
from models.seasonal import industry_pattern_for, ordered_values

from .selection import filter_items

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
HIGH_FACTOR_THRESHOLD = 1.1
LOW_FACTOR_THRESHOLD = 0.9
PREVIEW_SAMPLE_QUANTITY = 120

FactorLevel = Literal["high", "low", "normal"]


class DistributionError(ValueError):
    """Raised when a distribution cannot be computed for the given inputs."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards +infinity."""

    return int(math.floor(value + 0.5))


def distribute_equally(quantity: int) -> MonthlyAllocation:
    """Split *quantity* into 12 integers that differ by at most one."""

    base_amount = quantity // MONTHS_PER_YEAR
    remainder = quantity % MONTHS_PER_YEAR

    distribution = [base_amount] * MONTHS_PER_YEAR

    for index in range(min(remainder, MONTHS_PER_YEAR)):
        distribution[index] += 1

    # Only reachable if the remainder was not reduced modulo 12 upstream.
    if remainder > MONTHS_PER_YEAR:
        extra_remainder = remainder - MONTHS_PER_YEAR
        for offset in range(extra_remainder):
            distribution[MONTHS_PER_YEAR - 1 - offset] += 1

    return distribution


def distribute_by_percentage(total_budget: float, percentage: float) -> MonthlyAllocation:
    amount = round_half_up((total_budget * percentage) / 100)
    return distribute_equally(amount)


def get_seasonal_factors(category: str) -> List[float]:
    """Return the combined business x holiday x industry factor per month.

    Categories without their own industry row use the Accessories row.
    """

    business = ordered_values(BUSINESS_ACTIVITY)
    holiday = ordered_values(HOLIDAY_IMPACT)
    industry = ordered_values(industry_pattern_for(category))
    return [b * h * i for b, h, i in zip(business, holiday, industry)]


def classify_month_factor(factor: float) -> FactorLevel:
    if factor > HIGH_FACTOR_THRESHOLD:
        return "high"
    if factor < LOW_FACTOR_THRESHOLD:
        return "low"
    return "normal"


def distribute_seasonally(quantity: float, category: str) -> MonthlyAllocation:
    """Distribute *quantity* proportionally to the category's seasonal factors.

    Rounded allocations are reconciled against *quantity* one unit at a time,
    walking the months from the highest factor down. The ranked list is
    walked once; when removing units, months already at zero are skipped and
    any residue left after the pass stays in the result.
    """

    factors = get_seasonal_factors(category)
    total_factor = sum(factors)

    allocation = [round_half_up((quantity * factor) / total_factor) for factor in factors]

    difference = quantity - sum(allocation)
    if difference == 0:
        return allocation

    ranked = sorted(range(MONTHS_PER_YEAR), key=lambda index: factors[index], reverse=True)
    remaining = abs(difference)
    direction = 1 if difference > 0 else -1

    for month_index in ranked:
        if remaining <= 0:
            break
        if direction > 0 or allocation[month_index] > 0:
            allocation[month_index] += direction
            remaining -= 1

    if remaining > 0:
        logger.debug(
            "Seasonal reconciliation left %s unit(s) unresolved for %s (quantity=%s)",
            remaining,
            category,
            quantity,
        )
    return allocation


def apply_distribution(
    items: Iterable[LineItem],
    strategy: str,
    quantity: int | None = 0,
    percentage: float | None = 0,
) -> Dict[int, MonthlyAllocation]:
    """Return the new monthly allocation for each item keyed by item id.

    ``equal`` uses the same *quantity* for every item. ``seasonal`` uses
    *quantity* when positive and otherwise each item's annual budget.
    ``percentage`` takes *percentage* of each item's annual budget.
    """

    quantity_value = quantity or 0
    percentage_value = percentage or 0
    results: Dict[int, MonthlyAllocation] = {}

    for item in items:
        if strategy == "seasonal":
            source = quantity_value if quantity_value > 0 else item.budget2026
            results[item.id] = distribute_seasonally(source, item.category)
        elif strategy == "equal":
            results[item.id] = distribute_equally(quantity_value)
        elif strategy == "percentage":
            results[item.id] = distribute_by_percentage(item.budget2026, percentage_value)
        else:
            raise DistributionError(f"Unknown distribution strategy '{strategy}'.")

    logger.info("Applied %s distribution to %d item(s)", strategy, len(results))
    return results


def build_monthly_budgets(item: LineItem, allocation: Sequence[float]) -> List[MonthlyBudget]:
    """Copy *item*'s monthly records with ``budget_value`` replaced by *allocation*."""

    if len(allocation) != MONTHS_PER_YEAR:
        raise DistributionError("A monthly allocation must contain 12 values.")
    return [
        month.model_copy(update={"budget_value": value})
        for month, value in zip(item.monthly_data, allocation)
    ]


def preview_seasonal_distribution(
    items: Sequence[LineItem],
    filters: DistributionFilter,
    quantity: int = 0,
) -> List[Dict[str, object]] | None:
    """Return preview rows for the seasonal strategy, or ``None`` with nothing to show."""

    matching = filter_items(items, filters)
    if not filters.category and not matching:
        return None

    category = filters.category or (matching[0].category if matching else DEFAULT_INDUSTRY_CATEGORY)
    sample_quantity = quantity or PREVIEW_SAMPLE_QUANTITY
    distribution = distribute_seasonally(sample_quantity, category)
    factors = get_seasonal_factors(category)

    return [
        {
            "month": code,
            "value": value,
            "factor": factor,
            "level": classify_month_factor(factor),
        }
        for code, value, factor in zip(MONTH_CODES, distribution, factors)
    ]


__all__ = [
    "DistributionError",
    "HIGH_FACTOR_THRESHOLD",
    "LOW_FACTOR_THRESHOLD",
    "MONTHS_PER_YEAR",
    "PREVIEW_SAMPLE_QUANTITY",
    "apply_distribution",
    "build_monthly_budgets",
    "classify_month_factor",
    "distribute_by_percentage",
    "distribute_equally",
    "distribute_seasonally",
    "get_seasonal_factors",
    "preview_seasonal_distribution",
    "round_half_up",
]
