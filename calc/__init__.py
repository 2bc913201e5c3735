"""Calculation helpers for monthly budget distribution and discounts."""

from .discount import (
    discount_amount,
    discount_multiplier,
    discount_percentage,
    discounted_value,
    find_rule,
)
from .distribution import (
    DistributionError,
    apply_distribution,
    build_monthly_budgets,
    classify_month_factor,
    distribute_by_percentage,
    distribute_equally,
    distribute_seasonally,
    get_seasonal_factors,
    preview_seasonal_distribution,
)
from .selection import (
    CustomerCombination,
    customer_combinations,
    filter_items,
    unique_filter_values,
)

__all__ = [
    "CustomerCombination",
    "DistributionError",
    "apply_distribution",
    "build_monthly_budgets",
    "classify_month_factor",
    "customer_combinations",
    "discount_amount",
    "discount_multiplier",
    "discount_percentage",
    "discounted_value",
    "distribute_by_percentage",
    "distribute_equally",
    "distribute_seasonally",
    "filter_items",
    "find_rule",
    "get_seasonal_factors",
    "preview_seasonal_distribution",
    "unique_filter_values",
]
