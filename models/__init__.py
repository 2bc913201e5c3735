"""Model package exports."""

from .budget import (
    DEFAULT_LINE_ITEMS,
    STRATEGIES,
    DistributionFilter,
    DistributionRequest,
    DistributionStrategy,
    LineItem,
    MonthlyAllocation,
    MonthlyBudget,
)
from .discount import DiscountRule, default_discount_rules, rules_to_payload
from .seasonal import (
    BUSINESS_ACTIVITY,
    DEFAULT_INDUSTRY_CATEGORY,
    HOLIDAY_IMPACT,
    INDUSTRY_PATTERNS,
    MONTH_CODES,
)

__all__ = [
    "BUSINESS_ACTIVITY",
    "DEFAULT_INDUSTRY_CATEGORY",
    "DEFAULT_LINE_ITEMS",
    "DiscountRule",
    "DistributionFilter",
    "DistributionRequest",
    "DistributionStrategy",
    "HOLIDAY_IMPACT",
    "INDUSTRY_PATTERNS",
    "LineItem",
    "MONTH_CODES",
    "MonthlyAllocation",
    "MonthlyBudget",
    "STRATEGIES",
    "default_discount_rules",
    "rules_to_payload",
]
