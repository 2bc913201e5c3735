"""Fixed seasonal factor tables used by the seasonal distribution strategy."""
from __future__ import annotations

from typing import Dict, Mapping, Sequence, Tuple

MONTH_CODES: Tuple[str, ...] = (
    "JAN",
    "FEB",
    "MAR",
    "APR",
    "MAY",
    "JUN",
    "JUL",
    "AUG",
    "SEP",
    "OCT",
    "NOV",
    "DEC",
)

# Overall operational tempo (1.0 = normal).
BUSINESS_ACTIVITY: Mapping[str, float] = {
    "JAN": 0.85,
    "FEB": 0.95,
    "MAR": 1.15,
    "APR": 1.20,
    "MAY": 1.25,
    "JUN": 1.10,
    "JUL": 0.90,
    "AUG": 0.85,
    "SEP": 1.15,
    "OCT": 1.20,
    "NOV": 1.05,
    "DEC": 0.75,
}

# Lower values mean fewer working days.
HOLIDAY_IMPACT: Mapping[str, float] = {
    "JAN": 0.90,
    "FEB": 1.00,
    "MAR": 1.00,
    "APR": 0.95,
    "MAY": 0.90,
    "JUN": 1.00,
    "JUL": 0.85,
    "AUG": 0.80,
    "SEP": 1.00,
    "OCT": 1.00,
    "NOV": 0.95,
    "DEC": 0.70,
}

DEFAULT_INDUSTRY_CATEGORY = "Accessories"

INDUSTRY_PATTERNS: Mapping[str, Mapping[str, float]] = {
    "Tyres": {
        "JAN": 0.90,
        "FEB": 0.85,
        "MAR": 1.10,
        "APR": 1.25,
        "MAY": 1.20,
        "JUN": 1.15,
        "JUL": 1.00,
        "AUG": 0.95,
        "SEP": 1.15,
        "OCT": 1.30,
        "NOV": 1.10,
        "DEC": 0.80,
    },
    "Accessories": {
        "JAN": 0.80,
        "FEB": 0.90,
        "MAR": 1.15,
        "APR": 1.20,
        "MAY": 1.25,
        "JUN": 1.15,
        "JUL": 1.05,
        "AUG": 0.95,
        "SEP": 1.10,
        "OCT": 1.20,
        "NOV": 1.00,
        "DEC": 0.85,
    },
    "TYRE SERVICE": {
        "JAN": 0.85,
        "FEB": 0.90,
        "MAR": 1.20,
        "APR": 1.30,
        "MAY": 1.25,
        "JUN": 1.10,
        "JUL": 1.00,
        "AUG": 0.90,
        "SEP": 1.15,
        "OCT": 1.25,
        "NOV": 1.05,
        "DEC": 0.80,
    },
}

SEASONAL_TABLE_NOTES: Dict[str, str] = {
    "business_activity": "Operational tempo independent of product line.",
    "holiday_impact": "Reduction in working days and demand from holidays.",
    "industry_pattern": "Category-specific demand; unknown categories use Accessories.",
}


def ordered_values(table: Mapping[str, float]) -> Sequence[float]:
    """Return the table values in calendar order (January first)."""

    return tuple(float(table[code]) for code in MONTH_CODES)


def industry_pattern_for(category: str) -> Mapping[str, float]:
    """Return the industry row for *category*, falling back to Accessories."""

    return INDUSTRY_PATTERNS.get(category, INDUSTRY_PATTERNS[DEFAULT_INDUSTRY_CATEGORY])


__all__ = [
    "BUSINESS_ACTIVITY",
    "DEFAULT_INDUSTRY_CATEGORY",
    "HOLIDAY_IMPACT",
    "INDUSTRY_PATTERNS",
    "MONTH_CODES",
    "SEASONAL_TABLE_NOTES",
    "industry_pattern_for",
    "ordered_values",
]
