"""Line item selection helpers used by the distribution workflow."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from models import DistributionFilter, LineItem


@dataclass(frozen=True)
class CustomerCombination:
    """Category/brand/item row available for the selected customer."""

    id: int
    customer: str
    category: str
    brand: str
    item: str
    budget2026: float

    @property
    def label(self) -> str:
        return f"{self.category} - {self.brand} - {self.item}"


def matches_filter(item: LineItem, filters: DistributionFilter) -> bool:
    if filters.customer and item.customer != filters.customer:
        return False
    if filters.category and item.category != filters.category:
        return False
    if filters.brand and item.brand != filters.brand:
        return False
    if filters.item and filters.item.lower() not in item.item.lower():
        return False
    return True


def filter_items(items: Iterable[LineItem], filters: DistributionFilter) -> List[LineItem]:
    """Return value copies of the items matching every non-empty criterion."""

    return [item.model_copy(deep=True) for item in items if matches_filter(item, filters)]


def unique_filter_values(items: Sequence[LineItem]) -> Dict[str, List[str]]:
    return {
        "customers": sorted({item.customer for item in items}),
        "categories": sorted({item.category for item in items}),
        "brands": sorted({item.brand for item in items}),
        "item_names": sorted({item.item for item in items}),
    }


def customer_combinations(items: Iterable[LineItem], customer: str) -> List[CustomerCombination]:
    if not customer:
        return []
    return [
        CustomerCombination(
            id=item.id,
            customer=item.customer,
            category=item.category,
            brand=item.brand,
            item=item.item,
            budget2026=item.budget2026,
        )
        for item in items
        if item.customer == customer
    ]


__all__ = [
    "CustomerCombination",
    "customer_combinations",
    "filter_items",
    "matches_filter",
    "unique_filter_values",
]
