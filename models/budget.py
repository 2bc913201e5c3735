"""Pydantic models representing sales budget line items and distribution inputs."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .seasonal import MONTH_CODES

MonthlyAllocation = List[int]
DistributionStrategy = Literal["equal", "percentage", "seasonal"]
STRATEGIES: tuple[str, ...] = ("equal", "percentage", "seasonal")


class MonthlyBudget(BaseModel):
    """Budget figures for a single calendar month of a line item.

    Records coming from the planner carry extra per-month fields (rate, stock,
    GIT, discount). They are kept verbatim and never read here.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    month: str
    budget_value: float = Field(default=0.0, alias="budgetValue")
    actual_value: float = Field(default=0.0, alias="actualValue")

    @field_validator("month", mode="before")
    @classmethod
    def _normalise_month(cls, value: Any) -> str:
        code = str(value).strip().upper()
        if code not in MONTH_CODES:
            raise ValueError(f"Unknown month code '{value}'.")
        return code


def _empty_months() -> List[MonthlyBudget]:
    return [MonthlyBudget(month=code) for code in MONTH_CODES]


class LineItem(BaseModel):
    """A customer/item/category/brand combination carrying 12 monthly figures."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    customer: str
    item: str
    category: str
    brand: str = ""
    budget2026: float = Field(default=0.0, ge=0)
    monthly_data: List[MonthlyBudget] = Field(default_factory=_empty_months, alias="monthlyData")

    @field_validator("monthly_data", mode="before")
    @classmethod
    def _coerce_months(cls, value: Iterable[Any] | None) -> List[Any]:
        if value is None:
            return _empty_months()
        if isinstance(value, dict):
            value = [value.get(code, {"month": code}) for code in MONTH_CODES]
        coerced: List[Any] = []
        for index, entry in enumerate(value):
            if isinstance(entry, (int, float)):
                code = MONTH_CODES[index] if index < len(MONTH_CODES) else str(index)
                coerced.append({"month": code, "budgetValue": entry})
            else:
                coerced.append(entry)
        return coerced

    @model_validator(mode="after")
    def _ensure_twelve(self) -> "LineItem":
        if len(self.monthly_data) != 12:
            raise ValueError("Monthly data must contain exactly 12 months.")
        return self

    @property
    def monthly_budget_total(self) -> float:
        return sum(month.budget_value for month in self.monthly_data)

    def budget_values(self) -> List[float]:
        return [month.budget_value for month in self.monthly_data]

    @property
    def combination_label(self) -> str:
        return f"{self.category} - {self.brand} - {self.item}"


class DistributionFilter(BaseModel):
    """Selection criteria; an empty string matches everything."""

    customer: str = ""
    category: str = ""
    brand: str = ""
    item: str = ""

    @field_validator("customer", "category", "brand", "item", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> str:
        return "" if value is None else str(value)


class DistributionRequest(BaseModel):
    """User supplied settings for a single "Apply Distribution" action."""

    strategy: DistributionStrategy = "seasonal"
    item_quantity: int = Field(default=0, ge=0)
    percentage_value: float = Field(default=0.0, ge=0, le=100)
    filters: DistributionFilter = Field(default_factory=DistributionFilter)


DEFAULT_LINE_ITEMS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "customer": "Action Aid International (Tz)",
        "item": "BF GOODRICH TYRE 235/85R16 120/116S TL AT/TA KO2 LRERWLGO",
        "category": "Tyres",
        "brand": "BF GOODRICH",
        "budget2026": 1200,
    },
    {
        "id": 2,
        "customer": "Action Aid International (Tz)",
        "item": "VALVE 0214 TR 414J FOR CAR TUBELESS TYRE",
        "category": "Accessories",
        "brand": "ADVANCE",
        "budget2026": 960,
    },
    {
        "id": 3,
        "customer": "ADVENT CONSTRUCTION LTD.",
        "item": "MICHELIN TYRE 265/65R17 112T TL LTX TRAIL",
        "category": "Tyres",
        "brand": "MICHELIN",
        "budget2026": 480,
    },
    {
        "id": 4,
        "customer": "ADVENT CONSTRUCTION LTD.",
        "item": "WHEEL BALANCE ALLOYD RIMS",
        "category": "TYRE SERVICE",
        "brand": "TYRE SERVICE",
        "budget2026": 300,
    },
]
