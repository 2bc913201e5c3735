"""Tests for validation performed before a distribution is applied."""

from models import LineItem
from validators import (
    MISSING_AMOUNT_MESSAGE,
    MISSING_CUSTOMER_MESSAGE,
    NO_MATCHING_ITEMS_MESSAGE,
    collect_error_messages,
    validate_distribution,
    validate_line_items,
    validate_request,
)

ITEMS = [
    LineItem(id=1, customer="ACME LTD", item="Tyre A", category="Tyres", brand="MICHELIN", budget2026=120),
    LineItem(id=2, customer="ACME LTD", item="Valve", category="Accessories", brand="ADVANCE", budget2026=60),
]


def test_missing_customer_is_rejected() -> None:
    result, issues = validate_distribution({"strategy": "seasonal"}, ITEMS)
    assert result is None
    assert [issue.message for issue in issues] == [MISSING_CUSTOMER_MESSAGE]


def test_non_seasonal_requires_quantity_or_percentage() -> None:
    result, issues = validate_distribution(
        {"strategy": "equal", "filters": {"customer": "ACME LTD"}},
        ITEMS,
    )
    assert result is None
    assert issues[0].message == MISSING_AMOUNT_MESSAGE

    result, issues = validate_distribution(
        {"strategy": "seasonal", "filters": {"customer": "ACME LTD"}},
        ITEMS,
    )
    assert issues == []
    assert result is not None


def test_no_matching_items_is_an_error() -> None:
    result, issues = validate_distribution(
        {"strategy": "percentage", "percentage_value": 10, "filters": {"customer": "ACME LTD", "brand": "GITI"}},
        ITEMS,
    )
    assert result is None
    assert issues[0].message == NO_MATCHING_ITEMS_MESSAGE


def test_valid_request_returns_matching_items() -> None:
    result, issues = validate_distribution(
        {"strategy": "equal", "item_quantity": 24, "filters": {"customer": "ACME LTD", "category": "Tyres"}},
        ITEMS,
    )
    assert issues == []
    assert result is not None
    request, matching = result
    assert request.item_quantity == 24
    assert [item.id for item in matching] == [1]


def test_out_of_range_values_use_field_paths() -> None:
    request, issues = validate_request({"strategy": "equal", "item_quantity": -1, "percentage_value": 120})
    assert request is None
    fields = {issue.field for issue in issues}
    assert "distribution.item_quantity" in fields
    assert "distribution.percentage_value" in fields

    request, issues = validate_request({"strategy": "monthly"})
    assert request is None
    assert issues[0].field == "distribution.strategy"
    assert "[distribution.strategy]" in collect_error_messages(issues)


def test_validate_line_items_collects_indexed_issues() -> None:
    items, issues = validate_line_items(
        [
            {"id": 1, "customer": "A", "item": "x", "category": "Tyres", "budget2026": 10},
            {"id": 2, "customer": "B", "item": "y", "category": "Tyres", "budget2026": -5},
            {"id": 3, "customer": "C", "item": "z", "category": "Tyres", "monthlyData": [1, 2, 3]},
        ]
    )
    assert [item.id for item in items] == [1]
    assert any(issue.field.startswith("line_items.1") for issue in issues)
    assert any(issue.field.startswith("line_items.2") for issue in issues)
