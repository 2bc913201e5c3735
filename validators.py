"""Validation helpers for user supplied distribution settings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from pydantic import ValidationError

from calc.selection import filter_items
from models import DistributionRequest, LineItem

MISSING_CUSTOMER_MESSAGE = "Please select a customer first"
MISSING_AMOUNT_MESSAGE = "Please enter a quantity or percentage value"
NO_MATCHING_ITEMS_MESSAGE = "No items found with the selected criteria"


@dataclass(frozen=True)
class ValidationIssue:
    """Represents a validation error for a specific field."""

    field: str
    message: str


def _issues_from_error(prefix: str, error: ValidationError) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for detail in error.errors():
        path = ".".join(str(part) for part in detail.get("loc", ()))
        message = detail.get("msg", "Invalid value.")
        field = f"{prefix}.{path}" if prefix and path else prefix or path
        issues.append(ValidationIssue(field=field, message=message))
    return issues


def validate_request(data: Dict[str, Any]) -> Tuple[DistributionRequest | None, List[ValidationIssue]]:
    try:
        request = DistributionRequest(**data)
        return request, []
    except ValidationError as exc:
        return None, _issues_from_error("distribution", exc)


def validate_line_items(
    raw_items: Iterable[Dict[str, Any]],
) -> Tuple[List[LineItem], List[ValidationIssue]]:
    items: List[LineItem] = []
    issues: List[ValidationIssue] = []
    for index, raw in enumerate(raw_items):
        try:
            items.append(LineItem.model_validate(raw))
        except ValidationError as exc:
            issues.extend(_issues_from_error(f"line_items.{index}", exc))
    return items, issues


def validate_distribution(
    data: Dict[str, Any],
    items: Sequence[LineItem],
) -> Tuple[Tuple[DistributionRequest, List[LineItem]] | None, List[ValidationIssue]]:
    """Check a distribution request before the engine runs.

    Returns ``((request, matching_items), [])`` when the request can be applied,
    otherwise ``(None, issues)``. No partial computation happens on failure.
    """

    request, issues = validate_request(data)
    if request is None:
        return None, issues

    if not request.filters.customer:
        return None, [ValidationIssue(field="filters.customer", message=MISSING_CUSTOMER_MESSAGE)]

    if request.strategy != "seasonal" and not request.item_quantity and not request.percentage_value:
        return None, [ValidationIssue(field="item_quantity", message=MISSING_AMOUNT_MESSAGE)]

    matching = filter_items(items, request.filters)
    if not matching:
        return None, [ValidationIssue(field="filters", message=NO_MATCHING_ITEMS_MESSAGE)]

    return (request, matching), []


def collect_error_messages(issues: Iterable[ValidationIssue]) -> str:
    return "\n".join(f"[{issue.field}] {issue.message}" for issue in issues)


__all__ = [
    "MISSING_AMOUNT_MESSAGE",
    "MISSING_CUSTOMER_MESSAGE",
    "NO_MATCHING_ITEMS_MESSAGE",
    "ValidationIssue",
    "collect_error_messages",
    "validate_distribution",
    "validate_line_items",
    "validate_request",
]
