"""Utilities for managing Streamlit session state defaults and line item updates."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence

import streamlit as st

from calc.distribution import build_monthly_budgets
from models import DEFAULT_LINE_ITEMS, LineItem, MonthlyAllocation
from services.storage import KeyValueStore
from validators import collect_error_messages, validate_line_items

logger = logging.getLogger(__name__)

StateFactory = Callable[[], Any]
TypeHint = type | tuple[type, ...] | None

LINE_ITEMS_KEY = "sales_budget_items"


@dataclass(frozen=True)
class StateSpec:
    """Definition of a session state entry."""

    default_factory: StateFactory
    type_hint: TypeHint
    description: str

    def create_default(self) -> Any:
        """Return a new default value for the state entry."""
        return self.default_factory()

    def is_valid(self, value: Any) -> bool:
        """Check whether *value* matches the declared type hint."""
        if self.type_hint is None:
            return True
        hints = self.type_hint if isinstance(self.type_hint, tuple) else (self.type_hint,)
        return isinstance(value, hints)


STATE_SPECS: Dict[str, StateSpec] = {
    "line_items": StateSpec(list, list, "Sales budget line items"),
    "distribution_settings": StateSpec(
        lambda: {"strategy": "seasonal", "item_quantity": 0, "percentage_value": 0.0},
        dict,
        "Selected strategy and its quantity/percentage parameters",
    ),
    "distribution_filters": StateSpec(
        lambda: {"customer": "", "category": "", "brand": "", "item": ""},
        dict,
        "Customer/category/brand/item filters for distribution",
    ),
    "last_distribution": StateSpec(dict, dict, "Allocations produced by the last apply action"),
    "distribution_notice": StateSpec(dict, dict, "Outcome message of the last apply action, shown once"),
    "show_seasonal_info": StateSpec(lambda: False, bool, "Seasonal factor explanation toggle"),
    "show_advanced_filters": StateSpec(lambda: False, bool, "Category/brand/item filter toggle"),
    "last_updated_ts": StateSpec(lambda: "", str, "Last update timestamp"),
    "validation_status": StateSpec(lambda: "—", str, "Validation status display"),
}


def ensure_session_defaults(overrides: Mapping[str, Any] | None = None) -> None:
    """Populate :mod:`st.session_state` with defaults and type-validate entries."""

    overrides = overrides or {}
    for key, spec in STATE_SPECS.items():
        if key in overrides:
            st.session_state[key] = overrides[key]
            continue
        if key not in st.session_state or not spec.is_valid(st.session_state[key]):
            st.session_state[key] = spec.create_default()


def reset_session_keys(keys: Iterable[str] | None = None) -> None:
    """Reset selected state keys to their default values."""

    target_keys = list(keys) if keys is not None else list(STATE_SPECS.keys())
    for key in target_keys:
        if key in STATE_SPECS:
            st.session_state[key] = STATE_SPECS[key].create_default()
        elif key in st.session_state:
            del st.session_state[key]


def merge_distribution(
    items: Sequence[LineItem],
    distribution: Mapping[int, MonthlyAllocation],
) -> List[LineItem]:
    """Return *items* with the allocated monthly budgets merged in.

    Items absent from *distribution* are returned unchanged; for the others
    only the monthly ``budget_value`` fields are replaced.
    """

    merged: List[LineItem] = []
    for item in items:
        allocation = distribution.get(item.id)
        if allocation is None:
            merged.append(item)
            continue
        merged.append(item.model_copy(update={"monthly_data": build_monthly_budgets(item, allocation)}))
    return merged


def _coerce_items(raw: Iterable[Any]) -> List[LineItem]:
    items: List[LineItem] = []
    payloads: List[Dict[str, Any]] = []
    for entry in raw:
        if isinstance(entry, LineItem):
            items.append(entry)
        else:
            payloads.append(entry)
    if payloads:
        parsed, issues = validate_line_items(payloads)
        if issues:
            logger.warning("Skipping invalid line items:\n%s", collect_error_messages(issues))
        items.extend(parsed)
    return items


def load_line_items(store: KeyValueStore | None = None) -> List[LineItem]:
    """Return line items from the session, then *store*, then the built-in samples."""

    session_items = st.session_state.get("line_items")
    if session_items:
        items = _coerce_items(session_items)
        st.session_state["line_items"] = items
        return items

    stored = store.get(LINE_ITEMS_KEY) if store is not None else None
    source = stored if stored else DEFAULT_LINE_ITEMS
    items = _coerce_items(source)
    st.session_state["line_items"] = items
    return items


def save_line_items(items: Sequence[LineItem], store: KeyValueStore | None = None) -> None:
    st.session_state["line_items"] = list(items)
    st.session_state["last_updated_ts"] = datetime.now().isoformat(timespec="seconds")
    if store is not None:
        store.set(LINE_ITEMS_KEY, [item.model_dump(mode="json", by_alias=True) for item in items])


def apply_distribution_to_session(
    distribution: Mapping[int, MonthlyAllocation],
    store: KeyValueStore | None = None,
) -> List[LineItem]:
    """Merge *distribution* into the session line items and persist them."""

    items = load_line_items(store)
    merged = merge_distribution(items, distribution)
    save_line_items(merged, store)
    st.session_state["last_distribution"] = {int(k): list(v) for k, v in distribution.items()}
    logger.info("Merged distribution for %d item(s)", len(distribution))
    return merged


__all__ = [
    "LINE_ITEMS_KEY",
    "STATE_SPECS",
    "StateSpec",
    "apply_distribution_to_session",
    "ensure_session_defaults",
    "load_line_items",
    "merge_distribution",
    "reset_session_keys",
    "save_line_items",
]
