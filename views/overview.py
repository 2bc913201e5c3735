"""Streamlit overview of sales budget line items and their monthly figures."""
from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from calc import discount_percentage, discounted_value
from formatting import format_money, format_percentage, format_quantity
from models import MONTH_CODES, DiscountRule, LineItem
from services.discount_rules import DiscountRuleRepository
from services.storage import KeyValueStore
from state import load_line_items
from ui.components import MetricCard, render_metric_cards


def monthly_budget_dataframe(items: Sequence[LineItem]) -> pd.DataFrame:
    """One row per item with the 12 monthly budget values as columns."""

    rows = []
    for item in items:
        row = {
            "ID": item.id,
            "Customer": item.customer,
            "Category": item.category,
            "Brand": item.brand,
            "Item": item.item,
            "Budget 2026": item.budget2026,
        }
        row.update({code: month.budget_value for code, month in zip(MONTH_CODES, item.monthly_data)})
        row["Monthly total"] = item.monthly_budget_total
        rows.append(row)
    columns = ["ID", "Customer", "Category", "Brand", "Item", "Budget 2026", *MONTH_CODES, "Monthly total"]
    return pd.DataFrame(rows, columns=columns)


def discount_dataframe(items: Sequence[LineItem], rules: Sequence[DiscountRule]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Item": item.item,
                "Discount %": discount_percentage(rules, item.category, item.brand),
                "Budget after discount": discounted_value(item.budget2026, rules, item.category, item.brand),
            }
            for item in items
        ],
        columns=["Item", "Discount %", "Budget after discount"],
    )


def discount_display_dataframe(items: Sequence[LineItem], rules: Sequence[DiscountRule]) -> pd.DataFrame:
    """Discount table with the percentage and money columns formatted for display."""

    frame = discount_dataframe(items, rules)
    frame["Discount %"] = frame["Discount %"].map(format_percentage)
    frame["Budget after discount"] = frame["Budget after discount"].map(format_money)
    return frame


def render_overview_page(store: KeyValueStore | None = None) -> None:
    items = load_line_items(store)
    st.title("Sales budget overview")

    annual = sum(item.budget2026 for item in items)
    distributed = sum(item.monthly_budget_total for item in items)
    render_metric_cards(
        [
            MetricCard(icon="🧾", label="Line items", value=str(len(items))),
            MetricCard(icon="📦", label="Annual budget 2026", value=format_quantity(annual)),
            MetricCard(
                icon="📅",
                label="Distributed to months",
                value=format_quantity(distributed),
                tone="positive" if distributed == annual else "caution",
            ),
        ],
        grid_aria_label="Budget summary",
    )

    frame = monthly_budget_dataframe(items)
    st.dataframe(frame, hide_index=True, use_container_width=True)

    if store is not None:
        rules = DiscountRuleRepository(store).load()
        with st.expander("Discounts by item"):
            st.dataframe(discount_display_dataframe(items, rules), hide_index=True, use_container_width=True)


__all__ = ["discount_dataframe", "discount_display_dataframe", "monthly_budget_dataframe", "render_overview_page"]
