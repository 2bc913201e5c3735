"""Streamlit view for the "Set Distribution" workflow."""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence

import altair as alt
import pandas as pd
import streamlit as st

from calc import (
    apply_distribution,
    customer_combinations,
    filter_items,
    get_seasonal_factors,
    preview_seasonal_distribution,
    unique_filter_values,
)
from formatting import format_quantity
from models import (
    BUSINESS_ACTIVITY,
    HOLIDAY_IMPACT,
    MONTH_CODES,
    DistributionFilter,
    LineItem,
)
from models.seasonal import SEASONAL_TABLE_NOTES, industry_pattern_for
from services.storage import KeyValueStore
from state import apply_distribution_to_session, load_line_items, reset_session_keys
from theme import FACTOR_LEVEL_COLORS
from ui.components import MetricCard, render_callout, render_metric_cards, render_month_strip
from validators import collect_error_messages, validate_distribution

logger = logging.getLogger(__name__)

STRATEGY_LABELS: Dict[str, str] = {
    "seasonal": "Seasonal (recommended)",
    "equal": "Equal split",
    "percentage": "Percentage of annual budget",
}

STRATEGY_HELP: Dict[str, str] = {
    "seasonal": "Weights months by business activity, holidays and the category's industry pattern.",
    "equal": "Splits one quantity evenly; leftover units go to the earliest months.",
    "percentage": "Takes a percentage of each item's annual budget and splits it evenly.",
}


FILTER_WIDGET_DEFAULTS: Dict[str, str] = {
    "dist_filter_customer": "",
    "dist_filter_category": "",
    "dist_filter_brand": "",
    "dist_filter_item": "",
}

AMOUNT_WIDGET_DEFAULTS: Dict[str, object] = {"dist_quantity": 0, "dist_percentage": 0.0}


def preview_dataframe(rows: Sequence[Mapping[str, object]]) -> pd.DataFrame:
    """Return a month-ordered frame for the seasonal preview chart."""

    frame = pd.DataFrame(list(rows), columns=["month", "value", "factor", "level"])
    frame["_month_index"] = range(len(frame))
    return frame


def seasonal_factor_table(category: str) -> pd.DataFrame:
    """Return the three source tables and the combined factor for *category*."""

    industry = industry_pattern_for(category)
    return pd.DataFrame(
        {
            "Month": list(MONTH_CODES),
            "Business activity": [BUSINESS_ACTIVITY[code] for code in MONTH_CODES],
            "Holiday impact": [HOLIDAY_IMPACT[code] for code in MONTH_CODES],
            "Industry pattern": [industry[code] for code in MONTH_CODES],
            "Combined": get_seasonal_factors(category),
        }
    )


def selected_items_dataframe(items: Sequence[LineItem]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Customer": item.customer,
                "Category": item.category,
                "Brand": item.brand,
                "Item": item.item,
                "Budget 2026": item.budget2026,
            }
            for item in items
        ],
        columns=["Customer", "Category", "Brand", "Item", "Budget 2026"],
    )


def _seed_widget(key: str, value: object) -> None:
    # Keyed widgets take their value from session state; no value= argument.
    if key not in st.session_state:
        st.session_state[key] = value


def _select(label: str, options: List[str], current: str, key: str) -> str:
    choices = [""] + options
    if st.session_state.get(key, current) not in choices:
        st.session_state[key] = ""
    else:
        _seed_widget(key, current)
    return st.selectbox(
        label,
        choices,
        key=key,
        format_func=lambda value: value or "All",
    )


def clear_filters() -> None:
    """Reset the filter widgets and the stored filter selection."""

    for key, value in FILTER_WIDGET_DEFAULTS.items():
        st.session_state[key] = value
    reset_session_keys(["distribution_filters"])


def reset_amount_inputs() -> None:
    """Zero the quantity and percentage inputs, keeping the chosen strategy."""

    for key, value in AMOUNT_WIDGET_DEFAULTS.items():
        st.session_state[key] = value
    settings = dict(st.session_state["distribution_settings"])
    settings.update(item_quantity=0, percentage_value=0.0)
    st.session_state["distribution_settings"] = settings


def _render_filters(items: Sequence[LineItem]) -> DistributionFilter:
    values = unique_filter_values(items)
    current = st.session_state["distribution_filters"]

    customer = _select("Customer", values["customers"], current.get("customer", ""), "dist_filter_customer")
    show_advanced = st.toggle(
        "Advanced filters",
        value=st.session_state["show_advanced_filters"],
        key="dist_show_advanced",
    )
    st.session_state["show_advanced_filters"] = show_advanced

    category = current.get("category", "")
    brand = current.get("brand", "")
    item_search = current.get("item", "")
    if show_advanced:
        cols = st.columns(3)
        with cols[0]:
            category = _select("Category", values["categories"], category, "dist_filter_category")
        with cols[1]:
            brand = _select("Brand", values["brands"], brand, "dist_filter_brand")
        with cols[2]:
            _seed_widget("dist_filter_item", item_search)
            item_search = st.text_input("Item contains", key="dist_filter_item")

    filters = DistributionFilter(customer=customer, category=category, brand=brand, item=item_search)
    st.session_state["distribution_filters"] = filters.model_dump()

    st.button("Clear all filters", key="dist_clear_filters", on_click=clear_filters)
    return filters


def _render_combinations(items: Sequence[LineItem], customer: str) -> None:
    combinations = customer_combinations(items, customer)
    if not combinations:
        return
    with st.expander(f"Available combinations ({len(combinations)})"):
        for combo in combinations:
            st.markdown(f"- {combo.label} · budget {format_quantity(combo.budget2026)}")


def _render_seasonal_info(category: str) -> None:
    st.session_state["show_seasonal_info"] = st.toggle(
        "How seasonal distribution works",
        value=st.session_state["show_seasonal_info"],
        key="dist_show_seasonal_info",
    )
    if not st.session_state["show_seasonal_info"]:
        return
    render_callout(
        icon="📅",
        title="Seasonal factors",
        body=" ".join(SEASONAL_TABLE_NOTES.values()),
        tone="seasonal",
    )
    st.dataframe(seasonal_factor_table(category), hide_index=True, use_container_width=True)


def _render_preview(rows: Sequence[Mapping[str, object]]) -> None:
    st.subheader("Seasonal distribution preview")
    render_month_strip(rows)
    frame = preview_dataframe(rows)
    color_scale = alt.Scale(
        domain=list(FACTOR_LEVEL_COLORS.keys()),
        range=list(FACTOR_LEVEL_COLORS.values()),
    )
    chart = (
        alt.Chart(frame)
        .mark_bar(size=24, cornerRadiusEnd=4)
        .encode(
            x=alt.X("month:N", sort=alt.SortField(field="_month_index", order="ascending"), title="Month"),
            y=alt.Y("value:Q", title="Quantity"),
            color=alt.Color("level:N", scale=color_scale, legend=alt.Legend(title="Season")),
            tooltip=[
                alt.Tooltip("month:N"),
                alt.Tooltip("value:Q", title="Quantity"),
                alt.Tooltip("factor:Q", title="Factor", format=".3f"),
            ],
        )
        .properties(height=240)
    )
    st.altair_chart(chart, use_container_width=True)


def _submitted_form() -> Dict[str, object]:
    """Collect the request from the widget values committed with the click."""

    settings = st.session_state["distribution_settings"]
    filters = dict(st.session_state["distribution_filters"])
    filters["customer"] = st.session_state.get("dist_filter_customer", filters.get("customer", ""))
    if st.session_state["show_advanced_filters"]:
        filters["category"] = st.session_state.get("dist_filter_category", filters.get("category", ""))
        filters["brand"] = st.session_state.get("dist_filter_brand", filters.get("brand", ""))
        filters["item"] = st.session_state.get("dist_filter_item", filters.get("item", ""))

    strategy = st.session_state.get("dist_strategy", settings.get("strategy", "seasonal"))
    quantity = settings.get("item_quantity", 0)
    percentage = settings.get("percentage_value", 0.0)
    if strategy in ("equal", "seasonal"):
        quantity = st.session_state.get("dist_quantity", quantity)
    else:
        percentage = st.session_state.get("dist_percentage", percentage)
    return {
        "strategy": strategy,
        "item_quantity": quantity,
        "percentage_value": percentage,
        "filters": filters,
    }


def apply_distribution_form(store: KeyValueStore | None = None) -> None:
    """Validate the form, apply the distribution and reset the amount inputs.

    Runs as the Apply button callback, before the widgets of the next run are
    built, so the inputs can be zeroed.
    """

    items = load_line_items(store)
    validated, issues = validate_distribution(_submitted_form(), items)
    if issues:
        logger.info("Distribution rejected: %s", "; ".join(issue.message for issue in issues))
        st.session_state["validation_status"] = "error"
        st.session_state["distribution_notice"] = {
            "status": "error",
            "message": collect_error_messages(issues),
            "details": [],
        }
        return
    assert validated is not None
    request, selected = validated
    distribution = apply_distribution(
        selected,
        request.strategy,
        quantity=request.item_quantity,
        percentage=request.percentage_value,
    )
    apply_distribution_to_session(distribution, store)
    st.session_state["validation_status"] = "ok"
    st.session_state["distribution_notice"] = {
        "status": "ok",
        "message": f"Distribution applied to {len(distribution)} item(s).",
        "details": [
            f"{item.combination_label}: "
            + ", ".join(f"{code} {format_quantity(value)}" for code, value in zip(MONTH_CODES, distribution[item.id]))
            for item in selected[:5]
        ],
    }
    reset_amount_inputs()


def _render_notice() -> None:
    notice = st.session_state["distribution_notice"]
    if not notice:
        return
    if notice.get("status") == "ok":
        st.success(notice.get("message", ""))
    else:
        st.error(notice.get("message", ""))
    for line in notice.get("details", []):
        st.caption(line)
    reset_session_keys(["distribution_notice"])


def render_distribution_page(store: KeyValueStore | None = None) -> None:
    """Render the filter, strategy, preview and apply controls."""

    items = load_line_items(store)
    st.title("Set distribution")
    if not items:
        st.info("No line items available yet.")
        return

    filters = _render_filters(items)
    _render_combinations(items, filters.customer)

    matching = filter_items(items, filters)
    render_metric_cards(
        [
            MetricCard(icon="🧾", label="Matching items", value=str(len(matching))),
            MetricCard(
                icon="📦",
                label="Annual budget (selection)",
                value=format_quantity(sum(item.budget2026 for item in matching)),
            ),
        ],
        grid_aria_label="Selection summary",
    )
    if matching:
        st.dataframe(selected_items_dataframe(matching), hide_index=True, use_container_width=True)

    settings = st.session_state["distribution_settings"]
    strategies = list(STRATEGY_LABELS.keys())
    strategy = st.radio(
        "Distribution type",
        strategies,
        index=strategies.index(settings.get("strategy", "seasonal")),
        format_func=STRATEGY_LABELS.get,
        horizontal=True,
        key="dist_strategy",
    )
    st.caption(STRATEGY_HELP[strategy])

    quantity = int(settings.get("item_quantity", 0))
    percentage = float(settings.get("percentage_value", 0.0))
    if strategy in ("equal", "seasonal"):
        _seed_widget("dist_quantity", quantity)
        quantity = int(
            st.number_input(
                "Quantity",
                min_value=0,
                step=1,
                help="For seasonal distribution, 0 uses each item's annual budget.",
                key="dist_quantity",
            )
        )
    else:
        _seed_widget("dist_percentage", percentage)
        percentage = float(
            st.number_input(
                "Percentage of annual budget",
                min_value=0.0,
                max_value=100.0,
                step=1.0,
                key="dist_percentage",
            )
        )
    st.session_state["distribution_settings"] = {
        "strategy": strategy,
        "item_quantity": quantity,
        "percentage_value": percentage,
    }

    if strategy == "seasonal":
        category = filters.category or (matching[0].category if matching else "Accessories")
        _render_seasonal_info(category)
        rows = preview_seasonal_distribution(items, filters, quantity)
        if rows:
            _render_preview(rows)

    st.button(
        "Apply distribution",
        type="primary",
        key="dist_apply",
        on_click=apply_distribution_form,
        args=(store,),
    )
    _render_notice()


__all__ = [
    "AMOUNT_WIDGET_DEFAULTS",
    "FILTER_WIDGET_DEFAULTS",
    "STRATEGY_LABELS",
    "apply_distribution_form",
    "clear_filters",
    "preview_dataframe",
    "render_distribution_page",
    "reset_amount_inputs",
    "seasonal_factor_table",
    "selected_items_dataframe",
]
