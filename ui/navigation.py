"""Sidebar navigation between the planner pages."""
from __future__ import annotations

from dataclasses import dataclass

import streamlit as st


@dataclass(frozen=True)
class NavigationItem:
    """Metadata for a sidebar navigation entry."""

    key: str
    label: str
    icon: str
    description: str
    page_path: str | None


NAVIGATION_ITEMS: tuple[NavigationItem, ...] = (
    NavigationItem(
        key="overview",
        label="Budget overview",
        icon="🏠",
        description="Review line items and their monthly budget figures.",
        page_path="pages/00_Overview.py",
    ),
    NavigationItem(
        key="distribution",
        label="Set distribution",
        icon="📊",
        description="Spread annual quantities across months (equal, percentage or seasonal).",
        page_path="pages/10_Distribution.py",
    ),
)


def _switch_to(page_path: str | None) -> None:
    """Navigate to the given multipage *page_path* if provided."""

    if not page_path:
        return
    st.switch_page(page_path)


def render_global_navigation(current_key: str) -> None:
    """Render labelled sidebar navigation buttons."""

    st.sidebar.markdown("**Sales budget planner**")
    for item in NAVIGATION_ITEMS:
        is_active = item.key == current_key
        clicked = st.sidebar.button(
            f"{item.icon} {item.label}",
            key=f"nav_button_{item.key}",
            help=item.description,
            use_container_width=True,
            type="primary" if is_active else "secondary",
            disabled=is_active,
        )
        if clicked and not is_active:
            _switch_to(item.page_path)


__all__ = ["NAVIGATION_ITEMS", "NavigationItem", "render_global_navigation"]
