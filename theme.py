"""Colour scheme and shared CSS for the budget planner pages."""
from __future__ import annotations

from typing import Dict

import streamlit as st

THEME_COLORS: Dict[str, str] = {
    "background": "#F7F8FA",
    "surface": "#FFFFFF",
    "surface_alt": "#EEF1F6",
    "primary": "#0B1F3B",
    "accent": "#1E88E5",
    "positive": "#3C7A5E",
    "negative": "#B5504A",
    "neutral": "#D3DAE3",
    "text": "#1A1A1A",
    "text_subtle": "#5A6B7A",
    "seasonal": "#6F42C1",
}

# Preview colours for high/low/normal seasonal months.
FACTOR_LEVEL_COLORS: Dict[str, str] = {
    "high": "#3C7A5E",
    "low": "#B5504A",
    "normal": "#5A6B7A",
}

CUSTOM_STYLE_TEMPLATE = """
<style>
:root {{
    --planner-background: {background};
    --planner-surface: {surface};
    --planner-primary: {primary};
    --planner-accent: {accent};
    --planner-text: {text};
    --planner-text-subtle: {text_subtle};
}}
.stApp {{
    background-color: var(--planner-background);
    color: var(--planner-text);
}}
.responsive-card-grid {{
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
    gap: 0.75rem;
}}
.metric-card {{
    background: var(--planner-surface);
    border: 1px solid {neutral};
    border-radius: 12px;
    padding: 0.9rem 1rem;
}}
.metric-card__label {{
    color: var(--planner-text-subtle);
    font-size: 0.85rem;
}}
.metric-card__value {{
    font-size: 1.4rem;
    font-weight: 600;
    margin: 0.25rem 0 0;
}}
.callout {{
    display: flex;
    gap: 0.75rem;
    border-radius: 10px;
    padding: 0.75rem 1rem;
    background: {surface_alt};
}}
.callout--seasonal {{
    border-left: 4px solid {seasonal};
}}
.month-chip {{
    border-radius: 8px;
    padding: 0.4rem;
    text-align: center;
    font-size: 0.8rem;
}}
</style>
"""


def build_custom_style() -> str:
    return CUSTOM_STYLE_TEMPLATE.format(**THEME_COLORS)


def inject_theme() -> None:
    """Apply the shared CSS theme to the current page."""

    st.markdown(build_custom_style(), unsafe_allow_html=True)


__all__ = ["FACTOR_LEVEL_COLORS", "THEME_COLORS", "build_custom_style", "inject_theme"]
