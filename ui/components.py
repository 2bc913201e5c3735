"""Reusable UI helpers for metric cards, callouts and the seasonal month strip."""
from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Mapping, Sequence

import streamlit as st

from formatting import format_factor, format_quantity
from theme import FACTOR_LEVEL_COLORS


@dataclass(frozen=True)
class MetricCard:
    icon: str
    label: str
    value: str
    description: str | None = None
    tone: str | None = None  # e.g. "positive", "caution"


def render_metric_cards(cards: Sequence[MetricCard], *, grid_aria_label: str | None = None) -> None:
    """Render metric cards in a responsive grid."""

    if not cards:
        return
    card_blocks: list[str] = []
    for card in cards:
        tone_class = f" metric-card--{card.tone}" if card.tone else ""
        description_html = (
            f"<p class='metric-card__description'>{html.escape(card.description)}</p>"
            if card.description
            else ""
        )
        card_blocks.append(
            f"<section role='group' class='metric-card{tone_class}'>"
            f"<div class='metric-card__header'><span class='metric-card__icon'>{html.escape(card.icon)}</span> "
            f"<span class='metric-card__label'>{html.escape(card.label)}</span></div>"
            f"<p class='metric-card__value'>{html.escape(card.value)}</p>{description_html}"
            "</section>"
        )
    region_attrs = ""
    if grid_aria_label:
        region_attrs = f" role='region' aria-label='{html.escape(grid_aria_label)}'"
    st.markdown(
        f"<div class='responsive-card-grid'{region_attrs}>" + "".join(card_blocks) + "</div>",
        unsafe_allow_html=True,
    )


def render_callout(*, icon: str, title: str, body: str, tone: str = "neutral") -> None:
    st.markdown(
        """
        <div class="callout callout--{tone}" role="note">
            <span class="callout__icon">{icon}</span>
            <div class="callout__body">
                <strong class="callout__title">{title}</strong>
                <p>{body}</p>
            </div>
        </div>
        """.format(
            tone=html.escape(tone),
            icon=html.escape(icon),
            title=html.escape(title),
            body=html.escape(body),
        ),
        unsafe_allow_html=True,
    )


def render_month_strip(rows: Sequence[Mapping[str, object]]) -> None:
    """Render preview rows as coloured month chips (high/low/normal)."""

    columns = st.columns(len(rows)) if rows else []
    for column, row in zip(columns, rows):
        level = str(row.get("level", "normal"))
        colour = FACTOR_LEVEL_COLORS.get(level, FACTOR_LEVEL_COLORS["normal"])
        column.markdown(
            f"<div class='month-chip' style='border:1px solid {colour};color:{colour}'>"
            f"<strong>{html.escape(str(row.get('month', '')))}</strong><br/>"
            f"{format_quantity(row.get('value'))}<br/>"
            f"<small>({format_factor(row.get('factor'))})</small></div>",
            unsafe_allow_html=True,
        )


__all__ = ["MetricCard", "render_callout", "render_metric_cards", "render_month_strip"]
