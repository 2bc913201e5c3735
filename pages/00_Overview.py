"""Budget overview page accessible from the sidebar."""
from __future__ import annotations

import streamlit as st

from services.logging_utils import configure_logging
from services.storage import get_default_store
from state import ensure_session_defaults
from theme import inject_theme
from ui.navigation import render_global_navigation
from views import render_overview_page

st.set_page_config(
    page_title="Sales Budget Planner｜Overview",
    page_icon="▥",
    layout="wide",
)

configure_logging()
inject_theme()
ensure_session_defaults()
render_global_navigation("overview")
render_overview_page(get_default_store())
