"""Page renderers for the planner."""

from .distribution import render_distribution_page
from .overview import render_overview_page

__all__ = ["render_distribution_page", "render_overview_page"]
