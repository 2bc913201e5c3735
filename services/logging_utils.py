"""Logging setup shared by the Streamlit entry points."""
from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str | None = None) -> None:
    """Configure default logging if no handlers are present.

    The level comes from *level*, then ``PLANNER_LOG_LEVEL``, then INFO.
    """

    root = logging.getLogger()
    if root.handlers:
        return
    resolved = level if level is not None else os.getenv("PLANNER_LOG_LEVEL", "INFO")
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(resolved)


__all__ = ["LOG_FORMAT", "configure_logging"]
