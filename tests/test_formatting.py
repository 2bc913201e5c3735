import logging

from formatting import format_factor, format_money, format_percentage, format_quantity
from services.logging_utils import configure_logging


def test_format_factor_as_whole_percent() -> None:
    assert format_factor(1.425) == "143%"
    assert format_factor(0.42) == "42%"
    assert format_factor(1.0) == "100%"
    assert format_factor("not a number") == "—"


def test_format_quantity_and_money() -> None:
    assert format_quantity(1234.5) == "1,235"
    assert format_quantity(None) == "0"
    assert format_money(772.3) == "772.30"
    assert format_money(1000, "TZS") == "TZS 1,000.00"
    assert format_money(float("nan")) == "—"
    assert format_percentage(22.77) == "22.77%"


def test_configure_logging_respects_existing_handlers(monkeypatch) -> None:
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    try:
        root.handlers = []
        monkeypatch.setenv("PLANNER_LOG_LEVEL", "debug")
        configure_logging()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

        configure_logging(logging.ERROR)
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
