"""Persistence for the admin-configurable discount rules."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from pydantic import ValidationError

from models import DiscountRule, default_discount_rules, rules_to_payload

from .storage import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

DISCOUNT_RULES_KEY = "admin_discount_rules"


class DiscountRuleRepository:
    """Load and save discount rules through a :class:`KeyValueStore`."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.store = store
        self._now = now or datetime.utcnow

    def load(self) -> List[DiscountRule]:
        """Return stored rules, seeding the defaults on first use.

        Unreadable stored data falls back to the defaults without overwriting it.
        """

        try:
            payload = self.store.get(DISCOUNT_RULES_KEY)
        except StorageError:
            logger.exception("Error loading discount rules")
            return default_discount_rules()

        if payload is None:
            rules = default_discount_rules()
            self.save(rules)
            return rules

        try:
            return [DiscountRule.model_validate(entry) for entry in payload]
        except (TypeError, ValidationError):
            logger.exception("Stored discount rules are invalid; using defaults")
            return default_discount_rules()

    def save(self, rules: List[DiscountRule], admin_user: Optional[str] = None) -> List[DiscountRule]:
        timestamp = self._now().isoformat()
        update: dict[str, str] = {"last_modified": timestamp}
        if admin_user:
            update["created_by"] = admin_user
        stamped = [rule.model_copy(update=update) for rule in rules]
        self.store.set(DISCOUNT_RULES_KEY, rules_to_payload(stamped))
        logger.info("Discount rules saved by %s", admin_user or "system")
        return stamped

    def reset_to_defaults(self, admin_user: str) -> List[DiscountRule]:
        return self.save(default_discount_rules(), admin_user)


__all__ = ["DISCOUNT_RULES_KEY", "DiscountRuleRepository"]
