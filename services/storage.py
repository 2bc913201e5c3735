"""Key-value persistence for planner data (line items, discount rules)."""
from __future__ import annotations

import json
import logging
import os
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Iterator, Optional, Protocol

from sqlalchemy import Column, DateTime, String, Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///sales_planner.db")

_SQLITE_PREFIX = "sqlite:///"

Base = declarative_base()


class StorageError(RuntimeError):
    """Raised when a stored value cannot be written or decoded."""


class KeyValueEntry(Base):
    __tablename__ = "kv_entries"

    key = Column(String(255), primary_key=True)
    value_json = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class KeyValueStore(Protocol):
    """String-keyed store of JSON-serialisable values."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> bool: ...


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Type {type(value)!r} is not JSON serialisable")


def _dumps(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, default=_json_default)
    except TypeError as exc:
        raise StorageError(str(exc)) from exc


class InMemoryStore:
    """Dictionary backed store; values are round-tripped through JSON."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = _dumps(value)

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        return sorted(self._data)


class SqlKeyValueStore:
    """Store backed by a single SQLAlchemy table."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
        Base.metadata.create_all(bind=engine)

    @classmethod
    def from_url(cls, url: str = DATABASE_URL) -> "SqlKeyValueStore":
        connect_args = {"check_same_thread": False} if url.startswith(_SQLITE_PREFIX) else {}
        engine = create_engine(url, echo=False, future=True, connect_args=connect_args)
        return cls(engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a transactional scope around a series of operations."""

        session: Session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, key: str, default: Any = None) -> Any:
        with self.session() as session:
            entry = session.execute(select(KeyValueEntry).where(KeyValueEntry.key == key)).scalar_one_or_none()
            if entry is None:
                return default
            raw = entry.value_json
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Stored value for '{key}' is not valid JSON.") from exc

    def set(self, key: str, value: Any) -> None:
        payload = _dumps(value)
        with self.session() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                session.add(KeyValueEntry(key=key, value_json=payload))
            else:
                entry.value_json = payload
        logger.debug("Stored key %s (%d bytes)", key, len(payload))

    def delete(self, key: str) -> bool:
        with self.session() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                return False
            session.delete(entry)
        return True


_DEFAULT_STORE: Optional[SqlKeyValueStore] = None


def get_default_store() -> SqlKeyValueStore:
    """Return the process wide store configured through ``DATABASE_URL``."""

    global _DEFAULT_STORE
    if _DEFAULT_STORE is None:
        _DEFAULT_STORE = SqlKeyValueStore.from_url(DATABASE_URL)
    return _DEFAULT_STORE


__all__ = [
    "DATABASE_URL",
    "InMemoryStore",
    "KeyValueEntry",
    "KeyValueStore",
    "SqlKeyValueStore",
    "StorageError",
    "get_default_store",
]
