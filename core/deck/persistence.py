"""
Persistence - Selection Preference Storage

Key-value stores and the adapter that loads/saves the active category list.

The adapter absorbs every storage problem: a corrupt stored value loads as
absent, and a failed write is logged and reported as False. Callers never
see an exception from here.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from core.deck.constants import PREFERENCES_KEY
from core.deck.database import init_db
from core.deck.errors import (
    DeckError,
    PersistenceDecodeError,
    PersistenceReadError,
    PersistenceWriteError,
)
from core.deck.models import Preference

logger = logging.getLogger(__name__)


# ---- Stores ----

class KeyValueStore(ABC):
    """
    Durable string-to-string slots.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key was never written.

        Raises PersistenceReadError on failure.
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Write a value. Raises PersistenceWriteError on failure."""


class InMemoryStore(KeyValueStore):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class SqlKeyValueStore(KeyValueStore):
    """
    Store backed by the `preferences` table.

    The table is created on first use, so an unreachable database only
    surfaces as read/write errors.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        self._table_ready = False

    def _ensure_table(self) -> None:
        if not self._table_ready:
            init_db(self.engine)
            self._table_ready = True

    def get(self, key: str) -> Optional[str]:
        try:
            self._ensure_table()
            session = self._session_factory()
            try:
                row = session.get(Preference, key)
                return row.value if row is not None else None
            finally:
                session.close()
        except SQLAlchemyError as exc:
            raise PersistenceReadError(f"could not read {key!r}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._ensure_table()
        except SQLAlchemyError as exc:
            raise PersistenceWriteError(f"could not write {key!r}") from exc

        session = self._session_factory()
        try:
            row = session.get(Preference, key)
            now = datetime.now(timezone.utc)
            if row is None:
                session.add(Preference(key=key, value=value, updated_at=now))
            else:
                row.value = value
                row.updated_at = now
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise PersistenceWriteError(f"could not write {key!r}") from exc
        finally:
            session.close()


# ---- Adapter ----

def decode_selection(raw: str) -> list[str]:
    """
    Decode a stored selection.

    Args:
        raw: JSON text as written by encode_selection()

    Returns:
        Non-empty list of category ids

    Raises:
        PersistenceDecodeError: If the value is not a non-empty JSON list of strings
    """
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise PersistenceDecodeError("stored selection is not valid JSON") from exc

    if not isinstance(parsed, list):
        raise PersistenceDecodeError(f"expected a list, got {type(parsed).__name__}")
    if not parsed:
        raise PersistenceDecodeError("stored selection is empty")
    if not all(isinstance(item, str) and item for item in parsed):
        raise PersistenceDecodeError("stored selection must contain only category ids")
    return parsed


def encode_selection(category_ids: Sequence[str]) -> str:
    return json.dumps(list(category_ids))


class PreferencesAdapter:
    """
    Loads and saves the active category list under a fixed key.
    """

    def __init__(self, store: KeyValueStore, key: str = PREFERENCES_KEY):
        self.store = store
        self.key = key

    def load(self) -> Optional[list[str]]:
        """
        Load the persisted selection.

        Returns:
            List of category ids, or None when absent or undecodable
        """
        try:
            raw = self.store.get(self.key)
        except (DeckError, OSError) as exc:
            logger.warning("Could not read saved categories: %s", exc)
            return None

        if raw is None:
            return None

        try:
            return decode_selection(raw)
        except PersistenceDecodeError as exc:
            logger.warning("Failed to parse saved categories: %s", exc)
            return None

    def save(self, category_ids: Sequence[str]) -> bool:
        """
        Persist the selection.

        Returns:
            True if written, False if the store failed
        """
        try:
            self.store.set(self.key, encode_selection(category_ids))
        except (DeckError, OSError) as exc:
            logger.warning("Failed to save categories: %s", exc)
            return False
        return True
