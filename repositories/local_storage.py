# -*- coding: utf-8 -*-
"""
Local key-value storage.

A string-keyed, string-valued store with the contract of browser local
storage: get_item / set_item / remove_item. Repositories serialize their
records into it.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional

from .database import Database
from utils.logger import get_logger

logger = get_logger(__name__)


class LocalStorage(ABC):
    """Abstract local key-value storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string for key, or None if absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing an absent key is not an error."""
        pass


class SQLiteLocalStorage(LocalStorage):
    """Local storage persisted in the application's SQLite file."""

    def __init__(self, db: Database):
        self.db = db
        self.db.initialize()

    def get_item(self, key: str) -> Optional[str]:
        row = self.db.fetch_one("SELECT value FROM local_storage WHERE key = ?", (key,))
        return row["value"] if row else None

    def set_item(self, key: str, value: str) -> None:
        query = """
            INSERT INTO local_storage (key, value, updated_at) VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
        """
        self.db.execute(query, (key, value, datetime.now().isoformat()))
        logger.debug(f"Stored local item '{key}' ({len(value)} chars)")

    def remove_item(self, key: str) -> None:
        self.db.execute("DELETE FROM local_storage WHERE key = ?", (key,))
        logger.debug(f"Removed local item '{key}'")


class InMemoryLocalStorage(LocalStorage):
    """Process-local storage with the same contract, for tests and previews."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
