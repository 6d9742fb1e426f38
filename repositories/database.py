# -*- coding: utf-8 -*-
"""
SQLite database for durable local application state.

The desktop app keeps its client-side state (the in-progress signup record,
saved sharing connections) in a single local SQLite file, the way a web
client would keep it in browser local storage.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from utils.logger import get_logger

logger = get_logger(__name__)


SCHEMA = """
    CREATE TABLE IF NOT EXISTS local_storage (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
"""


class Database:
    """SQLite database wrapper."""

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize database.

        Args:
            db_path: Optional path for the SQLite file. Defaults to Config.LOCAL_STORAGE_DB_PATH.
        """
        if db_path is None:
            from app.config import Config
            db_path = Config.LOCAL_STORAGE_DB_PATH

        self._db_path = Path(db_path)
        self._connection: Optional[sqlite3.Connection] = None

        # Ensure directory exists
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def db_path(self) -> Path:
        """Get database file path."""
        return self._db_path

    def connect(self) -> bool:
        """Establish SQLite connection."""
        try:
            if self._connection is None:
                self._connection = sqlite3.connect(
                    str(self._db_path),
                    check_same_thread=False
                )
                # Use dict-like row factory
                self._connection.row_factory = self._dict_factory
            return True
        except sqlite3.Error as e:
            logger.error(f"SQLite connection error: {e}")
            return False

    def _dict_factory(self, cursor, row) -> Dict[str, Any]:
        """Convert row to dictionary."""
        columns = [col[0] for col in cursor.description]
        return {col: row[idx] for idx, col in enumerate(columns)}

    def _get_connection(self) -> sqlite3.Connection:
        """Get connection, connecting if needed."""
        if not self._connection:
            self.connect()
        return self._connection

    def initialize(self) -> None:
        """Initialize database schema."""
        self.execute(SCHEMA)
        logger.debug(f"Local storage schema ready at {self._db_path}")

    @contextmanager
    def transaction(self):
        """
        Transaction context manager.

        Usage:
            with db.transaction() as conn:
                # Operations auto-commit on success, rollback on error
        """
        conn = self._get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    def execute(self, query: str, params: Tuple = ()) -> List[Dict[str, Any]]:
        """
        Execute a query and return result rows (empty for non-SELECT queries).
        """
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(query, params)
            conn.commit()
            if cursor.description:
                return cursor.fetchall()
            return []
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"SQLite execute error: {e}\nQuery: {query}")
            raise

    def fetch_one(self, query: str, params: Tuple = ()) -> Optional[Dict[str, Any]]:
        """Execute query and fetch single row."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(query, params)
            return cursor.fetchone()
        except sqlite3.Error as e:
            logger.error(f"SQLite fetch_one error: {e}\nQuery: {query}")
            raise

    def close(self) -> None:
        """Close SQLite connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("SQLite connection closed")
