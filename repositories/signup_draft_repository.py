# -*- coding: utf-8 -*-
"""
Signup draft repository.

Holds the in-progress signup record and keeps its durable copy in local
storage in step with it: every merge re-serializes the entire record
before returning.
"""

import json
import threading
from typing import Any, Dict, Optional

from app.config import Config
from models.signup_record import SignupRecord
from services.exceptions import MalformedPersistedStateError
from .local_storage import LocalStorage
from utils.logger import get_logger

logger = get_logger(__name__)


class SignupDraftRepository:
    """Repository for the durable in-progress signup record."""

    def __init__(self, storage: LocalStorage, key: Optional[str] = None):
        self.storage = storage
        self.key = key or Config.SIGNUP_STORAGE_KEY
        self._record: Optional[SignupRecord] = None
        self._lock = threading.RLock()

    @property
    def record(self) -> SignupRecord:
        """Current in-memory record, loading it on first access."""
        if self._record is None:
            return self.load()
        return self._record

    def load(self) -> SignupRecord:
        """
        Read the durable record.

        Absent or malformed data yields a fully-initialized default record.
        Malformed data is logged and otherwise treated as absent.
        """
        with self._lock:
            raw = self.storage.get_item(self.key)
            if raw is None:
                logger.debug("No in-progress signup record found, starting fresh")
                self._record = SignupRecord()
                return self._record

            try:
                self._record = self._decode(raw)
                logger.info("Restored in-progress signup record")
            except MalformedPersistedStateError as e:
                logger.warning(f"{e.message}: {e.original_error}; starting from defaults")
                self._record = SignupRecord()
            return self._record

    def merge(self, partial: Dict[str, Any]) -> SignupRecord:
        """
        Shallow-merge a partial update into the current record and persist it.

        Args:
            partial: Field name -> value. Present keys overwrite, omitted keys are kept.

        Returns:
            The merged record, already written to local storage

        Raises:
            ValueError: If the partial is rejected; nothing is written
        """
        with self._lock:
            merged = self.record.merged(partial)
            self.storage.set_item(self.key, self._encode(merged))
            self._record = merged
            if partial:
                logger.debug(f"Merged signup fields: {', '.join(sorted(partial))}")
            return merged

    def clear(self) -> None:
        """Remove the durable record entirely and discard the in-memory copy."""
        with self._lock:
            self.storage.remove_item(self.key)
            self._record = None
            logger.info("Cleared in-progress signup record")

    @staticmethod
    def _encode(record: SignupRecord) -> str:
        return json.dumps(record.to_dict(), ensure_ascii=False, sort_keys=True)

    def _decode(self, raw: str) -> SignupRecord:
        try:
            return SignupRecord.from_dict(json.loads(raw))
        except (ValueError, TypeError, KeyError) as e:
            # json.JSONDecodeError is a ValueError
            raise MalformedPersistedStateError(self.key, raw, e) from e
