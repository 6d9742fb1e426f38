# -*- coding: utf-8 -*-
"""
Sharing connection repository.

Keeps the sharing connections that outlive signup: the ones granted on the
sharing step are carried over on completion and managed from the landing
page afterwards.
"""

import json
from typing import List, Optional

from app.config import Config
from models.signup_record import SharingConnection
from .local_storage import LocalStorage
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionRepository:
    """Repository for saved sharing connections."""

    def __init__(self, storage: LocalStorage, key: Optional[str] = None):
        self.storage = storage
        self.key = key or Config.CONNECTIONS_STORAGE_KEY

    def list(self) -> List[SharingConnection]:
        """
        Get all saved connections.

        Malformed stored data is logged and treated as an empty list.
        """
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError("connection list must be a JSON array")
            return [SharingConnection.from_dict(item) for item in data]
        except (ValueError, TypeError, KeyError) as e:
            logger.warning(f"Discarding malformed connections under '{self.key}': {e}")
            return []

    def save_all(self, connections: List[SharingConnection]) -> None:
        """Replace the saved connections."""
        payload = json.dumps([conn.to_dict() for conn in connections], ensure_ascii=False)
        self.storage.set_item(self.key, payload)

    def extend(self, connections: List[SharingConnection]) -> List[SharingConnection]:
        """
        Append connections, skipping ids that are already saved.

        Returns:
            The saved list after the append
        """
        saved = self.list()
        known = {conn.id for conn in saved}
        added = [conn for conn in connections if conn.id not in known]
        if added:
            saved = saved + added
            self.save_all(saved)
            logger.info(f"Saved {len(added)} sharing connection(s)")
        return saved

    def remove(self, connection_id: str) -> List[SharingConnection]:
        """Remove a connection by id and persist the list."""
        connections = [conn for conn in self.list() if conn.id != connection_id]
        self.save_all(connections)
        logger.info(f"Removed sharing connection {connection_id}")
        return connections
