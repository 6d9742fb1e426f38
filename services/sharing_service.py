# -*- coding: utf-8 -*-
"""
Sharing Service.

Creates consent-scoped sharing connections and renders their permission
summaries in the active language.
"""

from datetime import datetime
from typing import Dict, List, Optional

from models.signup_record import PERMISSION_KEYS, SharingConnection
from services.exceptions import ValidationException
from services.translation_manager import tr
from services.validation.validation_factory import ValidationFactory
from utils.logger import get_logger

logger = get_logger(__name__)


class SharingService:
    """Validated creation and bookkeeping of sharing connections."""

    def __init__(self, validation: Optional[ValidationFactory] = None):
        self._validation = validation or ValidationFactory()

    def create_connection(self, contact: str, permissions: Dict[str, bool],
                          created_at: Optional[datetime] = None) -> SharingConnection:
        """
        Create a new connection.

        Raises:
            ValidationException: If the contact is malformed or no permission is granted
        """
        values = {"contact": contact, "permissions": permissions}
        field_errors = self._validation.validate_fields(values, 'sharing_connection')
        if field_errors:
            errors = [msg for messages in field_errors.values() for msg in messages]
            field = next(iter(field_errors))
            logger.debug(f"Rejected sharing connection: {errors}")
            raise ValidationException(errors[0], field=field, errors=errors,
                                      context="sharing_connection",
                                      field_errors=field_errors)

        return SharingConnection.create(contact, permissions, created_at=created_at)

    def add_connection(self, connections: List[SharingConnection], contact: str,
                       permissions: Dict[str, bool]) -> List[SharingConnection]:
        """
        Return a new list with a validated connection appended.

        The given list is left unchanged, also when validation fails.
        """
        connection = self.create_connection(contact, permissions)
        logger.info(f"Added sharing connection {connection.id}")
        return list(connections) + [connection]

    @staticmethod
    def remove_connection(connections: List[SharingConnection],
                          connection_id: str) -> List[SharingConnection]:
        """Return a new list without the connection of the given id."""
        return [conn for conn in connections if conn.id != connection_id]

    @staticmethod
    def permissions_summary(permissions: Dict[str, bool]) -> str:
        """
        Localized one-line summary of granted permissions.

        Returns the "none" text when nothing is granted and the "all" text
        when every permission is granted.
        """
        granted = [key for key in PERMISSION_KEYS if permissions.get(key)]
        if not granted:
            return tr("sharing.summary.none")
        if len(granted) == len(PERMISSION_KEYS):
            return tr("sharing.summary.all")

        separator = tr("sharing.summary.separator")
        return separator.join(tr(f"permission.{key}") for key in granted)
