# -*- coding: utf-8 -*-
"""
Session Service.

Receives the finished signup identity, holds the authenticated user and
asks the application to move to its landing surface.
"""

from typing import Dict, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from app.config import Config
from services.exceptions import ValidationException
from services.translation_manager import get_language
from services.validation.validation_factory import ValidationFactory
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionService(QObject):
    """
    Holds the authenticated user for the running application.

    Signals:
        session_established(dict): identity of the new session
        redirect_requested(str): route of the landing surface to open
    """

    session_established = pyqtSignal(dict)
    redirect_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._current_user: Optional[Dict[str, str]] = None
        self._validation = ValidationFactory()

    @property
    def current_user(self) -> Optional[Dict[str, str]]:
        return dict(self._current_user) if self._current_user else None

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def establish_session(self, identity: Dict[str, str]):
        """
        Start a session for a finished signup identity.

        Args:
            identity: {"name", "contact"}

        Raises:
            ValidationException: If name or contact is missing
        """
        errors = self._validation.validate(identity, 'identity')
        if errors:
            raise ValidationException(" | ".join(errors), errors=errors, context="session")

        self._current_user = {"name": identity["name"], "contact": identity["contact"]}
        logger.info(f"Session established for {self._current_user['contact']}")

        route = Config.landing_route(get_language())
        self.session_established.emit(dict(self._current_user))
        self.redirect_requested.emit(route)
