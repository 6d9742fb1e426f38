# -*- coding: utf-8 -*-
"""
Navigable location of the signup wizard.

Keeps a browser-like history of wizard URLs such as
`hami://app/fa/signup?step=3` so back/forward and restarts resume at the
same step.
"""

from typing import List, Optional, Union

from PyQt5.QtCore import QObject, QUrl, QUrlQuery, pyqtSignal

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


class StepRouter(QObject):
    """
    History of wizard locations.

    Signals:
        location_changed(object): Emitted on back/forward traversal with the
            step of the new location (None when it has no usable step)
    """

    location_changed = pyqtSignal(object)

    def __init__(self, lang: Optional[str] = None,
                 initial_url: Optional[Union[str, QUrl]] = None, parent=None):
        super().__init__(parent)
        if initial_url is None:
            initial_url = Config.signup_url(lang or Config.DEFAULT_LANGUAGE)
        self._history: List[QUrl] = [QUrl(initial_url)]
        self._position = 0

    def current_url(self) -> QUrl:
        return QUrl(self._history[self._position])

    def current_step(self) -> Optional[int]:
        """
        Read the step query parameter of the current location.

        Returns:
            The step as an integer, or None when absent or unparseable
        """
        query = QUrlQuery(self._history[self._position])
        if not query.hasQueryItem(Config.STEP_QUERY_PARAM):
            return None

        value = query.queryItemValue(Config.STEP_QUERY_PARAM).strip()
        try:
            return int(value)
        except ValueError:
            logger.debug(f"Ignoring unparseable step parameter: {value!r}")
            return None

    def push_step(self, step: int):
        """Add a new history entry for the step, dropping any forward entries."""
        url = self._url_for(step)
        del self._history[self._position + 1:]
        self._history.append(url)
        self._position = len(self._history) - 1
        logger.debug(f"Pushed location {url.toString()}")

    def replace_step(self, step: int):
        """Rewrite the current history entry to the step."""
        url = self._url_for(step)
        self._history[self._position] = url
        logger.debug(f"Replaced location with {url.toString()}")

    def can_go_back(self) -> bool:
        return self._position > 0

    def can_go_forward(self) -> bool:
        return self._position < len(self._history) - 1

    def back(self) -> bool:
        """Traverse one entry back; returns False at the start of history."""
        if not self.can_go_back():
            return False
        self._position -= 1
        self.location_changed.emit(self.current_step())
        return True

    def forward(self) -> bool:
        """Traverse one entry forward; returns False at the end of history."""
        if not self.can_go_forward():
            return False
        self._position += 1
        self.location_changed.emit(self.current_step())
        return True

    def _url_for(self, step: int) -> QUrl:
        url = self.current_url()
        query = QUrlQuery(url)
        query.removeAllQueryItems(Config.STEP_QUERY_PARAM)
        query.addQueryItem(Config.STEP_QUERY_PARAM, str(step))
        url.setQuery(query)
        return url
