# -*- coding: utf-8 -*-
"""
Error Boundary for Wizard Steps.

Provides graceful error handling for wizard steps:
- Catches exceptions during step lifecycle
- Logs errors with context
- Reports a translated message instead of crashing the wizard
"""

from typing import Optional, Callable
from functools import wraps

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import pyqtSignal, QObject

from services.error_mapper import map_exception
from services.translation_manager import tr
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorBoundary(QObject):
    """
    Error boundary for wizard steps.

    Wraps step methods with error handling to prevent crashes.
    """

    error_occurred = pyqtSignal(str, str)  # error_type, user message

    def __init__(self, step_name: str, parent: Optional[QWidget] = None,
                 show_dialog: bool = False):
        """
        Initialize error boundary.

        Args:
            step_name: Name of the step being protected
            parent: Parent widget for error dialogs
            show_dialog: Whether failures also open a dialog
        """
        super().__init__(parent)
        self.step_name = step_name
        self.parent_widget = parent
        self.show_dialog = show_dialog
        self.error_count = 0

    def protect(self, func: Callable, operation_name: str = "operation") -> Callable:
        """
        Wrap a function with error boundary.

        Args:
            func: Function to protect
            operation_name: Name of operation for logging

        Returns:
            Wrapped function that returns None when the call fails
        """
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)

            except Exception as e:
                self._handle_error(e, operation_name)
                return None

        return wrapper

    def _handle_error(self, error: Exception, operation: str):
        """
        Handle an error that occurred in a step.

        Args:
            error: The exception that was raised
            operation: Name of the operation that failed
        """
        self.error_count += 1

        # Log error with full traceback
        logger.error(f"Error in {self.step_name} during {operation}: {error}", exc_info=True)

        message = f"{tr('error.step_failed')} {map_exception(error, self.step_name)}"
        self.error_occurred.emit(type(error).__name__, message)

        if self.show_dialog and self.parent_widget:
            ErrorHandler.show_error(self.parent_widget, message)

