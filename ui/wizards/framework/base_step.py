# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

All wizard steps should inherit from this class and implement:
- setup_ui(): Create the step's UI
- validate(): Validate step data
- populate_data(): Populate UI with data from the record
"""

from typing import Any, Callable, Dict, List, Optional
from abc import ABCMeta, abstractmethod
from dataclasses import dataclass

from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config
from models.signup_record import SignupRecord
from services.translation_manager import get_layout_direction


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    field_errors: Dict[str, List[str]] = None

    def __post_init__(self):
        if self.field_errors is None:
            self.field_errors = {}

    def add_error(self, message: str, field: str = None):
        """Add an error message."""
        self.errors.append(message)
        if field:
            self.field_errors.setdefault(field, []).append(message)
        self.is_valid = False

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def first_error(self, field: str) -> str:
        """First error of a field, or an empty string."""
        messages = self.field_errors.get(field) or []
        return messages[0] if messages else ""

    @classmethod
    def from_field_errors(cls, field_errors: Dict[str, List[str]]) -> 'StepValidationResult':
        """Build a result from errors grouped by field."""
        errors = [msg for messages in field_errors.values() for msg in messages]
        return cls(is_valid=not errors, errors=errors, field_errors=dict(field_errors))


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    A step reads the record it was given, writes back only through the
    `update_record` merge callback, and reports its validity through
    `validation_changed` when shown and on every relevant input change.
    """

    # Signals
    validation_changed = pyqtSignal(bool)

    def __init__(self, record: SignupRecord,
                 update_record: Callable[[Dict[str, Any]], SignupRecord],
                 parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            record: Current signup record
            update_record: Merge-and-persist callback returning the merged record
            parent: Parent widget
        """
        super().__init__(parent)
        self.record = record
        self._update_record = update_record
        self._is_initialized = False

        self.setLayoutDirection(get_layout_direction())

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """
        Initialize the step (called once).

        This method is called the first time the step is shown.
        """
        if not self._is_initialized:
            self._add_header()
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """
        Called when the step is mounted.

        Populates the UI from the record and reports initial validity.
        """
        if not self._is_initialized:
            self.initialize()
        self.populate_data()
        self.report_validity()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        Create all widgets and layouts here.
        """
        pass

    @abstractmethod
    def validate(self) -> StepValidationResult:
        """
        Validate the step's data.

        Returns:
            StepValidationResult with validation status and messages
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """
        Populate the step's UI with data from the record.

        Override this method to restore data when navigating back to the step.
        """
        pass

    def get_step_title(self) -> str:
        """Get the step's title."""
        return ""

    def get_step_description(self) -> str:
        """Get the step's description."""
        return ""

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def save(self, partial: Dict[str, Any]) -> SignupRecord:
        """Merge a partial update into the record through the wizard."""
        self.record = self._update_record(partial)
        return self.record

    def report_validity(self) -> bool:
        """Validate and emit the result."""
        is_valid = self.validate().is_valid
        self.validation_changed.emit(is_valid)
        return is_valid

    def create_validation_result(self) -> StepValidationResult:
        """Create a new validation result object."""
        return StepValidationResult(is_valid=True, errors=[])

    @staticmethod
    def create_error_label() -> QLabel:
        """Inline label for a field error."""
        label = QLabel("")
        label.setWordWrap(True)
        label.setStyleSheet(f"color: {Config.ERROR_COLOR}; font-size: 11px;")
        label.setVisible(False)
        return label

    @staticmethod
    def set_error(label: QLabel, message: str):
        label.setText(message)
        label.setVisible(bool(message))

    def _add_header(self):
        title = self.get_step_title()
        if title:
            self.title_label = QLabel(title)
            self.title_label.setAlignment(Qt.AlignCenter)
            self.title_label.setStyleSheet("font-size: 20px; font-weight: bold;")
            self.main_layout.addWidget(self.title_label)

        description = self.get_step_description()
        if description:
            self.description_label = QLabel(description)
            self.description_label.setAlignment(Qt.AlignCenter)
            self.description_label.setWordWrap(True)
            self.description_label.setStyleSheet(f"color: {Config.MUTED_TEXT_COLOR};")
            self.main_layout.addWidget(self.description_label)
