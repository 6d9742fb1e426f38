# -*- coding: utf-8 -*-
"""
Sharing Step - Last step of Signup Wizard on both paths.

Lets the user add consent-scoped sharing connections. The step is optional
and always valid; only the creation of a connection is validated.
"""

from PyQt5.QtWidgets import (
    QCheckBox, QFrame, QGridLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QVBoxLayout, QWidget
)

from app.config import Config
from models.signup_record import PERMISSION_KEYS, SharingConnection
from services.exceptions import ValidationException
from services.sharing_service import SharingService
from services.translation_manager import tr
from ui.wizards.framework import BaseStep, StepValidationResult
from utils.logger import get_logger

logger = get_logger(__name__)


class SharingStep(BaseStep):
    """Step 5 (youth) / step 6 (adult): Sharing preferences."""

    def __init__(self, record, update_record, parent=None, youth: bool = False):
        self.youth = youth
        self.sharing_service = SharingService()
        super().__init__(record, update_record, parent)

    def setup_ui(self):
        self.contact_input = QLineEdit()
        self.contact_input.setPlaceholderText(tr("step.sharing.contact_label"))
        self.main_layout.addWidget(self.contact_input)
        self.contact_error = self.create_error_label()
        self.main_layout.addWidget(self.contact_error)

        permissions_box = QWidget()
        grid = QGridLayout(permissions_box)
        grid.setContentsMargins(0, 0, 0, 0)
        self.permission_checkboxes = {}
        for i, key in enumerate(PERMISSION_KEYS):
            checkbox = QCheckBox(tr(f"permission.{key}"))
            self.permission_checkboxes[key] = checkbox
            grid.addWidget(checkbox, i // 2, i % 2)
        self.main_layout.addWidget(permissions_box)
        self.permissions_error = self.create_error_label()
        self.main_layout.addWidget(self.permissions_error)

        self.add_button = QPushButton(tr("step.sharing.add_connection"))
        self.add_button.clicked.connect(self.add_connection)
        self.main_layout.addWidget(self.add_button)

        self.connections_container = QWidget()
        self.connections_layout = QVBoxLayout(self.connections_container)
        self.connections_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.addWidget(self.connections_container)

        self.empty_label = QLabel(tr("step.sharing.empty"))
        self.empty_label.setStyleSheet(f"color: {Config.MUTED_TEXT_COLOR};")
        self.main_layout.addWidget(self.empty_label)
        self.main_layout.addStretch()

    def populate_data(self):
        self._render_connections()

    def validate(self) -> StepValidationResult:
        return self.create_validation_result()

    def get_step_title(self) -> str:
        return tr("step.sharing.title")

    def get_step_description(self) -> str:
        key = "step.sharing.description_youth" if self.youth else "step.sharing.description_adult"
        return tr(key)

    def add_connection(self):
        """Validate the form and add a connection; the list is unchanged on failure."""
        permissions = {key: cb.isChecked() for key, cb in self.permission_checkboxes.items()}
        try:
            connections = self.sharing_service.add_connection(
                self.record.sharing_connections, self.contact_input.text(), permissions
            )
        except ValidationException as e:
            self.set_error(self.contact_error, " ".join(e.field_errors.get("contact", [])))
            self.set_error(self.permissions_error, " ".join(e.field_errors.get("permissions", [])))
            return

        self.set_error(self.contact_error, "")
        self.set_error(self.permissions_error, "")
        self.contact_input.clear()
        for checkbox in self.permission_checkboxes.values():
            checkbox.setChecked(False)

        self.save({"sharing_connections": connections})
        self._render_connections()
        self.report_validity()

    def remove_connection(self, connection_id: str):
        connections = self.sharing_service.remove_connection(
            self.record.sharing_connections, connection_id
        )
        self.save({"sharing_connections": connections})
        self._render_connections()

    def _render_connections(self):
        while self.connections_layout.count():
            item = self.connections_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        for connection in self.record.sharing_connections:
            self.connections_layout.addWidget(self._connection_row(connection))

        self.empty_label.setVisible(not self.record.sharing_connections)

    def _connection_row(self, connection: SharingConnection) -> QWidget:
        row = QFrame()
        row.setFrameShape(QFrame.StyledPanel)
        layout = QHBoxLayout(row)

        text = QVBoxLayout()
        text.addWidget(QLabel(connection.contact))
        summary = QLabel(
            f"{tr('step.sharing.permissions_prefix')} "
            f"{SharingService.permissions_summary(connection.permissions)}"
        )
        summary.setStyleSheet(f"color: {Config.MUTED_TEXT_COLOR}; font-size: 11px;")
        text.addWidget(summary)
        layout.addLayout(text)
        layout.addStretch()

        remove_button = QPushButton(tr("button.remove"))
        remove_button.clicked.connect(lambda: self.remove_connection(connection.id))
        layout.addWidget(remove_button)
        return row
