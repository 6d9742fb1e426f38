# -*- coding: utf-8 -*-
"""
User Info Step - Step 3 of Signup Wizard.

Collects name, contact (email or phone), date of birth and password.
Field errors are shown inline once a field has been edited.
"""

from typing import Any, Dict, Optional

from PyQt5.QtWidgets import QDateEdit, QFormLayout, QLabel, QLineEdit, QWidget
from PyQt5.QtCore import QDate, QLocale

from app.config import Config
from services.translation_manager import get_language, tr
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseStep, StepValidationResult
from utils.datetime_utils import display_date_format, format_display_date, to_date_isoformat


class UserInfoStep(BaseStep):
    """Step 3: Identity and credentials."""

    def __init__(self, record, update_record, parent=None):
        super().__init__(record, update_record, parent)
        self._touched = set()

    def setup_ui(self):
        form = QWidget()
        self.form_layout = QFormLayout(form)
        self.form_layout.setSpacing(6)
        self.error_labels = {}

        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText(tr("step.user_info.name_placeholder"))
        self.name_input.textEdited.connect(lambda text: self._on_field_edited("name", text.strip()))
        self._add_row("name", "step.user_info.name_label", self.name_input)

        self.contact_input = QLineEdit()
        self.contact_input.setPlaceholderText(tr("step.user_info.contact_placeholder"))
        self.contact_input.textEdited.connect(
            lambda text: self._on_field_edited("email_or_phone", text.strip())
        )
        self._add_row("email_or_phone", "step.user_info.contact_label", self.contact_input)

        self.dob_input = QDateEdit()
        self.dob_input.setCalendarPopup(True)
        # One day before the earliest allowed date stands for "not set"
        earliest = Config.EARLIEST_BIRTH_DATE
        self._unset_date = QDate(earliest.year, earliest.month, earliest.day).addDays(-1)
        self.dob_input.setMinimumDate(self._unset_date)
        self.dob_input.setMaximumDate(QDate.currentDate())
        self.dob_input.setSpecialValueText(tr("step.user_info.dob_placeholder"))
        self.dob_input.setDisplayFormat(display_date_format(get_language()))
        if get_language() != "fa":
            self.dob_input.setLocale(QLocale(QLocale.English, QLocale.UnitedStates))
        self.dob_input.setDate(self._unset_date)
        self.dob_input.dateChanged.connect(self._on_dob_changed)
        self._add_row("dob", "step.user_info.dob_label", self.dob_input)

        self.dob_display_label = QLabel("")
        self.dob_display_label.setStyleSheet(f"color: {Config.MUTED_TEXT_COLOR};")
        self.form_layout.addRow("", self.dob_display_label)

        self.password_input = QLineEdit()
        self.password_input.setEchoMode(QLineEdit.Password)
        self.password_input.textEdited.connect(lambda text: self._on_field_edited("password", text))
        self._add_row("password", "step.user_info.password_label", self.password_input)

        self.confirm_input = QLineEdit()
        self.confirm_input.setEchoMode(QLineEdit.Password)
        self.confirm_input.textEdited.connect(self._on_confirm_edited)
        self._add_row("confirm_password", "step.user_info.confirm_password_label", self.confirm_input)

        self.main_layout.addWidget(form)
        self.main_layout.addStretch()

    def populate_data(self):
        self.name_input.setText(self.record.name or "")
        self.contact_input.setText(self.record.email_or_phone or "")
        self.password_input.setText(self.record.password or "")
        # Confirmation is never stored and always starts empty
        self.confirm_input.clear()

        self.dob_input.blockSignals(True)
        self.dob_input.setDate(self._to_qdate(self.record.dob))
        self.dob_input.blockSignals(False)
        self._update_dob_display()

    def collect_data(self) -> Dict[str, Any]:
        """Current values of every field, including the confirmation."""
        return {
            "name": self.name_input.text().strip(),
            "email_or_phone": self.contact_input.text().strip(),
            "dob": self._dob_value(),
            "password": self.password_input.text(),
            "confirm_password": self.confirm_input.text(),
        }

    def validate(self) -> StepValidationResult:
        field_errors = StepValidator.factory().validate_fields(self.collect_data(), "user_info")
        result = StepValidationResult.from_field_errors(field_errors)
        self._show_errors(result)
        return result

    def get_step_title(self) -> str:
        return tr("step.user_info.title")

    def get_step_description(self) -> str:
        return tr("step.user_info.description")

    def _add_row(self, field: str, label_key: str, editor: QWidget):
        self.form_layout.addRow(tr(label_key), editor)
        error_label = self.create_error_label()
        self.error_labels[field] = error_label
        self.form_layout.addRow("", error_label)

    def _on_field_edited(self, field: str, value: str):
        self._touched.add(field)
        self.save({field: value or None})
        self.report_validity()

    def _on_confirm_edited(self, _text: str):
        self._touched.add("confirm_password")
        self.report_validity()

    def _on_dob_changed(self, _qdate: QDate):
        self._touched.add("dob")
        self.save({"dob": self._dob_value()})
        self._update_dob_display()
        self.report_validity()

    def _dob_value(self) -> Optional[str]:
        qdate = self.dob_input.date()
        if qdate == self._unset_date or not qdate.isValid():
            return None
        return to_date_isoformat(qdate.toPyDate())

    def _to_qdate(self, value: Optional[str]) -> QDate:
        if not value:
            return self._unset_date
        qdate = QDate.fromString(value, "yyyy-MM-dd")
        return qdate if qdate.isValid() else self._unset_date

    def _update_dob_display(self):
        self.dob_display_label.setText(format_display_date(self._dob_value(), get_language()))

    def _show_errors(self, result: StepValidationResult):
        for field, label in self.error_labels.items():
            message = result.first_error(field) if field in self._touched else ""
            self.set_error(label, message)
