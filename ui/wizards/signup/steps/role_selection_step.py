# -*- coding: utf-8 -*-
"""
Role Selection Step - Step 5 of Signup Wizard (adult path).

Adults declare the roles they will use Hami in. Therapists may give a
clinic code; school consultants must give a school code.
"""

from PyQt5.QtWidgets import QCheckBox, QFormLayout, QLineEdit, QWidget

from models.signup_record import ADULT_ROLE_KEYS
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseStep, StepValidationResult


class RoleSelectionStep(BaseStep):
    """Step 5 (adult): Role selection."""

    def setup_ui(self):
        self.role_checkboxes = {}
        for role in ADULT_ROLE_KEYS:
            checkbox = QCheckBox(tr(f"role.{role}"))
            checkbox.toggled.connect(self._on_roles_changed)
            self.role_checkboxes[role] = checkbox
            self.main_layout.addWidget(checkbox)

        codes = QWidget()
        self.codes_form = QFormLayout(codes)
        form = self.codes_form

        self.clinic_code_input = QLineEdit()
        self.clinic_code_input.textEdited.connect(
            lambda text: self._on_code_edited("clinic_code", text)
        )
        form.addRow(tr("step.role_selection.clinic_code_label"), self.clinic_code_input)

        self.school_code_input = QLineEdit()
        self.school_code_input.textEdited.connect(
            lambda text: self._on_code_edited("school_code", text)
        )
        form.addRow(tr("step.role_selection.school_code_label"), self.school_code_input)

        self.school_code_error = self.create_error_label()
        form.addRow("", self.school_code_error)

        self.main_layout.addWidget(codes)
        self.main_layout.addStretch()

    def populate_data(self):
        for role, checkbox in self.role_checkboxes.items():
            checkbox.blockSignals(True)
            checkbox.setChecked(bool(self.record.adult_roles_selected.get(role)))
            checkbox.blockSignals(False)

        self.clinic_code_input.setText(self.record.clinic_code)
        self.school_code_input.setText(self.record.school_code)
        self._update_code_visibility()

    def validate(self) -> StepValidationResult:
        values = {
            "adult_roles_selected": self._selected_roles(),
            "school_code": self.school_code_input.text(),
        }
        result = StepValidationResult.from_field_errors(
            StepValidator.factory().validate_fields(values, "adult_roles")
        )
        self.set_error(self.school_code_error, result.first_error("school_code"))
        return result

    def get_step_title(self) -> str:
        return tr("step.role_selection.title")

    def get_step_description(self) -> str:
        return tr("step.role_selection.description")

    def _selected_roles(self):
        return {role: checkbox.isChecked() for role, checkbox in self.role_checkboxes.items()}

    def _on_roles_changed(self, _checked: bool):
        self.save({"adult_roles_selected": self._selected_roles()})
        self._update_code_visibility()
        self.report_validity()

    def _on_code_edited(self, field: str, text: str):
        self.save({field: text})
        self.report_validity()

    def _update_code_visibility(self):
        roles = self._selected_roles()
        self.clinic_code_input.setVisible(roles["therapist"])
        self.school_code_input.setVisible(roles["school_consultant"])
        form = self.codes_form
        form.labelForField(self.clinic_code_input).setVisible(roles["therapist"])
        form.labelForField(self.school_code_input).setVisible(roles["school_consultant"])
