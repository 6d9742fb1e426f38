# -*- coding: utf-8 -*-
"""
Terms Step - Step 2 of Signup Wizard.

Collects the mandatory terms consent and two optional consents. Only the
mandatory consent gates the step.
"""

from PyQt5.QtWidgets import QCheckBox, QLabel

from app.config import Config
from services.translation_manager import tr
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseStep, StepValidationResult
from utils.logger import get_logger

logger = get_logger(__name__)


class TermsStep(BaseStep):
    """Step 2: Terms and consent."""

    CONSENT_FIELDS = (
        ("accepted_mandatory_terms", "step.terms.mandatory_label"),
        ("accepted_optional_communications", "step.terms.communications_label"),
        ("accepted_optional_marketing", "step.terms.marketing_label"),
    )

    def setup_ui(self):
        self.checkboxes = {}
        for field, label_key in self.CONSENT_FIELDS:
            checkbox = QCheckBox(tr(label_key))
            checkbox.toggled.connect(
                lambda checked, name=field: self._on_consent_toggled(name, checked)
            )
            self.checkboxes[field] = checkbox
            self.main_layout.addWidget(checkbox)

        self.info_label = QLabel(tr("step.terms.info_note"))
        self.info_label.setWordWrap(True)
        self.info_label.setStyleSheet(f"color: {Config.MUTED_TEXT_COLOR};")
        self.main_layout.addWidget(self.info_label)
        self.main_layout.addStretch()

    def populate_data(self):
        for field, checkbox in self.checkboxes.items():
            checkbox.blockSignals(True)
            checkbox.setChecked(bool(getattr(self.record, field)))
            checkbox.blockSignals(False)

    def validate(self) -> StepValidationResult:
        values = {"accepted_mandatory_terms": self.checkboxes["accepted_mandatory_terms"].isChecked()}
        field_errors = StepValidator.factory().validate_fields(values, "terms")
        return StepValidationResult.from_field_errors(field_errors)

    def get_step_title(self) -> str:
        return tr("step.terms.title")

    def get_step_description(self) -> str:
        return tr("step.terms.description")

    def _on_consent_toggled(self, field: str, checked: bool):
        logger.debug(f"Consent {field} set to {checked}")
        self.save({field: checked})
        self.report_validity()
