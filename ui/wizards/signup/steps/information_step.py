# -*- coding: utf-8 -*-
"""
Information Step - Step 1 of Signup Wizard.

Introduces the app. Has no inputs and is always valid.
"""

from PyQt5.QtWidgets import QLabel
from PyQt5.QtCore import Qt

from services.translation_manager import tr
from ui.wizards.framework import BaseStep, StepValidationResult


class InformationStep(BaseStep):
    """Step 1: Welcome text."""

    def setup_ui(self):
        self.content_label = QLabel(tr("step.information.content"))
        self.content_label.setWordWrap(True)
        self.content_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.content_label)
        self.main_layout.addStretch()

    def validate(self) -> StepValidationResult:
        return self.create_validation_result()

    def get_step_title(self) -> str:
        return tr("step.information.title")

    def get_step_description(self) -> str:
        return tr("step.information.description")
