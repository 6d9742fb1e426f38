# -*- coding: utf-8 -*-
"""
Waiting Step - Shown on step 5/6 while the youth/adult branch is undetermined.

Navigation is blocked here; the only way out is back to verification,
where leaving the step resolves the branch.
"""

from PyQt5.QtWidgets import QPushButton, QProgressBar
from PyQt5.QtCore import pyqtSignal

from services.translation_manager import tr
from ui.wizards.framework import BaseStep, StepValidationResult


class WaitingStep(BaseStep):
    """Blocking view for an undetermined branch."""

    recover_requested = pyqtSignal()

    def setup_ui(self):
        self.busy_indicator = QProgressBar()
        self.busy_indicator.setRange(0, 0)
        self.busy_indicator.setTextVisible(False)
        self.main_layout.addWidget(self.busy_indicator)

        self.return_button = QPushButton(tr("button.return_to_verification"))
        self.return_button.clicked.connect(self.recover_requested.emit)
        self.main_layout.addWidget(self.return_button)
        self.main_layout.addStretch()

    def validate(self) -> StepValidationResult:
        result = self.create_validation_result()
        result.add_error(tr("step.waiting.description"))
        return result

    def get_step_title(self) -> str:
        return tr("step.waiting.title")

    def get_step_description(self) -> str:
        return tr("step.waiting.description")
