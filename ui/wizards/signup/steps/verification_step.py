# -*- coding: utf-8 -*-
"""
Verification Step - Step 4 of Signup Wizard.

Collects the verification code sent to the user's contact. The code can be
typed or pasted from the clipboard; email contacts get a link to their web
mail. Leaving this step resolves the youth/adult branch.
"""

from typing import Callable, Optional

from PyQt5.QtWidgets import QApplication, QHBoxLayout, QLabel, QLineEdit, QPushButton
from PyQt5.QtCore import QRegExp, Qt, QUrl
from PyQt5.QtGui import QDesktopServices, QRegExpValidator

from app.config import Config
from services.exceptions import ExternalCallException, ValidationException
from services.translation_manager import tr
from services.verification_service import (
    email_domain,
    email_provider_link,
    is_email,
    read_pasted_code,
)
from services.wizard.step_validator import StepValidator
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep, StepValidationResult
from utils.logger import get_logger

logger = get_logger(__name__)


class VerificationStep(BaseStep):
    """Step 4: Verification code."""

    def __init__(self, record, update_record, parent=None,
                 clipboard_reader: Optional[Callable[[], str]] = None):
        super().__init__(record, update_record, parent)
        self._clipboard_reader = clipboard_reader or (lambda: QApplication.clipboard().text())

    def setup_ui(self):
        self.code_input = QLineEdit()
        self.code_input.setAlignment(Qt.AlignCenter)
        self.code_input.setMaxLength(Config.VERIFICATION_CODE_LENGTH)
        self.code_input.setValidator(QRegExpValidator(QRegExp(r"\d*"), self.code_input))
        self.code_input.setPlaceholderText(tr("step.verification.code_label"))
        self.code_input.setStyleSheet("font-size: 22px; letter-spacing: 8px;")
        self.code_input.textEdited.connect(self._on_code_edited)
        self.main_layout.addWidget(self.code_input)

        actions = QHBoxLayout()
        self.paste_button = QPushButton(tr("button.paste"))
        self.paste_button.clicked.connect(self.paste_code)
        actions.addWidget(self.paste_button)

        self.provider_button = QPushButton("")
        self.provider_button.clicked.connect(self._open_provider)
        actions.addWidget(self.provider_button)
        self.main_layout.addLayout(actions)

        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setStyleSheet(f"color: {Config.PRIMARY_COLOR};")
        self.main_layout.addWidget(self.status_label)

        self.error_label = self.create_error_label()
        self.main_layout.addWidget(self.error_label)

        self.hint_label = QLabel(tr("step.verification.did_not_receive"))
        self.hint_label.setWordWrap(True)
        self.hint_label.setStyleSheet(f"color: {Config.MUTED_TEXT_COLOR};")
        self.main_layout.addWidget(self.hint_label)
        self.main_layout.addStretch()

    def populate_data(self):
        self.code_input.setText(self.record.verification_code or "")

        contact = self.record.email_or_phone or ""
        self.provider_button.setVisible(is_email(contact))
        if is_email(contact):
            self.provider_button.setText(
                tr("step.verification.open_email", domain=email_domain(contact))
            )

    def validate(self) -> StepValidationResult:
        values = {"verification_code": self.code_input.text()}
        result = StepValidationResult.from_field_errors(
            StepValidator.factory().validate_fields(values, "verification")
        )
        self.status_label.setText("" if result.has_errors() else tr("step.verification.verified"))
        return result

    def get_step_description(self) -> str:
        contact = self.record.email_or_phone or ""
        key = "step.verification.description_email" if is_email(contact) \
            else "step.verification.description_phone"
        return tr(key, contact=contact)

    def get_step_title(self) -> str:
        return tr("step.verification.title")

    def paste_code(self):
        """Fill the code from the clipboard."""
        try:
            code = read_pasted_code(self._clipboard_reader)
        except (ValidationException, ExternalCallException) as e:
            message = ErrorHandler.handle(e, self, context="clipboard", show_dialog=False)
            self.set_error(self.error_label, message)
            return

        self.set_error(self.error_label, "")
        self.code_input.setText(code)
        self._store_code(code)

    def _on_code_edited(self, text: str):
        self.set_error(self.error_label, "")
        self._store_code(text)

    def _store_code(self, code: str):
        self.save({"verification_code": code or None})
        self.report_validity()

    def _open_provider(self):
        link = email_provider_link(self.record.email_or_phone or "")
        logger.debug(f"Opening mail provider {link}")
        QDesktopServices.openUrl(QUrl(link))
