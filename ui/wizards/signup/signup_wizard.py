# -*- coding: utf-8 -*-
"""
Signup Wizard.

Hosts the signup orchestrator: a header with progress, exactly one step
widget for the active index, an inline notice and the footer controls.
"""

from typing import Callable, Optional

from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from services.translation_manager import get_layout_direction, tr
from services.wizard.step_sequencer import StepKind
from services.wizard.step_validator import StepValidator
from ui.components.celebration_popup import CelebrationPopup
from ui.components.wizard_footer import WizardFooter
from ui.components.wizard_header import WizardHeader
from ui.wizards.framework import BaseStep, ErrorBoundary
from ui.wizards.signup.steps import (
    InformationStep,
    RoleSelectionStep,
    SharingStep,
    TermsStep,
    UserInfoStep,
    VerificationStep,
    WaitingStep,
)
from ui.wizards.signup.wizard_orchestrator import WizardOrchestrator
from utils.logger import get_logger

logger = get_logger(__name__)


class SignupWizard(QWidget):
    """
    Signup wizard widget.

    Signals:
        completed(dict): identity of the finished signup
    """

    completed = pyqtSignal(dict)

    def __init__(self, orchestrator: WizardOrchestrator, parent: Optional[QWidget] = None,
                 clipboard_reader: Optional[Callable[[], str]] = None,
                 celebrate: bool = True):
        super().__init__(parent)
        self.orchestrator = orchestrator
        self._clipboard_reader = clipboard_reader
        self._celebrate = celebrate
        self.current_step: Optional[BaseStep] = None
        self._rendered_kind: Optional[StepKind] = None
        self.popup: Optional[CelebrationPopup] = None

        self._boundary = ErrorBoundary("", self)
        self._boundary.error_occurred.connect(lambda _type, message: self.show_notice(message))

        self.setLayoutDirection(get_layout_direction())
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.header = WizardHeader(tr("wizard.title"))
        layout.addWidget(self.header)

        self.notice_label = QLabel("")
        self.notice_label.setWordWrap(True)
        self.notice_label.setStyleSheet(f"color: {Config.ERROR_COLOR}; padding: 8px 20px;")
        self.notice_label.setVisible(False)
        layout.addWidget(self.notice_label)

        self.step_host = QWidget()
        self.step_layout = QVBoxLayout(self.step_host)
        self.step_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.step_host, 1)

        self.footer = WizardFooter()
        layout.addWidget(self.footer)

    def _connect_signals(self):
        self.orchestrator.step_changed.connect(self._on_step_changed)
        self.orchestrator.total_steps_changed.connect(lambda _total: self._update_header())
        self.orchestrator.validity_changed.connect(lambda _valid: self._update_navigation())
        self.orchestrator.navigation_blocked.connect(self.show_notice)
        self.orchestrator.wizard_completed.connect(self._on_wizard_completed)

        self.footer.next_clicked.connect(self._on_next)
        self.footer.previous_clicked.connect(self._on_previous)

    def start(self):
        """Mount the orchestrator and render its step."""
        self.orchestrator.mount()

    def show_notice(self, message: str):
        self.notice_label.setText(message)
        self.notice_label.setVisible(bool(message))

    # =========================================================================
    # Navigation
    # =========================================================================

    def _on_next(self):
        self.show_notice("")
        self.orchestrator.next_step(anchor=self.footer.btn_next)

    def _on_previous(self):
        self.show_notice("")
        self.orchestrator.previous_step()

    def _on_step_changed(self, _old: int, _new: int):
        self._render_step()
        self._update_header()
        self._update_navigation()

    def _update_header(self):
        self.header.set_progress(self.orchestrator.current_index, self.orchestrator.total_steps)

    def _update_navigation(self):
        self.footer.set_previous_enabled(self.orchestrator.can_go_previous())
        self.footer.set_next_enabled(self.orchestrator.is_next_enabled())
        self.footer.set_last_step(self.orchestrator.state.is_last_step)

    # =========================================================================
    # Step rendering
    # =========================================================================

    def _render_step(self):
        kind = self.orchestrator.current_kind
        if self.orchestrator.is_completed or (self.current_step is not None and kind == self._rendered_kind):
            return

        self._remove_current_step()

        boundary = self._boundary
        boundary.step_name = StepValidator.get_step_name(kind)

        step = boundary.protect(self._create_step, "rendering")(kind)
        if step is None:
            self.orchestrator.report_validation(False)
            return

        self.current_step = step
        self._rendered_kind = kind
        self.step_layout.addWidget(step)
        step.validation_changed.connect(self.orchestrator.report_validation)
        if isinstance(step, WaitingStep):
            step.recover_requested.connect(self.orchestrator.recover_from_indeterminate)

        boundary.protect(step.on_show, "loading")()
        logger.debug(f"Rendered signup step {self.orchestrator.current_index} ({kind.value})")

    def _create_step(self, kind: StepKind) -> BaseStep:
        record = self.orchestrator.record
        update = self.orchestrator.update_record

        if kind == StepKind.INFORMATION:
            return InformationStep(record, update)
        if kind == StepKind.TERMS:
            return TermsStep(record, update)
        if kind == StepKind.USER_INFO:
            return UserInfoStep(record, update)
        if kind == StepKind.VERIFICATION:
            return VerificationStep(record, update, clipboard_reader=self._clipboard_reader)
        if kind == StepKind.ADULT_ROLE_SELECTION:
            return RoleSelectionStep(record, update)
        if kind == StepKind.YOUTH_SHARING:
            return SharingStep(record, update, youth=True)
        if kind == StepKind.ADULT_SHARING:
            return SharingStep(record, update, youth=False)
        if kind == StepKind.INDETERMINATE:
            return WaitingStep(record, update)
        raise ValueError(f"No step widget for {kind}")

    def _remove_current_step(self):
        if self.current_step is None:
            return
        self.current_step.validation_changed.disconnect()
        self.step_layout.removeWidget(self.current_step)
        self.current_step.hide()
        self.current_step.deleteLater()
        self.current_step = None
        self._rendered_kind = None

    # =========================================================================
    # Completion
    # =========================================================================

    def _on_wizard_completed(self, identity: dict, anchor):
        self.footer.set_next_enabled(False)
        self.footer.set_previous_enabled(False)
        if self._celebrate:
            self.popup = CelebrationPopup.celebrate(anchor=anchor, parent=self)
        self.completed.emit(identity)
