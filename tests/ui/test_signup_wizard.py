# -*- coding: utf-8 -*-
"""
Tests for the signup wizard widget and its step widgets.
"""

import pytest
from PyQt5.QtCore import QDate, Qt

from models.signup_record import SignupRecord
from services.wizard.step_sequencer import StepKind
from ui.wizards.signup import SignupWizard
from ui.wizards.signup.steps import (
    InformationStep,
    RoleSelectionStep,
    SharingStep,
    TermsStep,
    UserInfoStep,
    VerificationStep,
    WaitingStep,
)


@pytest.fixture
def build_wizard(qtbot, make_orchestrator):
    """Create and start a signup wizard with a fake clipboard."""

    def _build(step=None, clipboard_text="12345"):
        orchestrator = make_orchestrator(step=step)
        wizard = SignupWizard(orchestrator, clipboard_reader=lambda: clipboard_text,
                              celebrate=False)
        qtbot.addWidget(wizard)
        wizard.show()
        wizard.start()
        return wizard

    return _build


class RecordingStore:
    """Stand-in for the wizard's merge callback used by standalone steps."""

    def __init__(self, record=None):
        self.record = record or SignupRecord()
        self.updates = []

    def update(self, partial):
        self.updates.append(partial)
        self.record = self.record.merged(partial)
        return self.record


# =============================================================================
# Wizard
# =============================================================================

def test_wizard_renders_information_step_first(build_wizard):
    wizard = build_wizard()

    assert isinstance(wizard.current_step, InformationStep)
    assert wizard.header.progress_label.text() == "Step 1 of 6"
    assert wizard.footer.btn_next.isEnabled()
    assert not wizard.footer.btn_previous.isEnabled()


def test_next_moves_to_terms(qtbot, build_wizard):
    wizard = build_wizard()

    qtbot.mouseClick(wizard.footer.btn_next, Qt.LeftButton)

    assert isinstance(wizard.current_step, TermsStep)
    assert wizard.header.progress_label.text() == "Step 2 of 6"


def test_terms_notice_when_mandatory_terms_unchecked(qtbot, build_wizard):
    wizard = build_wizard(step=2)

    qtbot.mouseClick(wizard.footer.btn_next, Qt.LeftButton)

    assert wizard.orchestrator.current_index == 2
    assert not wizard.notice_label.isHidden()
    assert wizard.notice_label.text() == "You must accept the terms and conditions to continue."


def test_accepting_terms_enables_next(qtbot, build_wizard, storage):
    wizard = build_wizard(step=2)

    wizard.current_step.checkboxes["accepted_mandatory_terms"].setChecked(True)

    assert wizard.orchestrator.can_go_next()
    assert '"accepted_mandatory_terms": true' in storage.get_item("signupFormData")

    qtbot.mouseClick(wizard.footer.btn_next, Qt.LeftButton)
    assert isinstance(wizard.current_step, UserInfoStep)


def test_undetermined_branch_renders_waiting_step(qtbot, build_wizard):
    wizard = build_wizard(step=5)

    assert isinstance(wizard.current_step, WaitingStep)
    assert not wizard.footer.btn_next.isEnabled()
    assert not wizard.footer.btn_previous.isEnabled()

    qtbot.mouseClick(wizard.current_step.return_button, Qt.LeftButton)

    assert isinstance(wizard.current_step, VerificationStep)


def test_finish_completes_and_emits_identity(qtbot, build_wizard, repo, adult_record_data):
    repo.merge(dict(adult_record_data, is_youth=False))
    wizard = build_wizard(step=6)
    assert wizard.footer.btn_next.text() == "Finish"

    with qtbot.waitSignal(wizard.completed) as blocker:
        qtbot.mouseClick(wizard.footer.btn_next, Qt.LeftButton)

    assert blocker.args == [{"name": "Sara", "contact": "sara@example.com"}]
    assert not wizard.footer.btn_next.isEnabled()


# =============================================================================
# Steps
# =============================================================================

def test_user_info_step_reports_validity(qtbot):
    store = RecordingStore()
    step = UserInfoStep(store.record, store.update)
    qtbot.addWidget(step)
    step.show()
    reports = []
    step.validation_changed.connect(reports.append)
    step.on_show()

    qtbot.keyClicks(step.name_input, "Sara")
    qtbot.keyClicks(step.contact_input, "sara@example.com")
    step.dob_input.setDate(QDate(1990, 5, 1))
    qtbot.keyClicks(step.password_input, "secret1")
    assert reports[-1] is False

    qtbot.keyClicks(step.confirm_input, "secret1")

    assert reports[-1] is True
    assert store.record.name == "Sara"
    assert store.record.dob == "1990-05-01"
    assert all("confirm_password" not in update for update in store.updates)


def test_user_info_errors_only_for_edited_fields(qtbot):
    store = RecordingStore()
    step = UserInfoStep(store.record, store.update)
    qtbot.addWidget(step)
    step.show()
    step.on_show()

    qtbot.keyClicks(step.contact_input, "nope")

    assert step.error_labels["email_or_phone"].text() == "Enter a valid email address or phone number."
    assert step.error_labels["name"].isHidden()


def test_verification_paste_fills_code(qtbot):
    store = RecordingStore(SignupRecord(email_or_phone="sara@gmail.com"))
    step = VerificationStep(store.record, store.update, clipboard_reader=lambda: "12 34-5")
    qtbot.addWidget(step)
    step.show()
    step.on_show()

    with qtbot.waitSignal(step.validation_changed) as blocker:
        qtbot.mouseClick(step.paste_button, Qt.LeftButton)

    assert blocker.args == [True]
    assert step.code_input.text() == "12345"
    assert store.record.verification_code == "12345"
    assert not step.provider_button.isHidden()


def test_verification_paste_rejects_non_digits(qtbot):
    store = RecordingStore(SignupRecord(email_or_phone="09120000000"))
    step = VerificationStep(store.record, store.update, clipboard_reader=lambda: "abcde")
    qtbot.addWidget(step)
    step.show()
    step.on_show()

    step.paste_code()

    assert step.error_label.text() == "The clipboard does not contain a valid code."
    assert store.updates == []
    assert step.provider_button.isHidden()


def test_verification_clipboard_failure_is_shown_inline(qtbot):
    def broken_clipboard():
        raise RuntimeError("clipboard unavailable")

    store = RecordingStore()
    step = VerificationStep(store.record, store.update, clipboard_reader=broken_clipboard)
    qtbot.addWidget(step)
    step.show()
    step.on_show()

    step.paste_code()

    assert step.error_label.text() == "Could not read the clipboard."


def test_role_selection_requires_school_code(qtbot):
    store = RecordingStore(SignupRecord(is_youth=False))
    step = RoleSelectionStep(store.record, store.update)
    qtbot.addWidget(step)
    step.show()
    reports = []
    step.validation_changed.connect(reports.append)
    step.on_show()
    assert reports[-1] is True

    step.role_checkboxes["school_consultant"].setChecked(True)
    assert reports[-1] is False
    assert not step.school_code_input.isHidden()

    qtbot.keyClicks(step.school_code_input, "S-12")

    assert reports[-1] is True
    assert store.record.school_code == "S-12"
    assert store.record.adult_roles_selected["school_consultant"] is True


def test_sharing_step_rejects_connection_without_permissions(qtbot):
    store = RecordingStore(SignupRecord(is_youth=True))
    step = SharingStep(store.record, store.update, youth=True)
    qtbot.addWidget(step)
    step.show()
    step.on_show()

    qtbot.keyClicks(step.contact_input, "mom@example.com")
    qtbot.mouseClick(step.add_button, Qt.LeftButton)

    assert store.record.sharing_connections == []
    assert step.permissions_error.text() == "Select at least one permission."


def test_sharing_step_adds_and_removes_connections(qtbot):
    store = RecordingStore(SignupRecord(is_youth=False))
    step = SharingStep(store.record, store.update)
    qtbot.addWidget(step)
    step.show()
    step.on_show()
    assert not step.empty_label.isHidden()

    qtbot.keyClicks(step.contact_input, "mom@example.com")
    step.permission_checkboxes["test_results"].setChecked(True)
    qtbot.mouseClick(step.add_button, Qt.LeftButton)

    assert [c.contact for c in store.record.sharing_connections] == ["mom@example.com"]
    assert step.contact_input.text() == ""
    assert step.empty_label.isHidden()

    step.remove_connection(store.record.sharing_connections[0].id)

    assert store.record.sharing_connections == []
    assert not step.empty_label.isHidden()


def test_waiting_step_is_never_valid(qtbot):
    store = RecordingStore()
    step = WaitingStep(store.record, store.update)
    qtbot.addWidget(step)
    step.show()

    with qtbot.waitSignal(step.validation_changed) as blocker:
        step.on_show()

    assert blocker.args == [False]


def test_step_kinds_map_to_widgets(build_wizard):
    wizard = build_wizard()

    assert isinstance(wizard._create_step(StepKind.ADULT_ROLE_SELECTION), RoleSelectionStep)
    assert wizard._create_step(StepKind.YOUTH_SHARING).youth is True
    assert wizard._create_step(StepKind.ADULT_SHARING).youth is False
