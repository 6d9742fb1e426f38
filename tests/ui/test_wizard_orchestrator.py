# -*- coding: utf-8 -*-
"""
Tests for the signup wizard state machine: gating, branching, clamping,
completion and history synchronization.
"""
import logging
from datetime import date

import pytest

from models.signup_record import SharingConnection
from repositories.connection_repository import ConnectionRepository
from services.wizard.step_sequencer import StepKind

TODAY = date(2026, 10, 19)


def years_before(years):
    """ISO date of the birthday that makes someone `years` old today."""
    return TODAY.replace(year=TODAY.year - years).isoformat()


def complete_shared_steps(orchestrator, dob):
    """Walk steps 1-4 the way the step widgets would, then leave verification."""
    orchestrator.next_step()

    orchestrator.update_record({"accepted_mandatory_terms": True})
    orchestrator.report_validation(True)
    orchestrator.next_step()

    orchestrator.update_record({
        "name": "Sara",
        "email_or_phone": "sara@example.com",
        "dob": dob,
        "password": "secret1",
    })
    orchestrator.report_validation(True)
    orchestrator.next_step()

    orchestrator.update_record({"verification_code": "12345"})
    orchestrator.report_validation(True)
    assert orchestrator.current_kind == StepKind.VERIFICATION
    orchestrator.next_step()


# =============================================================================
# Mounting and clamping
# =============================================================================

def test_fresh_mount_starts_on_information(make_orchestrator):
    orchestrator = make_orchestrator()
    orchestrator.mount()

    assert orchestrator.current_index == 1
    assert orchestrator.current_kind == StepKind.INFORMATION
    assert orchestrator.total_steps == 6
    assert orchestrator.can_go_next()
    assert not orchestrator.can_go_previous()
    assert orchestrator.router.current_step() == 1


@pytest.mark.parametrize("requested, expected", [("0", 1), ("-1", 1), ("abc", 1), ("3", 3)])
def test_requested_step_is_clamped(make_orchestrator, requested, expected):
    orchestrator = make_orchestrator(step=requested)
    orchestrator.mount()

    assert orchestrator.current_index == expected
    assert orchestrator.router.current_step() == expected


def test_step_beyond_range_on_unresolved_branch_waits(make_orchestrator):
    orchestrator = make_orchestrator(step=99)
    orchestrator.mount()

    assert orchestrator.current_index == 6
    assert orchestrator.current_kind == StepKind.INDETERMINATE
    assert orchestrator.router.current_step() == 6


def test_youth_requested_on_step_six_is_clamped_to_five(repo, make_orchestrator):
    repo.merge({"is_youth": True})
    orchestrator = make_orchestrator(step=6)
    orchestrator.mount()

    assert orchestrator.current_index == 5
    assert orchestrator.current_kind == StepKind.YOUTH_SHARING
    assert orchestrator.router.current_step() == 5


def test_mount_restores_persisted_record(repo, make_orchestrator, adult_record_data):
    repo.merge(adult_record_data)

    orchestrator = make_orchestrator(step=3)
    orchestrator.mount()

    assert orchestrator.current_kind == StepKind.USER_INFO
    assert orchestrator.record.name == "Sara"


def test_inactive_wizard_rejects_updates(make_orchestrator):
    orchestrator = make_orchestrator()

    orchestrator.report_validation(True)
    with pytest.raises(RuntimeError):
        orchestrator.update_record({"name": "Sara"})


# =============================================================================
# Gating
# =============================================================================

def test_terms_unchecked_blocks_next_with_notice(qtbot, make_orchestrator):
    orchestrator = make_orchestrator(step=2)
    orchestrator.mount()
    assert orchestrator.is_next_enabled()

    with qtbot.waitSignal(orchestrator.navigation_blocked) as blocker:
        assert not orchestrator.next_step()

    assert blocker.args == ["You must accept the terms and conditions to continue."]
    assert orchestrator.current_index == 2


def test_invalid_step_blocks_next_silently(qtbot, make_orchestrator):
    orchestrator = make_orchestrator(step=3)
    orchestrator.mount()

    with qtbot.assertNotEmitted(orchestrator.navigation_blocked):
        assert not orchestrator.next_step()

    assert orchestrator.current_index == 3
    assert not orchestrator.is_next_enabled()


def test_validity_resets_when_entering_a_step(make_orchestrator):
    orchestrator = make_orchestrator(step=1)
    orchestrator.mount()

    orchestrator.next_step()

    assert orchestrator.current_index == 2
    assert not orchestrator.can_go_next()


def test_previous_step_is_provisionally_valid(make_orchestrator):
    orchestrator = make_orchestrator(step=3)
    orchestrator.mount()

    assert orchestrator.previous_step()

    assert orchestrator.current_index == 2
    assert orchestrator.can_go_next()
    assert orchestrator.router.current_step() == 2


# =============================================================================
# Branching
# =============================================================================

def test_sixteen_year_old_takes_youth_path(qtbot, make_orchestrator):
    orchestrator = make_orchestrator()
    orchestrator.mount()

    with qtbot.waitSignal(orchestrator.branch_resolved) as blocker:
        complete_shared_steps(orchestrator, years_before(16))

    assert blocker.args == [True]
    assert orchestrator.record.is_youth is True
    assert orchestrator.total_steps == 5
    assert orchestrator.current_index == 5
    assert orchestrator.current_kind == StepKind.YOUTH_SHARING


def test_twenty_year_old_takes_adult_path(make_orchestrator):
    orchestrator = make_orchestrator()
    orchestrator.mount()

    complete_shared_steps(orchestrator, years_before(20))

    assert orchestrator.record.is_youth is False
    assert orchestrator.total_steps == 6
    assert orchestrator.current_kind == StepKind.ADULT_ROLE_SELECTION

    orchestrator.report_validation(True)
    orchestrator.next_step()
    assert orchestrator.current_index == 6
    assert orchestrator.current_kind == StepKind.ADULT_SHARING


def test_eighteenth_birthday_today_is_adult(make_orchestrator):
    orchestrator = make_orchestrator()
    orchestrator.mount()

    complete_shared_steps(orchestrator, years_before(18))

    assert orchestrator.record.is_youth is False


def test_dob_edit_is_resolved_again_when_leaving_verification(make_orchestrator):
    orchestrator = make_orchestrator()
    orchestrator.mount()
    complete_shared_steps(orchestrator, years_before(20))

    orchestrator.previous_step()
    orchestrator.update_record({"dob": years_before(15)})
    assert orchestrator.total_steps == 6

    orchestrator.report_validation(True)
    orchestrator.next_step()

    assert orchestrator.record.is_youth is True
    assert orchestrator.total_steps == 5
    assert orchestrator.current_kind == StepKind.YOUTH_SHARING


def test_branch_flip_on_step_six_redirects_to_five(qtbot, caplog, repo, make_orchestrator,
                                                    adult_record_data):
    repo.merge(dict(adult_record_data, is_youth=False))
    orchestrator = make_orchestrator(step=6)
    orchestrator.mount()
    assert orchestrator.current_kind == StepKind.ADULT_SHARING

    with caplog.at_level(logging.ERROR):
        with qtbot.waitSignal(orchestrator.step_changed) as blocker:
            orchestrator.update_record({"is_youth": True})

    assert blocker.args == [6, 5]
    assert orchestrator.current_index == 5
    assert orchestrator.current_kind == StepKind.YOUTH_SHARING
    assert orchestrator.router.current_step() == 5
    assert not any(r.levelno >= logging.ERROR for r in caplog.records)


def test_youth_record_resolved_at_step_six_is_logged_as_violation(caplog, repo,
                                                                  make_orchestrator):
    repo.merge({"is_youth": True})
    orchestrator = make_orchestrator(step=5)
    orchestrator.mount()

    with caplog.at_level(logging.ERROR):
        assert orchestrator._resolve(6) == (5, StepKind.YOUTH_SHARING)

    assert any(r.levelno == logging.ERROR and "Branch violation" in r.getMessage()
               for r in caplog.records)


# =============================================================================
# Undetermined branch
# =============================================================================

def test_undetermined_branch_blocks_navigation(make_orchestrator):
    orchestrator = make_orchestrator(step=5)
    orchestrator.mount()
    assert orchestrator.current_kind == StepKind.INDETERMINATE

    orchestrator.report_validation(True)

    assert not orchestrator.can_go_next()
    assert not orchestrator.next_step()
    assert not orchestrator.previous_step()
    assert orchestrator.current_index == 5


def test_recover_from_undetermined_branch(make_orchestrator):
    orchestrator = make_orchestrator(step=5)
    orchestrator.mount()

    assert orchestrator.recover_from_indeterminate()

    assert orchestrator.current_index == 4
    assert orchestrator.current_kind == StepKind.VERIFICATION
    assert not orchestrator.can_go_next()
    assert orchestrator.router.current_step() == 4


def test_resolving_branch_leaves_waiting_state(repo, make_orchestrator):
    orchestrator = make_orchestrator(step=6)
    orchestrator.mount()

    orchestrator.update_record({"is_youth": False})

    assert orchestrator.current_kind == StepKind.ADULT_SHARING


# =============================================================================
# Completion
# =============================================================================

def test_finish_on_adult_path(qtbot, storage, session, repo, make_orchestrator,
                              adult_record_data):
    repo.merge(dict(adult_record_data, is_youth=False))
    orchestrator = make_orchestrator(step=6)
    orchestrator.mount()

    with qtbot.waitSignal(orchestrator.wizard_completed) as blocker:
        assert orchestrator.next_step(anchor="finish-button")

    assert blocker.args == [{"name": "Sara", "contact": "sara@example.com"}, "finish-button"]
    assert storage.get_item("signupFormData") is None
    assert orchestrator.record is None
    assert orchestrator.is_completed
    assert session.current_user == {"name": "Sara", "contact": "sara@example.com"}


def test_finish_on_youth_path(storage, session, repo, make_orchestrator, adult_record_data):
    repo.merge(dict(adult_record_data, is_youth=True))
    orchestrator = make_orchestrator(step=5)
    orchestrator.mount()

    orchestrator.next_step()

    assert orchestrator.is_completed
    assert storage.get_item("signupFormData") is None
    assert session.is_authenticated


def test_finish_keeps_sharing_connections(storage, repo, make_orchestrator, adult_record_data):
    granted = SharingConnection.create("mom@example.com", {"test_results": True})
    repo.merge(dict(adult_record_data, is_youth=True, sharing_connections=[granted]))
    connections = ConnectionRepository(storage)
    orchestrator = make_orchestrator(step=5, connections=connections)
    orchestrator.mount()

    orchestrator.next_step()

    assert orchestrator.is_completed
    assert connections.list() == [granted]
    assert storage.get_item("signupFormData") is None


def test_completed_wizard_ignores_further_reports(make_orchestrator, repo, adult_record_data):
    repo.merge(dict(adult_record_data, is_youth=True))
    orchestrator = make_orchestrator(step=5)
    orchestrator.mount()
    orchestrator.next_step()

    orchestrator.report_validation(False)

    assert not orchestrator.next_step()
    assert not orchestrator.previous_step()


def test_session_rejection_is_logged(caplog, session, repo, make_orchestrator):
    repo.merge({"is_youth": True})
    orchestrator = make_orchestrator(step=5)
    orchestrator.mount()

    with caplog.at_level(logging.ERROR):
        orchestrator.next_step()

    assert orchestrator.is_completed
    assert not session.is_authenticated
    assert any("Session could not be established" in r.getMessage() for r in caplog.records)


# =============================================================================
# History
# =============================================================================

def test_history_back_acts_like_previous(make_orchestrator):
    orchestrator = make_orchestrator(step=1)
    orchestrator.mount()
    orchestrator.next_step()

    assert orchestrator.router.back()

    assert orchestrator.current_index == 1
    assert orchestrator.router.current_step() == 1


def test_history_forward_is_gated(make_orchestrator):
    orchestrator = make_orchestrator(step=1)
    orchestrator.mount()
    orchestrator.next_step()
    orchestrator.update_record({"accepted_mandatory_terms": True})
    orchestrator.report_validation(True)
    orchestrator.next_step()
    assert orchestrator.current_index == 3

    orchestrator.router.back()
    assert orchestrator.current_index == 2
    orchestrator.report_validation(False)

    orchestrator.router.forward()

    assert orchestrator.current_index == 2
    assert orchestrator.router.current_step() == 2


def test_history_forward_when_valid(make_orchestrator):
    orchestrator = make_orchestrator(step=1)
    orchestrator.mount()
    orchestrator.next_step()
    orchestrator.router.back()

    orchestrator.router.forward()

    assert orchestrator.current_index == 2
    assert orchestrator.router.current_step() == 2
