# -*- coding: utf-8 -*-
"""
Signup Wizard Orchestrator.

The state machine behind the signup wizard: current step, validity gating,
age-based branch resolution, completion and synchronization with the
navigable location. It owns no widgets; SignupWizard renders whatever step
the orchestrator points at.
"""

from datetime import date
from typing import Any, Callable, Dict, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from app.config import Config
from models.signup_record import SignupRecord
from repositories.connection_repository import ConnectionRepository
from repositories.signup_draft_repository import SignupDraftRepository
from services.exceptions import BranchViolationError, ValidationException
from services.session_service import SessionService
from services.translation_manager import tr
from services.wizard.step_router import StepRouter
from services.wizard.step_sequencer import (
    ADULT_TOTAL_STEPS,
    YOUTH_TOTAL_STEPS,
    StepKind,
    StepSequencer,
)
from services.wizard.step_validator import StepValidator
from ui.wizards.framework.wizard_state import NavigationDirection, WizardState
from utils.datetime_utils import calculate_age, parse_iso_date
from utils.logger import get_logger

logger = get_logger(__name__)

VERIFICATION_STEP = 4


class WizardOrchestrator(QObject):
    """
    Navigation state machine of the signup wizard.

    Signals:
        step_changed(int, int): old index, new index (also emitted when the
            kind shown at an unchanged index changes)
        total_steps_changed(int): new step count
        validity_changed(bool): validity of the active step
        navigation_blocked(str): user-visible reason a Next was refused
        branch_resolved(bool): is_youth decided on leaving verification
        wizard_completed(dict, object): finished identity and the anchor
            widget that triggered Finish
    """

    step_changed = pyqtSignal(int, int)
    total_steps_changed = pyqtSignal(int)
    validity_changed = pyqtSignal(bool)
    navigation_blocked = pyqtSignal(str)
    branch_resolved = pyqtSignal(bool)
    wizard_completed = pyqtSignal(dict, object)

    def __init__(self, store: SignupDraftRepository, router: StepRouter,
                 session: SessionService, today: Optional[Callable[[], date]] = None,
                 connections: Optional[ConnectionRepository] = None, parent=None):
        super().__init__(parent)
        self.store = store
        self.router = router
        self.session = session
        self.connections = connections
        self._today = today or date.today

        self.state = WizardState()
        self._record: Optional[SignupRecord] = None
        self._mounted = False

        self.router.location_changed.connect(self.navigate_to_location)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def record(self) -> Optional[SignupRecord]:
        """The in-memory record; None before mount and after completion."""
        return self._record

    @property
    def current_index(self) -> int:
        return self.state.current_index

    @property
    def current_kind(self) -> StepKind:
        return self.state.current_kind

    @property
    def total_steps(self) -> int:
        return self.state.total_steps

    @property
    def is_completed(self) -> bool:
        return self.state.completed

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def mount(self):
        """
        Restore the record and position the wizard.

        The step comes from the location's `step` parameter (1 when absent
        or unparseable), clamped into [1, total_steps]. The location is
        rewritten to the clamped step.
        """
        self._record = self.store.load()
        self.state = WizardState(total_steps=StepSequencer.total_steps(self._record))

        requested = self.router.current_step()
        index = StepSequencer.clamp(requested if requested is not None else 1, self._record)
        if requested is not None and requested != index:
            logger.info(f"Clamped requested step {requested} to {index}")

        index, kind = self._resolve(index)
        self.state.current_index = index
        self.state.current_kind = kind
        self.state.step_valid = StepValidator.default_validity(kind)
        self.router.replace_step(index)
        self._mounted = True

        logger.info(f"Signup wizard mounted at step {index}/{self.state.total_steps} ({kind.value})")
        logger.debug(f"Wizard state: {self.state.to_dict()}")
        self.total_steps_changed.emit(self.state.total_steps)
        self.step_changed.emit(0, index)
        self.validity_changed.emit(self.state.step_valid)

    # =========================================================================
    # Step reports
    # =========================================================================

    def report_validation(self, is_valid: bool):
        """Record the validity reported by the active step."""
        if not self._mounted or self.state.completed:
            return
        if self.state.is_indeterminate:
            is_valid = False
        self._set_validity(bool(is_valid))

    def update_record(self, partial: Dict[str, Any]) -> SignupRecord:
        """
        Merge and persist a partial update from the active step.

        The step count, index and kind are re-derived right away, so a
        change of branch takes effect before anything else renders.

        Returns:
            The merged record
        """
        if not self._mounted or self.state.completed:
            raise RuntimeError("Signup wizard is not active")

        self._record = self.store.merge(partial)
        self._sync_with_record()
        return self._record

    # =========================================================================
    # Navigation
    # =========================================================================

    def can_go_next(self) -> bool:
        return (self._mounted and not self.state.completed
                and not self.state.is_indeterminate and self.state.step_valid)

    def can_go_previous(self) -> bool:
        return (self._mounted and not self.state.completed
                and not self.state.is_indeterminate and self.state.current_index > 1)

    def is_next_enabled(self) -> bool:
        """
        Whether the Next control should be clickable.

        It stays clickable on Terms so a refused attempt can explain itself.
        """
        if self.can_go_next():
            return True
        return (self._mounted and not self.state.completed
                and self.state.current_kind == StepKind.TERMS)

    def next_step(self, anchor: Any = None) -> bool:
        """
        Advance one step, or finish on the last step.

        Args:
            anchor: On-screen control that triggered the action

        Returns:
            True if the wizard advanced or finished
        """
        return self._advance(anchor, push=True)

    def previous_step(self) -> bool:
        """Go back one step; the step is provisionally valid until it reports."""
        if not self.can_go_previous():
            return False
        self._go_to(self.state.current_index - 1, NavigationDirection.BACKWARD, push=True)
        return True

    def navigate_to_location(self, step: Optional[int]):
        """
        Follow a history traversal of the navigable location.

        Backward moves behave like Previous. Forward moves are honored only
        one step at a time and only when Next would be. Anything else puts
        the location back on the current step.
        """
        if not self._mounted or self.state.completed:
            return

        current = self.state.current_index
        if step == current:
            return

        if step is not None and step < current and self.can_go_previous():
            self._go_to(max(step, 1), NavigationDirection.BACKWARD, push=False)
            return

        if step == current + 1 and not self.state.is_last_step and self._advance(None, push=False):
            return

        logger.debug(f"Ignoring history move to step {step} from step {current}")
        self.router.replace_step(current)

    def recover_from_indeterminate(self) -> bool:
        """Leave the waiting state by returning to verification."""
        if not self.state.is_indeterminate:
            return False
        logger.info("Leaving undetermined branch state, returning to verification")
        self._go_to(VERIFICATION_STEP, NavigationDirection.BACKWARD, push=True,
                    provisional=False)
        return True

    def finish(self, anchor: Any = None):
        """
        Complete signup.

        Persists the final record, keeps its sharing connections, clears the
        durable copy, discards the in-memory record and hands the identity
        to the session.
        """
        if not self._mounted or self.state.completed:
            logger.warning("Finish requested on an inactive signup wizard")
            return

        final_record = self.store.merge({})
        identity = final_record.identity()
        if self.connections is not None and final_record.sharing_connections:
            self.connections.extend(final_record.sharing_connections)
        self.store.clear()
        self._record = None
        self.state.completed = True
        logger.info(f"Signup completed for {identity['contact']}")

        self.wizard_completed.emit(identity, anchor)

        try:
            self.session.establish_session(identity)
        except ValidationException as e:
            logger.error(f"Session could not be established: {e.message}")

    # =========================================================================
    # Internals
    # =========================================================================

    def _advance(self, anchor: Any, push: bool) -> bool:
        if not self._mounted or self.state.completed:
            return False

        kind = self.state.current_kind
        if kind == StepKind.INDETERMINATE:
            logger.debug("Next ignored while the branch is undetermined")
            return False

        if not self.state.step_valid:
            if kind == StepKind.TERMS:
                self.navigation_blocked.emit(tr("validation.terms_required"))
            logger.debug(f"Next blocked on invalid step {self.state.current_index} ({kind.value})")
            return False

        if kind == StepKind.VERIFICATION:
            self._resolve_branch()

        if self.state.is_last_step:
            self.finish(anchor)
            return True

        self._go_to(self.state.current_index + 1, NavigationDirection.FORWARD, push=push)
        return True

    def _resolve_branch(self):
        """Decide youth/adult from the date of birth and persist it."""
        birth_date = parse_iso_date(self._record.dob)
        if birth_date is None:
            logger.warning("Cannot resolve branch without a valid date of birth")
            return

        age = calculate_age(birth_date, self._today())
        is_youth = age < Config.YOUTH_AGE_LIMIT
        self._record = self.store.merge({"is_youth": is_youth})
        logger.info(f"Branch resolved: age {age}, {'youth' if is_youth else 'adult'} path")

        self._sync_total_steps()
        self.branch_resolved.emit(is_youth)

    def _go_to(self, index: int, direction: NavigationDirection, push: bool,
               provisional: bool = True):
        old = self.state.current_index
        index, kind = self._resolve(index)

        self.state.current_index = index
        self.state.current_kind = kind
        self.state.direction = direction

        if direction == NavigationDirection.BACKWARD and provisional:
            self._set_validity(kind != StepKind.INDETERMINATE)
        else:
            self._set_validity(StepValidator.default_validity(kind))

        if push:
            self.router.push_step(index)
        else:
            self.router.replace_step(index)

        logger.info(f"Signup step {old} -> {index} ({kind.value})")
        self.step_changed.emit(old, index)

    def _sync_with_record(self):
        """
        Re-derive step count, index and kind after a merge.

        A branch change that shortens the path pulls the index back onto
        it before the kind is resolved.
        """
        self._sync_total_steps()

        old_index, old_kind = self.state.current_index, self.state.current_kind
        index, kind = self._resolve(StepSequencer.clamp(old_index, self._record))
        if (index, kind) == (old_index, old_kind):
            return

        self.state.current_index = index
        self.state.current_kind = kind
        self._set_validity(StepValidator.default_validity(kind))
        self.router.replace_step(index)

        logger.info(f"Signup step re-derived: {old_index} ({old_kind.value}) -> {index} ({kind.value})")
        self.step_changed.emit(old_index, index)

    def _sync_total_steps(self):
        total = StepSequencer.total_steps(self._record)
        if total != self.state.total_steps:
            self.state.total_steps = total
            self.total_steps_changed.emit(total)

    def _resolve(self, index: int) -> Tuple[int, StepKind]:
        """
        Step kind for an index.

        A youth record positioned on step 6 is a branch violation: it is
        logged and redirected to the last youth step.
        """
        index = max(1, min(index, ADULT_TOTAL_STEPS))
        try:
            return index, StepSequencer.step_identity(index, self._record)
        except BranchViolationError as e:
            logger.error(f"Branch violation: {e.message}; redirecting to step {YOUTH_TOTAL_STEPS}")
            return YOUTH_TOTAL_STEPS, StepSequencer.step_identity(YOUTH_TOTAL_STEPS, self._record)

    def _set_validity(self, is_valid: bool):
        if self.state.step_valid != is_valid:
            self.state.step_valid = is_valid
            self.validity_changed.emit(is_valid)
