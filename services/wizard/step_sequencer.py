# -*- coding: utf-8 -*-
"""
Step sequencing for the signup wizard.

Maps 1-based step indices to step kinds for the youth and adult paths.
Steps 1-4 are shared by both paths; the branch decides what follows.
"""

from enum import Enum

from models.signup_record import SignupRecord
from services.exceptions import BranchViolationError

YOUTH_TOTAL_STEPS = 5
ADULT_TOTAL_STEPS = 6


class StepKind(Enum):
    """Identity of a wizard step."""

    INFORMATION = "information"
    TERMS = "terms"
    USER_INFO = "user_info"
    VERIFICATION = "verification"
    YOUTH_SHARING = "youth_sharing"
    ADULT_ROLE_SELECTION = "adult_role_selection"
    ADULT_SHARING = "adult_sharing"
    INDETERMINATE = "indeterminate"


_SHARED_STEPS = {
    1: StepKind.INFORMATION,
    2: StepKind.TERMS,
    3: StepKind.USER_INFO,
    4: StepKind.VERIFICATION,
}


class StepSequencer:
    """Computes step count and step identity from the branch flag."""

    @staticmethod
    def total_steps(record: SignupRecord) -> int:
        """
        Number of steps on the record's path.

        An undetermined branch counts as adult so the shared steps are
        never under-counted.
        """
        if record.is_youth is True:
            return YOUTH_TOTAL_STEPS
        return ADULT_TOTAL_STEPS

    @staticmethod
    def step_identity(index: int, record: SignupRecord) -> StepKind:
        """
        Map a 1-based index to its step kind.

        Raises:
            ValueError: If the index is outside 1..6
            BranchViolationError: If a youth record is asked for step 6
        """
        if index in _SHARED_STEPS:
            return _SHARED_STEPS[index]

        if index == 5:
            if record.is_youth is None:
                return StepKind.INDETERMINATE
            return StepKind.YOUTH_SHARING if record.is_youth else StepKind.ADULT_ROLE_SELECTION

        if index == 6:
            if record.is_youth is None:
                return StepKind.INDETERMINATE
            if record.is_youth:
                raise BranchViolationError(index, is_youth=True)
            return StepKind.ADULT_SHARING

        raise ValueError(f"Step index out of range: {index}")

    @classmethod
    def clamp(cls, index: int, record: SignupRecord) -> int:
        """Clamp an index into [1, total_steps]."""
        return max(1, min(index, cls.total_steps(record)))

