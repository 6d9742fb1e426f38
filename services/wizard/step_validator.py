# -*- coding: utf-8 -*-
"""
Step validation service for the Signup Wizard.

Step validity rules shared by the wizard and its step widgets.
"""

from typing import Optional

from services.translation_manager import tr
from services.validation.validation_factory import ValidationFactory
from services.wizard.step_sequencer import StepKind


class StepValidator:
    """Validity defaults, validators and display names per step kind."""

    # Steps with no gating input
    ALWAYS_VALID = (
        StepKind.INFORMATION,
        StepKind.YOUTH_SHARING,
        StepKind.ADULT_SHARING,
    )

    _factory: Optional[ValidationFactory] = None

    @classmethod
    def factory(cls) -> ValidationFactory:
        if cls._factory is None:
            cls._factory = ValidationFactory()
        return cls._factory

    @classmethod
    def default_validity(cls, kind: StepKind) -> bool:
        """Validity assumed when a step is entered going forward."""
        return kind in cls.ALWAYS_VALID

    @staticmethod
    def get_step_name(kind: StepKind) -> str:
        """Get localized name for step."""
        names = {
            StepKind.INFORMATION: "step.information.title",
            StepKind.TERMS: "step.terms.title",
            StepKind.USER_INFO: "step.user_info.title",
            StepKind.VERIFICATION: "step.verification.title",
            StepKind.YOUTH_SHARING: "step.sharing.title",
            StepKind.ADULT_ROLE_SELECTION: "step.role_selection.title",
            StepKind.ADULT_SHARING: "step.sharing.title",
            StepKind.INDETERMINATE: "step.waiting.title",
        }
        return tr(names[kind])
