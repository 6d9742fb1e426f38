# -*- coding: utf-8 -*-
"""
Wizard State - Ephemeral navigation state of a running wizard.

Only the record is persisted; this state is rebuilt on every mount.
"""

from dataclasses import dataclass
from enum import Enum

from services.wizard.step_sequencer import ADULT_TOTAL_STEPS, StepKind


class NavigationDirection(Enum):
    """Direction of the last transition. Only used for transition effects."""
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass
class WizardState:
    """Current position and validity of the wizard."""
    current_index: int = 1
    direction: NavigationDirection = NavigationDirection.FORWARD
    step_valid: bool = False
    total_steps: int = ADULT_TOTAL_STEPS
    current_kind: StepKind = StepKind.INFORMATION
    completed: bool = False

    @property
    def is_indeterminate(self) -> bool:
        return self.current_kind == StepKind.INDETERMINATE

    @property
    def is_last_step(self) -> bool:
        return self.current_index >= self.total_steps

    def to_dict(self) -> dict:
        """Convert to dictionary for logging."""
        return {
            "current_index": self.current_index,
            "direction": self.direction.value,
            "step_valid": self.step_valid,
            "total_steps": self.total_steps,
            "current_kind": self.current_kind.value,
            "completed": self.completed,
        }
