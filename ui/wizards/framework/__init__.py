# -*- coding: utf-8 -*-
"""
Wizard Framework - Building blocks for Hami's multi-step wizards.

Provides the step base class, ephemeral wizard state and the error
boundary that keeps a failing step from crashing its wizard.
"""

from .base_step import BaseStep, StepValidationResult
from .error_boundary import ErrorBoundary
from .wizard_state import NavigationDirection, WizardState

__all__ = [
    'BaseStep',
    'StepValidationResult',
    'ErrorBoundary',
    'NavigationDirection',
    'WizardState',
]
