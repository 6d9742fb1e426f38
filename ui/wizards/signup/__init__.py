# -*- coding: utf-8 -*-
"""
Signup Wizard - Multi-step account creation with a youth/adult branch.
"""

from .wizard_orchestrator import WizardOrchestrator
from .signup_wizard import SignupWizard

__all__ = ['WizardOrchestrator', 'SignupWizard']
