# -*- coding: utf-8 -*-
"""Signup Wizard Steps."""

from .information_step import InformationStep
from .terms_step import TermsStep
from .user_info_step import UserInfoStep
from .verification_step import VerificationStep
from .role_selection_step import RoleSelectionStep
from .sharing_step import SharingStep
from .waiting_step import WaitingStep

__all__ = [
    'InformationStep',
    'TermsStep',
    'UserInfoStep',
    'VerificationStep',
    'RoleSelectionStep',
    'SharingStep',
    'WaitingStep',
]
