# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy,
    GenericRequiredFieldsValidator,
    TermsValidator,
    UserInfoValidator,
    VerificationCodeValidator,
    AdultRoleValidator,
    SharingConnectionValidator,
)
from .validation_factory import ValidationFactory

__all__ = [
    'ValidationStrategy',
    'GenericRequiredFieldsValidator',
    'TermsValidator',
    'UserInfoValidator',
    'VerificationCodeValidator',
    'AdultRoleValidator',
    'SharingConnectionValidator',
    'ValidationFactory',
]
