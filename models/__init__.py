# -*- coding: utf-8 -*-
"""
Hami Data Models
"""

from .signup_record import (
    SignupRecord,
    SharingConnection,
    PERMISSION_KEYS,
    ADULT_ROLE_KEYS,
    default_permissions,
    default_adult_roles,
)

__all__ = [
    "SignupRecord",
    "SharingConnection",
    "PERMISSION_KEYS",
    "ADULT_ROLE_KEYS",
    "default_permissions",
    "default_adult_roles",
]
