# -*- coding: utf-8 -*-
"""
Hami Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "SessionService",
    "SharingService",
    "TranslationManager",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "SessionService":
        from .session_service import SessionService
        return SessionService
    elif name == "SharingService":
        from .sharing_service import SharingService
        return SharingService
    elif name == "TranslationManager":
        from .translation_manager import TranslationManager
        return TranslationManager
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
