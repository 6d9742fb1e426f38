# -*- coding: utf-8 -*-
"""
Hami Repository Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "Database",
    "LocalStorage",
    "SQLiteLocalStorage",
    "InMemoryLocalStorage",
    "SignupDraftRepository",
    "ConnectionRepository",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "Database":
        from .database import Database
        return Database
    elif name in ("LocalStorage", "SQLiteLocalStorage", "InMemoryLocalStorage"):
        from . import local_storage
        return getattr(local_storage, name)
    elif name == "SignupDraftRepository":
        from .signup_draft_repository import SignupDraftRepository
        return SignupDraftRepository
    elif name == "ConnectionRepository":
        from .connection_repository import ConnectionRepository
        return ConnectionRepository
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
