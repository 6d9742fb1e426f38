# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None,
                 field_errors: dict = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context
        self.field_errors = field_errors or {}


class MalformedPersistedStateError(Exception):
    """Exception raised when a durable record cannot be decoded."""

    def __init__(self, key: str, raw: str = None, original_error: Exception = None):
        super().__init__(f"Malformed persisted state under '{key}'")
        self.message = f"Malformed persisted state under '{key}'"
        self.key = key
        self.raw = raw
        self.original_error = original_error


class BranchViolationError(Exception):
    """Exception raised when a step index contradicts the resolved branch."""

    def __init__(self, index: int, is_youth: bool = None):
        message = f"Step {index} is not reachable on the {'youth' if is_youth else 'adult'} path"
        super().__init__(message)
        self.message = message
        self.index = index
        self.is_youth = is_youth


class ExternalCallException(Exception):
    """Exception raised when a local collaborator (clipboard, browser) fails."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context
