# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import (
    BranchViolationError,
    ExternalCallException,
    MalformedPersistedStateError,
    ValidationException,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def map_external_error(error: ExternalCallException) -> str:
    """Map a failed local collaborator call to its user-facing message.

    The wrapped error is logged only.
    """
    if error.original_error:
        logger.warning(f"External call failed ({error.context}): {error.original_error}")
    return error.message or tr("error.generic")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-friendly message.

    Validation messages are already translated and shown as they are;
    everything else becomes the generic message.
    """
    if isinstance(error, ValidationException):
        if not error.context and context:
            error.context = context
        if error.errors:
            logger.warning(f"Validation error: {error.errors}")
        return error.message or tr("validation.check_data")

    if isinstance(error, ExternalCallException):
        return map_external_error(error)

    if isinstance(error, (MalformedPersistedStateError, BranchViolationError)):
        logger.error(f"Internal state error in {context or 'unknown'}: {error}")
        return tr("error.generic")

    # Log unexpected errors
    logger.warning(f"Unexpected error: {error}")
    return tr("error.generic")
