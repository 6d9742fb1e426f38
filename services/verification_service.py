# -*- coding: utf-8 -*-
"""
Verification helpers for the signup verification step.

Normalizes codes pasted from the clipboard and derives the web mail link
for an email contact.
"""

import re
from typing import Callable, Optional

from app.config import Config
from services.exceptions import ExternalCallException, ValidationException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

_PROVIDER_LINKS = {
    "gmail.com": "https://mail.google.com/",
    "outlook.com": "https://outlook.live.com/",
    "hotmail.com": "https://outlook.live.com/",
    "live.com": "https://outlook.live.com/",
    "yahoo.com": "https://mail.yahoo.com/",
}

_SEPARATORS = re.compile(r"[\s-]")
_PARTIAL_CODE = re.compile(r"\d{0,%d}" % Config.VERIFICATION_CODE_LENGTH)


def is_email(contact: Optional[str]) -> bool:
    """Check if a contact identifier is an email address."""
    return bool(contact) and "@" in contact


def email_domain(contact: str) -> str:
    """Domain part of an email address, lower-cased."""
    return contact[contact.rfind("@") + 1:].strip().lower()


def email_provider_link(contact: str) -> str:
    """
    Web mail link for an email contact.

    Known providers map to their web mail; any other domain is opened as
    https://<domain>.
    """
    domain = email_domain(contact)
    return _PROVIDER_LINKS.get(domain, f"https://{domain}")


def normalize_pasted_code(text: str) -> str:
    """
    Turn clipboard text into a (possibly partial) verification code.

    Whitespace and dashes are removed and the result is cut to the code
    length.

    Raises:
        ValidationException: If what remains is not made of digits only
    """
    code = _SEPARATORS.sub("", text or "")[:Config.VERIFICATION_CODE_LENGTH]
    if not _PARTIAL_CODE.fullmatch(code):
        raise ValidationException(tr("error.paste_invalid"), field="verification_code",
                                  context="paste")
    return code


def read_pasted_code(read_clipboard: Callable[[], str]) -> str:
    """
    Read the clipboard and normalize its content into a code.

    Raises:
        ExternalCallException: If the clipboard cannot be read
        ValidationException: If the clipboard does not hold a code
    """
    try:
        text = read_clipboard()
    except Exception as e:
        logger.error(f"Failed to read clipboard contents: {e}")
        raise ExternalCallException(tr("error.clipboard_failed"), original_error=e,
                                    context="clipboard") from e

    return normalize_pasted_code(text)
