# -*- coding: utf-8 -*-
"""Field-level rules shared by the signup validators."""

import re
from datetime import date
from typing import Any, Optional

from app.config import Config
from utils.datetime_utils import parse_iso_date

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
PHONE_PATTERN = re.compile(r"\+?[0-9\s-]{7,15}")


def is_blank(value: Any) -> bool:
    """Check if a value is missing or whitespace-only."""
    return value is None or (isinstance(value, str) and not value.strip())


def is_email(value: Optional[str]) -> bool:
    """Check if the whole value is shaped like an email address."""
    if not value:
        return False
    return EMAIL_PATTERN.fullmatch(value.strip()) is not None


def is_phone(value: Optional[str]) -> bool:
    """Check if the whole value is shaped like a phone number."""
    if not value:
        return False
    return PHONE_PATTERN.fullmatch(value.strip()) is not None


def is_valid_contact(value: Optional[str]) -> bool:
    """Email or phone, matched against the whole string."""
    return is_email(value) or is_phone(value)


def birth_date_error(value: Any, today: Optional[date] = None) -> Optional[str]:
    """
    Check a date of birth.

    Returns:
        None when valid, otherwise one of 'required', 'invalid',
        'in_future' or 'too_early'
    """
    if is_blank(value):
        return "required"

    parsed = parse_iso_date(value)
    if parsed is None:
        return "invalid"

    if parsed > (today or date.today()):
        return "in_future"

    if parsed < Config.EARLIEST_BIRTH_DATE:
        return "too_early"

    return None
