# -*- coding: utf-8 -*-
"""
DateTime Utilities.

Centralized handling of the birth-date values collected during signup:
canonical ISO serialization, parsing, age calculation and display.
"""

from datetime import datetime, date
from typing import Union, Optional

from PyQt5.QtCore import QDate, QLocale


def to_date_isoformat(value: Union[datetime, date, str, None]) -> Optional[str]:
    """
    Convert any date-like value to date-only ISO format (YYYY-MM-DD).

    Args:
        value: datetime, date, ISO string, or None

    Returns:
        ISO date string (YYYY-MM-DD), or None when the value is None or
        is not a valid calendar date

    Examples:
        >>> to_date_isoformat(datetime(2024, 1, 15, 10, 30))
        '2024-01-15'
        >>> to_date_isoformat('2024-01-15T10:30:00')
        '2024-01-15'
        >>> to_date_isoformat('2024-02-30') is None
        True
    """
    if value is None:
        return None

    parsed = parse_iso_date(value)
    return parsed.isoformat() if parsed else None


def parse_iso_date(value: Union[datetime, date, str, None]) -> Optional[date]:
    """
    Parse an ISO date (or datetime) value into a date.

    Returns None for empty values and for strings that do not name a real
    calendar date.
    """
    if value is None:
        return None

    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if 'T' in text:
            text = text.split('T')[0]
        try:
            return date.fromisoformat(text)
        except ValueError:
            return None

    return None


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """
    Calculate age in completed years.

    Honors month/day rollover: the age only increases on (or after) the
    birthday itself, never from a plain year subtraction.

    Examples:
        >>> calculate_age(date(2008, 10, 19), date(2026, 10, 19))
        18
        >>> calculate_age(date(2008, 10, 20), date(2026, 10, 19))
        17
    """
    if today is None:
        today = date.today()

    before_birthday = (today.month, today.day) < (birth_date.month, birth_date.day)
    return today.year - birth_date.year - (1 if before_birthday else 0)



def display_date_format(lang: str) -> str:
    """Qt date format used to show birth dates in the given language."""
    return "yyyy/MM/dd" if lang == "fa" else "MMMM d, yyyy"


def format_display_date(value: Union[date, str, None], lang: str) -> str:
    """
    Format a birth date for display in the given language.

    Persian shows the compact yyyy/MM/dd form, English a long date.
    The stored value is always the canonical ISO string.
    """
    parsed = parse_iso_date(value)
    if parsed is None:
        return ""

    qdate = QDate(parsed.year, parsed.month, parsed.day)
    if lang == "fa":
        return qdate.toString(display_date_format(lang))
    return QLocale(QLocale.English, QLocale.UnitedStates).toString(qdate, display_date_format(lang))
