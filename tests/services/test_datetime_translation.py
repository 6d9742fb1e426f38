# -*- coding: utf-8 -*-
"""
Tests for date helpers and the translation manager.
"""
from datetime import date, datetime

import pytest
from PyQt5.QtCore import Qt

from services.translation_manager import (
    get_language,
    get_layout_direction,
    is_rtl,
    set_language,
    tr,
)
from utils.datetime_utils import (
    calculate_age,
    format_display_date,
    parse_iso_date,
    to_date_isoformat,
)

TODAY = date(2026, 10, 19)


# =============================================================================
# Dates
# =============================================================================

def test_age_changes_on_the_birthday_itself():
    assert calculate_age(date(2008, 10, 19), TODAY) == 18
    assert calculate_age(date(2008, 10, 20), TODAY) == 17


@pytest.mark.parametrize("value, expected", [
    ("2001-03-04", date(2001, 3, 4)),
    ("2001-03-04T10:00:00", date(2001, 3, 4)),
    (datetime(2001, 3, 4, 10, 0), date(2001, 3, 4)),
    ("2001-02-30", None),
    ("", None),
    (None, None),
])
def test_parse_iso_date(value, expected):
    assert parse_iso_date(value) == expected


def test_to_date_isoformat():
    assert to_date_isoformat(date(2001, 3, 4)) == "2001-03-04"
    assert to_date_isoformat("not a date") is None


def test_format_display_date(qapp):
    assert format_display_date("2001-03-04", "en") == "March 4, 2001"
    assert format_display_date("2001-03-04", "fa") == "2001/03/04"
    assert format_display_date(None, "en") == ""


# =============================================================================
# Translations
# =============================================================================

def test_translation_with_placeholders():
    assert tr("wizard.progress", current=2, total=6) == "Step 2 of 6"


def test_unknown_key_falls_back_to_key():
    assert tr("no.such.key") == "no.such.key"


def test_persian_is_right_to_left():
    set_language("fa")

    assert is_rtl()
    assert get_layout_direction() == Qt.RightToLeft


def test_english_is_left_to_right():
    assert not is_rtl()
    assert get_layout_direction() == Qt.LeftToRight


def test_unsupported_language_falls_back_to_persian():
    set_language("de")

    assert get_language() == "fa"

