# -*- coding: utf-8 -*-
"""
Tests for signup validation rules and strategies.
"""
from datetime import date

import pytest

from services.validation import ValidationFactory
from services.validation.rules import birth_date_error, is_valid_contact

TODAY = date(2026, 10, 19)


@pytest.fixture
def factory():
    return ValidationFactory(today=lambda: TODAY)


def user_info(**overrides):
    values = {
        "name": "Sara",
        "email_or_phone": "sara@example.com",
        "dob": "1990-05-01",
        "password": "secret1",
        "confirm_password": "secret1",
    }
    values.update(overrides)
    return values


@pytest.mark.parametrize("value", [
    "sara@example.com",
    "+98 912 000 0000",
    "0912-000-0000",
    "09120000000",
])
def test_valid_contacts(value):
    assert is_valid_contact(value)


@pytest.mark.parametrize("value", [
    "",
    "sara",
    "sara@example",
    "12345",
    "call me 09120000000",
    "+98912000000000000",
])
def test_invalid_contacts(value):
    assert not is_valid_contact(value)


def test_birth_date_errors():
    assert birth_date_error(None, TODAY) == "required"
    assert birth_date_error("2001-02-30", TODAY) == "invalid"
    assert birth_date_error("2026-10-20", TODAY) == "in_future"
    assert birth_date_error("1899-12-31", TODAY) == "too_early"
    assert birth_date_error("2026-10-19", TODAY) is None


def test_complete_user_info_is_valid(factory):
    assert factory.is_valid(user_info(), "user_info")


def test_user_info_errors_are_grouped_by_field(factory):
    errors = factory.validate_fields(
        user_info(name="  ", email_or_phone="nope", password="12345", confirm_password="123"),
        "user_info",
    )

    assert errors["name"] == ["Name is required."]
    assert errors["email_or_phone"] == ["Enter a valid email address or phone number."]
    assert errors["password"] == ["Password must be at least 6 characters."]
    assert errors["confirm_password"] == ["Passwords do not match."]
    assert "dob" not in errors


def test_future_birth_date_blocks_user_info(factory):
    errors = factory.validate_fields(user_info(dob="2030-01-01"), "user_info")
    assert errors["dob"] == ["Date of birth cannot be in the future."]


def test_verification_code_must_have_five_digits(factory):
    assert factory.is_valid({"verification_code": "12345"}, "verification")
    assert not factory.is_valid({"verification_code": "1234"}, "verification")
    assert not factory.is_valid({}, "verification")


def test_school_consultant_requires_school_code(factory):
    roles = {"school_consultant": True}
    assert not factory.is_valid({"adult_roles_selected": roles, "school_code": " "}, "adult_roles")
    assert factory.is_valid({"adult_roles_selected": roles, "school_code": "S-1"}, "adult_roles")


def test_no_role_is_a_valid_selection(factory):
    assert factory.is_valid({"adult_roles_selected": {}}, "adult_roles")


def test_sharing_connection_rules(factory):
    errors = factory.validate_fields({"contact": "", "permissions": {}}, "sharing_connection")

    assert set(errors) == {"contact", "permissions"}


def test_identity_requires_name_and_contact(factory):
    errors = factory.validate({"name": "", "contact": "a@b.co"}, "identity")

    assert errors == ["Name is required."]


def test_unknown_record_type(factory):
    assert not factory.is_valid({}, "nonexistent")
