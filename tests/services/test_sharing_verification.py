# -*- coding: utf-8 -*-
"""
Tests for sharing connection bookkeeping and verification helpers.
"""
import pytest

from models.signup_record import PERMISSION_KEYS
from services.exceptions import ExternalCallException, ValidationException
from services.sharing_service import SharingService
from services.translation_manager import set_language
from services.verification_service import (
    email_provider_link,
    normalize_pasted_code,
    read_pasted_code,
)


# =============================================================================
# Sharing
# =============================================================================

def test_add_connection_appends_without_touching_input():
    service = SharingService()
    existing = []

    connections = service.add_connection(existing, "mom@example.com", {"test_results": True})

    assert existing == []
    assert len(connections) == 1
    assert connections[0].contact == "mom@example.com"
    assert connections[0].permissions["test_results"] is True
    assert connections[0].permissions["basic_information"] is False


def test_connection_without_permission_is_rejected():
    service = SharingService()

    with pytest.raises(ValidationException) as info:
        service.add_connection([], "mom@example.com", {})

    assert info.value.field_errors == {"permissions": ["Select at least one permission."]}


def test_connection_with_bad_contact_is_rejected():
    with pytest.raises(ValidationException) as info:
        SharingService().create_connection("mom", {"test_results": True})

    assert "contact" in info.value.field_errors


def test_remove_connection_by_id():
    service = SharingService()
    connections = service.add_connection([], "a@b.co", {"test_results": True})
    connections = service.add_connection(connections, "c@d.co", {"test_results": True})

    remaining = SharingService.remove_connection(connections, connections[0].id)

    assert [c.contact for c in remaining] == ["c@d.co"]


def test_permissions_summary():
    assert SharingService.permissions_summary({}) == "No permissions granted"
    assert SharingService.permissions_summary({key: True for key in PERMISSION_KEYS}) == "All items"
    assert SharingService.permissions_summary(
        {"test_results": True, "basic_information": True}
    ) == "Basic information, Test results"


def test_permissions_summary_in_persian():
    set_language("fa")
    summary = SharingService.permissions_summary({"test_results": True, "basic_information": True})

    assert "، " in summary


# =============================================================================
# Verification
# =============================================================================

@pytest.mark.parametrize("contact, link", [
    ("sara@gmail.com", "https://mail.google.com/"),
    ("sara@Hotmail.com", "https://outlook.live.com/"),
    ("sara@yahoo.com", "https://mail.yahoo.com/"),
    ("sara@example.org", "https://example.org"),
])
def test_email_provider_link(contact, link):
    assert email_provider_link(contact) == link


@pytest.mark.parametrize("text, code", [
    ("12345", "12345"),
    (" 12 345 ", "12345"),
    ("123-45", "12345"),
    ("1234567", "12345"),
    ("123", "123"),
    ("", ""),
])
def test_normalize_pasted_code(text, code):
    assert normalize_pasted_code(text) == code


def test_pasted_text_with_letters_is_rejected():
    with pytest.raises(ValidationException) as info:
        normalize_pasted_code("code: 12345")

    assert info.value.message == "The clipboard does not contain a valid code."


def test_clipboard_failure_becomes_external_call_error():
    def broken_clipboard():
        raise RuntimeError("no clipboard")

    with pytest.raises(ExternalCallException) as info:
        read_pasted_code(broken_clipboard)

    assert info.value.message == "Could not read the clipboard."
    assert isinstance(info.value.original_error, RuntimeError)
