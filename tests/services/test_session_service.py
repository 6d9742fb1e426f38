# -*- coding: utf-8 -*-
"""
Tests for the session service and the error mapper.
"""
import pytest

from services.error_mapper import map_exception
from services.exceptions import (
    BranchViolationError,
    ExternalCallException,
    ValidationException,
)


def test_establish_session_emits_then_redirects(qtbot, session):
    events = []
    session.session_established.connect(lambda user: events.append(("session", user)))
    session.redirect_requested.connect(lambda route: events.append(("redirect", route)))

    session.establish_session({"name": "Sara", "contact": "sara@example.com"})

    assert session.is_authenticated
    assert session.current_user == {"name": "Sara", "contact": "sara@example.com"}
    assert events == [
        ("session", {"name": "Sara", "contact": "sara@example.com"}),
        ("redirect", "/en/dashboard"),
    ]


def test_establish_session_requires_identity(session):
    with pytest.raises(ValidationException):
        session.establish_session({"name": "", "contact": ""})

    assert not session.is_authenticated



def test_map_validation_error_keeps_its_message():
    assert map_exception(ValidationException("Name is required.")) == "Name is required."


def test_map_external_error():
    error = ExternalCallException("Could not read the clipboard.", original_error=OSError())
    assert map_exception(error) == "Could not read the clipboard."


def test_map_internal_errors_to_generic_message():
    generic = "Something went wrong. Please try again."

    assert map_exception(BranchViolationError(6, is_youth=True)) == generic
    assert map_exception(RuntimeError("boom")) == generic
