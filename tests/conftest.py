# -*- coding: utf-8 -*-
"""
Shared fixtures for the Hami test suite.
"""
import os
import sys
import tempfile
from datetime import date
from pathlib import Path

# Headless Qt and throwaway data/log directories, set before app.config loads
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
_SCRATCH = Path(tempfile.mkdtemp(prefix="hami-tests-"))
os.environ.setdefault("HAMI_DATA_DIR", str(_SCRATCH / "data"))
os.environ.setdefault("HAMI_LOGS_DIR", str(_SCRATCH / "logs"))

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from repositories.local_storage import InMemoryLocalStorage
from repositories.signup_draft_repository import SignupDraftRepository
from services.session_service import SessionService
from services.translation_manager import set_language
from services.wizard.step_router import StepRouter

TODAY = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def english():
    """Run every test in English; restore the default afterwards."""
    set_language("en")
    yield
    set_language("en")


@pytest.fixture
def storage():
    return InMemoryLocalStorage()


@pytest.fixture
def repo(storage):
    return SignupDraftRepository(storage)


@pytest.fixture
def router(qapp):
    return StepRouter(lang="en")


@pytest.fixture
def session(qapp):
    return SessionService()


@pytest.fixture
def make_orchestrator(qapp, repo, session):
    """Build a mounted-ready orchestrator for a given starting location."""
    from ui.wizards.signup.wizard_orchestrator import WizardOrchestrator

    def _make(step=None, router=None, connections=None):
        if router is None:
            url = "hami://app/en/signup" if step is None else f"hami://app/en/signup?step={step}"
            router = StepRouter(initial_url=url)
        return WizardOrchestrator(repo, router, session, today=lambda: TODAY,
                                  connections=connections)

    return _make


@pytest.fixture
def adult_record_data():
    """Persisted state of an adult who has just passed verification."""
    return {
        "accepted_mandatory_terms": True,
        "name": "Sara",
        "email_or_phone": "sara@example.com",
        "dob": "1990-05-01",
        "password": "secret1",
        "verification_code": "12345",
    }
