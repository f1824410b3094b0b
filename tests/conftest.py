"""
Shared fixtures: every test starts with an empty store, default settings
and no PLAYBOOK_* variables in the environment.
"""

import os

import pytest

from validation_playbook.settings import reset_settings
from validation_playbook.store import reset_store


VALID_EMPLOYEE = {
    "name": "Grace Hopper",
    "position": "Engineer",
    "department": "R&D",
    "salary": 85000,
    "address": {"street": "1 Navy Way", "city": "arlington", "zip_code": "22202", "country": "us"},
    "skills": ["COBOL", "compilers"],
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in list(os.environ):
        if name.startswith("PLAYBOOK_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_store()
    yield
    reset_settings()
    reset_store()


@pytest.fixture
def valid_employee():
    return {**VALID_EMPLOYEE, "address": dict(VALID_EMPLOYEE["address"])}
