"""
Unit tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from validation_playbook.settings import get_settings, load_settings, reset_settings


def test_defaults_without_environment():
    config = load_settings()
    assert config.app_name == "Validation Playbook"
    assert config.debug is False
    assert config.company_domain == "example.com"


def test_environment_values_are_coerced(monkeypatch):
    monkeypatch.setenv("PLAYBOOK_DEBUG", "true")
    monkeypatch.setenv("PLAYBOOK_MAX_CONNECTIONS", "20")
    monkeypatch.setenv("PLAYBOOK_TIMEOUT_SECONDS", "1.5")
    monkeypatch.setenv("PLAYBOOK_ENVIRONMENT", "staging")

    config = load_settings()
    assert config.debug is True
    assert config.max_connections == 20
    assert config.timeout_seconds == 1.5
    assert config.environment == "staging"


def test_empty_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("PLAYBOOK_MAX_CONNECTIONS", "")
    assert load_settings().max_connections == 10


def test_invalid_environment_raises(monkeypatch):
    monkeypatch.setenv("PLAYBOOK_ENVIRONMENT", "prod")
    with pytest.raises(ValidationError):
        load_settings()


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("PLAYBOOK_COMPANY_DOMAIN", "acme.io")
    assert get_settings() is first

    reset_settings()
    assert get_settings().company_domain == "acme.io"


def test_company_domain_must_be_a_dotted_domain(monkeypatch):
    monkeypatch.setenv("PLAYBOOK_COMPANY_DOMAIN", "intranet")
    with pytest.raises(ValidationError):
        load_settings()


def test_model_validate_ignores_environment(monkeypatch):
    monkeypatch.setenv("PLAYBOOK_APP_NAME", "From Env")
    from validation_playbook.models import Config

    assert Config.model_validate({}).app_name == "Validation Playbook"
    assert Config().app_name == "From Env"
