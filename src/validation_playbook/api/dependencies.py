"""
FastAPI Dependencies

Providers resolved per request. Each app instance keeps its own runner
and settings on app.state; the store is process-wide.
"""

from fastapi import Request

from validation_playbook.models import Config
from validation_playbook.runner import OnboardingRunner
from validation_playbook.store import Store, get_store


def get_settings_dep(request: Request) -> Config:
    return request.app.state.settings


def get_store_dep() -> Store:
    return get_store()


def get_runner(request: Request) -> OnboardingRunner:
    return request.app.state.runner
