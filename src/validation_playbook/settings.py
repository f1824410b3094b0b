"""
Settings Loader

Config is a pydantic-settings model: PLAYBOOK_* environment variables and
the .env file override its defaults. This module only caches the instance.
"""

from functools import lru_cache

from validation_playbook.models.config import Config


def load_settings() -> Config:
    """
    Builds a Config from the environment.

    Raises pydantic.ValidationError when a variable is invalid.
    """
    return Config()


@lru_cache()
def get_settings() -> Config:
    """
    Get cached settings instance.

    Loaded once and shared by the API and the workflow nodes;
    call reset_settings() after changing the environment.
    """
    return load_settings()


def reset_settings() -> None:
    get_settings.cache_clear()
