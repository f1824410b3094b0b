"""
Config Domain Model

Application settings as a Pydantic Settings model. Instantiating Config()
reads PLAYBOOK_* environment variables and the .env file; model_validate()
validates a plain payload without touching the environment.
"""

from typing import Annotated, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from validation_playbook.annotations import Doc, NonEmptyStr

# Last label must be \w+ so every first.last@<domain> matches the Email alias
DOMAIN_PATTERN = r"^[\w-]+(\.[\w-]+)*\.\w+$"

Domain = Annotated[str, Field(pattern=DOMAIN_PATTERN), Doc("DNS domain with at least one dot")]


class Config(BaseSettings):
    """Runtime configuration of the playbook service and workflow."""

    model_config = SettingsConfigDict(
        env_prefix="PLAYBOOK_",  # e.g. PLAYBOOK_MAX_CONNECTIONS
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="forbid",
        json_schema_extra={
            "examples": [
                {"app_name": "Validation Playbook", "environment": "staging", "max_connections": 20}
            ]
        },
    )

    app_name: NonEmptyStr = "Validation Playbook"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    max_connections: int = Field(default=10, gt=0, le=1000, description="Connection pool size")
    timeout_seconds: float = Field(default=30.0, gt=0, description="Request timeout")
    max_correction_attempts: int = Field(
        default=3, ge=1, description="Corrections allowed before an onboarding run is abandoned"
    )
    company_domain: Domain = "example.com"

    @model_validator(mode="after")
    def _no_debug_in_production(self) -> "Config":
        if self.debug and self.environment == "production":
            raise ValueError("debug must be disabled in production")
        return self
