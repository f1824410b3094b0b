"""
User Domain Model

Shows the basics: type coercion ("42" -> 42), optional fields and defaults.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from validation_playbook.annotations import Age, Email, NonEmptyStr, PositiveInt


class UserCreate(BaseModel):
    """Payload for registering a user account."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {"name": "Alice", "email": "alice@example.com", "age": 30, "tags": ["admin"]}
            ]
        },
    )

    name: NonEmptyStr
    email: Email
    age: Optional[Age] = Field(default=None, description="Age in years (0-130)")
    is_active: bool = True
    tags: List[str] = Field(default_factory=list, description="Free-form labels")


class User(UserCreate):
    """A stored user account."""

    id: PositiveInt
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
