"""
Employee Domain Model

The nested-model example: `address` arrives as a dict and is parsed into
an Address; its errors surface with dotted locations (address.zip_code).
This is also the payload the onboarding workflow validates.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from validation_playbook.annotations import Email, NonEmptyStr, PositiveInt, PositivePrice
from validation_playbook.models.address import Address


class EmployeeCreate(BaseModel):
    """Payload describing a new hire."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Grace Hopper",
                    "position": "Engineer",
                    "department": "R&D",
                    "salary": 85000,
                    "address": {"street": "1 Navy Way", "city": "arlington", "zip_code": "22202", "country": "us"},
                    "skills": ["COBOL", "compilers"],
                }
            ]
        },
    )

    name: NonEmptyStr
    position: NonEmptyStr
    department: NonEmptyStr = "General"
    salary: PositivePrice
    address: Address
    email: Optional[Email] = Field(default=None, description="Personal contact email")
    skills: List[str] = Field(default_factory=list)
    hired_on: Optional[date] = Field(default=None, description="First working day")


class Employee(EmployeeCreate):
    """A registered employee."""

    id: PositiveInt
