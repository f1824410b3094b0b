"""
Address Domain Model

Nested inside Employee; a plain dict under "address" is parsed into this model.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from validation_playbook.annotations import CountryCode, NonEmptyStr, ZipCode


class Address(BaseModel):
    """Postal address of a person or office."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {"street": "1 Infinite Loop", "city": "Cupertino", "zip_code": "95014", "country": "US"}
            ]
        },
    )

    street: NonEmptyStr
    city: NonEmptyStr
    zip_code: ZipCode
    country: CountryCode = "US"

    @field_validator("country", mode="before")
    @classmethod
    def _upper_country(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v
