"""
Product Domain Model

Shows numeric constraints, a field validator that cleans a list,
and computed fields that appear in serialized output.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from validation_playbook.annotations import NonEmptyStr, Percentage, PositiveInt, PositivePrice


def _uniq_preserve_order(items: List[str]) -> List[str]:
    seen = set()
    out = []
    for x in items:
        if x in seen:
            continue
        seen.add(x)
        out.append(x)
    return out


class ProductCreate(BaseModel):
    """Payload for adding a product to the catalog."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "examples": [
                {"name": "Laptop", "price": 999.99, "quantity": 5, "discount": 10, "tags": ["electronics"]}
            ]
        },
    )

    name: NonEmptyStr
    price: PositivePrice
    quantity: int = Field(default=0, ge=0, description="Units in stock")
    discount: Percentage = 0
    tags: List[str] = Field(default_factory=list, description="Lower-cased, de-duplicated labels")

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, v: List[str]) -> List[str]:
        cleaned = [t.strip().lower() for t in v if t and t.strip()]
        return _uniq_preserve_order(cleaned)

    @computed_field
    @property
    def final_price(self) -> float:
        """Price after discount, rounded to cents."""
        return round(self.price * (1 - self.discount / 100), 2)

    @computed_field
    @property
    def in_stock(self) -> bool:
        return self.quantity > 0


class Product(ProductCreate):
    """A stored catalog product."""

    id: PositiveInt
