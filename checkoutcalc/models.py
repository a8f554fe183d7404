"""Checkout Pydantic models for type-safe pricing data.

Prices are whole numbers in the smallest currency unit (e.g. cents).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, field_validator


class PricingRule(BaseModel):
    """Unit price plus optional "N for a bundled price" volume discount.

    Field names on the wire follow the pricing file format (``UnitPrice``,
    ``DiscountQty``, ``DiscountPrice``); Python code may use either form.
    Positivity is not enforced here so that a malformed catalogue entry can
    still be represented and reported when a total is computed.
    """

    unit_price: StrictInt = Field(alias="UnitPrice")
    discount_qty: StrictInt = Field(default=0, alias="DiscountQty")  # 0 = no discount
    discount_price: StrictInt = Field(default=0, alias="DiscountPrice")

    @field_validator("unit_price", "discount_qty", "discount_price", mode="before")
    @classmethod
    def coerce_whole_floats(cls, v):
        # YAML/JSON writers sometimes emit 50.0 for 50
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    @property
    def has_discount(self) -> bool:
        return self.discount_qty > 0

    @property
    def is_valid(self) -> bool:
        """True when unit price is positive, discount_qty is not negative, and any
        discount has a positive bundle price."""
        if self.unit_price <= 0 or self.discount_qty < 0:
            return False
        if self.discount_qty > 0 and self.discount_price <= 0:
            return False
        return True

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "UnitPrice": 50,
                "DiscountQty": 3,
                "DiscountPrice": 130,
            }
        }
