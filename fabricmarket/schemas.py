"""
Wire format of a product.

The backend serializes rows through `Product` and the storefront parses the
same JSON back into it, so both sides agree on the camelCase field names.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )

    id: int
    name: str
    fabric_type: str
    gsm: float = Field(ge=0)
    color: str
    price_per_meter: float = Field(gt=0)
    stock: int = Field(ge=0)
    image_url: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ErrorBody(BaseModel):
    error: str
