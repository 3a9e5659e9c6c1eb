# fruit_app/models/fruits.py

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Fruit(BaseModel):
    """
    A fruit as accepted by POST /api/fruits and returned by both routes.

    ``id`` is optional on input; the repository assigns one on first save.
    """

    id: Optional[UUID] = None
    name: str = Field(..., min_length=1, max_length=100)
    color: Optional[str] = Field(default=None, max_length=50)
    price: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=10, decimal_places=2
    )

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Optional[Decimal]) -> Optional[float]:
        return float(price) if price is not None else None
