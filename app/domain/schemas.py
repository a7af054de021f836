# app/domain/schemas.py
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from app.utils.settings import MAX_PRICE


class ProductIn(BaseModel):
    """Schema dla tworzenia i aktualizacji produktu."""

    name: str = Field(..., min_length=1, description="Nazwa produktu")
    price: Decimal = Field(
        ..., ge=0, le=MAX_PRICE, allow_inf_nan=False, description="Cena (0 <= cena <= 99999999.99)"
    )


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str
    price: Decimal

    model_config = ConfigDict(from_attributes=True)

    #w JSON cena jako liczba, nie string; pelne kwoty bez ".0" (60, nie 60.0)
    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> int | float:
        if price == price.to_integral_value():
            return int(price)
        return float(price)


class ErrorOut(BaseModel):
    """Schema dla bledu (response)."""

    error: str


class ResultOut(BaseModel):
    result: str
