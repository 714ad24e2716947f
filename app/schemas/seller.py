from typing import Literal, Optional
from pydantic import BaseModel, Field, condecimal

Currency = Literal["ZMW", "USD", "GBP", "EUR"]


class ProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    price: condecimal(gt=0, max_digits=12, decimal_places=2)
    currency: Currency = "ZMW"
    sku: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = None
    slug: Optional[str] = Field(default=None, max_length=220)
    is_active: bool = True


class AdminProductRequest(ProductRequest):
    seller_id: int


class ProductUpdateRequest(BaseModel):
    # Only fields sent by the client are applied
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=220)
    sku: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = None
    price: Optional[condecimal(gt=0, max_digits=12, decimal_places=2)] = None
    currency: Optional[Currency] = None
    is_active: Optional[bool] = None


class OrderStatusRequest(BaseModel):
    status: str
