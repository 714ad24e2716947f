from typing import Optional
from pydantic import BaseModel, Field
from app.constants import MAX_QUANTITY_PER_ITEM


class AddCartItemRequest(BaseModel):
    product_id: int
    quantity: int = Field(default=1, ge=1, le=MAX_QUANTITY_PER_ITEM)
    variant_id: Optional[str] = None


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(ge=1, le=MAX_QUANTITY_PER_ITEM)
