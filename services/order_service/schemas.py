from datetime import datetime
from pydantic import BaseModel, Field


class OrderCreate(BaseModel):
    customer_id: int
    # One entry per unit; repeat an id to order it more than once
    product_ids: list[int] = Field(default_factory=list)


class OrderResponse(BaseModel):
    id: int
    customer_id: int
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str
