"""
Pydantic schemas for order request/response validation
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from flower_orders.lifecycle import OrderStatus
from flower_orders.schemas.common import CamelModel
from flower_orders.services.deadline import time_remaining_label


class OrderCreate(CamelModel):
    """Schema for placing a stock order"""
    product_id: str = Field(..., min_length=1, max_length=64, description="Catalog product ID")
    quantity: int = Field(..., gt=0, description="Quantity to order")
    description: Optional[str] = Field(None, max_length=2000, description="Customer note")


class OrderResponse(CamelModel):
    """Schema for order response"""
    id: int
    bill_id: Optional[str] = None
    user_id: str
    product_id: str
    product_title: str
    product_image: Optional[str] = None
    unit_price: float
    duration_hours: float
    quantity: int
    total_price: float
    description: Optional[str] = None
    status: OrderStatus
    created_at: datetime
    updated_at: datetime
    expected_delivery_at: Optional[datetime] = None
    time_remaining: Optional[str] = Field(None, description="Countdown to the expected delivery")

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_record(cls, order, now: datetime) -> "OrderResponse":
        """Build the response for an ORM order, labelling the countdown as of ``now``"""
        response = cls.model_validate(order)
        if response.status == OrderStatus.CONFIRMED and response.expected_delivery_at is not None:
            response.time_remaining = time_remaining_label(response.expected_delivery_at, now)
        return response


class OrderListResponse(CamelModel):
    """Schema for list of orders response"""
    orders: list[OrderResponse]
    total: int
