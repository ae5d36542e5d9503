"""
Pydantic schemas for custom request validation
"""
from datetime import date, datetime, time
from typing import Annotated, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from flower_orders.lifecycle import OrderStatus
from flower_orders.schemas.common import CamelModel
from flower_orders.services.deadline import time_remaining_label

PHONE_PATTERN = r"^[0-9]{10}$"

# URLs or base64 data URLs straight from the storefront upload
ImageRef = Annotated[str, Field(min_length=1)]


class CustomRequestCreate(CamelModel):
    """Schema for placing a free-form custom request"""
    description: str = Field(..., min_length=1, max_length=4000, description="What the customer wants")
    requested_date: date = Field(..., description="Desired fulfillment date (informational)")
    requested_time: time = Field(..., description="Desired fulfillment time (informational)")
    contact_name: str = Field(..., min_length=1, max_length=255)
    contact_phone: str = Field(..., pattern=PHONE_PATTERN, description="Exactly 10 digits")
    images: list[ImageRef] = Field(..., min_length=1, description="At least one reference photo")


class CustomRequestResponse(CamelModel):
    """Schema for custom request response"""
    id: int
    user_id: str
    description: str
    requested_date: date
    requested_time: time
    contact_name: str
    contact_phone: str
    images: list[str]
    status: OrderStatus
    created_at: datetime
    updated_at: datetime
    deadline_at: Optional[datetime] = None
    time_remaining: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_record(cls, custom_request, now: datetime) -> "CustomRequestResponse":
        response = cls.model_validate(custom_request)
        if response.status == OrderStatus.CONFIRMED and response.deadline_at is not None:
            response.time_remaining = time_remaining_label(response.deadline_at, now)
        return response


class CustomRequestListResponse(CamelModel):
    """Schema for list of custom requests response"""
    custom_requests: list[CustomRequestResponse]
    total: int
