"""
Pydantic schemas for admin settings
"""
from pydantic import Field

from flower_orders.schemas.common import CamelModel
from flower_orders.schemas.custom_request import PHONE_PATTERN


class ContactResponse(CamelModel):
    phone: str


class ContactUpdate(CamelModel):
    """Schema for changing the shop contact number"""
    phone: str = Field(..., pattern=PHONE_PATTERN, description="Exactly 10 digits")
