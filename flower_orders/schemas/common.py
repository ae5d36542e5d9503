"""
Shared schema pieces
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from flower_orders.lifecycle import OrderStatus


class CamelModel(BaseModel):
    """Speaks camelCase on the wire, accepts snake_case too"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatusUpdate(CamelModel):
    """Schema for an admin status change"""
    status: OrderStatus = Field(..., description="Requested next status")
