"""
Pydantic schemas for the polling read side
"""
from enum import Enum
from typing import Union

from flower_orders.schemas.common import CamelModel
from flower_orders.schemas.custom_request import CustomRequestResponse
from flower_orders.schemas.order import OrderResponse


class LedgerKind(str, Enum):
    ORDERS = "orders"
    CUSTOM_REQUESTS = "custom-requests"


class UserHistoryResponse(CamelModel):
    """Everything a customer has placed, in creation order"""
    orders: list[OrderResponse]
    custom_requests: list[CustomRequestResponse]


class QueueResponse(CamelModel):
    """One admin queue for one ledger"""
    kind: LedgerKind
    items: list[Union[OrderResponse, CustomRequestResponse]]
    total: int


class PendingCounts(CamelModel):
    """Badge counts for the admin dashboard"""
    orders: int
    custom_requests: int
