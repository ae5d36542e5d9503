"""
Schemas package
"""
from flower_orders.schemas.common import StatusUpdate
from flower_orders.schemas.order import (
    OrderCreate,
    OrderResponse,
    OrderListResponse
)
from flower_orders.schemas.custom_request import (
    CustomRequestCreate,
    CustomRequestResponse,
    CustomRequestListResponse
)
from flower_orders.schemas.queue import (
    LedgerKind,
    UserHistoryResponse,
    QueueResponse,
    PendingCounts
)
from flower_orders.schemas.settings import ContactResponse, ContactUpdate

__all__ = [
    "StatusUpdate",
    "OrderCreate",
    "OrderResponse",
    "OrderListResponse",
    "CustomRequestCreate",
    "CustomRequestResponse",
    "CustomRequestListResponse",
    "LedgerKind",
    "UserHistoryResponse",
    "QueueResponse",
    "PendingCounts",
    "ContactResponse",
    "ContactUpdate"
]
