"""
Queue Service - read-side aggregation for polling clients

Nothing here writes; every call is a plain query over committed rows, so
identical calls close in time return identical results.
"""
from typing import Callable, Optional

from sqlalchemy.orm import Session

from flower_orders.clock import utcnow
from flower_orders.config import settings
from flower_orders.lifecycle import OrderStatus
from flower_orders.repositories.custom_request_repository import CustomRequestRepository
from flower_orders.repositories.order_repository import OrderRepository
from flower_orders.schemas.custom_request import CustomRequestResponse
from flower_orders.schemas.order import OrderResponse
from flower_orders.schemas.queue import LedgerKind, PendingCounts, QueueResponse, UserHistoryResponse
from flower_orders.services.exceptions import ValidationError


class QueueService:
    """Sync/Query facade over both ledgers"""

    def __init__(self, db: Session, clock: Callable = utcnow):
        self.clock = clock
        self.ledgers = {
            LedgerKind.ORDERS: (OrderRepository(db), OrderResponse),
            LedgerKind.CUSTOM_REQUESTS: (CustomRequestRepository(db), CustomRequestResponse),
        }

    def for_user(self, user_id: str) -> UserHistoryResponse:
        """All of a user's orders and custom requests, any status, creation order"""
        orders, order_schema = self.ledgers[LedgerKind.ORDERS]
        requests, request_schema = self.ledgers[LedgerKind.CUSTOM_REQUESTS]
        now = self.clock()
        return UserHistoryResponse(
            orders=[order_schema.from_record(o, now) for o in orders.get_by_user(user_id)],
            custom_requests=[request_schema.from_record(r, now) for r in requests.get_by_user(user_id)]
        )

    def pending_queue(self, kind: LedgerKind) -> QueueResponse:
        """PENDING records awaiting an accept/decline, oldest first"""
        repository, _ = self._ledger(kind)
        return self._queue(kind, repository.get_by_status(OrderStatus.PENDING))

    def active_queue(self, kind: LedgerKind) -> QueueResponse:
        """CONFIRMED records, earliest deadline first, ties by creation order"""
        repository, _ = self._ledger(kind)
        return self._queue(kind, repository.get_active())

    def history_queue(self, kind: LedgerKind, limit: Optional[int] = None) -> QueueResponse:
        """COMPLETED/CANCELLED records, most recently closed first"""
        if limit is None:
            limit = settings.HISTORY_DEFAULT_LIMIT
        if limit < 1:
            raise ValidationError(f"limit must be positive, got {limit}")
        repository, _ = self._ledger(kind)
        return self._queue(kind, repository.get_history(limit))

    def pending_counts(self) -> PendingCounts:
        orders, _ = self.ledgers[LedgerKind.ORDERS]
        requests, _ = self.ledgers[LedgerKind.CUSTOM_REQUESTS]
        return PendingCounts(
            orders=orders.count_by_status(OrderStatus.PENDING),
            custom_requests=requests.count_by_status(OrderStatus.PENDING)
        )

    def _ledger(self, kind):
        try:
            return self.ledgers[LedgerKind(kind)]
        except ValueError:
            raise ValidationError(f"Unknown ledger kind: {kind!r}")

    def _queue(self, kind, records) -> QueueResponse:
        _, schema = self._ledger(kind)
        now = self.clock()
        items = [schema.from_record(r, now) for r in records]
        return QueueResponse(kind=LedgerKind(kind), items=items, total=len(items))
