"""
Polling endpoints for the admin dashboard and customer history
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from flower_orders.api.deps import Caller, get_caller, get_queue_service
from flower_orders.schemas.queue import LedgerKind, PendingCounts, QueueResponse, UserHistoryResponse
from flower_orders.services.access import require_admin, require_owner_or_admin
from flower_orders.services.queue_service import QueueService

router = APIRouter(tags=["queues"])


@router.get("/users/{user_id}/history", response_model=UserHistoryResponse, summary="Customer history")
def get_user_history(
    user_id: str,
    caller: Caller = Depends(get_caller),
    service: QueueService = Depends(get_queue_service)
):
    """
    All orders and custom requests placed by a user, in creation order
    """
    require_owner_or_admin(caller.user_id, caller.role, user_id)
    return service.for_user(user_id)


@router.get("/queues/pending-counts", response_model=PendingCounts, summary="Pending badge counts")
def get_pending_counts(
    caller: Caller = Depends(get_caller),
    service: QueueService = Depends(get_queue_service)
):
    require_admin(caller.role, "view queues")
    return service.pending_counts()


@router.get("/queues/{kind}/pending", response_model=QueueResponse, summary="Pending queue")
def get_pending_queue(
    kind: LedgerKind,
    caller: Caller = Depends(get_caller),
    service: QueueService = Depends(get_queue_service)
):
    require_admin(caller.role, "view queues")
    return service.pending_queue(kind)


@router.get("/queues/{kind}/active", response_model=QueueResponse, summary="Active queue")
def get_active_queue(
    kind: LedgerKind,
    caller: Caller = Depends(get_caller),
    service: QueueService = Depends(get_queue_service)
):
    """
    Confirmed work, most urgent deadline first
    """
    require_admin(caller.role, "view queues")
    return service.active_queue(kind)


@router.get("/queues/{kind}/history", response_model=QueueResponse, summary="History queue")
def get_history_queue(
    kind: LedgerKind,
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Maximum number of records to return"),
    caller: Caller = Depends(get_caller),
    service: QueueService = Depends(get_queue_service)
):
    """
    Completed and cancelled records, most recently closed first
    """
    require_admin(caller.role, "view queues")
    return service.history_queue(kind, limit)
