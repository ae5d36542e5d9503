"""
Health check endpoints
"""
import logging
from typing import Callable

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flower_orders.api.deps import get_catalog_client, get_clock
from flower_orders.config import settings
from flower_orders.database import get_db
from flower_orders.services.bill_sequencer import BillSequencer
from flower_orders.services.catalog_client import CatalogClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    response: Response,
    db: Session = Depends(get_db),
    catalog: CatalogClient = Depends(get_catalog_client),
    clock: Callable = Depends(get_clock)
):
    """
    Readiness of the order desk

    - **healthy**: bill counter readable and catalog reachable
    - **degraded**: catalog unreachable; placing orders fails, queues and
      status changes still work
    - **unhealthy** (503): today's bill counter cannot be read, so no order
      can be confirmed
    """
    now = clock()
    sequencer = BillSequencer(db)

    bills_issued_today = None
    try:
        bills_issued_today = sequencer.issued_on(now)
        database_status = "healthy"
    except SQLAlchemyError as e:
        logger.error("Bill counter unreadable: %s", e)
        database_status = f"unhealthy: {e}"

    catalog_ok = await catalog.ping()

    if database_status != "healthy":
        overall_status = "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif not catalog_ok:
        overall_status = "degraded"
    else:
        overall_status = "healthy"

    return {
        "service": settings.SERVICE_NAME,
        "status": overall_status,
        "database": database_status,
        "catalog_service": "healthy" if catalog_ok else "unreachable",
        "events": "enabled" if settings.EVENTS_ENABLED else "disabled",
        "store_day": sequencer.day_key(now),
        "bills_issued_today": bills_issued_today,
        "timestamp": now.isoformat()
    }


@router.get("/")
def root():
    return {"service": settings.SERVICE_NAME, "version": "1.0.0", "docs": "/docs"}
