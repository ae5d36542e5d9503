"""
Shared API dependencies
"""
from typing import Callable

from fastapi import Depends, Header
from pydantic import BaseModel
from sqlalchemy.orm import Session

from flower_orders.clock import utcnow
from flower_orders.database import get_db
from flower_orders.lifecycle import Role
from flower_orders.publishers.event_publisher import EventPublisher
from flower_orders.services.catalog_client import CatalogClient
from flower_orders.services.custom_request_service import CustomRequestService
from flower_orders.services.order_service import OrderService
from flower_orders.services.queue_service import QueueService
from flower_orders.services.settings_service import SettingsService


class Caller(BaseModel):
    """Identity attached by the gateway to every request"""
    user_id: str
    role: Role


def get_caller(
    x_user_id: str = Header(..., min_length=1, description="Validated caller id"),
    x_user_role: Role = Header(..., description="CUSTOMER or ADMIN")
) -> Caller:
    return Caller(user_id=x_user_id, role=x_user_role)


def get_clock() -> Callable:
    return utcnow


def get_catalog_client() -> CatalogClient:
    return CatalogClient()


def get_event_publisher() -> EventPublisher:
    return EventPublisher()


def get_order_service(
    db: Session = Depends(get_db),
    catalog: CatalogClient = Depends(get_catalog_client),
    publisher: EventPublisher = Depends(get_event_publisher),
    clock: Callable = Depends(get_clock)
) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db, catalog=catalog, event_publisher=publisher, clock=clock)


def get_custom_request_service(
    db: Session = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
    clock: Callable = Depends(get_clock)
) -> CustomRequestService:
    """Dependency to get CustomRequestService instance"""
    return CustomRequestService(db, event_publisher=publisher, clock=clock)


def get_queue_service(
    db: Session = Depends(get_db),
    clock: Callable = Depends(get_clock)
) -> QueueService:
    return QueueService(db, clock=clock)


def get_settings_service(
    db: Session = Depends(get_db),
    clock: Callable = Depends(get_clock)
) -> SettingsService:
    return SettingsService(db, clock=clock)
