"""
Custom Request Service - Business Logic Layer
"""
import logging
from typing import Callable, Dict

from sqlalchemy.orm import Session

from flower_orders.clock import utcnow
from flower_orders.config import settings
from flower_orders.lifecycle import OrderStatus
from flower_orders.publishers.event_publisher import EventPublisher
from flower_orders.repositories.custom_request_repository import CustomRequestRepository
from flower_orders.schemas.custom_request import CustomRequestCreate, CustomRequestResponse
from flower_orders.services.deadline import compute_deadline
from flower_orders.services.exceptions import ValidationError
from flower_orders.services.ledger import LedgerService

logger = logging.getLogger(__name__)


class CustomRequestService(LedgerService):
    """Custom-Request Ledger"""

    entity_name = "CustomRequest"
    repository_class = CustomRequestRepository
    create_schema = CustomRequestCreate
    response_schema = CustomRequestResponse

    def __init__(
        self,
        db: Session,
        event_publisher: EventPublisher = None,
        clock: Callable = utcnow,
        sla_hours: float = None
    ):
        super().__init__(db, event_publisher=event_publisher, clock=clock)
        self.sla_hours = settings.CUSTOM_REQUEST_SLA_HOURS if sla_hours is None else sla_hours

    def create(self, payload, user_id: str) -> CustomRequestResponse:
        """
        Place a custom request

        Raises:
            ValidationError: If images are missing, the phone is not
                10 digits, or any other field is malformed
        """
        if not user_id:
            raise ValidationError("user_id is required")
        request_data = self._parse(payload)

        now = self.clock()
        custom_request = self.repository.create({
            'user_id': user_id,
            'description': request_data.description,
            'requested_date': request_data.requested_date,
            'requested_time': request_data.requested_time,
            'contact_name': request_data.contact_name,
            'contact_phone': request_data.contact_phone,
            'images': list(request_data.images),
            'status': OrderStatus.PENDING.value,
            'created_at': now,
            'updated_at': now,
        })
        logger.info("Custom request %s placed by %s", custom_request.id, user_id)

        response = self._to_response(custom_request)
        self._notify(
            self.event_publisher.publish_custom_request_created,
            lambda: response.model_dump(mode="json")
        )
        return response

    def _confirmation_values(self, record, now) -> Dict:
        return {"deadline_at": compute_deadline(now, self.sla_hours)}

    def _publish_status_changed(self, data: Dict) -> bool:
        return self.event_publisher.publish_custom_request_status_changed(data)
