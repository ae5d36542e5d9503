"""
Ledger Service - behaviour shared by the order and custom-request ledgers

Status changes are a compare-and-set on the record's current status inside
one transaction, together with every side effect of the change (deadline,
bill number). A caller that loses a race on the same record sees zero rows
updated, rolls back, and gets InvalidTransitionError.
"""
import logging
from typing import Callable, Dict, List

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from flower_orders.clock import utcnow
from flower_orders.lifecycle import OrderStatus, Role, can_transition, is_terminal
from flower_orders.publishers.event_publisher import EventPublisher
from flower_orders.services.access import require_admin
from flower_orders.services.exceptions import (
    InvalidStateError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from flower_orders.services.settings_service import SettingsService

logger = logging.getLogger(__name__)


class LedgerService:
    """Base service for one ledger"""

    entity_name = "Record"
    repository_class = None
    create_schema = None
    response_schema = None

    def __init__(self, db: Session, event_publisher: EventPublisher = None, clock: Callable = utcnow):
        self.db = db
        self.repository = self.repository_class(db)
        self.event_publisher = event_publisher or EventPublisher()
        self.clock = clock

    def list_all(self) -> List:
        """All records, creation order"""
        return [self._to_response(r) for r in self.repository.get_all()]

    def get(self, record_id: int):
        """Single record by ID"""
        return self._to_response(self._get_or_404(record_id))

    def transition(self, record_id: int, actor_role: Role, new_status: OrderStatus):
        """
        Move a record to ``new_status``

        Raises:
            AuthorizationError: If the actor is not the admin
            ValidationError: If ``new_status`` is not a known status
            NotFoundError: If the record does not exist
            InvalidTransitionError: If ``new_status`` is not a legal successor
        """
        require_admin(actor_role, f"change {self.entity_name.lower()} status")
        try:
            new_status = OrderStatus(new_status)
        except ValueError:
            raise ValidationError(f"Unknown status: {new_status!r}")

        record = self._get_or_404(record_id)
        current = OrderStatus(record.status)
        if not can_transition(current, new_status):
            logger.info(
                "Rejected %s %s transition %s -> %s",
                self.entity_name, record_id, current.value, new_status.value
            )
            raise InvalidTransitionError(self.entity_name, record_id, current, new_status)

        now = self.clock()
        values = {"status": new_status.value, "updated_at": now}
        try:
            if new_status == OrderStatus.CONFIRMED:
                values.update(self._confirmation_values(record, now))
            applied = self.repository.compare_and_set_status(record_id, current, values)
        except Exception:
            self.db.rollback()
            raise

        if not applied:
            # Lost the race: undo side effects and report what the winner left
            self.db.rollback()
            latest = self._get_or_404(record_id)
            logger.info(
                "Concurrent update on %s %s, now %s", self.entity_name, record_id, latest.status
            )
            raise InvalidTransitionError(self.entity_name, record_id, latest.status, new_status)

        self.db.commit()
        self.db.refresh(record)
        logger.info(
            "%s %s: %s -> %s", self.entity_name, record_id, current.value, new_status.value
        )

        response = self._to_response(record)
        self._notify(self._publish_status_changed, lambda: {
            "id": record_id,
            "user_id": record.user_id,
            "old_status": current.value,
            "new_status": new_status.value,
            "updated_at": now.isoformat(),
            "record": response.model_dump(mode="json"),
            "contact_phone": SettingsService(self.db).get_contact(),
        })
        return response

    def delete(self, record_id: int, actor_role: Role) -> None:
        """
        Hard-delete a completed or cancelled record

        Raises:
            AuthorizationError: If the actor is not the admin
            NotFoundError: If the record does not exist
            InvalidStateError: If the record is still in progress
        """
        require_admin(actor_role, f"delete a {self.entity_name.lower()}")
        record = self._get_or_404(record_id)
        if not is_terminal(record.status):
            raise InvalidStateError(
                f"{self.entity_name} {record_id} is {record.status}; "
                f"only completed or cancelled records can be deleted"
            )
        self.repository.delete(record)
        logger.info("%s %s deleted", self.entity_name, record_id)

    def _get_or_404(self, record_id: int):
        record = self.repository.get_by_id(record_id)
        if record is None:
            raise NotFoundError(f"{self.entity_name} with id={record_id} not found")
        return record

    def _parse(self, payload):
        """Coerce a dict or create-schema into a validated create-schema"""
        if isinstance(payload, self.create_schema):
            return payload
        try:
            return self.create_schema.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(_describe(e)) from e

    def _to_response(self, record):
        return self.response_schema.from_record(record, self.clock())

    def _notify(self, publish: Callable, build_event: Callable[[], Dict]) -> None:
        # Runs after commit; neither building nor publishing the event may fail the operation
        try:
            publish(build_event())
        except Exception as e:
            logger.warning("Failed to publish %s event: %s", self.entity_name, e)

    def _confirmation_values(self, record, now) -> Dict:
        raise NotImplementedError

    def _publish_status_changed(self, data: Dict) -> bool:
        raise NotImplementedError


def _describe(error: PydanticValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "payload"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
