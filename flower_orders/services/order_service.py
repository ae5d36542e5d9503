"""
Order Service - Business Logic Layer
"""
import logging
from typing import Callable, Dict

from sqlalchemy.orm import Session

from flower_orders.clock import utcnow
from flower_orders.lifecycle import OrderStatus
from flower_orders.publishers.event_publisher import EventPublisher
from flower_orders.repositories.order_repository import OrderRepository
from flower_orders.schemas.order import OrderCreate, OrderResponse
from flower_orders.services.bill_sequencer import BillSequencer
from flower_orders.services.catalog_client import CatalogClient, ProductNotFoundError
from flower_orders.services.deadline import compute_deadline
from flower_orders.services.exceptions import NotFoundError, ValidationError
from flower_orders.services.ledger import LedgerService

logger = logging.getLogger(__name__)


class OrderService(LedgerService):
    """Order Ledger"""

    entity_name = "Order"
    repository_class = OrderRepository
    create_schema = OrderCreate
    response_schema = OrderResponse

    def __init__(
        self,
        db: Session,
        catalog: CatalogClient = None,
        event_publisher: EventPublisher = None,
        clock: Callable = utcnow,
        bill_sequencer: BillSequencer = None
    ):
        super().__init__(db, event_publisher=event_publisher, clock=clock)
        self.catalog = catalog or CatalogClient()
        self.bill_sequencer = bill_sequencer or BillSequencer(db)

    async def create(self, payload, user_id: str) -> OrderResponse:
        """
        Place a stock order

        Steps:
        1. Validate input
        2. Read the product from the catalog service
        3. Snapshot title, image, unit price and prep duration
        4. Save order as PENDING
        5. Publish OrderCreated event

        Raises:
            ValidationError: If the payload is malformed
            NotFoundError: If the product does not exist
            CatalogUnavailableError: If the catalog cannot be reached
        """
        if not user_id:
            raise ValidationError("user_id is required")
        order_data = self._parse(payload)

        try:
            product = await self.catalog.get_product(order_data.product_id)
        except ProductNotFoundError as e:
            raise NotFoundError(str(e)) from e

        now = self.clock()
        order = self.repository.create({
            'user_id': user_id,
            'product_id': order_data.product_id,
            'product_title': product.title,
            'product_image': product.images[0] if product.images else None,
            'unit_price': product.price,
            'duration_hours': product.duration_hours,
            'quantity': order_data.quantity,
            'total_price': round(product.price * order_data.quantity, 2),
            'description': order_data.description,
            'status': OrderStatus.PENDING.value,
            'created_at': now,
            'updated_at': now,
        })
        logger.info("Order %s placed by %s for product %s", order.id, user_id, order.product_id)

        response = self._to_response(order)
        self._notify(self.event_publisher.publish_order_created, lambda: response.model_dump(mode="json"))
        return response

    def _confirmation_values(self, record, now) -> Dict:
        return {
            "expected_delivery_at": compute_deadline(now, record.duration_hours),
            "bill_id": self.bill_sequencer.next_bill_id(now),
        }

    def _publish_status_changed(self, data: Dict) -> bool:
        return self.event_publisher.publish_order_status_changed(data)
