"""
RabbitMQ Event Publisher
"""
import json
import logging
import uuid
from typing import Dict

import pika

from flower_orders.clock import utcnow
from flower_orders.config import settings

logger = logging.getLogger(__name__)

ORDER_CREATED = ("OrderCreated", "order.created")
ORDER_STATUS_CHANGED = ("OrderStatusChanged", "order.status.changed")
CUSTOM_REQUEST_CREATED = ("CustomRequestCreated", "custom_request.created")
CUSTOM_REQUEST_STATUS_CHANGED = ("CustomRequestStatusChanged", "custom_request.status.changed")


class EventPublisher:
    """Publisher for sending lifecycle events to RabbitMQ"""

    def __init__(self, enabled: bool = None):
        self.rabbitmq_url = settings.RABBITMQ_URL
        self.exchange = settings.RABBITMQ_EXCHANGE
        self.enabled = settings.EVENTS_ENABLED if enabled is None else enabled

    def publish_order_created(self, data: Dict) -> bool:
        return self._publish(*ORDER_CREATED, data)

    def publish_order_status_changed(self, data: Dict) -> bool:
        return self._publish(*ORDER_STATUS_CHANGED, data)

    def publish_custom_request_created(self, data: Dict) -> bool:
        return self._publish(*CUSTOM_REQUEST_CREATED, data)

    def publish_custom_request_status_changed(self, data: Dict) -> bool:
        return self._publish(*CUSTOM_REQUEST_STATUS_CHANGED, data)

    def _publish(self, event_type: str, routing_key: str, data: Dict) -> bool:
        """
        Publish one event to the topic exchange

        Args:
            event_type: Event name placed in the envelope
            routing_key: Topic routing key
            data: JSON-serialisable payload

        Returns:
            True if published successfully, False otherwise
        """
        if not self.enabled:
            logger.debug("Events disabled, dropping %s", event_type)
            return False

        event = {
            "event_type": event_type,
            "event_id": str(uuid.uuid4()),
            "event_version": "1.0",
            "timestamp": utcnow().isoformat(),
            "source": settings.SERVICE_NAME,
            "data": data
        }

        try:
            connection = pika.BlockingConnection(
                pika.URLParameters(self.rabbitmq_url)
            )
            try:
                channel = connection.channel()
                channel.exchange_declare(
                    exchange=self.exchange,
                    exchange_type='topic',
                    durable=True
                )

                # Enable publisher confirms
                channel.confirm_delivery()

                channel.basic_publish(
                    exchange=self.exchange,
                    routing_key=routing_key,
                    body=json.dumps(event, default=str),
                    properties=pika.BasicProperties(
                        delivery_mode=2,  # Persistent message
                        content_type='application/json',
                        correlation_id=event["event_id"]
                    )
                )
            finally:
                connection.close()

        except pika.exceptions.AMQPError as e:
            logger.warning("Failed to publish %s: %s", event_type, e)
            return False

        logger.info("Event published: %s (ID: %s)", event_type, event["event_id"])
        return True
