"""
Publishers package
"""
from flower_orders.publishers.event_publisher import EventPublisher

__all__ = ["EventPublisher"]
