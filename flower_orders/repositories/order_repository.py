"""
Order Repository - Data Access Layer
"""
from flower_orders.models.order import Order
from flower_orders.repositories.ledger_repository import LedgerRepository


class OrderRepository(LedgerRepository):
    """Repository for Order records"""

    model = Order
    deadline_column = "expected_delivery_at"
