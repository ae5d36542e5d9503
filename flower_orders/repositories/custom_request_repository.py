"""
Custom Request Repository - Data Access Layer
"""
from flower_orders.models.custom_request import CustomRequest
from flower_orders.repositories.ledger_repository import LedgerRepository


class CustomRequestRepository(LedgerRepository):
    """Repository for CustomRequest records"""

    model = CustomRequest
    deadline_column = "deadline_at"
