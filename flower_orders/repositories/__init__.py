"""
Repositories package
"""
from flower_orders.repositories.order_repository import OrderRepository
from flower_orders.repositories.custom_request_repository import CustomRequestRepository
from flower_orders.repositories.bill_counter_repository import BillCounterRepository
from flower_orders.repositories.settings_repository import SettingsRepository

__all__ = [
    "OrderRepository",
    "CustomRequestRepository",
    "BillCounterRepository",
    "SettingsRepository"
]
