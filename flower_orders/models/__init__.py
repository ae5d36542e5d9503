"""
Models package
"""
from flower_orders.models.order import Order
from flower_orders.models.custom_request import CustomRequest
from flower_orders.models.bill_counter import BillCounter
from flower_orders.models.app_setting import AppSetting

__all__ = ["Order", "CustomRequest", "BillCounter", "AppSetting"]
