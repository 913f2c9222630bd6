"""
Módulo de servicios de marketplace.
"""
from .inventory_service import CrossingEvent, InventoryService, StockEvaluator
from .notification_service import LowStockNotificationDispatcher, NotificationJob
from .order_service import OrderService

__all__ = [
    'CrossingEvent',
    'InventoryService',
    'LowStockNotificationDispatcher',
    'NotificationJob',
    'OrderService',
    'StockEvaluator',
]
