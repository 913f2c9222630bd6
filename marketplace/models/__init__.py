from .catalog import Product, ProductVariant
from .inventory import InventoryMovement
from .orders import Order, OrderItem

__all__ = [
    "Product",
    "ProductVariant",
    "InventoryMovement",
    "Order",
    "OrderItem",
]
