"""
Servicio para la confirmación de pago de órdenes.
"""
import logging

from django.db import transaction
from django.utils import timezone

from core.exceptions import BusinessLogicError
from ..models import InventoryMovement, Order, ProductVariant
from .inventory_service import InventoryService

logger = logging.getLogger(__name__)


class OrderService:

    @classmethod
    @transaction.atomic
    def confirm_payment(cls, order):
        """
        Confirma el pago de una orden y descuenta el inventario de cada ítem.

        Con todos los ítems descontados se evalúa el umbral de stock bajo de
        cada variante con las cantidades antes y después de la venta.
        """
        # Reforzar atomicidad y lock sobre la orden
        order = Order.objects.select_for_update().get(pk=order.pk)

        if order.status == Order.OrderStatus.PAID:
            raise BusinessLogicError(detail="La orden ya ha sido pagada.")

        if order.status == Order.OrderStatus.CANCELLED:
            raise BusinessLogicError(detail="La orden está cancelada y no se puede pagar.")

        stock_changes = cls._capture_stock(order)
        order.status = Order.OrderStatus.PAID
        order.paid_at = timezone.now()
        order.save(update_fields=['status', 'paid_at', 'updated_at'])

        logger.info("Pago confirmado: order_id=%s, total=%s", order.id, order.total_amount)

        # Solo se evalúa cuando todos los ítems se descontaron; un fallo previo revierte todo.
        for variant, previous_stock, new_stock in stock_changes:
            InventoryService.check_low_stock(variant, previous_stock, new_stock)
        return order

    @classmethod
    def _capture_stock(cls, order):
        changes = []
        for item in order.items.all():
            variant = ProductVariant.objects.select_for_update().get(pk=item.variant_id)
            if variant.has_unlimited_stock:
                continue
            if variant.stock < item.quantity:
                raise BusinessLogicError(
                    detail=f"Stock insuficiente para confirmar el pago del ítem {variant}.",
                    internal_code="MKT-STOCK",
                )
            previous_stock = variant.stock
            variant.stock -= item.quantity
            variant.save(update_fields=['stock', 'updated_at'])
            InventoryMovement.objects.create(
                variant=variant,
                quantity=-item.quantity,
                movement_type=InventoryMovement.MovementType.SALE,
                reference_order=order,
                description="Venta confirmada",
                created_by=None,
            )
            changes.append((variant, previous_stock, variant.stock))
        return changes
