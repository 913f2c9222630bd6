from django.conf import settings
from django.db import models

from core.models import BaseModel

from .catalog import ProductVariant


class Order(BaseModel):
    class OrderStatus(models.TextChoices):
        PENDING_PAYMENT = 'PENDING_PAYMENT', 'Pendiente de Pago'
        PAID = 'PAID', 'Pagada'
        CANCELLED = 'CANCELLED', 'Cancelada'

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        null=True, blank=True,
        related_name='orders',
        verbose_name="Usuario"
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING_PAYMENT,
        verbose_name="Estado de la Orden"
    )
    total_amount = models.DecimalField(
        max_digits=10, decimal_places=2,
        default=0,
        verbose_name="Monto Total"
    )
    paid_at = models.DateTimeField(null=True, blank=True, verbose_name="Fecha de Pago")

    class Meta:
        verbose_name = "Orden"
        verbose_name_plural = "Órdenes"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='mkt_order_status_idx'),
        ]

    def __str__(self):
        return f"Orden {self.id}"


class OrderItem(BaseModel):
    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name="Orden"
    )
    variant = models.ForeignKey(
        ProductVariant,
        on_delete=models.PROTECT,
        related_name='order_items',
        verbose_name="Variante"
    )
    quantity = models.PositiveIntegerField(verbose_name="Cantidad")
    price_at_purchase = models.DecimalField(
        max_digits=10, decimal_places=2,
        verbose_name="Precio al momento de la compra"
    )

    class Meta:
        verbose_name = "Ítem de Orden"
        verbose_name_plural = "Ítems de Orden"

    def __str__(self):
        return f"{self.quantity} x {self.variant}"
