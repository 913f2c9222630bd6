from django.conf import settings
from django.db import models

from core.models import BaseModel

from .catalog import ProductVariant


class InventoryMovement(BaseModel):
    """
    Bitácora de cambios de stock. Cada venta o ajuste manual deja una fila
    con la cantidad firmada (negativa cuando sale inventario).
    """

    class MovementType(models.TextChoices):
        SALE = 'SALE', 'Venta'
        ADJUSTMENT = 'ADJUSTMENT', 'Ajuste'

    variant = models.ForeignKey(
        ProductVariant,
        on_delete=models.CASCADE,
        related_name='inventory_movements',
    )
    quantity = models.IntegerField()
    movement_type = models.CharField(max_length=20, choices=MovementType.choices)
    reference_order = models.ForeignKey(
        'Order',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='inventory_movements',
    )
    description = models.CharField(max_length=255, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='inventory_movements_created',
    )

    class Meta:
        verbose_name = "Movimiento de Inventario"
        verbose_name_plural = "Movimientos de Inventario"
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['variant', 'created_at'], name='mkt_invmov_variant_idx'),
        ]
        constraints = [
            # Una orden descuenta cada variante una sola vez
            models.UniqueConstraint(
                fields=['reference_order', 'variant'],
                condition=models.Q(movement_type='SALE'),
                name='mkt_unique_sale_per_order_variant',
            )
        ]

    def __str__(self):
        return f"{self.get_movement_type_display()} {self.quantity:+d} · {self.variant}"
