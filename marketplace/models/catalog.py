from django.db import models

from core.models import BaseModel


class Product(BaseModel):
    name = models.CharField(max_length=255, verbose_name="Nombre del Producto")
    description = models.TextField(blank=True, verbose_name="Descripción")
    is_active = models.BooleanField(
        default=True,
        verbose_name="Activo",
        help_text="Indica si el producto está visible y disponible para la compra."
    )

    class Meta:
        verbose_name = "Producto"
        verbose_name_plural = "Productos"
        ordering = ['name']
        indexes = [
            models.Index(fields=['is_active'], name='mkt_product_active_idx'),
        ]

    def __str__(self):
        return self.name


class ProductVariant(BaseModel):
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name="Producto"
    )
    name = models.CharField(
        max_length=120,
        verbose_name="Nombre de la Variante",
        help_text="Identifica la presentación, por ejemplo 50ml."
    )
    sku = models.CharField(
        max_length=60,
        unique=True,
        verbose_name="SKU",
        help_text="Identificador único para integraciones y carrito."
    )
    price = models.DecimalField(max_digits=10, decimal_places=2, verbose_name="Precio Regular")
    stock = models.PositiveIntegerField(default=0, verbose_name="Cantidad en Stock")
    has_unlimited_stock = models.BooleanField(
        default=False,
        verbose_name="Stock ilimitado",
        help_text="Las variantes con stock ilimitado no descuentan inventario ni generan alertas."
    )

    class Meta:
        verbose_name = "Variante de Producto"
        verbose_name_plural = "Variantes de Producto"
        ordering = ['product__name', 'name']
        indexes = [
            models.Index(fields=['sku'], name='mkt_variant_sku_idx'),
            models.Index(fields=['product', 'stock'], name='mkt_variant_product_stock_idx'),
        ]

    def __str__(self):
        return f"{self.product.name} - {self.name}"

    @property
    def is_out_of_stock(self):
        return not self.has_unlimited_stock and self.stock <= 0
