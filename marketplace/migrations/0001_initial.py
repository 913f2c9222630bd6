import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255, verbose_name="Nombre del Producto")),
                ("description", models.TextField(blank=True, verbose_name="Descripción")),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text="Indica si el producto está visible y disponible para la compra.",
                        verbose_name="Activo",
                    ),
                ),
            ],
            options={
                "verbose_name": "Producto",
                "verbose_name_plural": "Productos",
                "ordering": ["name"],
                "indexes": [models.Index(fields=["is_active"], name="mkt_product_active_idx")],
            },
        ),
        migrations.CreateModel(
            name="ProductVariant",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "name",
                    models.CharField(
                        help_text="Identifica la presentación, por ejemplo 50ml.",
                        max_length=120,
                        verbose_name="Nombre de la Variante",
                    ),
                ),
                (
                    "sku",
                    models.CharField(
                        help_text="Identificador único para integraciones y carrito.",
                        max_length=60,
                        unique=True,
                        verbose_name="SKU",
                    ),
                ),
                ("price", models.DecimalField(decimal_places=2, max_digits=10, verbose_name="Precio Regular")),
                ("stock", models.PositiveIntegerField(default=0, verbose_name="Cantidad en Stock")),
                (
                    "has_unlimited_stock",
                    models.BooleanField(
                        default=False,
                        help_text="Las variantes con stock ilimitado no descuentan inventario ni generan alertas.",
                        verbose_name="Stock ilimitado",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variants",
                        to="marketplace.product",
                        verbose_name="Producto",
                    ),
                ),
            ],
            options={
                "verbose_name": "Variante de Producto",
                "verbose_name_plural": "Variantes de Producto",
                "ordering": ["product__name", "name"],
                "indexes": [
                    models.Index(fields=["sku"], name="mkt_variant_sku_idx"),
                    models.Index(fields=["product", "stock"], name="mkt_variant_product_stock_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PENDING_PAYMENT", "Pendiente de Pago"),
                            ("PAID", "Pagada"),
                            ("CANCELLED", "Cancelada"),
                        ],
                        default="PENDING_PAYMENT",
                        max_length=20,
                        verbose_name="Estado de la Orden",
                    ),
                ),
                (
                    "total_amount",
                    models.DecimalField(decimal_places=2, default=0, max_digits=10, verbose_name="Monto Total"),
                ),
                ("paid_at", models.DateTimeField(blank=True, null=True, verbose_name="Fecha de Pago")),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="orders",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Usuario",
                    ),
                ),
            ],
            options={
                "verbose_name": "Orden",
                "verbose_name_plural": "Órdenes",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["status"], name="mkt_order_status_idx")],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("quantity", models.PositiveIntegerField(verbose_name="Cantidad")),
                (
                    "price_at_purchase",
                    models.DecimalField(
                        decimal_places=2, max_digits=10, verbose_name="Precio al momento de la compra"
                    ),
                ),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="marketplace.order",
                        verbose_name="Orden",
                    ),
                ),
                (
                    "variant",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="order_items",
                        to="marketplace.productvariant",
                        verbose_name="Variante",
                    ),
                ),
            ],
            options={
                "verbose_name": "Ítem de Orden",
                "verbose_name_plural": "Ítems de Orden",
            },
        ),
        migrations.CreateModel(
            name="InventoryMovement",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("quantity", models.IntegerField()),
                (
                    "movement_type",
                    models.CharField(choices=[("SALE", "Venta"), ("ADJUSTMENT", "Ajuste")], max_length=20),
                ),
                ("description", models.CharField(blank=True, max_length=255)),
                (
                    "created_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="inventory_movements_created",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "reference_order",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="inventory_movements",
                        to="marketplace.order",
                    ),
                ),
                (
                    "variant",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inventory_movements",
                        to="marketplace.productvariant",
                    ),
                ),
            ],
            options={
                "verbose_name": "Movimiento de Inventario",
                "verbose_name_plural": "Movimientos de Inventario",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["variant", "created_at"], name="mkt_invmov_variant_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("movement_type", "SALE")),
                        fields=("reference_order", "variant"),
                        name="mkt_unique_sale_per_order_variant",
                    )
                ],
            },
        ),
    ]
