import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="GlobalSettings",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "low_stock_threshold",
                    models.PositiveIntegerField(
                        default=5,
                        help_text="Se notifica cuando el stock de una variante pasa de estar por encima a igual o por debajo de este valor.",
                        verbose_name="Umbral de Stock Bajo",
                    ),
                ),
                (
                    "low_stock_recipients",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Correos separados por coma o salto de línea.",
                        verbose_name="Destinatarios de alertas de stock",
                    ),
                ),
                (
                    "low_stock_send_email",
                    models.BooleanField(
                        default=False,
                        help_text="Si está desactivado, los cruces de umbral no generan notificaciones.",
                        verbose_name="Enviar correo de stock bajo",
                    ),
                ),
            ],
            options={
                "verbose_name": "Configuración Global",
                "verbose_name_plural": "Configuraciones Globales",
            },
        ),
    ]
