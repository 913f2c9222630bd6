"""
Modelo de configuración global del sistema (Singleton).
"""
import logging
import re
import uuid

from django.core.cache import cache
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import models, transaction

from ..caching import GLOBAL_SETTINGS_CACHE_KEY
from .base import BaseModel

logger = logging.getLogger(__name__)


GLOBAL_SETTINGS_SINGLETON_UUID = uuid.UUID("00000000-0000-0000-0000-000000000001")

_RECIPIENT_SEPARATORS = re.compile(r"[\s,;]+")


def parse_recipients(raw):
    """
    Convierte el texto libre del admin en una lista ordenada de correos.
    Acepta comas, punto y coma, espacios o saltos de línea; descarta duplicados.
    """
    recipients = []
    for chunk in _RECIPIENT_SEPARATORS.split(raw or ""):
        email = chunk.strip()
        if email and email not in recipients:
            recipients.append(email)
    return recipients


class GlobalSettings(BaseModel):
    """
    Modelo Singleton para almacenar las configuraciones globales del sistema.
    Se guarda con un UUID fijo y se cachea para lecturas rápidas.
    """
    low_stock_threshold = models.PositiveIntegerField(
        default=5,
        verbose_name="Umbral de Stock Bajo",
        help_text="Se notifica cuando el stock de una variante pasa de estar por encima a igual o por debajo de este valor.",
    )
    low_stock_recipients = models.TextField(
        blank=True,
        default="",
        verbose_name="Destinatarios de alertas de stock",
        help_text="Correos separados por coma o salto de línea.",
    )
    low_stock_send_email = models.BooleanField(
        default=False,
        verbose_name="Enviar correo de stock bajo",
        help_text="Si está desactivado, los cruces de umbral no generan notificaciones.",
    )

    def clean(self):
        messages = []
        valid, invalid = [], []
        for email in parse_recipients(self.low_stock_recipients):
            try:
                validate_email(email)
            except ValidationError:
                invalid.append(email)
            else:
                valid.append(email)
        if invalid:
            messages.append(f"Correos inválidos: {', '.join(invalid)}")
        if self.low_stock_send_email and not valid:
            messages.append("Define al menos un destinatario para activar el envío de correos.")

        if messages:
            raise ValidationError({"low_stock_recipients": messages})

    @property
    def recipient_list(self):
        return parse_recipients(self.low_stock_recipients)

    def save(self, *args, **kwargs):
        # Forzamos UUID singleton
        self.pk = self.id = GLOBAL_SETTINGS_SINGLETON_UUID

        old = type(self).objects.filter(pk=self.pk).first()
        if old is not None:
            self._state.adding = False
            self.created_at = old.created_at
            changes = []
            for field in ["low_stock_threshold", "low_stock_send_email"]:
                old_val = getattr(old, field)
                new_val = getattr(self, field)
                if old_val != new_val:
                    changes.append(f"{field}: {old_val} -> {new_val}")
            if old.recipient_list != self.recipient_list:
                changes.append(
                    f"low_stock_recipients: {len(old.recipient_list)} -> {len(self.recipient_list)} destinatarios"
                )
            if changes:
                logger.warning("GlobalSettings modificado: %s", ", ".join(changes))

        self.full_clean()
        super().save(*args, **kwargs)
        # Invalida/actualiza caché después de guardar
        cache.set(GLOBAL_SETTINGS_CACHE_KEY, self, timeout=None)

    @classmethod
    def load(cls) -> "GlobalSettings":
        """
        Obtiene la instancia desde caché o DB, creándola si no existe.
        """
        cached = cache.get(GLOBAL_SETTINGS_CACHE_KEY)
        if cached is not None:
            return cached

        with transaction.atomic():
            obj, _ = cls.objects.select_for_update().get_or_create(id=GLOBAL_SETTINGS_SINGLETON_UUID)

        cache.set(GLOBAL_SETTINGS_CACHE_KEY, obj, timeout=None)
        return obj

    def __str__(self) -> str:
        return "Configuraciones Globales del Sistema"

    class Meta:
        verbose_name = "Configuración Global"
        verbose_name_plural = "Configuraciones Globales"
