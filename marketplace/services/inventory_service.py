"""
Servicio de gestión de inventario para Marketplace.

Decide si un cambio de stock cruza el umbral de stock bajo y, si es así,
delega el aviso al dispatcher de notificaciones.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from functools import partial
from typing import Any, Optional

from django.db import transaction

from core.exceptions import BusinessLogicError
from core.services import get_stock_alert_settings
from ..models import InventoryMovement, ProductVariant
from .notification_service import LowStockNotificationDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrossingEvent:
    """Cruce de umbral detectado para una variante. No se persiste."""
    variant_id: Any
    previous_stock: int
    new_stock: int
    threshold: int

    @property
    def is_out_of_stock(self) -> bool:
        return self.new_stock <= 0


def _coerce_int(value) -> Optional[int]:
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # 5.9 no es 5: un valor con decimales se trata como inválido, no se trunca.
    if isinstance(value, (float, Decimal)) and number != value:
        return None
    return number


def normalize_threshold(threshold) -> int:
    """Umbrales ausentes, no numéricos o negativos equivalen a 0 (solo avisar al agotarse)."""
    value = _coerce_int(threshold)
    if value is None or value < 0:
        return 0
    return value


class StockEvaluator:
    """
    Lógica pura de decisión: sin I/O, determinista y total sobre su entrada.
    """

    @staticmethod
    def evaluate(variant, previous_stock, new_stock, threshold) -> Optional[CrossingEvent]:
        if getattr(variant, "has_unlimited_stock", False):
            return None

        previous = _coerce_int(previous_stock)
        current = _coerce_int(new_stock)
        if previous is None or current is None:
            logger.warning(
                "Valores de stock inválidos para variante %s: previous=%r, new=%r",
                getattr(variant, "id", None), previous_stock, new_stock,
            )
            return None

        if current >= previous:
            return None

        limit = normalize_threshold(threshold)
        # Si ya estaba en zona baja, el aviso ya se emitió en el cruce anterior.
        if previous > limit and current <= limit:
            return CrossingEvent(
                variant_id=variant.id,
                previous_stock=previous,
                new_stock=current,
                threshold=limit,
            )
        return None


class InventoryService:
    @staticmethod
    def check_low_stock(variant, previous_stock, new_stock, config=None, queue=None):
        """
        Evalúa el cambio de stock y, si hubo cruce, programa la notificación
        para cuando la transacción en curso haga commit.

        Si la transacción se revierte el cruce nunca existió y no se encola nada;
        fuera de un bloque atómico el envío es inmediato. Nunca lanza por
        problemas del pipeline de notificaciones: la operación que disparó la
        evaluación (guardado manual, pago) siempre se completa.
        Retorna el CrossingEvent detectado o None.
        """
        if config is None:
            try:
                config = get_stock_alert_settings()
            except Exception:
                logger.exception(
                    "No se pudo cargar la configuración de alertas de stock (variante %s)", variant.id
                )
                return None

        event = StockEvaluator.evaluate(variant, previous_stock, new_stock, config.threshold)
        if event is None:
            return None

        logger.info(
            "Cruce de umbral de stock: variant_id=%s, %s -> %s (umbral=%s, agotado=%s)",
            event.variant_id, event.previous_stock, event.new_stock, event.threshold, event.is_out_of_stock,
        )
        dispatcher = LowStockNotificationDispatcher(config=config, queue=queue)
        transaction.on_commit(partial(dispatcher.dispatch, event))
        return event

    @classmethod
    @transaction.atomic
    def adjust_stock(cls, variant, new_stock, changed_by=None, reason=""):
        """
        Edición manual del stock de una variante.

        Relee la fila bloqueada para conocer la cantidad almacenada antes del
        cambio; dos ediciones concurrentes sobre la misma variante se serializan.
        """
        if new_stock is None or new_stock < 0:
            raise BusinessLogicError(
                detail="El stock no puede ser negativo.",
                internal_code="MKT-STOCK-NEGATIVE",
            )

        variant = ProductVariant.objects.select_for_update().get(pk=variant.pk)
        previous_stock = variant.stock
        if previous_stock == new_stock:
            return variant

        variant.stock = new_stock
        variant.save(update_fields=['stock', 'updated_at'])
        InventoryMovement.objects.create(
            variant=variant,
            quantity=new_stock - previous_stock,
            movement_type=InventoryMovement.MovementType.ADJUSTMENT,
            description=(reason or "Ajuste manual de stock")[:255],
            created_by=changed_by,
        )
        logger.info(
            "Ajuste de stock: variant_id=%s, %s -> %s, user=%s",
            variant.id, previous_stock, new_stock, changed_by.pk if changed_by else None,
        )

        cls.check_low_stock(variant, previous_stock, new_stock)
        return variant
