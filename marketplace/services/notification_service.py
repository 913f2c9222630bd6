"""
Servicio de notificaciones para el módulo Marketplace.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from core.jobs import CeleryJobQueue

logger = logging.getLogger(__name__)

LOW_STOCK_JOB_TYPE = "variant-low-stock"


@dataclass(frozen=True)
class NotificationJob:
    """
    Descriptor serializable del job de aviso.

    Lleva solo el identificador de la variante: el worker puede ejecutarse
    después de otro cambio y debe leer el estado vigente.
    """
    variant_id: str
    recipients: List[str] = field(default_factory=list)
    job_type: str = LOW_STOCK_JOB_TYPE

    def payload(self):
        return {
            "variant_id": self.variant_id,
            "recipients": list(self.recipients),
        }


class LowStockNotificationDispatcher:
    """
    Traduce un CrossingEvent + configuración en un job de la cola durable.

    No guarda estado entre llamadas. Un fallo al encolar se reporta en logs
    y nunca se propaga al flujo que disparó la evaluación.
    """

    def __init__(self, config, queue=None):
        self.config = config
        self.queue = queue if queue is not None else CeleryJobQueue()

    def dispatch(self, event):
        if not self.config.send_email:
            logger.info("Envío de correo de stock bajo desactivado; variante %s sin notificar", event.variant_id)
            return None

        recipients = list(self.config.recipients)
        if not recipients:
            logger.info("Sin destinatarios para alertas de stock; variante %s sin notificar", event.variant_id)
            return None

        job = NotificationJob(variant_id=str(event.variant_id), recipients=recipients)
        try:
            self.queue.submit(job.job_type, job.payload())
        except Exception:
            logger.exception(
                "Error encolando notificación de stock bajo: variant_id=%s, job=%s",
                job.variant_id, job.job_type,
            )
            return None

        logger.info(
            "Notificación de stock bajo encolada: variant_id=%s, destinatarios=%d",
            job.variant_id, len(recipients),
        )
        return job
