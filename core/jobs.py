"""
Cliente de la cola durable de jobs.

El core solo describe el trabajo (tipo + payload serializable en JSON); la
ejecución, los reintentos y el backoff son responsabilidad de Celery.
"""
import logging

from django.conf import settings
from django.utils.module_loading import import_string
from kombu.exceptions import OperationalError

from .exceptions import JobSubmissionError

logger = logging.getLogger(__name__)

DEFAULT_JOB_TASKS = {
    "variant-low-stock": "marketplace.tasks.send_variant_low_stock_email",
}


class JobQueue:
    """Interfaz mínima de una cola durable."""

    def submit(self, job_type, payload):
        raise NotImplementedError


class CeleryJobQueue(JobQueue):
    """
    Publica jobs en el broker de Celery.

    Cada tipo de job se resuelve a una tarea registrada; el payload se pasa
    como kwargs para que el esquema del job sea el contrato de la tarea.
    """

    def __init__(self, job_tasks=None):
        self.job_tasks = dict(job_tasks or getattr(settings, "STOCKWATCH_JOB_TASKS", DEFAULT_JOB_TASKS))

    def resolve(self, job_type):
        task_path = self.job_tasks.get(job_type)
        if not task_path:
            raise JobSubmissionError(job_type, f"No hay tarea registrada para el job '{job_type}'.")
        try:
            return import_string(task_path)
        except ImportError as exc:
            raise JobSubmissionError(job_type, f"Tarea inválida para '{job_type}': {task_path}") from exc

    def submit(self, job_type, payload):
        task = self.resolve(job_type)
        try:
            result = task.apply_async(kwargs=dict(payload))
        except OperationalError as exc:
            raise JobSubmissionError(job_type, f"Broker no disponible: {exc}") from exc
        logger.debug("Job encolado: type=%s, task_id=%s", job_type, result.id)
        return result.id
