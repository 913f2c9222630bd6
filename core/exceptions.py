"""
Excepciones de dominio y manejador de errores de la API.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
    status.HTTP_401_UNAUTHORIZED: "NOT_AUTHENTICATED",
    status.HTTP_403_FORBIDDEN: "NOT_AUTHORIZED",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_409_CONFLICT: "CONFLICT",
    status.HTTP_422_UNPROCESSABLE_ENTITY: "BUSINESS_RULE_VIOLATION",
    status.HTTP_429_TOO_MANY_REQUESTS: "RATE_LIMIT_EXCEEDED",
}


class BusinessLogicError(APIException):
    """
    Operación rechazada por una regla de negocio (stock negativo,
    stock insuficiente, orden ya pagada...). Se responde con 422.
    """
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = "Regla de negocio no satisfecha."
    default_code = "BUSINESS_LOGIC_ERROR"

    def __init__(self, detail=None, *, internal_code=None, status_code=None, extra=None):
        payload = {"detail": detail or self.default_detail}
        if internal_code:
            payload["code"] = internal_code
        if extra:
            payload["meta"] = extra
        if status_code:
            self.status_code = status_code
        super().__init__(payload, self.default_code)


class JobSubmissionError(Exception):
    """El backend de colas rechazó o no pudo recibir un job."""

    def __init__(self, job_type, message=None):
        self.job_type = job_type
        super().__init__(message or f"No se pudo encolar el job '{job_type}'.")


def drf_exception_handler(exc, context):
    """
    Normaliza errores de la API a {status_code, error, detail, code?, errors?}.

    Las excepciones que DRF no reconoce se devuelven como None para que
    Django genere el 500 (y Sentry las reciba).
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    body = {
        "status_code": response.status_code,
        "error": ERROR_CODES.get(response.status_code, "SERVER_ERROR"),
        "detail": "Error",
    }
    if isinstance(data, dict):
        body["detail"] = data.get("detail") or body["detail"]
        if "code" in data:
            body["code"] = data["code"]
        errors = {key: value for key, value in data.items() if key not in ("detail", "code")}
        if errors:
            body["errors"] = errors
    elif isinstance(data, list):
        body["errors"] = data

    if response.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Error de API %s en %s", response.status_code, context.get("view"))

    response.data = body
    return response
