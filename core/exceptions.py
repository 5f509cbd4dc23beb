import logging

from django.db import DatabaseError
from rest_framework.views import exception_handler
from rest_framework import status
from rest_framework.exceptions import APIException

logger = logging.getLogger(__name__)


class InvalidRequestError(APIException):
    """Petición inválida: datos mal formados o fuera de rango (400)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Solicitud inválida."
    default_code = "INVALID_REQUEST"

    def __init__(self, detail=None, *, internal_code=None, extra=None):
        payload = {"detail": detail or self.default_detail}
        if internal_code:
            payload["code"] = internal_code
        if extra:
            payload["meta"] = extra
        super().__init__(payload, self.default_code)


class ResourceNotFoundError(APIException):
    """El recurso solicitado no existe (404)."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Recurso no encontrado."
    default_code = "NOT_FOUND"


class ServiceUnavailableError(APIException):
    """La base de datos u otra dependencia no está disponible (503)."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "El servicio no está disponible temporalmente."
    default_code = "SERVICE_UNAVAILABLE"


def drf_exception_handler(exc, context):
    """
    Normaliza errores según la convención (400/404/405/409/5xx).
    """
    if isinstance(exc, DatabaseError):
        # La BD caída en una petición CRUD llega al cliente como 503.
        logger.error("Error de base de datos en la petición: %s", exc)
        exc = ServiceUnavailableError()

    response = exception_handler(exc, context)

    if response is None:
        # Error inesperado
        return None

    default_detail = response.data.get("detail") if isinstance(response.data, dict) else None
    code = response.status_code

    normalized = {
        "status_code": code,
        "error": _map_http_to_code(code),
        "detail": default_detail or "Error",
    }
    # Adjunta errores de validación detallados si existen
    if isinstance(response.data, dict):
        if "code" in response.data:
            normalized["code"] = response.data.get("code")
        extra = {k: v for k, v in response.data.items() if k not in {"detail", "code"}}
        if extra:
            normalized["errors"] = extra
    elif isinstance(response.data, list):
        normalized["errors"] = {"non_field_errors": response.data}

    response.data = normalized
    return response


def _map_http_to_code(code: int) -> str:
    return {
        status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
        status.HTTP_404_NOT_FOUND: "NOT_FOUND",
        status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
        status.HTTP_409_CONFLICT: "CONFLICT",
        status.HTTP_503_SERVICE_UNAVAILABLE: "SERVICE_UNAVAILABLE",
    }.get(code, "SERVER_ERROR")
