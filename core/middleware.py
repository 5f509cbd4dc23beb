import uuid
import logging

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

_REQUEST_ID_HEADER = "HTTP_X_REQUEST_ID"
_RESPONSE_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(MiddlewareMixin):
    """
    Inyecta un X-Request-ID para trazar peticiones en logs/errores.
    """
    def process_request(self, request):
        rid = request.META.get(_REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.request_id = rid
        return None

    def process_response(self, request, response):
        rid = getattr(request, "request_id", None)
        if rid:
            response[_RESPONSE_ID_HEADER] = rid
            if response.status_code >= 500:
                logger.error(
                    "Respuesta %s en %s %s (request_id=%s)",
                    response.status_code,
                    request.method,
                    request.path,
                    rid,
                )
        return response
