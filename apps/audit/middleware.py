import logging
import time

from django.core.exceptions import PermissionDenied
from django.http import Http404

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Journalise chaque requête (méthode, chemin, statut, durée) et les erreurs non gérées."""

    def __init__(self, get_response): self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(level, "%s %s -> %s (%.1f ms)",
                   request.method, request.path, response.status_code, elapsed_ms)
        return response

    def process_exception(self, request, exception):
        # 404 / 403 sont des réponses normales ; le reste part vers la page 500
        if isinstance(exception, (Http404, PermissionDenied)):
            return None
        logger.error("Unhandled error on %s %s", request.method, request.path, exc_info=exception)
        return None
