"""Middleware de contexte de requête: identifiant de corrélation et durée de traitement.

L'identifiant (`X-Request-ID`, repris de la requête ou généré) est lié aux contextvars structlog
pour que chaque log émis pendant la requête le porte. La durée est renvoyée dans
`X-Process-Time-ms` et journalisée en fin de requête.
"""

import time
from collections.abc import Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

log = structlog.get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Propage l'identifiant de requête et mesure le temps de réponse."""

    def __init__(
        self,
        app: ASGIApp,
        request_id_header: str = "X-Request-ID",
        timing_header: str = "X-Process-Time-ms",
    ) -> None:
        super().__init__(app)
        self.request_id_header = request_id_header
        self.timing_header = timing_header

    async def dispatch(self, request, call_next: Callable):
        request_id = request.headers.get(self.request_id_header) or str(uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id, path=request.url.path)
        start = time.perf_counter()
        try:
            response = await call_next(request)
            duration_ms = int((time.perf_counter() - start) * 1000)
            response.headers[self.request_id_header] = request_id
            response.headers[self.timing_header] = str(duration_ms)
            log.debug("request_completed", status=response.status_code, duration_ms=duration_ms)
            return response
        finally:
            structlog.contextvars.clear_contextvars()
