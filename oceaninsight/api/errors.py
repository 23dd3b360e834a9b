"""Gestion standardisée des erreurs API avec enveloppes d'erreur.

Ce module fournit une enveloppe d'erreur unique pour les endpoints JSON (`code`, `message`,
`trace_id`, `details`) et le gestionnaire d'exception qui la produit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from oceaninsight.core.http_constants import HTTP_BAD_REQUEST, HTTP_NOT_FOUND

log = structlog.get_logger(__name__)

INVALID_COORDINATES = "INVALID_COORDINATES"
UNKNOWN_DOMAIN = "UNKNOWN_DOMAIN"


@dataclass
class ErrorEnvelope:
    """Standard error envelope for API responses."""

    code: str
    message: str
    trace_id: str | None = None
    details: dict[str, Any] | None = None


class APIError(HTTPException):
    """Custom API error with standard envelope."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize an API error with standardized envelope."""
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.message = message
        self.details = details


def invalid_coordinates(lat: str | None, lon: str | None) -> APIError:
    return APIError(
        HTTP_BAD_REQUEST,
        INVALID_COORDINATES,
        "lat and lon must be finite numbers",
        details={"lat": lat, "lon": lon},
    )


def unknown_domain(name: str) -> APIError:
    return APIError(HTTP_NOT_FOUND, UNKNOWN_DOMAIN, f"unknown domain: {name}")


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    trace_id: str | None = None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    envelope = ErrorEnvelope(code=code, message=message, trace_id=trace_id, details=details)
    return JSONResponse(
        status_code=status_code,
        content={
            "code": envelope.code,
            "message": envelope.message,
            "trace_id": envelope.trace_id,
            **({"details": envelope.details} if envelope.details else {}),
        },
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    trace_id = request.headers.get("X-Request-ID")
    log.info("api_error", code=exc.code, status=exc.status_code, path=request.url.path)
    return create_error_response(exc.status_code, exc.code, exc.message, trace_id, exc.details)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
