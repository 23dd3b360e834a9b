"""
Métriques Prometheus pour l'application.

Ce module définit les métriques HTTP du service et celles des appels aux sources amont (Open-Meteo,
OBIS, GBIF), expose `/metrics` et fournit le middleware de mesure des requêtes.
"""

import time

from fastapi import APIRouter, Request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

metrics_router = APIRouter(tags=["metrics"])

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "route", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "Latency of HTTP requests", ["route"]
)

# Upstream sources
UPSTREAM_REQUESTS = Counter(
    "upstream_requests_total",
    "Total requests sent to upstream data sources",
    ["source", "outcome"],
)
UPSTREAM_LATENCY = Histogram(
    "upstream_latency_seconds",
    "Latency of upstream data source requests",
    ["source"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
)

# Domain pipelines that produced nothing (empty or mock summary substituted)
DOMAIN_FALLBACKS = Counter(
    "domain_fallbacks_total",
    "Domain summaries replaced by an empty or mock summary",
    ["domain", "kind"],
)


@metrics_router.get("/metrics")
def metrics():
    """
    Expose les métriques Prometheus au format texte.

    Returns:
        Response: Réponse HTTP contenant les métriques au format Prometheus.
    """
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware Prometheus pour mesurer les métriques HTTP.

    Collecte les métriques de comptage des requêtes et de latence par route pour l'exposition
    Prometheus.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Traite une requête HTTP et collecte les métriques.

        Args:
            request: Requête HTTP entrante.
            call_next: Fonction pour appeler le middleware suivant.

        Returns:
            Response: Réponse HTTP avec métriques collectées.
        """
        start = time.perf_counter()
        response: Response = await call_next(request)
        route = request.scope.get("path", "unknown")
        REQUEST_COUNT.labels(request.method, route, str(response.status_code)).inc()
        REQUEST_LATENCY.labels(route).observe(time.perf_counter() - start)
        return response
