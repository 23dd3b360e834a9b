"""
Application principale FastAPI.

Ce module assemble les composants du tableau de bord: middlewares, pages HTML, API JSON,
métriques et gestion des erreurs.

Responsabilités du module:
- Initialiser le logging structuré au niveau configuré
- Construire l'application FastAPI avec son titre/debug
- Ajouter les middlewares (contexte de requête, Prometheus)
- Monter les routers (santé, pages, résumés, métriques)
"""

from __future__ import annotations

from fastapi import FastAPI

from oceaninsight.api.errors import register_error_handlers
from oceaninsight.api.routes_health import router as health_router
from oceaninsight.api.routes_pages import router as pages_router
from oceaninsight.api.routes_summary import router as summary_router
from oceaninsight.app.metrics import PrometheusMiddleware, metrics_router
from oceaninsight.core.container import container
from oceaninsight.core.logging import setup_logging
from oceaninsight.middlewares.request_context import RequestContextMiddleware


def create_app() -> FastAPI:
    """Construit et retourne l'application FastAPI prête à l'usage."""
    settings = container.settings
    setup_logging(settings.LOG_LEVEL)
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router)
    app.include_router(pages_router)
    app.include_router(summary_router)
    app.include_router(metrics_router)
    register_error_handlers(app)
    return app


app = create_app()
