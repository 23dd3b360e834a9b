"""
Endpoint de santé pour vérifier la disponibilité de l'API et du stockage de coordonnée.

Expose `/health` pour signaler l'état général de l'application.
"""


from fastapi import APIRouter

from oceaninsight.core.container import container

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Vérifie la disponibilité de l'API et indique le backend de stockage."""
    return {
        "status": "ok",
        "storage": getattr(container, "storage_backend", "unknown"),
        "mock_fallback": bool(getattr(container.settings, "MOCK_FALLBACK", False)),
    }
