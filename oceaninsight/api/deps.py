"""Dépendances partagées pour les routes de l'API.

But du module
-------------
- Centraliser l'accès aux instances nécessaires aux endpoints (contrôleur de pages, service du
  tableau de bord, settings).
- Offrir un point d'ancrage remplaçable dans les tests via `app.dependency_overrides`, sans
  modifier les routes.
"""

from oceaninsight.core.container import container
from oceaninsight.core.settings import Settings
from oceaninsight.domain.page_controller import PageController
from oceaninsight.domain.services import DashboardService


def get_page_controller() -> PageController:
    return container.page_controller


def get_dashboard_service() -> DashboardService:
    return container.dashboard


def get_app_settings() -> Settings:
    return container.settings
