"""Définition et chargement des paramètres de configuration applicative.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
"""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Détermination du fichier .env à utiliser avec priorité:
# 1) ENV_FILE (chemin explicite)
# 2) .env.{APP_ENV} si présent
# 3) .env (défaut)
_cwd = Path.cwd()
_env_file_from_env = os.getenv("ENV_FILE")
if _env_file_from_env:
    _ENV_FILE_PATH = _env_file_from_env
else:
    _app_env = os.getenv("APP_ENV", "dev")
    _candidate_specific = _cwd / f".env.{_app_env}"
    _candidate_default = _cwd / ".env"
    if _candidate_specific.exists():
        _ENV_FILE_PATH = _candidate_specific
    else:
        _ENV_FILE_PATH = _candidate_default


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_PATH,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
    )
    APP_NAME: str = "ocean-insight"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Stockage de la dernière coordonnée (mémoire par défaut, Redis si configuré)
    REDIS_URL: str | None = None
    REQUIRE_REDIS: bool = False
    COORDS_STORAGE_KEY: str = "selectedCoords"

    # Sources amont
    MARINE_API_URL: str = "https://marine-api.open-meteo.com/v1/marine"
    OBIS_API_URL: str = "https://api.obis.org/v3/occurrence"
    GBIF_API_URL: str = "https://api.gbif.org/v1/occurrence/search"
    # None = pas de timeout (une requête bloquée retarde seulement sa page)
    UPSTREAM_TIMEOUT_S: float | None = None
    BBOX_HALF_WIDTH_DEG: float = 0.25
    OBIS_PAGE_SIZE: int = 100
    GBIF_PAGE_SIZE: int = 100

    # Repli sur les données simulées quand une source est indisponible
    MOCK_FALLBACK: bool = False

    # Graphiques (Chart.js côté navigateur)
    CHARTS_ENABLED: bool = True
    CHARTJS_URL: str = "https://cdn.jsdelivr.net/npm/chart.js"


def get_settings() -> Settings:
    """Construit et retourne la configuration de l'application."""
    return Settings()
