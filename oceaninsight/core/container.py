"""
Conteneur d'injection de dépendances et configuration application.

Instancie les composants centraux (settings, stockage de coordonnée, clients amont, service,
contrôleur de pages) et expose un singleton `container` utilisé par les routes.
"""

import redis
import structlog

from oceaninsight.core.settings import Settings, get_settings
from oceaninsight.domain.entities import DashboardState
from oceaninsight.domain.page_controller import PageController
from oceaninsight.domain.services import DashboardService
from oceaninsight.infra.http_clients import GbifClient, MarineWeatherClient, ObisClient
from oceaninsight.infra.repositories import InMemoryCoordinateStore, RedisCoordinateStore


class Container:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        s = self.settings
        key = s.COORDS_STORAGE_KEY

        if s.REDIS_URL:
            try:
                self.coords_store = RedisCoordinateStore(s.REDIS_URL, key=key)
                self.storage_backend = "redis"
            except (redis.RedisError, ValueError) as err:
                if s.REQUIRE_REDIS:
                    raise RuntimeError("Redis required but unavailable") from err
                structlog.get_logger(__name__).warning("coords_store_memory_fallback")
                self.coords_store = InMemoryCoordinateStore(key=key)
                self.storage_backend = "memory-fallback"
        else:
            if s.REQUIRE_REDIS:
                raise RuntimeError("Redis required but REDIS_URL not set")
            self.coords_store = InMemoryCoordinateStore(key=key)
            self.storage_backend = "memory"

        # État initial lu une seule fois au démarrage
        self.state = DashboardState(last_coordinate=self.coords_store.get())

        timeout = s.UPSTREAM_TIMEOUT_S
        self.marine_client = MarineWeatherClient(s.MARINE_API_URL, timeout=timeout)
        self.obis_client = ObisClient(
            s.OBIS_API_URL, timeout=timeout, half_width=s.BBOX_HALF_WIDTH_DEG
        )
        self.gbif_client = GbifClient(
            s.GBIF_API_URL, timeout=timeout, half_width=s.BBOX_HALF_WIDTH_DEG
        )
        self.dashboard = DashboardService(
            self.marine_client,
            self.obis_client,
            self.gbif_client,
            mock_fallback=s.MOCK_FALLBACK,
            obis_size=s.OBIS_PAGE_SIZE,
            gbif_limit=s.GBIF_PAGE_SIZE,
        )
        self.page_controller = PageController(
            self.dashboard, self.coords_store, self.state, charts_enabled=s.CHARTS_ENABLED
        )


container = Container()
