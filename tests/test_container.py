"""Tests du conteneur: choix du stockage de coordonnée et état initial."""

from __future__ import annotations

import json
from unittest.mock import Mock, patch

import pytest

from oceaninsight.core.container import Container
from oceaninsight.core.settings import Settings
from oceaninsight.domain.coordinates import Coordinate
from oceaninsight.infra.repositories import InMemoryCoordinateStore, RedisCoordinateStore

REDIS_URL = "redis://localhost:6379/0"


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_memory_store_without_redis_url() -> None:
    c = Container(_settings(REDIS_URL=None))
    assert c.storage_backend == "memory"
    assert isinstance(c.coords_store, InMemoryCoordinateStore)
    assert c.state.last_coordinate is None
    assert c.page_controller.service is c.dashboard


def test_require_redis_without_url_fails() -> None:
    with pytest.raises(RuntimeError):
        Container(_settings(REDIS_URL=None, REQUIRE_REDIS=True))


def test_redis_store_restores_last_coordinate() -> None:
    client = Mock()
    client.get.return_value = json.dumps({"latitude": 12.5, "longitude": -30.0})
    with patch("redis.Redis.from_url", return_value=client):
        c = Container(_settings(REDIS_URL=REDIS_URL, COORDS_STORAGE_KEY="coords"))
    assert c.storage_backend == "redis"
    assert isinstance(c.coords_store, RedisCoordinateStore)
    assert c.state.last_coordinate == Coordinate(latitude=12.5, longitude=-30.0)
    client.get.assert_called_once_with("coords")


def test_invalid_redis_url_falls_back_to_memory() -> None:
    with patch("redis.Redis.from_url", side_effect=ValueError("bad url")):
        c = Container(_settings(REDIS_URL="not-a-url"))
    assert c.storage_backend == "memory-fallback"
    assert isinstance(c.coords_store, InMemoryCoordinateStore)


def test_upstream_settings_reach_clients() -> None:
    c = Container(
        _settings(UPSTREAM_TIMEOUT_S=3.0, BBOX_HALF_WIDTH_DEG=0.5, MOCK_FALLBACK=True)
    )
    assert c.obis_client.timeout == 3.0  # noqa: PLR2004
    assert c.gbif_client.half_width == 0.5  # noqa: PLR2004
    assert c.dashboard.mock_fallback is True
