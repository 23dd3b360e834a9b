"""
Tests des pages HTML (page principale, soumission, pages de détail).

Le contrôleur de pages est remplacé via `app.dependency_overrides` par une instance branchée sur
des clients amont simulés.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from oceaninsight.api.deps import get_page_controller
from oceaninsight.app.main import app
from oceaninsight.core.http_constants import HTTP_BAD_REQUEST, HTTP_OK, HTTP_SEE_OTHER
from oceaninsight.domain.entities import DashboardState
from oceaninsight.domain.page_controller import INVALID_COORDINATES_MESSAGE, PageController
from oceaninsight.domain.services import DashboardService
from oceaninsight.infra.repositories import InMemoryCoordinateStore


@pytest.fixture
def controller(fake_clients):
    marine, obis, gbif = fake_clients
    return PageController(
        DashboardService(marine, obis, gbif), InMemoryCoordinateStore(), DashboardState()
    )


@pytest.fixture
def client(controller):
    app.dependency_overrides[get_page_controller] = lambda: controller
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_main_page_renders_form(client) -> None:
    r = client.get("/")
    assert r.status_code == HTTP_OK
    assert 'id="exploreBtn"' in r.text
    assert 'name="latitude"' in r.text
    assert 'href="/fisheries"' in r.text


def test_explore_invalid_input_shows_notice(client) -> None:
    r = client.get("/explore", params={"latitude": "abc", "longitude": "12"})
    assert r.status_code == HTTP_BAD_REQUEST
    assert INVALID_COORDINATES_MESSAGE in r.text
    assert 'role="alert"' in r.text
    assert 'value="abc"' in r.text


def test_explore_redirects_to_oceanographic(client) -> None:
    r = client.get(
        "/explore", params={"latitude": "200", "longitude": "10"}, follow_redirects=False
    )
    assert r.status_code == HTTP_SEE_OTHER
    assert r.headers["location"] == "/oceanographic?lat=10.000000&lon=180.000000"


def test_main_page_prefilled_after_submit(client) -> None:
    client.get("/explore", params={"latitude": "43.3", "longitude": "5.4"}, follow_redirects=False)
    r = client.get("/")
    assert 'value="43.300000"' in r.text
    assert 'value="5.400000"' in r.text


def test_detail_without_coordinate_shows_dashes(client, fake_clients) -> None:
    marine, obis, gbif = fake_clients
    r = client.get("/fisheries")
    assert r.status_code == HTTP_OK
    assert "No coordinate selected." in r.text
    assert "<th>Dominant Species</th><td>-</td>" in r.text
    assert "<canvas" not in r.text
    obis.fetch.assert_not_awaited()
    gbif.fetch_fish.assert_not_awaited()
    marine.fetch.assert_not_awaited()


def test_oceanographic_page_renders_hourly_table_and_charts(client) -> None:
    r = client.get("/oceanographic", params={"lat": "43.3", "lon": "5.4"})
    assert r.status_code == HTTP_OK
    assert 'data-page="oceanographic"' in r.text
    assert "Oceanographic (hourly)" in r.text
    assert "21.5 °C" in r.text
    assert 'id="chart-sst"' in r.text
    assert "https://cdn.jsdelivr.net/npm/chart.js" in r.text


def test_molecular_page_links_carry_coordinate(client) -> None:
    r = client.get("/molecular-biodiversity", params={"lat": "43.3", "lon": "5.4"})
    assert r.status_code == HTTP_OK
    assert "Sardina pilchardus" in r.text
    assert 'href="/fisheries?lat=43.300000&amp;lon=5.400000"' in r.text


def test_marine_outage_only_dashes_oceanographic_page(client, fake_clients) -> None:
    """Open-Meteo indisponible: page océanographique en tirets, page pêche intacte."""
    marine, _, _ = fake_clients
    marine.fetch = AsyncMock(return_value=None)
    params = {"lat": "43.3", "lon": "5.4"}

    ocean = client.get("/oceanographic", params=params)
    assert ocean.status_code == HTTP_OK
    assert "<h4>Oceanographic</h4>" in ocean.text
    assert "<th>Sea Surface Temperature</th><td>-</td>" in ocean.text
    assert "<th>Significant Wave Height</th><td>-</td>" in ocean.text
    assert "<canvas" not in ocean.text

    fisheries = client.get("/fisheries", params=params)
    assert fisheries.status_code == HTTP_OK
    assert "<th>Predicted Catch Index</th><td>28</td>" in fisheries.text
    assert "<th>Dominant Species</th><td>Sardina pilchardus</td>" in fisheries.text
