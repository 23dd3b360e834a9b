"""Configuration de test pour pytest avec gestion des chemins et faux clients amont.

Ce module ajoute la racine du projet au sys.path et fournit des clients amont simulés
(`AsyncMock`) pour exercer le service et les routes sans réseau.
"""

import os
import sys
from unittest.mock import AsyncMock, Mock

import pytest

# Ensure project root is on sys.path so that
# imports like `from oceaninsight...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from oceaninsight.domain.entities import (  # noqa: E402
    HourlySeries,
    MarineForecast,
    OccurrenceRecord,
)

FISH_CLASS = "Actinopterygii"


def make_record(name, taxon_class=FISH_CLASS, family=None, genus=None, depth=None):
    """Occurrence minimale pour les tests."""
    return OccurrenceRecord(
        scientific_name=name,
        event_date="2023-06-01",
        depth_meters=depth,
        family=family,
        genus=genus,
        taxon_class=taxon_class,
    )


def make_forecast() -> MarineForecast:
    """Prévision marine de deux heures (métriques partiellement renseignées)."""
    return MarineForecast(
        hourly=HourlySeries(
            time=["2024-05-01T00:00Z", "2024-05-01T01:00Z"],
            sea_surface_temperature=[21.5, 21.7],
            wave_height=[1.2],
            swell_wave_height=[0.8, 0.9],
        ),
        units={"sea_surface_temperature": "°C", "wave_height": "m"},
    )


@pytest.fixture
def obis_records():
    return [
        make_record("Sardina pilchardus", family="Clupeidae", genus="Sardina", depth=12.0),
        make_record("Engraulis encrasicolus", family="Engraulidae", genus="Engraulis"),
        make_record("Tursiops truncatus", taxon_class="Mammalia", family="Delphinidae"),
    ]


@pytest.fixture
def gbif_records():
    return [
        make_record("Engraulis encrasicolus", family="Engraulidae"),
        make_record("Thunnus thynnus", family="Scombridae", depth=0.0),
    ]


@pytest.fixture
def fake_clients(obis_records, gbif_records):
    """Triplet (marine, obis, gbif) de clients simulés qui réussissent tous."""
    marine = Mock()
    marine.fetch = AsyncMock(return_value=make_forecast())
    obis = Mock()
    obis.fetch = AsyncMock(return_value=obis_records)
    gbif = Mock()
    gbif.fetch_fish = AsyncMock(return_value=gbif_records)
    return marine, obis, gbif
