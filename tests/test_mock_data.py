"""Tests du générateur de données simulées (déterminisme et bornes)."""

from __future__ import annotations

import math

from oceaninsight.domain.aggregation import round_half_up
from oceaninsight.domain.coordinates import Coordinate
from oceaninsight.domain.mock_data import (
    MARKER_GENES,
    RISK_LEVELS,
    SPECIES,
    _PseudoRandom,
    _seed,
    mock,
)

# Constantes pour éviter les erreurs PLR2004 (Magic values)
HALF = 5.0
SST_RANGE = (18, 31)
SALINITY_RANGE = (30, 37)
CATCH_RANGE = (20, 95)
HABITAT_RANGE = (40, 98)
TAXA_RANGE = (5, 120)


def test_mock_is_deterministic() -> None:
    coord = Coordinate(latitude=43.3, longitude=5.4)
    assert mock(coord) == mock(coord)


def test_mock_differs_between_coordinates() -> None:
    a = mock(Coordinate(latitude=43.3, longitude=5.4))
    b = mock(Coordinate(latitude=-12.0, longitude=130.5))
    assert a != b


def test_mock_values_within_bounds() -> None:
    snapshot = mock(Coordinate(latitude=10.5, longitude=-20.25))
    ocean = snapshot.oceanographic
    assert ocean.hourly is None
    assert SST_RANGE[0] <= float(ocean.sea_surface_temperature_c) <= SST_RANGE[1]
    assert SALINITY_RANGE[0] <= float(ocean.salinity_psu) <= SALINITY_RANGE[1]

    fisheries = snapshot.fisheries
    assert CATCH_RANGE[0] <= fisheries.predicted_catch_index <= CATCH_RANGE[1]
    assert HABITAT_RANGE[0] <= fisheries.habitat_suitability <= HABITAT_RANGE[1]
    assert fisheries.dominant_species in SPECIES

    molecular = snapshot.molecular
    assert TAXA_RANGE[0] <= molecular.potential_taxa_detected <= TAXA_RANGE[1]
    assert molecular.invasive_risk in RISK_LEVELS
    assert molecular.marker_genes in (MARKER_GENES[:2], MARKER_GENES[:3])


def test_pseudo_random_draw_uses_fractional_part() -> None:
    rnd = _PseudoRandom(0.5)
    assert rnd.draw(0, 10, 1) == HALF
    # 0.5 * 2 = 1.0 -> partie fractionnaire nulle
    assert rnd.draw(0, 10, 2) == 0.0
    assert rnd.pick(["a", "b"], 1) == "b"


def test_round_half_up_differs_from_bankers_rounding() -> None:
    assert round_half_up(2.5) == 3  # noqa: PLR2004
    assert round_half_up(0.5) == 1
    assert round_half_up(1.49) == 1


def test_mock_integer_values_round_half_up() -> None:
    """Les entiers simulés sont arrondis au demi supérieur, jamais à l'entier pair."""
    coord = Coordinate(latitude=43.3, longitude=5.4)
    rnd = _PseudoRandom(_seed(coord))
    snapshot = mock(coord)
    assert snapshot.fisheries.predicted_catch_index == math.floor(rnd.draw(20, 95, 5) + 0.5)
    assert snapshot.fisheries.habitat_suitability == math.floor(rnd.draw(40, 98, 7) + 0.5)
    assert snapshot.molecular.potential_taxa_detected == math.floor(rnd.draw(5, 120, 10) + 0.5)
