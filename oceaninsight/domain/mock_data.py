"""Données simulées déterministes pour le développement et le repli hors ligne.

Les valeurs dérivent d'un hachage trigonométrique de la coordonnée: une même coordonnée produit
toujours le même résultat. Les résumés produits ont exactement la forme des données réelles.
"""

from __future__ import annotations

import math

from oceaninsight.domain.aggregation import MARKER_GENES, round_half_up
from oceaninsight.domain.coordinates import Coordinate
from oceaninsight.domain.entities import (
    DashboardSnapshot,
    FisheriesSummary,
    MolecularSummary,
    OceanographicSummary,
)

SPECIES = ["Sardine", "Mackerel", "Anchovy", "Tuna"]
RISK_LEVELS = ["Low", "Moderate", "High"]
SWELL_ADVISORY_THRESHOLD = 0.7


def _seed(coord: Coordinate) -> float:
    return abs(math.sin(coord.latitude * 12.9898 + coord.longitude * 78.233) * 43758.5453)


class _PseudoRandom:
    """Tirages reproductibles dans [min, max) à partir d'une graine et d'un facteur."""

    def __init__(self, seed: float):
        self.seed = seed

    def draw(self, low: float, high: float, factor: int = 1) -> float:
        fraction = (self.seed * factor) % 1
        return low + fraction * (high - low)

    def pick(self, choices: list[str], factor: int) -> str:
        index = math.floor(self.draw(0, len(choices), factor))
        return choices[min(index, len(choices) - 1)]


def mock(coord: Coordinate) -> DashboardSnapshot:
    """Retourne les trois résumés simulés pour la coordonnée."""
    rnd = _PseudoRandom(_seed(coord))

    oceanographic = OceanographicSummary(
        sea_surface_temperature_c=f"{rnd.draw(18, 31, 1):.1f}",
        salinity_psu=f"{rnd.draw(30, 37, 2):.2f}",
        chlorophyll_mg_m3=f"{rnd.draw(0.05, 3.5, 3):.2f}",
        wave_height_m=f"{rnd.draw(0.2, 3.0, 4):.2f}",
    )

    fisheries = FisheriesSummary(
        predicted_catch_index=round_half_up(rnd.draw(20, 95, 5)),
        dominant_species=rnd.pick(SPECIES, 6),
        habitat_suitability=round_half_up(rnd.draw(40, 98, 7)),
        advisories=(
            "Avoid trawling due to swell"
            if rnd.draw(0, 1, 8) > SWELL_ADVISORY_THRESHOLD
            else "Conditions favorable for small-scale fishing"
        ),
    )

    molecular = MolecularSummary(
        e_dna_diversity_index=f"{rnd.draw(0.2, 0.95, 9):.2f}",
        potential_taxa_detected=round_half_up(rnd.draw(5, 120, 10)),
        invasive_risk=rnd.pick(RISK_LEVELS, 11),
        marker_genes=MARKER_GENES[: 1 + math.floor(rnd.draw(1, 3, 12))],
    )

    return DashboardSnapshot(
        oceanographic=oceanographic, fisheries=fisheries, molecular=molecular
    )
