# Schémas Pydantic exposés par l'API JSON (réponses).

from typing import Any

from pydantic import BaseModel

from oceaninsight.domain.coordinates import Coordinate
from oceaninsight.domain.entities import (
    DashboardSnapshot,
    FisheriesSummary,
    MolecularSummary,
    OceanographicSummary,
)


class SummaryResponse(BaseModel):
    """Réponse groupée: coordonnée normalisée et les trois résumés.

    Champs:
    - coordinate: Coordinate (après inversion/bornage éventuels)
    - oceanographic, fisheries, molecular: résumés par domaine
    """

    coordinate: Coordinate
    oceanographic: OceanographicSummary
    fisheries: FisheriesSummary
    molecular: MolecularSummary

    @classmethod
    def from_snapshot(cls, coord: Coordinate, snapshot: DashboardSnapshot) -> "SummaryResponse":
        return cls(
            coordinate=coord,
            oceanographic=snapshot.oceanographic,
            fisheries=snapshot.fisheries,
            molecular=snapshot.molecular,
        )


class DomainSummaryResponse(BaseModel):
    """Réponse pour un seul domaine (résumé sérialisé selon le type du domaine)."""

    coordinate: Coordinate
    domain: str
    summary: dict[str, Any]
