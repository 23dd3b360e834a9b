"""
Routes JSON des résumés: les trois domaines, un domaine, ou les données simulées.

Les coordonnées sont lues dans `lat`/`lon` (tout flottant fini accepté) puis normalisées.
"""

from fastapi import APIRouter, Depends

from oceaninsight.api.deps import get_dashboard_service
from oceaninsight.api.errors import invalid_coordinates, unknown_domain
from oceaninsight.api.schemas import DomainSummaryResponse, SummaryResponse
from oceaninsight.domain.coordinates import Coordinate, coordinate_from_strings
from oceaninsight.domain.entities import Domain
from oceaninsight.domain.mock_data import mock
from oceaninsight.domain.services import DashboardService

router = APIRouter(prefix="/api", tags=["summary"])
service_dep = Depends(get_dashboard_service)


def _require_coordinate(lat: str | None, lon: str | None) -> Coordinate:
    coord = coordinate_from_strings(lat, lon)
    if coord is None:
        raise invalid_coordinates(lat, lon)
    return coord


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    lat: str | None = None, lon: str | None = None, service: DashboardService = service_dep
):
    """
    Retourne les trois résumés pour une coordonnée.

    Les trois sources amont sont interrogées en parallèle; un domaine sans données est rendu
    vide (ou simulé si le repli est actif).
    """
    coord = _require_coordinate(lat, lon)
    snapshot = await service.fetch_all(coord)
    return SummaryResponse.from_snapshot(coord, snapshot)


@router.get("/summary/{domain}", response_model=DomainSummaryResponse)
async def get_domain_summary(
    domain: str,
    lat: str | None = None,
    lon: str | None = None,
    service: DashboardService = service_dep,
):
    """Retourne le résumé d'un seul domaine (`oceanographic`, `fisheries`, `molecular`)."""
    try:
        selected = Domain(domain)
    except ValueError as err:
        raise unknown_domain(domain) from err
    coord = _require_coordinate(lat, lon)
    summary = await service.summarize(selected, coord)
    return DomainSummaryResponse(
        coordinate=coord, domain=selected.value, summary=summary.model_dump()
    )


@router.get("/mock", response_model=SummaryResponse)
def get_mock(lat: str | None = None, lon: str | None = None):
    """Données simulées déterministes pour la coordonnée (aucun appel réseau)."""
    coord = _require_coordinate(lat, lon)
    return SummaryResponse.from_snapshot(coord, mock(coord))
