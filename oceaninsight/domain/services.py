"""
Service métier du tableau de bord: récupération, agrégation et repli par domaine.

Chaque domaine est calculé indépendamment: un échec dans un pipeline n'affecte jamais les autres.
Un pipeline qui ne produit rien est remplacé par un résumé vide (ou simulé si le repli est actif).
"""

from __future__ import annotations

import asyncio
from typing import Any

import structlog

from oceaninsight.app.metrics import DOMAIN_FALLBACKS
from oceaninsight.core.http_constants import DEFAULT_GBIF_LIMIT, DEFAULT_OBIS_SIZE
from oceaninsight.domain.aggregation import aggregate_biodiversity, aggregate_fisheries
from oceaninsight.domain.coordinates import Coordinate
from oceaninsight.domain.entities import (
    DashboardSnapshot,
    Domain,
    DomainSummary,
    FisheriesSummary,
    MarineForecast,
    MolecularSummary,
    OccurrenceRecord,
    OceanographicSummary,
    empty_summary,
)
from oceaninsight.domain.mock_data import mock
from oceaninsight.infra.http_clients import UpstreamError


def oceanographic_from_forecast(forecast: MarineForecast) -> OceanographicSummary:
    return OceanographicSummary(hourly=forecast.hourly, units=forecast.units)


class DashboardService:
    """
    Orchestration des sources amont pour les trois vues.

    Responsabilités:
    - Lancer les requêtes amont nécessaires à un domaine (ou aux trois) en parallèle.
    - Agréger les occurrences en résumés affichables.
    - Substituer un résumé vide ou simulé quand un pipeline ne produit rien.
    """

    def __init__(
        self,
        marine_client,
        obis_client,
        gbif_client,
        mock_fallback: bool = False,
        obis_size: int = DEFAULT_OBIS_SIZE,
        gbif_limit: int = DEFAULT_GBIF_LIMIT,
    ):
        """Initialise le service avec ses clients amont.

        Paramètres:
        - marine_client: fournit `fetch(coord)` (séries Open-Meteo ou None).
        - obis_client: fournit `fetch(coord, size)` (lève `UpstreamError`).
        - gbif_client: fournit `fetch_fish(coord, limit)` (liste vide en cas d'échec).
        - mock_fallback: remplace un domaine vide par les données simulées.
        """
        self.marine = marine_client
        self.obis = obis_client
        self.gbif = gbif_client
        self.mock_fallback = mock_fallback
        self.obis_size = obis_size
        self.gbif_limit = gbif_limit
        self._log = structlog.get_logger(__name__).bind(component="dashboard_service")

    # --- pipelines par domaine ---

    async def oceanographic(self, coord: Coordinate) -> OceanographicSummary | None:
        forecast = await self.marine.fetch(coord)
        return oceanographic_from_forecast(forecast) if forecast is not None else None

    async def fisheries(self, coord: Coordinate) -> FisheriesSummary | None:
        obis_result, gbif_fish = await asyncio.gather(
            self.obis.fetch(coord, self.obis_size),
            self.gbif.fetch_fish(coord, self.gbif_limit),
            return_exceptions=True,
        )
        return self._fisheries_from(obis_result, gbif_fish)

    async def molecular(self, coord: Coordinate) -> MolecularSummary | None:
        try:
            records = await self.obis.fetch(coord, self.obis_size)
        except UpstreamError as exc:
            self._log.warning("molecular_pipeline_failed", error=str(exc))
            return None
        return aggregate_biodiversity(records)

    async def summarize(self, domain: Domain, coord: Coordinate) -> DomainSummary:
        """Exécute le pipeline d'un seul domaine et applique la politique de repli."""
        pipelines = {
            Domain.OCEANOGRAPHIC: self.oceanographic,
            Domain.FISHERIES: self.fisheries,
            Domain.MOLECULAR: self.molecular,
        }
        try:
            summary = await pipelines[domain](coord)
        except Exception as exc:  # noqa: BLE001
            # Même confinement que fetch_all: un domaine en échec est rendu vide ou simulé
            self._log.warning(f"{domain.value}_pipeline_failed", error=str(exc))
            summary = None
        return summary if summary is not None else self.fallback(domain, coord)

    # --- récupération groupée ---

    async def fetch_all(self, coord: Coordinate) -> DashboardSnapshot:
        """
        Lance les trois requêtes amont en parallèle et agrège les trois domaines.

        Les trois requêtes sont attendues quel que soit le résultat des autres (aucune
        annulation); l'échec OBIS vide les domaines pêche et biodiversité, pas l'océanographie.
        """
        forecast, obis_result, gbif_fish = await asyncio.gather(
            self.marine.fetch(coord),
            self.obis.fetch(coord, self.obis_size),
            self.gbif.fetch_fish(coord, self.gbif_limit),
            return_exceptions=True,
        )

        oceanographic = None
        if isinstance(forecast, MarineForecast):
            oceanographic = oceanographic_from_forecast(forecast)
        elif isinstance(forecast, BaseException):
            self._log.warning("oceanographic_pipeline_failed", error=str(forecast))

        molecular = None
        if isinstance(obis_result, list):
            molecular = aggregate_biodiversity(obis_result)
        fisheries = self._fisheries_from(obis_result, gbif_fish)

        summaries = {
            Domain.OCEANOGRAPHIC: oceanographic,
            Domain.FISHERIES: fisheries,
            Domain.MOLECULAR: molecular,
        }
        return DashboardSnapshot(
            **{
                domain.value: summary if summary is not None else self.fallback(domain, coord)
                for domain, summary in summaries.items()
            }
        )

    # --- helpers ---

    def _fisheries_from(self, obis_result: Any, gbif_fish: Any) -> FisheriesSummary | None:
        if isinstance(obis_result, BaseException):
            self._log.warning("fisheries_pipeline_failed", error=str(obis_result))
            return None
        gbif_records: list[OccurrenceRecord] = []
        if isinstance(gbif_fish, BaseException):
            self._log.warning("gbif_pipeline_failed", error=str(gbif_fish))
        else:
            gbif_records = gbif_fish
        return aggregate_fisheries(obis_result, gbif_records)

    def fallback(self, domain: Domain, coord: Coordinate) -> DomainSummary:
        """Résumé de substitution: simulé si le repli est actif, sinon vide."""
        if self.mock_fallback:
            DOMAIN_FALLBACKS.labels(domain.value, "mock").inc()
            return mock(coord).for_domain(domain)
        DOMAIN_FALLBACKS.labels(domain.value, "empty").inc()
        return empty_summary(domain)
