"""Clients HTTP externes (météo marine, occurrences OBIS, occurrences GBIF).

Objectif du module
------------------
- Encapsuler les appels réseau vers les sources tierces et normaliser leurs réponses.
- Appliquer la politique d'échec propre à chaque source:
    * Open-Meteo Marine: None ("indisponible"), l'appelant peut se replier sur des données
      simulées.
    * OBIS: `UpstreamError` propagée, deux domaines dépendent de cette source.
    * GBIF: liste vide, la source est secondaire.
"""

from __future__ import annotations

import time
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from oceaninsight.app.metrics import UPSTREAM_LATENCY, UPSTREAM_REQUESTS
from oceaninsight.core.http_constants import (
    DEFAULT_BBOX_HALF_WIDTH_DEG,
    DEFAULT_GBIF_LIMIT,
    DEFAULT_OBIS_SIZE,
)
from oceaninsight.domain.coordinates import Coordinate, bounding_polygon
from oceaninsight.domain.entities import (
    HOURLY_METRICS,
    HourlySeries,
    MarineForecast,
    OccurrenceRecord,
)
from oceaninsight.infra.upstream_schemas import (
    GbifRecord,
    GbifResponse,
    MarineHourly,
    MarineResponse,
    ObisRecord,
    ObisResponse,
)

BONY_FISH_CLASS_NAME = "Actinopterygii"


class UpstreamError(Exception):
    """Échec d'un appel à une source amont (réseau, statut HTTP ou contenu illisible)."""

    def __init__(self, source: str, message: str) -> None:
        """Initialise l'erreur avec le nom de la source et un message court."""
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class _UpstreamClient:
    """Socle commun: une requête GET JSON par appel, instrumentée (logs + métriques)."""

    source = "upstream"

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: URL de l'endpoint interrogé.
            timeout: délai maximal en secondes (None = pas de timeout).
            transport: transport httpx alternatif (tests).
        """
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._log = structlog.get_logger(__name__).bind(component=f"{self.source}_client")

    async def _get_json(self, params: dict[str, Any]) -> Any:
        outcome = "ok"
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
                headers={"Accept": "application/json"},
            ) as client:
                resp = await client.get(self.base_url, params=params)
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as exc:
            outcome = "http_error"
            raise UpstreamError(self.source, f"status {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            outcome = "network_error"
            raise UpstreamError(self.source, str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            outcome = "decode_error"
            raise UpstreamError(self.source, "invalid JSON body") from exc
        finally:
            UPSTREAM_REQUESTS.labels(self.source, outcome).inc()
            UPSTREAM_LATENCY.labels(self.source).observe(time.perf_counter() - start)


class MarineWeatherClient(_UpstreamClient):
    """Séries horaires Open-Meteo Marine (veille + prévision du jour, UTC)."""

    source = "open_meteo"

    async def fetch(self, coord: Coordinate) -> MarineForecast | None:
        """Retourne les séries horaires normalisées, ou None si la source est indisponible."""
        params = {
            "latitude": str(coord.latitude),
            "longitude": str(coord.longitude),
            "hourly": ",".join(HOURLY_METRICS),
            "past_days": "1",
            "forecast_days": "1",
            "timezone": "UTC",
        }
        try:
            payload = MarineResponse.model_validate(await self._get_json(params))
        except (UpstreamError, ValidationError) as exc:
            self._log.warning("marine_unavailable", error=str(exc))
            return None

        hourly = payload.hourly or MarineHourly()
        series = HourlySeries(
            time=[f"{t}Z" for t in hourly.time],
            **{name: getattr(hourly, name) for name in HOURLY_METRICS},
        )
        return MarineForecast(hourly=series, units=payload.hourly_units or {})


def obis_to_occurrence(record: ObisRecord) -> OccurrenceRecord:
    depth = record.minimumDepthInMeters
    if depth is None:
        depth = record.depth
    return OccurrenceRecord(
        scientific_name=record.scientificName,
        event_date=record.eventDate,
        depth_meters=depth,
        family=record.family,
        genus=record.genus,
        taxon_class=record.class_,
    )


class _BoundingBoxClient(_UpstreamClient):
    """Source interrogée par une boîte de ±`half_width` degrés autour du point."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        half_width: float = DEFAULT_BBOX_HALF_WIDTH_DEG,
    ) -> None:
        """Initialise le client avec la demi-largeur de la boîte de recherche."""
        super().__init__(base_url, timeout=timeout, transport=transport)
        self.half_width = half_width


class ObisClient(_BoundingBoxClient):
    """Occurrences OBIS dans la boîte de recherche."""

    source = "obis"

    async def fetch(
        self, coord: Coordinate, size: int = DEFAULT_OBIS_SIZE
    ) -> list[OccurrenceRecord]:
        """
        Retourne jusqu'à `size` occurrences normalisées.

        Raises:
            UpstreamError: en cas d'échec réseau, de statut non 2xx ou de réponse illisible.
        """
        params = {"size": size, "geometry": bounding_polygon(coord, self.half_width)}
        try:
            payload = ObisResponse.model_validate(await self._get_json(params))
        except ValidationError as exc:
            self._log.error("obis_failed", error="malformed payload")
            raise UpstreamError(self.source, "malformed payload") from exc
        except UpstreamError as exc:
            self._log.error("obis_failed", error=exc.message)
            raise
        return [obis_to_occurrence(r) for r in payload.results[:size]]


def compose_event_date(year: int | None, month: int | None, day: int | None) -> str | None:
    """Date `YYYY-MM-DD` recomposée (parties manquantes à zéro), None si tout est absent."""
    if year is None and month is None and day is None:
        return None
    y = str(year) if year is not None else ""
    m = str(month).zfill(2) if month is not None else "00"
    d = str(day).zfill(2) if day is not None else "00"
    return f"{y}-{m}-{d}"


def gbif_to_occurrence(record: GbifRecord) -> OccurrenceRecord:
    name = (
        record.scientificName
        or record.species
        or record.genericName
        or (record.taxon.scientificName if record.taxon else None)
    )
    event_date = record.eventDate or compose_event_date(record.year, record.month, record.day)
    candidates = (record.depth, record.minimumDepthInMeters, record.decimalDepth)
    depth = next((v for v in candidates if v is not None), None)
    return OccurrenceRecord(
        scientific_name=name,
        event_date=event_date,
        depth_meters=depth,
        family=record.family,
        genus=record.genus,
        taxon_class=record.class_,
    )


class GbifClient(_BoundingBoxClient):
    """Occurrences GBIF filtrées côté serveur sur la classe des poissons osseux."""

    source = "gbif"

    async def fetch_fish(
        self, coord: Coordinate, limit: int = DEFAULT_GBIF_LIMIT
    ) -> list[OccurrenceRecord]:
        """Retourne les occurrences de poissons normalisées; liste vide en cas d'échec."""
        params = {
            "class": BONY_FISH_CLASS_NAME,
            "geometry": bounding_polygon(coord, self.half_width),
            "limit": limit,
        }
        try:
            payload = GbifResponse.model_validate(await self._get_json(params))
        except (UpstreamError, ValidationError) as exc:
            self._log.warning("gbif_unavailable", error=str(exc))
            return []
        return [gbif_to_occurrence(r) for r in payload.results[:limit]]
