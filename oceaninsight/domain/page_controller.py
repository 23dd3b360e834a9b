"""
Contrôleur de pages: saisie de coordonnées (page principale) et pages de détail par domaine.

Les pages de détail lisent la coordonnée uniquement depuis la requête: un rafraîchissement sans
paramètres revient à un état vide au lieu de réafficher une coordonnée mémorisée. Seule la page
principale relit la dernière coordonnée (pré-remplissage du formulaire).
"""

from __future__ import annotations

from urllib.parse import urlencode

import structlog
from pydantic import BaseModel, Field

from oceaninsight.domain.charts import ChartConfig, build_charts
from oceaninsight.domain.coordinates import Coordinate, coordinate_from_strings, format_coord
from oceaninsight.domain.entities import DashboardState, Domain, DomainSummary
from oceaninsight.domain.render_service import Panel, build_panel
from oceaninsight.domain.results import Result
from oceaninsight.domain.services import DashboardService
from oceaninsight.infra.repositories import CoordinateStore

INVALID_COORDINATES_MESSAGE = "Please enter valid Longitude and Latitude."


class NavLink(BaseModel):
    label: str
    href: str
    active: bool = False


class MainView(BaseModel):
    """Page principale: valeurs du formulaire et message bloquant éventuel."""

    latitude: str = ""
    longitude: str = ""
    error: str | None = None


class DetailView(BaseModel):
    """Page de détail d'un domaine, prête à rendre."""

    domain: Domain
    coordinate: Coordinate | None = None
    summary: DomainSummary | None = None
    panel: Panel
    charts: list[ChartConfig] = Field(default_factory=list)
    nav_links: list[NavLink] = Field(default_factory=list)


def detail_url(domain: Domain, coord: Coordinate | None) -> str:
    """URL de la page de détail, portant la coordonnée (6 décimales) si elle est connue."""
    if coord is None:
        return domain.path
    query = urlencode(
        {"lat": format_coord(coord.latitude), "lon": format_coord(coord.longitude)}
    )
    return f"{domain.path}?{query}"


def nav_links(coord: Coordinate | None, active: Domain | None = None) -> list[NavLink]:
    return [
        NavLink(label=domain.label, href=detail_url(domain, coord), active=domain == active)
        for domain in Domain
    ]


class PageController:
    """
    Machine à deux états d'entrée: page principale et pages de détail.

    Paramètres:
    - service: `DashboardService` exécutant les pipelines de données.
    - store: stockage de la dernière coordonnée (get/set/clear).
    - state: état partagé créé au démarrage à partir du stockage.
    - charts_enabled: produit ou non les configurations de graphiques.
    """

    def __init__(
        self,
        service: DashboardService,
        store: CoordinateStore,
        state: DashboardState,
        charts_enabled: bool = True,
    ):
        """Initialise le contrôleur avec ses dépendances injectées."""
        self.service = service
        self.store = store
        self.state = state
        self.charts_enabled = charts_enabled
        self._log = structlog.get_logger(__name__).bind(component="page_controller")

    def remember(self, coord: Coordinate) -> Result[None]:
        """Mémorise la coordonnée (état + stockage); un échec d'écriture est journalisé."""
        self.state.last_coordinate = coord
        result = self.store.set(coord)
        if not result.ok:
            self._log.warning("coordinate_persist_failed", error=result.error)
        return result

    def main_view(self) -> MainView:
        last = self.state.last_coordinate
        if last is None:
            return MainView()
        return MainView(
            latitude=format_coord(last.latitude), longitude=format_coord(last.longitude)
        )

    def submit(self, lat_raw: str | None, lon_raw: str | None) -> Result[str]:
        """
        Valide la saisie et retourne l'URL de la page océanographique.

        En cas d'échec, le message d'erreur est destiné à l'utilisateur et aucune navigation ne
        doit avoir lieu.
        """
        coord = coordinate_from_strings(lat_raw, lon_raw)
        if coord is None:
            self._log.info("coordinate_rejected", latitude=lat_raw, longitude=lon_raw)
            return Result.failure(INVALID_COORDINATES_MESSAGE)
        self.remember(coord)
        return Result.success(detail_url(Domain.OCEANOGRAPHIC, coord))

    async def detail(
        self, domain: Domain, lat_raw: str | None, lon_raw: str | None
    ) -> DetailView:
        """
        Construit la page de détail d'un domaine.

        Sans coordonnée valide dans la requête: tableaux en tirets, aucun appel réseau.
        Sinon: mémorisation, liens de navigation portant la coordonnée, puis les trois requêtes
        amont lancées ensemble; seul le panneau du domaine demandé est rendu.
        """
        coord = coordinate_from_strings(lat_raw, lon_raw)
        if coord is None:
            return DetailView(
                domain=domain,
                panel=build_panel(domain, None),
                nav_links=nav_links(None, domain),
            )

        self.remember(coord)
        snapshot = await self.service.fetch_all(coord)
        summary = snapshot.for_domain(domain)
        charts: list[ChartConfig] = []
        if self.charts_enabled:
            result = build_charts(domain, summary)
            if result.ok:
                charts = result.unwrap_or([])
            else:
                self._log.warning("charts_skipped", domain=domain.value, error=result.error)
        return DetailView(
            domain=domain,
            coordinate=coord,
            summary=summary,
            panel=build_panel(domain, summary),
            charts=charts,
            nav_links=nav_links(coord, domain),
        )
