"""
Routes HTML du tableau de bord: page principale, soumission des coordonnées, pages de détail.

La logique (validation, mémorisation, pipelines) vit dans `PageController`; les routes se
limitent au rendu des templates et aux redirections.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from oceaninsight.api.deps import get_app_settings, get_page_controller
from oceaninsight.core.http_constants import HTTP_BAD_REQUEST, HTTP_OK, HTTP_SEE_OTHER
from oceaninsight.core.settings import Settings
from oceaninsight.domain.entities import Domain
from oceaninsight.domain.page_controller import MainView, PageController, nav_links
from oceaninsight.domain.render_service import templates

router = APIRouter(tags=["pages"])
controller_dep = Depends(get_page_controller)
settings_dep = Depends(get_app_settings)


def _render_main(
    request: Request, view: MainView, settings: Settings, status_code: int = HTTP_OK
):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.APP_NAME,
            "nav_links": nav_links(None),
            "latitude": view.latitude,
            "longitude": view.longitude,
            "error": view.error,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
def main_page(
    request: Request,
    controller: PageController = controller_dep,
    settings: Settings = settings_dep,
):
    """Page principale: formulaire pré-rempli avec la dernière coordonnée mémorisée."""
    return _render_main(request, controller.main_view(), settings)


@router.get("/explore", response_class=HTMLResponse)
def explore(
    request: Request,
    latitude: str | None = None,
    longitude: str | None = None,
    controller: PageController = controller_dep,
    settings: Settings = settings_dep,
):
    """
    Valide la saisie puis redirige vers la page océanographique.

    Une saisie non numérique réaffiche le formulaire avec un message bloquant (400), sans
    navigation.
    """
    result = controller.submit(latitude, longitude)
    if not result.ok:
        view = MainView(latitude=latitude or "", longitude=longitude or "", error=result.error)
        return _render_main(request, view, settings, status_code=HTTP_BAD_REQUEST)
    return RedirectResponse(result.value, status_code=HTTP_SEE_OTHER)


async def _detail_page(
    request: Request,
    domain: Domain,
    lat: str | None,
    lon: str | None,
    controller: PageController,
    settings: Settings,
):
    view = await controller.detail(domain, lat, lon)
    return templates.TemplateResponse(
        request,
        "detail.html",
        {
            "app_name": settings.APP_NAME,
            "page_id": domain.value,
            "page_label": domain.label,
            "nav_links": view.nav_links,
            "coordinate": view.coordinate,
            "panel": view.panel,
            "charts": [chart.model_dump() for chart in view.charts],
            "chartjs_url": settings.CHARTJS_URL,
        },
    )


@router.get(Domain.OCEANOGRAPHIC.path, response_class=HTMLResponse)
async def oceanographic_page(
    request: Request,
    lat: str | None = None,
    lon: str | None = None,
    controller: PageController = controller_dep,
    settings: Settings = settings_dep,
):
    """Page océanographique (séries horaires Open-Meteo Marine)."""
    return await _detail_page(request, Domain.OCEANOGRAPHIC, lat, lon, controller, settings)


@router.get(Domain.FISHERIES.path, response_class=HTMLResponse)
async def fisheries_page(
    request: Request,
    lat: str | None = None,
    lon: str | None = None,
    controller: PageController = controller_dep,
    settings: Settings = settings_dep,
):
    """Page pêche (OBIS + GBIF, poissons osseux)."""
    return await _detail_page(request, Domain.FISHERIES, lat, lon, controller, settings)


@router.get(Domain.MOLECULAR.path, response_class=HTMLResponse)
async def molecular_page(
    request: Request,
    lat: str | None = None,
    lon: str | None = None,
    controller: PageController = controller_dep,
    settings: Settings = settings_dep,
):
    """Page biodiversité moléculaire (occurrences OBIS)."""
    return await _detail_page(request, Domain.MOLECULAR, lat, lon, controller, settings)
