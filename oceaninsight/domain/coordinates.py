"""
Coordonnées géographiques: normalisation, lecture et géométrie de recherche.

Les saisies utilisateur inversent souvent latitude et longitude (convention (lon, lat) des données
halieutiques). `normalize` détecte ce cas, puis borne chaque axe dans son domaine valide.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from oceaninsight.core.http_constants import DEFAULT_BBOX_HALF_WIDTH_DEG

LAT_MIN, LAT_MAX = -90.0, 90.0
LON_MIN, LON_MAX = -180.0, 180.0


class Coordinate(BaseModel):
    """Point géographique toujours borné (latitude [-90, 90], longitude [-180, 180])."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=LAT_MIN, le=LAT_MAX)
    longitude: float = Field(ge=LON_MIN, le=LON_MAX)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def normalize(lat: float, lon: float) -> Coordinate:
    """
    Construit une `Coordinate` à partir de valeurs éventuellement inversées.

    Si la latitude sort de [-90, 90] alors que la longitude est dans [-180, 180], les deux axes
    sont échangés. Chaque axe est ensuite borné indépendamment; aucune entrée numérique ne lève.
    """
    looks_swapped = (lat < LAT_MIN or lat > LAT_MAX) and LON_MIN <= lon <= LON_MAX
    if looks_swapped:
        lat, lon = lon, lat
    return Coordinate(
        latitude=clamp(lat, LAT_MIN, LAT_MAX),
        longitude=clamp(lon, LON_MIN, LON_MAX),
    )


def parse_number(raw: str | float | None) -> float | None:
    """Lit un nombre fini depuis une saisie ou un paramètre de requête, sinon None."""
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def coordinate_from_strings(
    lat_raw: str | float | None, lon_raw: str | float | None
) -> Coordinate | None:
    """Parse et normalise une paire (lat, lon); None si l'une des deux est invalide."""
    lat = parse_number(lat_raw)
    lon = parse_number(lon_raw)
    if lat is None or lon is None:
        return None
    return normalize(lat, lon)


def format_coord(value: float) -> str:
    """Rendu à 6 décimales utilisé dans les URLs générées."""
    return f"{float(value):.6f}"


def bounding_polygon(
    coord: Coordinate, half_width: float = DEFAULT_BBOX_HALF_WIDTH_DEG
) -> str:
    """
    Polygone WKT fermé (5 points) autour de la coordonnée.

    Ordre des sommets: SO, SE, NE, NO, SO; valeurs à 4 décimales, au format `lon lat`.
    """
    min_lon = f"{coord.longitude - half_width:.4f}"
    max_lon = f"{coord.longitude + half_width:.4f}"
    min_lat = f"{coord.latitude - half_width:.4f}"
    max_lat = f"{coord.latitude + half_width:.4f}"
    ring = [
        (min_lon, min_lat),
        (max_lon, min_lat),
        (max_lon, max_lat),
        (min_lon, max_lat),
        (min_lon, min_lat),
    ]
    return "POLYGON((" + ",".join(f"{x} {y}" for x, y in ring) + "))"
