"""Configurations de graphiques (format Chart.js) dérivées des résumés.

Les graphiques sont accessoires: `build_charts` ne lève pas, il retourne un `Result` en échec
et l'appelant continue avec les seuls tableaux.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from oceaninsight.core.http_constants import SAMPLE_SIZE
from oceaninsight.domain.entities import (
    Domain,
    DomainSummary,
    FisheriesSummary,
    MolecularSummary,
    OceanographicSummary,
)
from oceaninsight.domain.results import Result

AXIS_OPTIONS: dict[str, Any] = {
    "plugins": {"legend": {"labels": {"color": "#fff"}}},
    "scales": {"x": {"ticks": {"color": "#ccc"}}, "y": {"ticks": {"color": "#ccc"}}},
}
LEGEND_OPTIONS: dict[str, Any] = {"plugins": {"legend": {"labels": {"color": "#fff"}}}}
PIE_COLORS = ["#ff6384", "#36a2eb", "#ffcd56", "#4bc0c0", "#9966ff"]
DOUGHNUT_COLORS = ["#ffd700", "#00bfff", "#ff6384", "#36a2eb", "#4bc0c0"]

# (canvas, métrique horaire, libellé, couleur de bordure, couleur de fond)
OCEAN_SERIES = [
    ("chart-sst", "sea_surface_temperature", "SST (°C)", "#ffcc00", "rgba(255,204,0,0.2)"),
    ("chart-wave", "wave_height", "Wave Height (m)", "#00bfff", "rgba(0,191,255,0.2)"),
    ("chart-swell", "swell_wave_height", "Swell Height (m)", "#66ff99", "rgba(102,255,153,0.2)"),
]


class ChartConfig(BaseModel):
    """Un graphique à instancier dans le canvas `canvas_id`."""

    canvas_id: str
    type: str
    data: dict[str, Any]
    options: dict[str, Any]


def _oceanographic_charts(summary: OceanographicSummary) -> list[ChartConfig]:
    if summary.hourly is None:
        return []
    labels = summary.hourly.time
    return [
        ChartConfig(
            canvas_id=canvas,
            type="line",
            data={
                "labels": labels,
                "datasets": [
                    {
                        "label": label,
                        "data": summary.hourly.metric(metric),
                        "borderColor": border,
                        "backgroundColor": background,
                        "tension": 0.2,
                    }
                ],
            },
            options=AXIS_OPTIONS,
        )
        for canvas, metric, label, border, background in OCEAN_SERIES
    ]


def _fisheries_charts(summary: FisheriesSummary) -> list[ChartConfig]:
    counts = [
        summary.total_fish_occurrences_obis or 0,
        summary.total_fish_occurrences_gbif or 0,
        summary.total_fish_occurrences_combined or 0,
    ]
    species = summary.sample_species[:SAMPLE_SIZE]
    return [
        ChartConfig(
            canvas_id="chart-fish-counts",
            type="bar",
            data={
                "labels": ["OBIS", "GBIF", "Combined"],
                "datasets": [
                    {
                        "label": "Fish Occurrences",
                        "data": counts,
                        "backgroundColor": ["#00bfff", "#ff6384", "#ffd700"],
                    }
                ],
            },
            options=AXIS_OPTIONS,
        ),
        ChartConfig(
            canvas_id="chart-species-top",
            type="pie",
            data={
                "labels": species,
                "datasets": [{"data": [1] * len(species), "backgroundColor": PIE_COLORS}],
            },
            options=LEGEND_OPTIONS,
        ),
    ]


def _molecular_charts(summary: MolecularSummary) -> list[ChartConfig]:
    families = summary.top_families
    return [
        ChartConfig(
            canvas_id="chart-occurrences",
            type="bar",
            data={
                "labels": ["Occurrences"],
                "datasets": [
                    {
                        "label": "Total",
                        "data": [summary.total_occurrences or 0],
                        "backgroundColor": ["#66ff99"],
                    }
                ],
            },
            options=AXIS_OPTIONS,
        ),
        ChartConfig(
            canvas_id="chart-families",
            type="doughnut",
            data={
                "labels": [f.name for f in families],
                "datasets": [
                    {"data": [f.count for f in families], "backgroundColor": DOUGHNUT_COLORS}
                ],
            },
            options=LEGEND_OPTIONS,
        ),
    ]


_BUILDERS = {
    Domain.OCEANOGRAPHIC: (OceanographicSummary, _oceanographic_charts),
    Domain.FISHERIES: (FisheriesSummary, _fisheries_charts),
    Domain.MOLECULAR: (MolecularSummary, _molecular_charts),
}


def build_charts(domain: Domain, summary: DomainSummary) -> Result[list[ChartConfig]]:
    """Construit les graphiques du domaine; échec explicite si le résumé ne correspond pas."""
    expected, builder = _BUILDERS[domain]
    if not isinstance(summary, expected):
        return Result.failure(
            f"{domain.value} charts need {expected.__name__}, got {type(summary).__name__}"
        )
    try:
        return Result.success(builder(summary))
    except (TypeError, ValueError) as exc:
        return Result.failure(f"{domain.value} charts failed: {exc}")
