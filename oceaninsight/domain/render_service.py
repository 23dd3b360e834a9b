"""Service de rendu des résumés en tableaux HTML.

Ce module convertit un résumé de domaine en panneau (titre + tableaux de cellules déjà formatées)
puis en fragment HTML via Jinja2. Toute valeur absente (None, chaîne vide, liste vide) est rendue
par un tiret.
"""

from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from oceaninsight.domain.entities import (
    HOURLY_METRICS,
    Domain,
    DomainSummary,
    FisheriesSummary,
    HourlySeries,
    MolecularSummary,
    OccurrenceRecord,
    OceanographicSummary,
)

PLACEHOLDER = "-"
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

HOURLY_HEADERS = {
    "sea_surface_temperature": "SST",
    "wave_height": "Wave H",
    "wave_direction": "Wave Dir",
    "wave_period": "Wave Per",
    "swell_wave_height": "Swell H",
    "swell_wave_direction": "Swell Dir",
    "swell_wave_period": "Swell Per",
    "wind_wave_height": "WindWave H",
    "wind_wave_direction": "WindWave Dir",
    "wind_wave_period": "WindWave Per",
}
OCCURRENCE_HEADERS = ["Scientific Name", "Date", "Depth (m)"]


def display(value, suffix: str = "") -> str:
    """Texte affichable d'une valeur, ou tiret si elle est absente.

    Les listes sont jointes par des virgules; le suffixe n'est ajouté qu'aux valeurs présentes.
    """
    if value is None or value == "":
        return PLACEHOLDER
    if isinstance(value, list | tuple):
        if not value:
            return PLACEHOLDER
        return ", ".join(str(v) for v in value) + suffix
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}{suffix}"


class Table(BaseModel):
    """Tableau prêt à rendre.

    `key_value`: chaque ligne est (libellé, valeur) avec le libellé en en-tête de ligne.
    """

    aria_label: str
    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)
    key_value: bool = False
    scroll: bool = False

    @property
    def width(self) -> int:
        return max(len(self.headers), 1)


class Panel(BaseModel):
    title: str
    tables: list[Table]


def _at(values: list, index: int):
    return values[index] if index < len(values) else None


def _unit_suffix(units: dict[str, str], metric: str) -> str:
    unit = units.get(metric) or ""
    return f" {unit}" if unit else ""


def hourly_rows(series: HourlySeries, units: dict[str, str]) -> list[list[str]]:
    """Une ligne par horodatage; chaque métrique est lue au même index, tiret si trop courte."""
    rows = []
    for i, timestamp in enumerate(series.time):
        row = [display(timestamp)]
        for metric in HOURLY_METRICS:
            row.append(display(_at(series.metric(metric), i), _unit_suffix(units, metric)))
        rows.append(row)
    return rows


def occurrence_rows(records: list[OccurrenceRecord]) -> list[list[str]]:
    return [
        [display(r.scientific_name), display(r.event_date), display(r.depth_meters)]
        for r in records
    ]


def _oceanographic_panel(summary: OceanographicSummary) -> Panel:
    if summary.hourly is not None:
        units = summary.units
        headers = ["Time (UTC)"] + [
            f"{HOURLY_HEADERS[m]} ({units.get(m) or ''})" for m in HOURLY_METRICS
        ]
        table = Table(
            aria_label="Oceanographic Hourly Data",
            headers=headers,
            rows=hourly_rows(summary.hourly, units),
            scroll=True,
        )
        return Panel(title="Oceanographic (hourly)", tables=[table])

    table = Table(
        aria_label="Oceanographic Data",
        key_value=True,
        rows=[
            ["Timestamp (UTC)", display(summary.time_iso)],
            ["Sea Surface Temperature", display(summary.sea_surface_temperature_c, " °C")],
            ["Salinity", display(summary.salinity_psu, " PSU")],
            ["Chlorophyll-a", display(summary.chlorophyll_mg_m3, " mg/m³")],
            ["Significant Wave Height", display(summary.wave_height_m, " m")],
        ],
    )
    return Panel(title="Oceanographic", tables=[table])


def _fisheries_panel(summary: FisheriesSummary) -> Panel:
    metrics = Table(
        aria_label="Fisheries Data",
        key_value=True,
        rows=[
            ["Predicted Catch Index", display(summary.predicted_catch_index)],
            ["Dominant Species", display(summary.dominant_species)],
            ["Habitat Suitability", display(summary.habitat_suitability, "%")],
            ["Advisory", display(summary.advisories)],
            ["Total Fish Occurrences (OBIS)", display(summary.total_fish_occurrences_obis)],
            ["Total Fish Occurrences (GBIF)", display(summary.total_fish_occurrences_gbif)],
            [
                "Total Fish Occurrences (Combined)",
                display(summary.total_fish_occurrences_combined),
            ],
            ["Sample Species", display(summary.sample_species)],
        ],
    )
    obis = Table(
        aria_label="Fish Occurrences (OBIS)",
        headers=OCCURRENCE_HEADERS,
        rows=occurrence_rows(summary.fish_occurrences),
    )
    gbif = Table(
        aria_label="Fish Occurrences (GBIF)",
        headers=OCCURRENCE_HEADERS,
        rows=occurrence_rows(summary.fish_occurrences_gbif),
    )
    return Panel(title="Fisheries", tables=[metrics, obis, gbif])


def _molecular_panel(summary: MolecularSummary) -> Panel:
    metrics = Table(
        aria_label="Molecular Biodiversity Data",
        key_value=True,
        rows=[
            ["eDNA Diversity Index", display(summary.e_dna_diversity_index)],
            ["Potential Taxa Detected", display(summary.potential_taxa_detected)],
            ["Invasive Risk", display(summary.invasive_risk)],
            ["Marker Genes", display(summary.marker_genes)],
            ["Total Occurrences (OBIS)", display(summary.total_occurrences)],
            ["Top Families", display(summary.top_families)],
            ["Top Genera", display(summary.top_genera)],
        ],
    )
    occurrences = Table(
        aria_label="Occurrences",
        headers=OCCURRENCE_HEADERS,
        rows=occurrence_rows(summary.occurrences),
    )
    return Panel(title="Molecular Biodiversity", tables=[metrics, occurrences])


_PANELS = {
    Domain.OCEANOGRAPHIC: (OceanographicSummary, _oceanographic_panel),
    Domain.FISHERIES: (FisheriesSummary, _fisheries_panel),
    Domain.MOLECULAR: (MolecularSummary, _molecular_panel),
}


def build_panel(domain: Domain, summary: DomainSummary | None) -> Panel:
    """Panneau du domaine; un résumé absent ou d'un autre domaine est rendu vide."""
    expected, builder = _PANELS[domain]
    if not isinstance(summary, expected):
        summary = expected()
    return builder(summary)


def render_summary(domain: Domain, summary: DomainSummary | None) -> str:
    """Fragment HTML (titre + tableaux) pour un résumé de domaine."""
    return templates.get_template("partials/panel.html").render(panel=build_panel(domain, summary))
