"""
Entités du domaine métier.

Ce module définit les modèles de données affichés par le tableau de bord: enregistrements
d'occurrence normalisés, séries horaires marines et résumés par domaine (océanographie, pêche,
biodiversité moléculaire).
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from oceaninsight.domain.coordinates import Coordinate

HOURLY_METRICS: tuple[str, ...] = (
    "sea_surface_temperature",
    "wave_height",
    "wave_direction",
    "wave_period",
    "swell_wave_height",
    "swell_wave_direction",
    "swell_wave_period",
    "wind_wave_height",
    "wind_wave_direction",
    "wind_wave_period",
)


class Domain(StrEnum):
    """Les trois vues du tableau de bord."""

    OCEANOGRAPHIC = "oceanographic"
    FISHERIES = "fisheries"
    MOLECULAR = "molecular"

    @property
    def path(self) -> str:
        """Chemin de la page de détail."""
        return _PAGE_PATHS[self]

    @property
    def label(self) -> str:
        return _PAGE_LABELS[self]


_PAGE_PATHS = {
    Domain.OCEANOGRAPHIC: "/oceanographic",
    Domain.FISHERIES: "/fisheries",
    Domain.MOLECULAR: "/molecular-biodiversity",
}
_PAGE_LABELS = {
    Domain.OCEANOGRAPHIC: "Oceanographic",
    Domain.FISHERIES: "Fisheries",
    Domain.MOLECULAR: "Molecular Biodiversity",
}


class OccurrenceRecord(BaseModel):
    """Occurrence normalisée; un champ absent à la source reste None (jamais déduit)."""

    scientific_name: str | None = None
    event_date: str | None = None
    depth_meters: float | None = None
    family: str | None = None
    genus: str | None = None
    taxon_class: str | None = None


class TaxonCount(BaseModel):
    """Taxon et nombre d'occurrences (top familles/genres)."""

    name: str
    count: int

    def __str__(self) -> str:
        return f"{self.name} ({self.count})"


class HourlySeries(BaseModel):
    """Séries horaires parallèles (une liste par métrique, alignées sur `time`)."""

    time: list[str] = Field(default_factory=list)
    sea_surface_temperature: list[float | None] = Field(default_factory=list)
    wave_height: list[float | None] = Field(default_factory=list)
    wave_direction: list[float | None] = Field(default_factory=list)
    wave_period: list[float | None] = Field(default_factory=list)
    swell_wave_height: list[float | None] = Field(default_factory=list)
    swell_wave_direction: list[float | None] = Field(default_factory=list)
    swell_wave_period: list[float | None] = Field(default_factory=list)
    wind_wave_height: list[float | None] = Field(default_factory=list)
    wind_wave_direction: list[float | None] = Field(default_factory=list)
    wind_wave_period: list[float | None] = Field(default_factory=list)

    def metric(self, name: str) -> list[float | None]:
        return getattr(self, name)


class MarineForecast(BaseModel):
    """Réponse normalisée de la source météo marine."""

    hourly: HourlySeries
    units: dict[str, str] = Field(default_factory=dict)


class OceanographicSummary(BaseModel):
    """
    Résumé océanographique.

    Deux formes: série horaire (`hourly` + `units`, données réelles) ou valeurs ponctuelles
    (données simulées). Un résumé vide n'a ni l'une ni l'autre.
    """

    hourly: HourlySeries | None = None
    units: dict[str, str] = Field(default_factory=dict)
    time_iso: str | None = None
    sea_surface_temperature_c: str | None = None
    salinity_psu: str | None = None
    chlorophyll_mg_m3: str | None = None
    wave_height_m: str | None = None


class FisheriesSummary(BaseModel):
    """Résumé halieutique (indices dérivés des occurrences de poissons osseux)."""

    predicted_catch_index: int | None = None
    dominant_species: str | None = None
    habitat_suitability: int | None = None
    advisories: str | None = None
    total_fish_occurrences_obis: int | None = None
    total_fish_occurrences_gbif: int | None = None
    total_fish_occurrences_combined: int | None = None
    sample_species: list[str] = Field(default_factory=list)
    fish_occurrences: list[OccurrenceRecord] = Field(default_factory=list)
    fish_occurrences_gbif: list[OccurrenceRecord] = Field(default_factory=list)


class MolecularSummary(BaseModel):
    """Résumé de biodiversité moléculaire (indices eDNA approchés par les occurrences)."""

    e_dna_diversity_index: str | None = None
    potential_taxa_detected: int | None = None
    invasive_risk: str | None = None
    marker_genes: list[str] = Field(default_factory=list)
    top_taxa: list[str] = Field(default_factory=list)
    total_occurrences: int | None = None
    top_families: list[TaxonCount] = Field(default_factory=list)
    top_genera: list[TaxonCount] = Field(default_factory=list)
    occurrences: list[OccurrenceRecord] = Field(default_factory=list)


DomainSummary = OceanographicSummary | FisheriesSummary | MolecularSummary

SUMMARY_TYPES: dict[Domain, type[BaseModel]] = {
    Domain.OCEANOGRAPHIC: OceanographicSummary,
    Domain.FISHERIES: FisheriesSummary,
    Domain.MOLECULAR: MolecularSummary,
}


def empty_summary(domain: Domain) -> DomainSummary:
    """Résumé vide (toutes les valeurs rendues en tiret)."""
    return SUMMARY_TYPES[domain]()


class DashboardSnapshot(BaseModel):
    """Les trois résumés calculés pour une coordonnée."""

    oceanographic: OceanographicSummary = Field(default_factory=OceanographicSummary)
    fisheries: FisheriesSummary = Field(default_factory=FisheriesSummary)
    molecular: MolecularSummary = Field(default_factory=MolecularSummary)

    def for_domain(self, domain: Domain) -> DomainSummary:
        return getattr(self, domain.value)


class DashboardState(BaseModel):
    """État partagé du tableau de bord: dernière coordonnée consultée."""

    last_coordinate: Coordinate | None = None
