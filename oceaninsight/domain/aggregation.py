"""
Agrégation des occurrences en indicateurs affichables.

Objectif: à partir des occurrences brutes (OBIS, GBIF), dériver des indices simples et stables:
nombre de taxons uniques, indice de diversité plafonné, top familles/genres, indices de pêche.
Une liste vide ne lève jamais: chaque indicateur retombe sur sa valeur de base.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

from oceaninsight.core.http_constants import MAX_DETAIL_ROWS, SAMPLE_SIZE, TOP_K
from oceaninsight.domain.entities import (
    FisheriesSummary,
    MolecularSummary,
    OccurrenceRecord,
    TaxonCount,
)

BONY_FISH_CLASS = "actinopterygii"
MARKER_GENES = ["COI", "16S", "18S"]

DIVERSITY_CAP = 0.95
DIVERSITY_SCALE = 100
MODERATE_RISK_THRESHOLD = 50

CATCH_INDEX_MIN, CATCH_INDEX_MAX = 20, 95
HABITAT_BASE, HABITAT_MAX = 40, 98
FAVORABLE_THRESHOLD = 10
ADVISORY_FAVORABLE = "Conditions favorable for small-scale fishing"
ADVISORY_SURVEY = "Survey area recommended"
UNKNOWN_SPECIES = "Unknown"


def unique_in_order(values: Iterable[str | None]) -> list[str]:
    """Valeurs non vides, dédoublonnées, dans l'ordre de première apparition."""
    return list(dict.fromkeys(v for v in values if v))


def top_k(values: Iterable[str | None], k: int = TOP_K) -> list[TaxonCount]:
    """
    Les `k` valeurs les plus fréquentes, par compte décroissant.

    À égalité, l'ordre de première apparition est conservé (tri stable sur un Counter, qui
    conserve l'ordre d'insertion).
    """
    counts = Counter(v for v in values if v)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [TaxonCount(name=name, count=count) for name, count in ranked[:k]]


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def aggregate_biodiversity(records: list[OccurrenceRecord]) -> MolecularSummary:
    """Résumé de biodiversité moléculaire à partir des occurrences OBIS."""
    taxa = unique_in_order(r.scientific_name for r in records)
    n = len(taxa)
    diversity = f"{min(n / DIVERSITY_SCALE, DIVERSITY_CAP):.2f}" if n > 0 else "0.00"
    return MolecularSummary(
        e_dna_diversity_index=diversity,
        potential_taxa_detected=n,
        invasive_risk="Moderate" if n > MODERATE_RISK_THRESHOLD else "Low",
        marker_genes=list(MARKER_GENES),
        top_taxa=taxa[:SAMPLE_SIZE],
        total_occurrences=len(records),
        top_families=top_k(r.family for r in records),
        top_genera=top_k(r.genus for r in records),
        occurrences=records[:MAX_DETAIL_ROWS],
    )


def is_bony_fish(record: OccurrenceRecord) -> bool:
    return (record.taxon_class or "").lower() == BONY_FISH_CLASS


def aggregate_fisheries(
    obis_records: list[OccurrenceRecord], gbif_fish: list[OccurrenceRecord]
) -> FisheriesSummary:
    """
    Résumé halieutique combinant OBIS (filtré aux poissons osseux) et GBIF.

    Démarche:
    - Union des noms scientifiques (OBIS d'abord, puis les nouveaux noms GBIF).
    - Indices proportionnels au nombre total d'occurrences de poissons, bornés.
    - Espèce dominante: premier nom combiné, sinon premier enregistrement de l'une ou l'autre
      source, sinon "Unknown".
    """
    obis_fish = [r for r in obis_records if is_bony_fish(r)]
    combined = unique_in_order(
        [r.scientific_name for r in obis_fish] + [r.scientific_name for r in gbif_fish]
    )
    dominant = (
        (combined[0] if combined else None)
        or (obis_records[0].scientific_name if obis_records else None)
        or (gbif_fish[0].scientific_name if gbif_fish else None)
        or UNKNOWN_SPECIES
    )

    obis_count = len(obis_fish)
    gbif_count = len(gbif_fish)
    total = obis_count + gbif_count

    return FisheriesSummary(
        predicted_catch_index=min(CATCH_INDEX_MAX, max(CATCH_INDEX_MIN, total * 2 + 20)),
        dominant_species=dominant,
        habitat_suitability=min(HABITAT_MAX, HABITAT_BASE + round_half_up(total * 0.8)),
        advisories=ADVISORY_FAVORABLE if total > FAVORABLE_THRESHOLD else ADVISORY_SURVEY,
        total_fish_occurrences_obis=obis_count,
        total_fish_occurrences_gbif=gbif_count,
        total_fish_occurrences_combined=total,
        sample_species=combined[:SAMPLE_SIZE],
        fish_occurrences=obis_fish[:MAX_DETAIL_ROWS],
        fish_occurrences_gbif=gbif_fish[:MAX_DETAIL_ROWS],
    )
