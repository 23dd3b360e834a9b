"""Tests des configurations de graphiques par domaine."""

from __future__ import annotations

from conftest import make_forecast

from oceaninsight.domain.charts import build_charts
from oceaninsight.domain.entities import (
    Domain,
    FisheriesSummary,
    MolecularSummary,
    OceanographicSummary,
    TaxonCount,
)


def test_oceanographic_without_hourly_has_no_chart() -> None:
    result = build_charts(Domain.OCEANOGRAPHIC, OceanographicSummary(salinity_psu="35.0"))
    assert result.ok
    assert result.value == []


def test_oceanographic_line_charts_share_time_labels() -> None:
    forecast = make_forecast()
    summary = OceanographicSummary(hourly=forecast.hourly, units=forecast.units)

    charts = build_charts(Domain.OCEANOGRAPHIC, summary).unwrap_or([])

    assert [c.canvas_id for c in charts] == ["chart-sst", "chart-wave", "chart-swell"]
    assert all(c.type == "line" for c in charts)
    assert charts[0].data["labels"] == forecast.hourly.time
    assert charts[1].data["datasets"][0]["data"] == [1.2]


def test_fisheries_charts() -> None:
    summary = FisheriesSummary(
        total_fish_occurrences_obis=1,
        total_fish_occurrences_gbif=2,
        total_fish_occurrences_combined=3,
        sample_species=["A", "B"],
    )
    counts, species = build_charts(Domain.FISHERIES, summary).unwrap_or([])
    assert counts.type == "bar"
    assert counts.data["labels"] == ["OBIS", "GBIF", "Combined"]
    assert counts.data["datasets"][0]["data"] == [1, 2, 3]
    assert species.type == "pie"
    assert species.data["datasets"][0]["data"] == [1, 1]


def test_empty_fisheries_counts_are_zero() -> None:
    counts, species = build_charts(Domain.FISHERIES, FisheriesSummary()).unwrap_or([])
    assert counts.data["datasets"][0]["data"] == [0, 0, 0]
    assert species.data["labels"] == []


def test_molecular_charts() -> None:
    summary = MolecularSummary(
        total_occurrences=12,
        top_families=[TaxonCount(name="Clupeidae", count=5), TaxonCount(name="Gadidae", count=2)],
    )
    occurrences, families = build_charts(Domain.MOLECULAR, summary).unwrap_or([])
    assert occurrences.data["datasets"][0]["data"] == [12]
    assert families.type == "doughnut"
    assert families.data["labels"] == ["Clupeidae", "Gadidae"]
    assert families.data["datasets"][0]["data"] == [5, 2]


def test_mismatched_summary_is_a_failure() -> None:
    result = build_charts(Domain.MOLECULAR, FisheriesSummary())
    assert not result.ok
    assert "MolecularSummary" in result.error
