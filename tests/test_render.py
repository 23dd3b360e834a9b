"""Tests du rendu des résumés en tableaux (tirets, séries irrégulières, fragments HTML)."""

from __future__ import annotations

from conftest import make_forecast, make_record

from oceaninsight.domain.entities import (
    Domain,
    FisheriesSummary,
    HourlySeries,
    MolecularSummary,
    OceanographicSummary,
    TaxonCount,
)
from oceaninsight.domain.render_service import (
    PLACEHOLDER,
    build_panel,
    display,
    hourly_rows,
    render_summary,
)

# Constantes pour éviter les erreurs PLR2004 (Magic values)
EXPECTED_COUNT_3 = 3
HOURLY_COLUMNS = 11


def test_display_placeholder_for_missing_values() -> None:
    assert display(None) == PLACEHOLDER
    assert display("") == PLACEHOLDER
    assert display([]) == PLACEHOLDER
    assert display(None, " m") == PLACEHOLDER


def test_display_formats_present_values() -> None:
    assert display(0) == "0"
    assert display(3.0) == "3"
    assert display(2.5, " m") == "2.5 m"
    assert display(["COI", "16S"]) == "COI, 16S"
    assert display([TaxonCount(name="Clupeidae", count=4)]) == "Clupeidae (4)"


def test_hourly_rows_ragged_arrays() -> None:
    """Une métrique plus courte que `time` est rendue en tiret aux index manquants."""
    series = HourlySeries(
        time=["t0", "t1", "t2"],
        sea_surface_temperature=[20.0],
        wave_height=[1.0, None, 1.4],
    )
    rows = hourly_rows(series, {"sea_surface_temperature": "°C"})
    assert len(rows) == EXPECTED_COUNT_3
    assert all(len(row) == HOURLY_COLUMNS for row in rows)
    assert rows[0][:3] == ["t0", "20 °C", "1"]
    assert rows[1][:3] == ["t1", PLACEHOLDER, PLACEHOLDER]
    assert rows[2][:3] == ["t2", PLACEHOLDER, "1.4"]


def test_oceanographic_hourly_panel_headers_carry_units() -> None:
    forecast = make_forecast()
    panel = build_panel(
        Domain.OCEANOGRAPHIC,
        OceanographicSummary(hourly=forecast.hourly, units=forecast.units),
    )
    table = panel.tables[0]
    assert panel.title == "Oceanographic (hourly)"
    assert table.headers[0] == "Time (UTC)"
    assert table.headers[1] == "SST (°C)"
    assert table.headers[3] == "Wave Dir ()"
    assert table.scroll is True


def test_oceanographic_point_panel_suffixes() -> None:
    summary = OceanographicSummary(sea_surface_temperature_c="24.1", wave_height_m="1.20")
    rows = build_panel(Domain.OCEANOGRAPHIC, summary).tables[0].rows
    values = dict((label, value) for label, value in rows)
    assert values["Sea Surface Temperature"] == "24.1 °C"
    assert values["Significant Wave Height"] == "1.20 m"
    assert values["Salinity"] == PLACEHOLDER
    assert values["Timestamp (UTC)"] == PLACEHOLDER


def test_empty_fisheries_panel_is_all_dashes() -> None:
    panel = build_panel(Domain.FISHERIES, None)
    metrics, obis, gbif = panel.tables
    assert all(value == PLACEHOLDER for _, value in metrics.rows)
    assert obis.rows == []
    assert gbif.rows == []


def test_mismatched_summary_renders_empty_panel() -> None:
    panel = build_panel(Domain.FISHERIES, MolecularSummary(total_occurrences=5))
    assert panel.title == "Fisheries"
    assert all(value == PLACEHOLDER for _, value in panel.tables[0].rows)


def test_fisheries_panel_values() -> None:
    summary = FisheriesSummary(
        predicted_catch_index=28,
        habitat_suitability=43,
        sample_species=["Sardina pilchardus", "Thunnus thynnus"],
        fish_occurrences=[make_record("Sardina pilchardus", depth=12.0)],
    )
    metrics, obis, _ = build_panel(Domain.FISHERIES, summary).tables
    values = dict((label, value) for label, value in metrics.rows)
    assert values["Habitat Suitability"] == "43%"
    assert values["Sample Species"] == "Sardina pilchardus, Thunnus thynnus"
    assert obis.rows == [["Sardina pilchardus", "2023-06-01", "12"]]


def test_render_summary_html_contains_placeholders() -> None:
    html = render_summary(Domain.MOLECULAR, MolecularSummary())
    assert "<h4>Molecular Biodiversity</h4>" in html
    assert 'aria-label="Occurrences"' in html
    assert '<td colspan="3">-</td>' in html
    assert "<th>Invasive Risk</th><td>-</td>" in html
