"""Schémas des réponses JSON des sources amont (Open-Meteo Marine, OBIS, GBIF).

Tous les champs sont optionnels: un champ absent devient None. Une valeur scalaire mal typée
(ex: profondeur non numérique) est ramenée à None au lieu d'invalider toute la réponse.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _lenient_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        out = float(value)
    except (TypeError, ValueError):
        return None
    return out if math.isfinite(out) else None


def _lenient_str(value: Any) -> str | None:
    if value is None or isinstance(value, dict | list):
        return None
    text = str(value)
    return text or None


def _lenient_int(value: Any) -> int | None:
    number = _lenient_float(value)
    return int(number) if number is not None else None


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# --- Open-Meteo Marine ---


class MarineHourly(_Payload):
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

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        # "hourly": {"wave_height": null} quand la variable n'existe pas au point demandé
        return [] if value is None else value


class MarineResponse(_Payload):
    hourly: MarineHourly | None = None
    hourly_units: dict[str, str] | None = None


# --- OBIS ---


class ObisRecord(_Payload):
    scientificName: str | None = None
    family: str | None = None
    genus: str | None = None
    class_: str | None = Field(default=None, alias="class")
    eventDate: str | None = None
    minimumDepthInMeters: float | None = None
    maximumDepthInMeters: float | None = None
    depth: float | None = None

    @field_validator("scientificName", "family", "genus", "class_", "eventDate", mode="before")
    @classmethod
    def _strings(cls, value: Any) -> str | None:
        return _lenient_str(value)

    @field_validator("minimumDepthInMeters", "maximumDepthInMeters", "depth", mode="before")
    @classmethod
    def _floats(cls, value: Any) -> float | None:
        return _lenient_float(value)


class ObisResponse(_Payload):
    results: list[ObisRecord] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _results_list(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]


# --- GBIF ---


class GbifTaxon(_Payload):
    scientificName: str | None = None


class GbifRecord(_Payload):
    scientificName: str | None = None
    species: str | None = None
    genericName: str | None = None
    taxon: GbifTaxon | None = None
    eventDate: str | None = None
    year: int | None = None
    month: int | None = None
    day: int | None = None
    depth: float | None = None
    minimumDepthInMeters: float | None = None
    decimalDepth: float | None = None
    family: str | None = None
    genus: str | None = None
    class_: str | None = Field(default=None, alias="class")

    @field_validator(
        "scientificName", "species", "genericName", "eventDate", "family", "genus", "class_",
        mode="before",
    )
    @classmethod
    def _strings(cls, value: Any) -> str | None:
        return _lenient_str(value)

    @field_validator("year", "month", "day", mode="before")
    @classmethod
    def _ints(cls, value: Any) -> int | None:
        return _lenient_int(value)

    @field_validator("depth", "minimumDepthInMeters", "decimalDepth", mode="before")
    @classmethod
    def _floats(cls, value: Any) -> float | None:
        return _lenient_float(value)

    @field_validator("taxon", mode="before")
    @classmethod
    def _taxon(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None


class GbifResponse(_Payload):
    results: list[GbifRecord] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _results_list(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]
