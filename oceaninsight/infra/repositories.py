"""
Stockage de la dernière coordonnée consultée.

Une seule entrée nommée (par défaut `selectedCoords`) contenant `{"latitude", "longitude"}` en
JSON. Les écritures sont « best effort »: elles retournent un `Result` que l'appelant journalise
sans interrompre le rendu.
"""

from __future__ import annotations

import json
from typing import Protocol

import redis
from pydantic import ValidationError

from oceaninsight.domain.coordinates import Coordinate
from oceaninsight.domain.results import Result

DEFAULT_KEY = "selectedCoords"


class CoordinateStore(Protocol):
    """Interface de persistance: lecture, écriture, effacement."""

    def get(self) -> Coordinate | None: ...

    def set(self, coord: Coordinate) -> Result[None]: ...

    def clear(self) -> Result[None]: ...


def _encode(coord: Coordinate) -> str:
    return json.dumps({"latitude": coord.latitude, "longitude": coord.longitude})


def _decode(raw: str | bytes | None) -> Coordinate | None:
    if not raw:
        return None
    try:
        return Coordinate.model_validate(json.loads(raw))
    except (TypeError, ValueError, ValidationError):
        return None


class InMemoryCoordinateStore:
    """
    Stockage en mémoire (utilisé pour dev/tests).

    Conserve la valeur encodée dans un dict local, non persistant.
    """

    def __init__(self, key: str = DEFAULT_KEY):
        """Initialise un stockage vide pour la clé donnée."""
        self.key = key
        self._db: dict[str, str] = {}

    def get(self) -> Coordinate | None:
        return _decode(self._db.get(self.key))

    def set(self, coord: Coordinate) -> Result[None]:
        self._db[self.key] = _encode(coord)
        return Result.success()

    def clear(self) -> Result[None]:
        self._db.pop(self.key, None)
        return Result.success()


class RedisCoordinateStore:
    """Stockage adossé à Redis (clé configurable, valeur JSON)."""

    def __init__(self, url: str, key: str = DEFAULT_KEY):
        """Crée un client Redis à partir de l'URL fournie."""
        self.client = redis.Redis.from_url(url, decode_responses=True)
        self.key = key

    def get(self) -> Coordinate | None:
        """Lit la coordonnée; une erreur Redis est traitée comme une absence."""
        try:
            raw = self.client.get(self.key)
        except redis.RedisError:
            return None
        return _decode(raw)

    def set(self, coord: Coordinate) -> Result[None]:
        try:
            self.client.set(self.key, _encode(coord))
        except redis.RedisError as exc:
            return Result.failure(f"redis set failed: {exc}")
        return Result.success()

    def clear(self) -> Result[None]:
        try:
            self.client.delete(self.key)
        except redis.RedisError as exc:
            return Result.failure(f"redis delete failed: {exc}")
        return Result.success()
