"""Résultat explicite des opérations à effet de bord non critiques.

La persistance de la coordonnée, la construction des graphiques ou la soumission du formulaire
retournent un `Result` au lieu de lever: l'appelant décide de journaliser et continuer.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class Result(BaseModel, Generic[T]):
    """Succès (avec valeur) ou échec (avec message d'erreur)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> Result[T]:
        return cls(ok=False, error=error)

    def unwrap_or(self, default: T) -> T:
        """Retourne la valeur en cas de succès, sinon `default`."""
        if self.ok and self.value is not None:
            return self.value
        return default
