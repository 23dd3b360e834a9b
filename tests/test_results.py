"""Tests du résultat explicite (succès/échec) des opérations non critiques."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from oceaninsight.domain.results import Result


def test_success_carries_value() -> None:
    result = Result.success([1, 2])
    assert result.ok
    assert result.value == [1, 2]
    assert result.error is None
    assert result.unwrap_or([]) == [1, 2]


def test_failure_falls_back_to_default() -> None:
    result = Result.failure("redis set failed")
    assert not result.ok
    assert result.error == "redis set failed"
    assert result.unwrap_or("default") == "default"


def test_result_is_immutable() -> None:
    result = Result.success()
    with pytest.raises(ValidationError):
        result.ok = False
