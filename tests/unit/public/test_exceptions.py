"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from refuel.exceptions import (
    RefuelCapabilityShapeError,
    RefuelError,
    RefuelFieldError,
    RefuelShapeError,
    RefuelUnresolvedDependencyError,
)
from tests.unit.contracts import IA


@pytest.mark.parametrize(
    "error",
    [
        RefuelShapeError("shape"),
        RefuelFieldError("field", field_name="a"),
        RefuelUnresolvedDependencyError("missing", contract=IA),
        RefuelCapabilityShapeError("accessor"),
    ],
)
def test_all_errors_share_base_class(error: Exception) -> None:
    assert isinstance(error, RefuelError)


def test_unresolved_dependency_error_keeps_contract() -> None:
    error = RefuelUnresolvedDependencyError("missing", contract=IA)

    assert error.contract is IA
    assert str(error) == "missing"


def test_field_error_keeps_field_name() -> None:
    error = RefuelFieldError("field", field_name="a")

    assert error.field_name == "a"
