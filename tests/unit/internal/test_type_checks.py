from __future__ import annotations

import itertools
from collections import OrderedDict, deque
from decimal import Decimal
from typing import Protocol

import pytest

from refuel._internal.type_checks import (
    is_contract,
    is_provider_instance,
    is_runtime_class,
    type_name,
)
from tests.unit.contracts import IA, EmailNotifier, Notifier, ProcA


@pytest.mark.parametrize("candidate", [IA, Notifier])
def test_protocols_and_abstract_classes_are_contracts(candidate: object) -> None:
    assert is_contract(candidate)


@pytest.mark.parametrize(
    "candidate",
    [ProcA, EmailNotifier, int, Protocol, list[IA], "IA", None],
)
def test_other_values_are_not_contracts(candidate: object) -> None:
    assert not is_contract(candidate)


def test_generic_aliases_are_not_runtime_classes() -> None:
    assert is_runtime_class(ProcA)
    assert not is_runtime_class(list[int])


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [(ProcA(), True), (ProcA, False), (None, False), (3, False), (print, False)],
)
def test_provider_instances(candidate: object, expected: bool) -> None:
    assert is_provider_instance(candidate) is expected


def test_type_name_uses_qualname() -> None:
    assert type_name(IA) == "IA"
    assert type_name(3) == "3"


class SlottedRecord:
    __slots__ = ("value",)


@pytest.mark.parametrize(
    "candidate",
    [OrderedDict(), deque(), Decimal("1.5"), itertools.count()],
)
def test_values_and_collections_outside_builtins_are_not_providers(candidate: object) -> None:
    assert not is_provider_instance(candidate)


def test_slotted_instances_are_providers() -> None:
    assert is_provider_instance(SlottedRecord())
