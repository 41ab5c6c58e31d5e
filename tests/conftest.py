"""Shared pytest fixtures for refuel tests."""

import pytest

from refuel.capabilities import CapabilityExtractor
from refuel.injection import DependencyInjector
from refuel.registry import Registry


@pytest.fixture()
def registry() -> Registry:
    """Empty registry with default accessor and dependency block names."""
    return Registry()


@pytest.fixture()
def capability_extractor() -> CapabilityExtractor:
    """CapabilityExtractor instance."""
    return CapabilityExtractor()


@pytest.fixture()
def dependency_injector() -> DependencyInjector:
    """DependencyInjector instance."""
    return DependencyInjector()
