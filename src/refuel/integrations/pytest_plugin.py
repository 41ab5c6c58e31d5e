from __future__ import annotations

import pytest

from refuel.registry import Registry


@pytest.fixture()
def refuel_registry() -> Registry:
    """Create a per-test registry.

    The fixture is function-scoped, so registrations are isolated between tests
    unless users override fixture scope explicitly. Override the fixture to
    pre-register shared providers or fakes.

    Returns:
        A new empty ``Registry`` instance.

    """
    return Registry()
