from refuel.capabilities import CapabilityExtractor
from refuel.exceptions import (
    RefuelCapabilityShapeError,
    RefuelError,
    RefuelFieldError,
    RefuelShapeError,
    RefuelUnresolvedDependencyError,
)
from refuel.injection import DependencyInjector
from refuel.registry import Registry

__all__ = [
    "CapabilityExtractor",
    "DependencyInjector",
    "RefuelCapabilityShapeError",
    "RefuelError",
    "RefuelFieldError",
    "RefuelShapeError",
    "RefuelUnresolvedDependencyError",
    "Registry",
]
