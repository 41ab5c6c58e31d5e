from __future__ import annotations

import inspect
import types
from typing import Any, TypeGuard

from typing_extensions import is_protocol

from refuel.defaults import DEFAULT_NON_PROVIDER_TYPES


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_contract(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is an abstract capability type.

    Protocol classes and abstract base classes qualify. Concrete classes,
    primitives and parametrized aliases do not.

    Args:
        candidate: Annotation being checked.

    """
    if not is_runtime_class(candidate):
        return False
    return is_protocol(candidate) or inspect.isabstract(candidate)


def is_provider_instance(candidate: object) -> bool:
    """Return true when candidate is an instance of a mutable record class.

    Classes, builtin values, numbers and collections are rejected, as are
    instances that cannot hold attributes (no ``__dict__`` and no ``__slots__``).

    Args:
        candidate: Value passed as a provider.

    """
    if isinstance(candidate, type) or isinstance(candidate, DEFAULT_NON_PROVIDER_TYPES):
        return False
    candidate_type = type(candidate)
    if candidate_type.__module__ == "builtins":
        return False
    return hasattr(candidate, "__dict__") or any(
        "__slots__" in vars(klass) for klass in candidate_type.__mro__ if klass is not object
    )


def type_name(value: Any) -> str:
    return getattr(value, "__qualname__", repr(value))


__all__ = ["is_contract", "is_provider_instance", "is_runtime_class", "type_name"]
