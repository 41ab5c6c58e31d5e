from __future__ import annotations

from typing import Any


class RefuelError(Exception):
    """Represent a base class for all refuel-specific failures.

    Catch this type when you want to halt startup on any registration failure
    without matching each concrete exception class individually.
    """


class RefuelShapeError(RefuelError):
    """Signal a provider or dependency block with an unsupported shape.

    Raised by ``Registry.register`` when the candidate is not a provider
    instance, and when the dependency block is not a dataclass or holds a class
    reference instead of an instance. Providers are instances of non-builtin
    classes that can hold attributes (``__dict__`` or ``__slots__``). Classes,
    ``None``, numbers, mappings, sequences and sets are rejected.

    Typical fixes include passing an instance (``registry.register(Service())``)
    and declaring the dependency block as a dataclass annotation on the provider.
    """


class RefuelFieldError(RefuelError):
    """Signal an invalid member of a dependency block.

    Raised when a dependency field cannot be assigned from outside the block
    (private name, ``init=False`` or a frozen dataclass) or when its annotation
    is a concrete type rather than a contract.

    Typical fixes include annotating every block field with a ``Protocol`` or
    abstract class and keeping the block dataclass mutable.
    """

    def __init__(self, message: str, *, field_name: str) -> None:
        super().__init__(message)
        self.field_name = field_name


class RefuelUnresolvedDependencyError(RefuelError):
    """Signal that a required contract has no registered provider.

    Raised by ``Registry.register`` when a dependency block references a
    contract nobody has registered yet, and by ``Registry.lookup``.

    Providers must be registered in dependency order: register the provider of
    the missing contract before its dependents.
    """

    def __init__(self, message: str, *, contract: Any) -> None:
        super().__init__(message)
        self.contract = contract


class RefuelCapabilityShapeError(RefuelError):
    """Signal a capability accessor with an invalid signature.

    The accessor (``provide`` by default) must be a method taking no arguments
    and annotated to return exactly one contract type.
    """
