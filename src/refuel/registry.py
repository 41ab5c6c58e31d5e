from __future__ import annotations

import logging
from typing import Any, TypeVar

from refuel._internal.type_checks import type_name
from refuel.capabilities import CapabilityExtractor
from refuel.defaults import DEFAULT_DEPENDENCIES_ATTRIBUTE, DEFAULT_PROVIDE_METHOD_NAME
from refuel.exceptions import RefuelUnresolvedDependencyError
from refuel.injection import DependencyInjector

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Registry:
    """Map contracts to the providers that implement them.

    Providers are plain objects. A provider may declare a dependency block, a
    dataclass whose fields are annotated with contracts, and may expose a
    capability accessor, a zero-argument method annotated to return the
    contract it offers.

    ``register`` first injects the dependency block from providers registered
    earlier, then publishes the provider under the contract it offers. Providers
    must therefore be registered in dependency order. Registering a second
    provider for the same contract replaces the first one for later lookups.

    The registry performs no locking. Serialize ``register`` calls, typically by
    registering everything once during application startup.
    """

    def __init__(
        self,
        *,
        provide_method_name: str = DEFAULT_PROVIDE_METHOD_NAME,
        dependencies_attribute: str = DEFAULT_DEPENDENCIES_ATTRIBUTE,
    ) -> None:
        """Initialize an empty registry.

        Args:
            provide_method_name: Name of the capability accessor looked up on providers.
            dependencies_attribute: Name of the provider attribute holding the
                dependency block.

        Examples:
            .. code-block:: python

                registry = Registry()
                registry.register(ProcessA())
                registry.register(ProcessB())

        """
        self._capability_extractor = CapabilityExtractor(provide_method_name=provide_method_name)
        self._dependency_injector = DependencyInjector(
            dependencies_attribute=dependencies_attribute,
            capability_extractor=self._capability_extractor,
        )
        self._providers: dict[type[Any], object] = {}

    def register(self, instance: object) -> None:
        """Inject the dependencies of ``instance`` and publish the contract it offers.

        The registry mapping is only written after both steps succeed. A failed
        call leaves the mapping unchanged; the failed instance should be
        discarded.

        Args:
            instance: Provider instance to wire and register.

        Raises:
            RefuelShapeError: The provider or its dependency block has an invalid shape.
            RefuelFieldError: A dependency block field is invalid.
            RefuelUnresolvedDependencyError: A required contract has no provider yet.
            RefuelCapabilityShapeError: The capability accessor is malformed.

        """
        self._dependency_injector.inject(instance, self._providers)

        contract = self._capability_extractor.extract(instance)
        if contract is None:
            logger.debug("Registered '%s' without a provided contract", type_name(type(instance)))
            return

        previous = self._providers.get(contract)
        if previous is not None and previous is not instance:
            logger.debug(
                "Provider '%s' replaces '%s' for contract '%s'",
                type_name(type(instance)),
                type_name(type(previous)),
                type_name(contract),
            )
        self._providers[contract] = instance
        logger.debug(
            "Registered '%s' as provider of '%s'",
            type_name(type(instance)),
            type_name(contract),
        )

    def find(self, contract: type[T]) -> object | None:
        """Get the provider registered for ``contract``, if it exists.

        Args:
            contract: Contract type to look up.

        """
        return self._providers.get(contract)

    def lookup(self, contract: type[T]) -> object:
        """Get the provider registered for ``contract``.

        Args:
            contract: Contract type to look up.

        Raises:
            RefuelUnresolvedDependencyError: No provider is registered for ``contract``.

        """
        provider = self._providers.get(contract)
        if provider is None:
            msg = f"No implementation found for contract '{type_name(contract)}'."
            raise RefuelUnresolvedDependencyError(msg, contract=contract)
        return provider

    def provide(self, contract: type[T]) -> T:
        """Return the value the registered provider surfaces for ``contract``.

        This is the same value the injector assigns into dependency fields.

        Args:
            contract: Contract type to resolve.

        """
        return self._capability_extractor.provide(self.lookup(contract))

    def contracts(self) -> list[type[Any]]:
        """Get all contracts that currently have a provider."""
        return list(self._providers)

    def __contains__(self, contract: object) -> bool:
        return contract in self._providers

    def __len__(self) -> int:
        return len(self._providers)
