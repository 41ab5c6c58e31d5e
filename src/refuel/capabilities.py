from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, get_origin, get_type_hints

from refuel._internal.type_checks import is_contract, type_name
from refuel.defaults import DEFAULT_PROVIDE_METHOD_NAME
from refuel.exceptions import RefuelCapabilityShapeError

_MISSING = object()


@dataclass(slots=True)
class CapabilityExtractor:
    """Extracts the contract a provider offers from its capability accessor.

    The contract is read from the accessor's return annotation, so the static
    type is used as the registry key even though the accessor may return a
    more specific runtime value.
    """

    provide_method_name: str = DEFAULT_PROVIDE_METHOD_NAME

    def extract(self, instance: object) -> type[Any] | None:
        """Return the contract offered by ``instance`` or ``None`` for sink providers.

        Args:
            instance: Provider instance to probe for a capability accessor.

        Raises:
            RefuelCapabilityShapeError: The accessor exists but is not a
                zero-argument method annotated with a single contract.

        """
        accessor = getattr(instance, self.provide_method_name, _MISSING)
        if accessor is _MISSING:
            return None

        provider_name = type_name(type(instance))
        if not callable(accessor):
            msg = (
                f"'{provider_name}.{self.provide_method_name}' must be a method, "
                f"got {accessor!r}."
            )
            raise RefuelCapabilityShapeError(msg)

        self._validate_no_arguments(accessor, provider_name=provider_name)

        return_annotation = self._resolved_return_annotation(accessor, provider_name=provider_name)
        if get_origin(return_annotation) is tuple:
            msg = (
                f"The '{provider_name}.{self.provide_method_name}' method must have "
                f"exactly one return value, got {return_annotation!r}."
            )
            raise RefuelCapabilityShapeError(msg)

        if not is_contract(return_annotation):
            msg = (
                f"The '{provider_name}.{self.provide_method_name}' method does not return "
                f"a contract: {type_name(return_annotation)} is not a Protocol or abstract class."
            )
            raise RefuelCapabilityShapeError(msg)

        return return_annotation

    def provide(self, instance: object) -> Any:
        """Call the capability accessor of an already validated provider."""
        return getattr(instance, self.provide_method_name)()

    def _validate_no_arguments(self, accessor: Callable[..., Any], *, provider_name: str) -> None:
        try:
            signature = inspect.signature(accessor)
        except (TypeError, ValueError) as error:
            msg = f"Unable to inspect '{provider_name}.{self.provide_method_name}' signature."
            raise RefuelCapabilityShapeError(msg) from error

        if signature.parameters:
            names = ", ".join(signature.parameters)
            msg = (
                f"The '{provider_name}.{self.provide_method_name}' method must take no "
                f"arguments, got ({names})."
            )
            raise RefuelCapabilityShapeError(msg)

    def _resolved_return_annotation(
        self,
        accessor: Callable[..., Any],
        *,
        provider_name: str,
    ) -> Any:
        try:
            return_annotation = get_type_hints(accessor).get("return", _MISSING)
        except (AttributeError, NameError, TypeError) as error:
            msg = (
                f"Unable to resolve the return annotation of "
                f"'{provider_name}.{self.provide_method_name}'. "
                f"Original annotation error: {error}"
            )
            raise RefuelCapabilityShapeError(msg) from error

        if return_annotation is _MISSING:
            msg = (
                f"The '{provider_name}.{self.provide_method_name}' method must declare "
                "the contract it offers as its return annotation."
            )
            raise RefuelCapabilityShapeError(msg)
        return return_annotation
