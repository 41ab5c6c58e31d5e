from __future__ import annotations

import dataclasses
import inspect
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, get_origin, get_type_hints

from refuel._internal.type_checks import is_contract, is_provider_instance, type_name
from refuel.capabilities import CapabilityExtractor
from refuel.defaults import DEFAULT_DEPENDENCIES_ATTRIBUTE
from refuel.exceptions import (
    RefuelFieldError,
    RefuelShapeError,
    RefuelUnresolvedDependencyError,
)

_MISSING = object()


@dataclass(slots=True)
class DependencyInjector:
    """Populate the dependency block of a provider from registered providers.

    The dependency block is a dataclass stored on the provider under
    ``dependencies_attribute``. Every field of the block must be annotated with
    a contract. Each field receives the value returned by the capability
    accessor of the provider currently registered for that contract.

    All fields are validated and resolved before anything is assigned, so a
    failed injection leaves the provider untouched.
    """

    dependencies_attribute: str = DEFAULT_DEPENDENCIES_ATTRIBUTE
    capability_extractor: CapabilityExtractor = field(default_factory=CapabilityExtractor)

    def inject(self, instance: object, providers: Mapping[type[Any], object]) -> None:
        """Fill the dependency block of ``instance``.

        Args:
            instance: Provider instance whose dependency block is populated in place.
            providers: Registered providers keyed by the contract they offer.

        Raises:
            RefuelShapeError: The provider or its dependency block has an invalid shape.
            RefuelFieldError: A block field is not settable or not contract-typed.
            RefuelUnresolvedDependencyError: A required contract has no provider.

        """
        if not is_provider_instance(instance):
            msg = (
                f"Provider must be a record type instance, got {instance!r}. "
                "Pass an instance of a user-defined class."
            )
            raise RefuelShapeError(msg)

        provider_name = type_name(type(instance))
        declared_type = self._declared_block_type(instance, provider_name=provider_name)
        current_block = getattr(instance, self.dependencies_attribute, _MISSING)
        if declared_type is _MISSING and current_block is _MISSING:
            return

        block_type = self._block_type(
            declared_type=declared_type,
            current_block=current_block,
            provider_name=provider_name,
        )
        values = self._resolve_fields(block_type, providers)

        if current_block is _MISSING:
            self._set_block(instance, block_type(**values), provider_name=provider_name)
            return
        for name, value in values.items():
            setattr(current_block, name, value)

    def _declared_block_type(self, instance: object, *, provider_name: str) -> Any:
        for owner in type(instance).__mro__:
            annotation = inspect.get_annotations(owner).get(self.dependencies_attribute, _MISSING)
            if annotation is _MISSING:
                continue
            if not isinstance(annotation, str):
                return annotation

            module_namespace = vars(sys.modules[owner.__module__])
            try:
                return eval(annotation, module_namespace, dict(vars(owner)))  # noqa: S307
            except (AttributeError, NameError, TypeError) as error:
                msg = (
                    f"Unable to resolve the '{provider_name}.{self.dependencies_attribute}' "
                    f"annotation. Original annotation error: {error}"
                )
                raise RefuelShapeError(msg) from error
        return _MISSING

    def _block_type(
        self,
        *,
        declared_type: Any,
        current_block: object,
        provider_name: str,
    ) -> type[Any]:
        attribute = f"{provider_name}.{self.dependencies_attribute}"
        if isinstance(current_block, type) or get_origin(declared_type) is type:
            msg = (
                f"The '{attribute}' field must hold a dataclass instance, "
                "not a class reference."
            )
            raise RefuelShapeError(msg)

        block_type = declared_type if current_block is _MISSING else type(current_block)
        if not (isinstance(block_type, type) and dataclasses.is_dataclass(block_type)):
            msg = f"The '{attribute}' field must be a dataclass, got {type_name(block_type)}."
            raise RefuelShapeError(msg)
        return block_type

    def _resolve_fields(
        self,
        block_type: type[Any],
        providers: Mapping[type[Any], object],
    ) -> dict[str, Any]:
        block_name = type_name(block_type)
        try:
            hints = get_type_hints(block_type)
        except (AttributeError, NameError, TypeError) as error:
            msg = (
                f"Unable to resolve annotations of dependency block '{block_name}'. "
                f"Original annotation error: {error}"
            )
            raise RefuelShapeError(msg) from error

        field_names = {block_field.name for block_field in dataclasses.fields(block_type)}
        for name in inspect.signature(block_type).parameters:
            if name not in field_names:
                msg = (
                    f"Field '{block_name}.{name}' is not settable: "
                    "init-only parameters cannot be injected."
                )
                raise RefuelFieldError(msg, field_name=name)

        frozen = block_type.__dataclass_params__.frozen
        values: dict[str, Any] = {}
        for block_field in dataclasses.fields(block_type):
            if frozen or not block_field.init or block_field.name.startswith("_"):
                msg = f"Field '{block_name}.{block_field.name}' is not settable."
                raise RefuelFieldError(msg, field_name=block_field.name)

            contract = hints.get(block_field.name)
            if not is_contract(contract):
                msg = (
                    f"All members of dependency block '{block_name}' must be contract-typed, "
                    f"'{block_field.name}' is annotated as {type_name(contract)}."
                )
                raise RefuelFieldError(msg, field_name=block_field.name)

            provider = providers.get(contract)
            if provider is None:
                msg = f"No implementation found for contract '{type_name(contract)}'."
                raise RefuelUnresolvedDependencyError(msg, contract=contract)

            values[block_field.name] = self.capability_extractor.provide(provider)
        return values

    def _set_block(self, instance: object, block: object, *, provider_name: str) -> None:
        try:
            setattr(instance, self.dependencies_attribute, block)
        except AttributeError as error:
            msg = (
                f"Unable to assign '{provider_name}.{self.dependencies_attribute}'. "
                "Providers must allow attribute assignment."
            )
            raise RefuelShapeError(msg) from error
