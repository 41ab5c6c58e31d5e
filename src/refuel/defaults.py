from collections.abc import Mapping, Sequence, Set
from numbers import Number

DEFAULT_PROVIDE_METHOD_NAME = "provide"
"""Name of the capability accessor looked up on every provider."""

DEFAULT_DEPENDENCIES_ATTRIBUTE = "backends"
"""Name of the provider attribute holding the dependency block."""

DEFAULT_NON_PROVIDER_TYPES: tuple[type, ...] = (
    Number,
    Mapping,
    Sequence,
    Set,
)
"""Value and collection types never accepted as providers, even when subclassed."""
