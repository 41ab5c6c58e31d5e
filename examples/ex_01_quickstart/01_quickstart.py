"""Quickstart: wire providers through their declared contracts.

Each process declares the contracts it needs in a dataclass dependency block
and the contract it offers through ``provide``. Registering them in dependency
order lets the registry inject everything automatically.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from refuel import Registry


class InterfaceA(Protocol):
    def get_id(self) -> str: ...

    def get_that(self) -> int: ...


class InterfaceB(Protocol):
    def get_id(self) -> str: ...

    def get_something_else(self) -> int: ...


class ProcessA:
    """Provider of InterfaceA without dependencies."""

    def __init__(self) -> None:
        self.id = "A"

    def get_id(self) -> str:
        return self.id

    def get_that(self) -> int:
        return 5

    def provide(self) -> InterfaceA:
        return self


@dataclass
class ProcessBDeps:
    a: InterfaceA


class ProcessB:
    """Provider of InterfaceB that depends on InterfaceA."""

    backends: ProcessBDeps

    def __init__(self) -> None:
        self.id = "B"

    def get_id(self) -> str:
        return f"my ID: {self.id}, A's ID: {self.backends.a.get_id()}"

    def get_something_else(self) -> int:
        return 4

    def provide(self) -> InterfaceB:
        return self


@dataclass
class ProcessCDeps:
    a: InterfaceA
    b: InterfaceB


class ProcessC:
    """Consumer of InterfaceA and InterfaceB that offers nothing."""

    backends: ProcessCDeps

    def __init__(self) -> None:
        self.id = "C"

    def get_id(self) -> str:
        deps = self.backends
        return f"my ID: {self.id}, A's ID: {deps.a.get_id()}, B's ID: {deps.b.get_id()}"


def main() -> None:
    registry = Registry()

    process_a = ProcessA()
    registry.register(process_a)

    process_b = ProcessB()
    registry.register(process_b)

    process_c = ProcessC()
    registry.register(process_c)

    print(process_c.get_id())  # => my ID: C, A's ID: A, B's ID: my ID: B, A's ID: A
    print(f"b_uses_a={process_b.backends.a is process_a}")  # => b_uses_a=True
    print(f"contracts={len(registry)}")  # => contracts=2


if __name__ == "__main__":
    main()
