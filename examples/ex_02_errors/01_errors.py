"""Errors: registration fails fast and leaves the registry unchanged.

A provider whose dependency has not been registered yet raises
``RefuelUnresolvedDependencyError``. A ``provide`` method that does not return
exactly one contract raises ``RefuelCapabilityShapeError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from refuel import RefuelCapabilityShapeError, RefuelUnresolvedDependencyError, Registry


class Clock(Protocol):
    def now(self) -> int: ...


class Storage(Protocol):
    def load(self) -> str: ...


@dataclass
class ReportDeps:
    clock: Clock


class Report:
    backends: ReportDeps

    def provide(self) -> Storage:
        return self

    def load(self) -> str:
        return f"report@{self.backends.clock.now()}"


class TwoFaced:
    def provide(self) -> tuple[Clock, Storage]:
        return self, self


def main() -> None:
    registry = Registry()

    try:
        registry.register(Report())
    except RefuelUnresolvedDependencyError as error:
        print(f"missing={error.contract.__name__}")  # => missing=Clock

    try:
        registry.register(TwoFaced())
    except RefuelCapabilityShapeError:
        print("malformed_provide=rejected")  # => malformed_provide=rejected

    print(f"contracts={len(registry)}")  # => contracts=0


if __name__ == "__main__":
    main()
