"""Test actions and a recording dispatch sink shared by kernel tests."""

from __future__ import annotations

from enum import Enum

from bridgeware.kernel.types import ActionSource


class A(str, Enum):
    FOO = "foo"
    BAZ = "baz"


class B(str, Enum):
    BAR = "bar"
    QUX = "qux"


class Recorder:
    """Dispatch sink that remembers everything it was given."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, ActionSource]] = []

    def __call__(self, action: object, source: ActionSource) -> None:
        self.calls.append((action, source))

    @property
    def actions(self) -> list[object]:
        return [action for action, _ in self.calls]
