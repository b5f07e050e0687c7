"""
Bridgeware Kernel: Shared Types

Data classes used across the bridge engine, the collection lifter and the
store. These are the contracts that bind the kernel together.

  ActionSource     where an action was dispatched from (file, function, line, info)
  Bridge           one routing rule: transform + predicate + declaration site
  ElementIDAction  an element action addressed by the element's stable id
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

ID = TypeVar("ID")
A = TypeVar("A")

# ---------------------------------------------------------------------------
# Callable shapes
# ---------------------------------------------------------------------------

GetState = Callable[[], Any]
Transform = Callable[[Any, GetState], Any]  # (action, get_state) -> output | None
Predicate = Callable[[GetState, Any], bool]  # (get_state, action) -> bool
Output = Callable[[Any, "ActionSource"], Any]  # dispatch sink, return value ignored
AfterReducer = Callable[[], None]


def always(get_state: GetState, action: Any) -> bool:
    """Predicate that accepts every state and action."""
    return True


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ActionSource:
    """
    Provenance of a dispatched action.

    file/function/line point at the code that dispatched (or declared) something.
    info is free text appended by whoever relays the action further.
    """

    file: str
    function: str
    line: int
    info: str | None = None

    @classmethod
    def here(cls, stacklevel: int = 1, info: str | None = None) -> ActionSource:
        """
        Capture the source location of a caller.

        stacklevel=1 is whoever called here(); 2 is their caller, and so on.
        """
        frame = inspect.currentframe()
        try:
            for _ in range(stacklevel):
                if frame.f_back is None:
                    break
                frame = frame.f_back
            return cls(
                file=frame.f_code.co_filename,
                function=frame.f_code.co_name,
                line=frame.f_lineno,
                info=info,
            )
        finally:
            del frame

    def bridged(self, action: Any, origin: ActionSource) -> ActionSource:
        """
        Provenance for an action derived from `action` by the bridge declared at `origin`.

        Keeps this source's file/function/line, so consumers still see where the
        triggering action came from, and appends the bridge hop to info.
        """
        hop = f"Bridged from {action} at {origin.file}, {origin.function}:{origin.line}"
        lines = [part for part in (self.info, hop) if part is not None]
        return ActionSource(
            file=self.file,
            function=self.function,
            line=self.line,
            info="\n".join(lines),
        )


@dataclass(frozen=True)
class Bridge:
    """
    One routing rule.

    transform and predicate must be pure. predicate runs against the state
    after the triggering action was reduced; origin is the declaration site.
    """

    transform: Transform
    predicate: Predicate = field(default=always)
    origin: ActionSource = field(default_factory=lambda: ActionSource.here(stacklevel=3))


@dataclass(frozen=True)
class ElementIDAction(Generic[ID, A]):
    """An element-scoped action tagged with the id of the element it targets."""

    id: ID
    action: A
