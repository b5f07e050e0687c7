"""
Example app: actions.

AppAction is a tagged union of frozen dataclasses. The accessor functions at
the bottom pull a variant's payload out of an AppAction (or return None), which
is what bridges match on.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from bridgeware.kernel.types import ElementIDAction


class LifecycleEvent(str, Enum):
    DID_BECOME_ACTIVE = "did_become_active"
    WILL_RESIGN_ACTIVE = "will_resign_active"
    DID_ENTER_BACKGROUND = "did_enter_background"
    WILL_ENTER_FOREGROUND = "will_enter_foreground"


class ReachabilityEvent(str, Enum):
    START_MONITORING = "start_monitoring"
    STOP_MONITORING = "stop_monitoring"


class TaskAction(str, Enum):
    ACTIVATE = "activate"
    CONFIRM = "confirm"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Lifecycle:
    event: LifecycleEvent


@dataclass(frozen=True)
class Reachability:
    event: ReachabilityEvent


@dataclass(frozen=True)
class ConnectivityChanged:
    """Reported by the network monitor while monitoring is on."""

    online: bool


@dataclass(frozen=True)
class AddTask:
    id: str
    title: str


@dataclass(frozen=True)
class RemoveTask:
    id: str


@dataclass(frozen=True)
class Task:
    """A per-task action addressed by task id."""

    element: ElementIDAction[str, TaskAction]


AppAction = Union[Lifecycle, Reachability, ConnectivityChanged, AddTask, RemoveTask, Task]


# ---------------------------------------------------------------------------
# Variant accessors
# ---------------------------------------------------------------------------


def lifecycle(action: AppAction) -> LifecycleEvent | None:
    match action:
        case Lifecycle(event=event):
            return event
        case _:
            return None


def task(action: AppAction) -> ElementIDAction[str, TaskAction] | None:
    match action:
        case Task(element=element):
            return element
        case _:
            return None


def with_task(action: AppAction, element: ElementIDAction[str, TaskAction]) -> AppAction:
    """Replace the task slot of a Task action; other variants come back unchanged."""
    if isinstance(action, Task):
        return replace(action, element=element)
    return action
