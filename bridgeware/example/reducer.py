"""
Example app: reducer.

Pure function: (state, action) -> state
No side effects. Unknown actions and actions addressed to missing tasks leave
the state unchanged.
"""

from __future__ import annotations

from typing import Any, Callable

from bridgeware.example.actions import (
    AddTask,
    AppAction,
    ConnectivityChanged,
    Lifecycle,
    LifecycleEvent,
    Reachability,
    ReachabilityEvent,
    RemoveTask,
    Task,
    TaskAction,
)
from bridgeware.example.state import AppState, LifecycleState, TaskState, TaskStatus

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def reduce(state: AppState, action: AppAction) -> AppState:
    """Apply one action to the state and return the new state."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        return state
    return handler(state, action)


def replay(actions: list[AppAction], state: AppState | None = None) -> AppState:
    """Fold actions over `state` (or the initial state), bypassing middleware."""
    state = state if state is not None else AppState.initial()
    for action in actions:
        state = reduce(state, action)
    return state


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

_LIFECYCLE_TRANSITIONS: dict[LifecycleEvent, LifecycleState] = {
    LifecycleEvent.DID_BECOME_ACTIVE: LifecycleState.FOREGROUND_ACTIVE,
    LifecycleEvent.WILL_RESIGN_ACTIVE: LifecycleState.FOREGROUND_INACTIVE,
    LifecycleEvent.DID_ENTER_BACKGROUND: LifecycleState.BACKGROUND_INACTIVE,
    LifecycleEvent.WILL_ENTER_FOREGROUND: LifecycleState.FOREGROUND_INACTIVE,
}

# task action -> (required status, resulting status)
_TASK_TRANSITIONS: dict[TaskAction, tuple[TaskStatus, TaskStatus]] = {
    TaskAction.ACTIVATE: (TaskStatus.PENDING, TaskStatus.ACTIVE),
    TaskAction.CONFIRM: (TaskStatus.ACTIVE, TaskStatus.CONFIRMED),
    TaskAction.COMPLETE: (TaskStatus.CONFIRMED, TaskStatus.DONE),
}


def _handle_lifecycle(state: AppState, action: Lifecycle) -> AppState:
    return state.model_copy(update={"lifecycle": _LIFECYCLE_TRANSITIONS[action.event]})


def _handle_reachability(state: AppState, action: Reachability) -> AppState:
    if action.event is ReachabilityEvent.START_MONITORING:
        reachability = state.reachability.model_copy(update={"monitoring": True})
    else:
        reachability = state.reachability.model_copy(update={"monitoring": False, "online": None})
    return state.model_copy(update={"reachability": reachability})


def _handle_connectivity(state: AppState, action: ConnectivityChanged) -> AppState:
    if not state.reachability.monitoring:
        return state
    reachability = state.reachability.model_copy(update={"online": action.online})
    return state.model_copy(update={"reachability": reachability})


def _handle_add_task(state: AppState, action: AddTask) -> AppState:
    if any(t.id == action.id for t in state.tasks):
        return state
    task = TaskState(id=action.id, title=action.title)
    return state.model_copy(update={"tasks": state.tasks + (task,)})


def _handle_remove_task(state: AppState, action: RemoveTask) -> AppState:
    tasks = tuple(t for t in state.tasks if t.id != action.id)
    return state.model_copy(update={"tasks": tasks})


def _handle_task(state: AppState, action: Task) -> AppState:
    required, result = _TASK_TRANSITIONS[action.element.action]
    tasks = tuple(
        t.model_copy(update={"status": result})
        if t.id == action.element.id and t.status is required
        else t
        for t in state.tasks
    )
    return state.model_copy(update={"tasks": tasks})


_HANDLERS: dict[type, Callable[[AppState, Any], AppState]] = {
    Lifecycle: _handle_lifecycle,
    Reachability: _handle_reachability,
    ConnectivityChanged: _handle_connectivity,
    AddTask: _handle_add_task,
    RemoveTask: _handle_remove_task,
    Task: _handle_task,
}
