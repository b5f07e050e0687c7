"""
Example app: bridges.

The lifecycle and reachability middlewares know nothing about each other;
these bridges connect them. Task bridges are written for a single task and
lifted onto the task list.
"""

from __future__ import annotations

from bridgeware.example.actions import (
    LifecycleEvent,
    Reachability,
    ReachabilityEvent,
    TaskAction,
    lifecycle,
    task,
    with_task,
)
from bridgeware.example.state import AppState, TaskStatus
from bridgeware.kernel import BridgeMiddleware, equals, holds, lift_to_collection_in_place, then


def lifecycle_to_reachability() -> BridgeMiddleware:
    """Monitor the network only while the app is in the foreground."""
    return (
        BridgeMiddleware()
        .bridge_on_signal(
            then(lifecycle, equals(LifecycleEvent.DID_BECOME_ACTIVE)),
            Reachability(ReachabilityEvent.START_MONITORING),
        )
        .bridge_on_signal(
            then(lifecycle, equals(LifecycleEvent.DID_ENTER_BACKGROUND)),
            Reachability(ReachabilityEvent.STOP_MONITORING),
        )
    )


def task_confirmation() -> BridgeMiddleware:
    """Per task: an activation that went through is confirmed right away."""
    return BridgeMiddleware().bridge_on_signal(
        equals(TaskAction.ACTIVATE),
        TaskAction.CONFIRM,
        when=holds(lambda t: t.status is TaskStatus.ACTIVE),
    )


def task_list_bridges() -> BridgeMiddleware:
    # Task actions go in and come out as TaskAction, so the Task wrapper is rewritten in place
    return lift_to_collection_in_place(
        task_confirmation(),
        get_element=task,
        set_element=with_task,
        state_collection=_tasks,
    )


def _tasks(state: AppState):
    return state.tasks
