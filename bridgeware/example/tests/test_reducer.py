"""Tests for the example reducer."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bridgeware.example.actions import (
    AddTask,
    ConnectivityChanged,
    Lifecycle,
    LifecycleEvent,
    Reachability,
    ReachabilityEvent,
    RemoveTask,
    Task,
    TaskAction,
)
from bridgeware.example.reducer import reduce, replay
from bridgeware.example.state import AppState, LifecycleState, TaskState, TaskStatus
from bridgeware.kernel import ElementIDAction


def task_action(task_id: str, action: TaskAction) -> Task:
    return Task(ElementIDAction(id=task_id, action=action))


class TestLifecycle:
    def test_become_active(self):
        state = reduce(AppState.initial(), Lifecycle(LifecycleEvent.DID_BECOME_ACTIVE))
        assert state.lifecycle is LifecycleState.FOREGROUND_ACTIVE

    def test_enter_background(self):
        state = replay(
            [
                Lifecycle(LifecycleEvent.DID_BECOME_ACTIVE),
                Lifecycle(LifecycleEvent.DID_ENTER_BACKGROUND),
            ]
        )
        assert state.lifecycle is LifecycleState.BACKGROUND_INACTIVE


class TestReachability:
    def test_connectivity_ignored_when_not_monitoring(self):
        state = reduce(AppState.initial(), ConnectivityChanged(online=True))
        assert state.reachability.online is None

    def test_connectivity_recorded_while_monitoring(self):
        state = replay(
            [Reachability(ReachabilityEvent.START_MONITORING), ConnectivityChanged(online=False)]
        )
        assert state.reachability.monitoring is True
        assert state.reachability.online is False

    def test_stop_clears_online(self):
        state = replay(
            [
                Reachability(ReachabilityEvent.START_MONITORING),
                ConnectivityChanged(online=True),
                Reachability(ReachabilityEvent.STOP_MONITORING),
            ]
        )
        assert state.reachability.monitoring is False
        assert state.reachability.online is None


class TestTasks:
    def test_add_and_remove(self):
        state = replay([AddTask("a", "A"), AddTask("b", "B"), RemoveTask("a")])
        assert [t.id for t in state.tasks] == ["b"]

    def test_duplicate_add_ignored(self):
        state = replay([AddTask("a", "A"), AddTask("a", "again")])
        assert len(state.tasks) == 1
        assert state.tasks[0].title == "A"

    def test_status_transitions(self):
        state = replay(
            [
                AddTask("a", "A"),
                task_action("a", TaskAction.ACTIVATE),
                task_action("a", TaskAction.CONFIRM),
                task_action("a", TaskAction.COMPLETE),
            ]
        )
        assert state.tasks[0].status is TaskStatus.DONE

    def test_out_of_order_transition_ignored(self):
        state = replay([AddTask("a", "A"), task_action("a", TaskAction.CONFIRM)])
        assert state.tasks[0].status is TaskStatus.PENDING

    def test_unknown_task_ignored(self):
        before = replay([AddTask("a", "A")])
        after = reduce(before, task_action("zzz", TaskAction.ACTIVATE))
        assert after == before


class TestState:
    def test_unknown_action_returns_same_state(self):
        state = AppState.initial()
        assert reduce(state, object()) is state

    def test_state_is_frozen(self):
        with pytest.raises(ValidationError):
            AppState.initial().lifecycle = LifecycleState.FOREGROUND_ACTIVE

    def test_task_id_required(self):
        with pytest.raises(ValidationError):
            TaskState(id="", title="nope")
