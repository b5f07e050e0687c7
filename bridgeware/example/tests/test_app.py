"""
End-to-end tests: the example store with its bridges wired in.
"""

from __future__ import annotations

import pytest

from bridgeware.example.__main__ import main
from bridgeware.example.actions import (
    AddTask,
    Lifecycle,
    LifecycleEvent,
    Reachability,
    ReachabilityEvent,
    RemoveTask,
    Task,
    TaskAction,
    with_task,
)
from bridgeware.example.app import build_store
from bridgeware.example.bridges import task_list_bridges
from bridgeware.example.state import AppState, TaskState, TaskStatus
from bridgeware.kernel import ActionSource, ElementIDAction


@pytest.fixture
def store():
    s = build_store(trace=False)
    for task_id in ("t1", "t2", "t3"):
        s.dispatch(AddTask(id=task_id, title=task_id.upper()))
    return s


def actions(store) -> list:
    return [action for action, _ in store.history]


class TestLifecycleToReachability:
    def test_become_active_starts_monitoring(self, store):
        store.dispatch(Lifecycle(LifecycleEvent.DID_BECOME_ACTIVE))
        assert store.state.reachability.monitoring is True
        assert actions(store)[-1] == Reachability(ReachabilityEvent.START_MONITORING)

    def test_background_stops_monitoring(self, store):
        store.dispatch(Lifecycle(LifecycleEvent.DID_BECOME_ACTIVE))
        store.dispatch(Lifecycle(LifecycleEvent.DID_ENTER_BACKGROUND))
        assert store.state.reachability.monitoring is False

    def test_other_events_not_bridged(self, store):
        before = len(store.history)
        store.dispatch(Lifecycle(LifecycleEvent.WILL_RESIGN_ACTIVE))
        assert len(store.history) == before + 1

    def test_bridged_provenance_points_at_dispatch(self, store):
        store.dispatch(Lifecycle(LifecycleEvent.DID_BECOME_ACTIVE))
        (trigger, trigger_source), (_, bridged_source) = list(store.history)[-2:]
        assert bridged_source.file == trigger_source.file
        assert bridged_source.line == trigger_source.line
        assert bridged_source.info.startswith(f"Bridged from {trigger} at ")
        assert "bridges.py" in bridged_source.info


class TestTaskConfirmation:
    def test_activation_is_confirmed_for_that_task_only(self, store):
        store.dispatch(Task(ElementIDAction(id="t2", action=TaskAction.ACTIVATE)))
        statuses = {t.id: t.status for t in store.state.tasks}
        assert statuses == {
            "t1": TaskStatus.PENDING,
            "t2": TaskStatus.CONFIRMED,
            "t3": TaskStatus.PENDING,
        }
        assert actions(store)[-1] == Task(ElementIDAction(id="t2", action=TaskAction.CONFIRM))

    def test_absent_task_emits_nothing(self, store):
        before = len(store.history)
        store.dispatch(Task(ElementIDAction(id="t99", action=TaskAction.ACTIVATE)))
        assert len(store.history) == before + 1

    def test_rejected_activation_not_confirmed(self, store):
        store.dispatch(Task(ElementIDAction(id="t1", action=TaskAction.ACTIVATE)))
        before = len(store.history)
        # t1 is already confirmed, so activating again leaves it alone
        store.dispatch(Task(ElementIDAction(id="t1", action=TaskAction.ACTIVATE)))
        assert len(store.history) == before + 1

    def test_removed_task_not_bridged(self, store):
        store.dispatch(RemoveTask("t3"))
        store.dispatch(Task(ElementIDAction(id="t3", action=TaskAction.ACTIVATE)))
        assert all(not isinstance(a, Task) or a.element.action is TaskAction.ACTIVATE for a in actions(store))


class TestTaskListBridges:
    """The task bridges rewrite the Task wrapper in place via with_task."""

    dispatcher = ActionSource(file="list.py", function="tap_row", line=1)

    def test_with_task_replaces_element(self):
        incoming = Task(ElementIDAction(id="t1", action=TaskAction.ACTIVATE))
        element = ElementIDAction(id="t1", action=TaskAction.CONFIRM)
        assert with_task(incoming, element) == Task(element)

    def test_with_task_leaves_other_variants_alone(self):
        action = Lifecycle(LifecycleEvent.DID_BECOME_ACTIVE)
        assert with_task(action, ElementIDAction(id="t1", action=TaskAction.CONFIRM)) is action

    def test_derives_rewritten_task_action(self):
        state = AppState(tasks=(TaskState(id="t1", title="T1", status=TaskStatus.ACTIVE),))
        incoming = Task(ElementIDAction(id="t1", action=TaskAction.ACTIVATE))
        (derived, _), = task_list_bridges().derive(incoming, self.dispatcher, lambda: state)
        assert derived == Task(ElementIDAction(id="t1", action=TaskAction.CONFIRM))

    def test_non_task_action_ignored(self):
        state = AppState(tasks=(TaskState(id="t1", title="T1", status=TaskStatus.ACTIVE),))
        action = Lifecycle(LifecycleEvent.DID_BECOME_ACTIVE)
        assert task_list_bridges().derive(action, self.dispatcher, lambda: state) == []


class TestMain:
    def test_prints_final_state(self, capsys):
        assert main(["--quiet", "--events", "did_become_active", "--activate", "laundry"]) == 0
        out = capsys.readouterr().out
        assert '"monitoring": true' in out
        assert '"confirmed"' in out
