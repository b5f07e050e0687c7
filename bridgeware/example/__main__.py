"""
Run the example app through a short scenario and print the final state.

Usage:
  python -m bridgeware.example [--events EVENT ...] [--activate TASK_ID] [--quiet]
"""

from __future__ import annotations

import argparse
import logging
import sys

from bridgeware import __version__
from bridgeware.config import configure_logging
from bridgeware.example.actions import (
    AddTask,
    ConnectivityChanged,
    Lifecycle,
    LifecycleEvent,
    Task,
    TaskAction,
)
from bridgeware.example.app import build_store
from bridgeware.kernel import ElementIDAction

DEFAULT_EVENTS = ["did_become_active", "did_enter_background"]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m bridgeware.example",
        description="Replay lifecycle events and task activations through the bridged store.",
    )
    parser.add_argument(
        "--events",
        nargs="*",
        default=DEFAULT_EVENTS,
        choices=[e.value for e in LifecycleEvent],
        help="lifecycle events to dispatch, in order",
    )
    parser.add_argument(
        "--activate",
        action="append",
        default=[],
        metavar="TASK_ID",
        help="task id to activate after the lifecycle events (repeatable)",
    )
    parser.add_argument("--quiet", action="store_true", help="do not trace actions")
    parser.add_argument("-v", "--version", action="version", version=f"bridgeware {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.WARNING if args.quiet else None)
    store = build_store(trace=not args.quiet)

    for task_id, title in (("groceries", "Buy groceries"), ("laundry", "Do laundry")):
        store.dispatch(AddTask(id=task_id, title=title))

    for event in args.events:
        store.dispatch(Lifecycle(LifecycleEvent(event)))
        if store.state.reachability.monitoring:
            store.dispatch(ConnectivityChanged(online=True))

    for task_id in args.activate:
        store.dispatch(Task(ElementIDAction(id=task_id, action=TaskAction.ACTIVATE)))

    print(store.state.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
