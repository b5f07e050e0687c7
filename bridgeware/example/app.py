"""Example app: store wiring."""

from __future__ import annotations

from bridgeware.config import settings
from bridgeware.example.bridges import lifecycle_to_reachability, task_list_bridges
from bridgeware.example.reducer import reduce
from bridgeware.example.state import AppState
from bridgeware.kernel import Middleware, Store, TraceMiddleware, compose


def app_middleware(trace: bool | None = None) -> Middleware:
    trace = settings.TRACE_ACTIONS if trace is None else trace
    middlewares: list[Middleware] = [lifecycle_to_reachability(), task_list_bridges()]
    if trace:
        middlewares.append(TraceMiddleware())
    return compose(*middlewares)


def build_store(initial_state: AppState | None = None, trace: bool | None = None) -> Store:
    return Store(
        initial_state if initial_state is not None else AppState.initial(),
        reduce,
        app_middleware(trace),
    )
