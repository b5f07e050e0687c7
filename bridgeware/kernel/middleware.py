"""
Bridgeware Kernel: Middleware Contract

The host side of the action pipeline. A middleware sees every action before
the reducer runs and may hand back an after-reducer callable, which the store
runs once the new state is in place.

  Middleware          base class (no-op)
  ComposedMiddleware  runs several middlewares in order
  TraceMiddleware     logs every action with its provenance
"""

from __future__ import annotations

import logging
from typing import Any

from bridgeware.kernel.types import ActionSource, AfterReducer, GetState, Output

logger = logging.getLogger(__name__)


class Middleware:
    """
    Base middleware. Subclasses override what they need.

    receive_context is called by the host before any action is routed here.
    """

    def receive_context(self, get_state: GetState, output: Output) -> None:
        pass

    def handle(self, action: Any, dispatcher: ActionSource) -> AfterReducer | None:
        return None

    def __add__(self, other: Middleware) -> ComposedMiddleware:
        return compose(self, other)


class ComposedMiddleware(Middleware):
    """Middlewares run in declaration order; their after-reducers run in the same order."""

    def __init__(self, *middlewares: Middleware) -> None:
        self.middlewares: list[Middleware] = list(middlewares)

    def receive_context(self, get_state: GetState, output: Output) -> None:
        for middleware in self.middlewares:
            middleware.receive_context(get_state, output)

    def handle(self, action: Any, dispatcher: ActionSource) -> AfterReducer | None:
        pending = [
            after
            for after in (mw.handle(action, dispatcher) for mw in self.middlewares)
            if after is not None
        ]
        if not pending:
            return None

        def _after_reducer() -> None:
            for after in pending:
                after()

        return _after_reducer


def compose(*middlewares: Middleware) -> ComposedMiddleware:
    """Flatten middlewares (and nested compositions) into one ComposedMiddleware."""
    flat: list[Middleware] = []
    for middleware in middlewares:
        if isinstance(middleware, ComposedMiddleware):
            flat.extend(middleware.middlewares)
        else:
            flat.append(middleware)
    return ComposedMiddleware(*flat)


# ---------------------------------------------------------------------------
# Tracing
# ---------------------------------------------------------------------------


def format_action(action: Any, source: ActionSource) -> str:
    """Multi-line, boxed rendering of an action and where it came from."""
    return (
        f"\n┌─▶ {action}"
        f"\n│ source: {source.file}:{source.line}"
        f"\n│ function: {source.function}"
        f"\n│ info: {source.info if source.info is not None else '<nil>'}"
        "\n└────────────────────"
    )


class TraceMiddleware(Middleware):
    """Logs each action after it was reduced."""

    def __init__(self, level: int = logging.INFO, log: logging.Logger | None = None) -> None:
        self.level = level
        self.log = log or logger

    def handle(self, action: Any, dispatcher: ActionSource) -> AfterReducer:
        def _after_reducer() -> None:
            self.log.log(self.level, "%s", format_action(action, dispatcher))

        return _after_reducer
