"""
Bridgeware Kernel: Bridge Engine

A middleware that watches the action stream and, after the reducer ran,
dispatches derived actions for every registered bridge whose predicate holds
and whose transform matches.

    bridges = (
        BridgeMiddleware()
        .bridge_on_signal(then(lifecycle, equals(DID_BECOME_ACTIVE)), Reachability(START_MONITORING))
        .bridge_on_signal(then(lifecycle, equals(DID_ENTER_BACKGROUND)), Reachability(STOP_MONITORING))
    )

Rules:
  - Bridges are evaluated in registration order. All matching bridges fire.
  - Predicates see the state after the triggering action was reduced.
  - Derived actions keep the triggering action's file/function/line and record
    the bridge hop in `info`.
  - Until receive_context() was called (or after teardown()), handling is a no-op.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from bridgeware.kernel.compose import then
from bridgeware.kernel.middleware import Middleware
from bridgeware.kernel.types import (
    ActionSource,
    AfterReducer,
    Bridge,
    GetState,
    Output,
    Predicate,
    Transform,
    always,
)

logger = logging.getLogger(__name__)


class BridgeMiddleware(Middleware):
    """Ordered registry of bridges plus the engine that evaluates them."""

    def __init__(self, bridges: Iterable[Bridge] = ()) -> None:
        self._bridges: list[Bridge] = list(bridges)
        self._get_state: GetState | None = None
        self._output: Output | None = None
        self._torn_down = False

    @property
    def bridges(self) -> tuple[Bridge, ...]:
        return tuple(self._bridges)

    def __len__(self) -> int:
        return len(self._bridges)

    def __repr__(self) -> str:
        return f"BridgeMiddleware(bridges={len(self._bridges)})"

    # -----------------------------------------------------------------------
    # Registration
    # -----------------------------------------------------------------------

    def add(self, bridge: Bridge) -> BridgeMiddleware:
        """Append a prebuilt record. Duplicates are kept and both fire."""
        self._bridges.append(bridge)
        return self

    def bridge_with_state(
        self,
        transform: Transform,
        when: Predicate = always,
        *,
        source: ActionSource | None = None,
    ) -> BridgeMiddleware:
        """
        Bridge with a state-aware transform.

        Args:
            transform: (action, get_state) -> derived action, or None for no match
            when: (get_state, action) -> bool, evaluated after the reducer
            source: declaration site; defaults to the caller's location
        """
        return self.add(
            Bridge(
                transform=transform,
                predicate=when,
                origin=source or ActionSource.here(stacklevel=2),
            )
        )

    def bridge(
        self,
        mapping: Callable[[Any], Any],
        when: Predicate = always,
        *,
        source: ActionSource | None = None,
    ) -> BridgeMiddleware:
        """
        Bridge an action to a derived action.

        `mapping` gets only the incoming action and returns the derived action
        or None, e.g. then(case(Lifecycle, "event"), ...).
        """

        def _transform(action: Any, get_state: GetState) -> Any:
            return mapping(action)

        return self.bridge_with_state(
            _transform, when, source=source or ActionSource.here(stacklevel=2)
        )

    def bridge_on(
        self,
        checker: Callable[[Any], Any],
        dispatch: Callable[[Any], Any],
        when: Predicate = always,
        *,
        source: ActionSource | None = None,
    ) -> BridgeMiddleware:
        """
        Bridge when `checker` finds something in the action.

        `checker` returns a payload or None; `dispatch` turns the payload into
        the derived action (or None to skip after inspecting it).
        """
        return self.bridge(
            then(checker, dispatch), when, source=source or ActionSource.here(stacklevel=2)
        )

    def bridge_on_signal(
        self,
        checker: Callable[[Any], Any],
        output: Any = None,
        when: Predicate = always,
        *,
        factory: Callable[[], Any] | None = None,
        source: ActionSource | None = None,
    ) -> BridgeMiddleware:
        """
        Bridge a payload-free match to a fixed action.

        `output` is dispatched as is, even when it is callable. Pass
        `factory=` instead to build a fresh action each time the bridge fires.
        """
        if (output is None) == (factory is None):
            raise TypeError("bridge_on_signal() takes exactly one of output or factory")

        def _dispatch(_: Any) -> Any:
            return factory() if factory is not None else output

        return self.bridge(
            then(checker, _dispatch), when, source=source or ActionSource.here(stacklevel=2)
        )

    # -----------------------------------------------------------------------
    # Evaluation
    # -----------------------------------------------------------------------

    def derive(
        self, action: Any, dispatcher: ActionSource, get_state: GetState
    ) -> list[tuple[Any, ActionSource]]:
        """
        Evaluate every bridge against `action` and return what should be dispatched.

        Pure: nothing is dispatched here. Returns (derived_action, provenance)
        pairs in registration order.
        """
        snapshot = _read_once(get_state)
        derived: list[tuple[Any, ActionSource]] = []
        for bridge in self._bridges:
            if not bridge.predicate(snapshot, action):
                continue
            output = bridge.transform(action, snapshot)
            if output is None:
                continue
            derived.append((output, dispatcher.bridged(action, bridge.origin)))
        return derived

    def receive_context(self, get_state: GetState, output: Output) -> None:
        self._get_state = get_state
        self._output = output
        self._torn_down = False

    def teardown(self) -> None:
        """Stop dispatching, including from after-reducers already handed out."""
        self._torn_down = True

    def handle(self, action: Any, dispatcher: ActionSource) -> AfterReducer:
        def _after_reducer() -> None:
            get_state, output = self._get_state, self._output
            if self._torn_down or get_state is None or output is None:
                logger.debug("Bridge middleware not bound, dropping %s", action)
                return

            for derived, source in self.derive(action, dispatcher, get_state):
                logger.debug("Bridged %s -> %s", action, derived)
                output(derived, source)

        return _after_reducer


def _read_once(get_state: GetState) -> GetState:
    """Lazy accessor that reads the state on first call and then keeps that snapshot."""
    cache: list[Any] = []

    def _get_state() -> Any:
        if not cache:
            cache.append(get_state())
        return cache[0]

    return _get_state
