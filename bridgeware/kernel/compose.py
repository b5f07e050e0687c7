"""
Bridgeware Kernel: Matching & Composition

Small combinators for declaring bridges against tagged-variant actions.

Actions are plain classes (usually frozen dataclasses, one per variant) or enum
members. Instead of optional-chained paths into the action tree, a bridge
matches with explicit extractors that return the variant's payload or None:

    then(case(Lifecycle, "event"), equals(LifecycleEvent.DID_BECOME_ACTIVE))

Everything here resolves to an ordinary callable, so the engine never knows
which helper produced a given transform or predicate.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable

from bridgeware.kernel.types import GetState, Predicate

Extractor = Callable[[Any], Any]  # value -> payload | None


def ignore(value: Any) -> None:
    """Terminal function: swallows whatever it is given."""
    return None


def constant(value: Any) -> Callable[[Any], Any]:
    """Function that ignores its argument and returns `value`."""

    def _constant(_: Any) -> Any:
        return value

    return _constant


def pipe(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Forward composition: pipe(f, g)(x) == g(f(x))."""
    if not functions:
        raise ValueError("pipe() needs at least one function")

    def _piped(value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), functions, value)

    return _piped


def then(*functions: Extractor) -> Extractor:
    """
    Optional-chained composition.

    Runs each function on the previous result and stops with None as soon as
    one of them yields None.
    """
    if not functions:
        raise ValueError("then() needs at least one function")

    def _chained(value: Any) -> Any:
        for fn in functions:
            if value is None:
                return None
            value = fn(value)
        return value

    return _chained


def case(variant: type, attr: str | None = None) -> Extractor:
    """
    Extractor for one variant of a tagged union.

    Returns the action's `attr` (or the action itself when attr is None) when
    the action is an instance of `variant`, otherwise None.
    """

    def _case(action: Any) -> Any:
        if not isinstance(action, variant):
            return None
        if attr is None:
            return action
        return getattr(action, attr)

    _case.__name__ = f"case_{variant.__name__}"
    return _case


def equals(expected: Any) -> Extractor:
    """Extractor for payload-free variants: True when the value equals `expected`."""

    def _equals(value: Any) -> bool | None:
        return True if value == expected else None

    return _equals


def holds(projection: Callable[[Any], Any]) -> Predicate:
    """Predicate that reads a boolean-ish projection of the current state."""

    def _holds(get_state: GetState, action: Any) -> bool:
        return bool(projection(get_state()))

    return _holds
