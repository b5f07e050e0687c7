"""
Bridgeware Kernel: Collection Lifter

Turns a BridgeMiddleware written for one element (a task, a row, a card) into
one that works on the whole application, where element actions travel wrapped
in an ElementIDAction and element states live in a collection.

The lift copies the records once. Bridges added to the element middleware
afterwards do not show up in the lifted one.

Note the asymmetry kept from the element-level contract: the element's own
state is handed to the element *predicate*, but element *transforms* receive
an accessor that returns None. A state-aware element transform therefore
cannot read element state once lifted.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable

from bridgeware.kernel.bridge import BridgeMiddleware
from bridgeware.kernel.types import Bridge, ElementIDAction, GetState

_MISSING = object()

ExtractElement = Callable[[Any], "ElementIDAction | None"]
StateCollection = Callable[[Any], Iterable[Any]]


def lift_to_collection(
    middleware: BridgeMiddleware,
    *,
    input_action: ExtractElement,
    output_action: Callable[[ElementIDAction], Any],
    state_collection: StateCollection,
    element_id: Callable[[Any], Any] = operator.attrgetter("id"),
) -> BridgeMiddleware:
    """
    Lift an element-scoped BridgeMiddleware to a collection-scoped one.

    Args:
        middleware: the element-scoped bridges
        input_action: global action -> ElementIDAction of an element action, or None
        output_action: ElementIDAction of a derived element action -> global action
        state_collection: global state -> iterable of element states
        element_id: element state -> its stable id (default: `.id`)

    Returns:
        A new, independent BridgeMiddleware over global actions and state.
    """
    return _lift(
        middleware,
        extract=input_action,
        embed=lambda action, element_action: output_action(element_action),
        state_collection=state_collection,
        element_id=element_id,
    )


def lift_to_collection_in_place(
    middleware: BridgeMiddleware,
    *,
    get_element: ExtractElement,
    set_element: Callable[[Any, ElementIDAction], Any],
    state_collection: StateCollection,
    element_id: Callable[[Any], Any] = operator.attrgetter("id"),
) -> BridgeMiddleware:
    """
    Lift for bridges whose input and output share one element action type.

    The derived global action is the incoming one with its element slot
    replaced: set_element(incoming_action, ElementIDAction(id, derived)).
    """
    return _lift(
        middleware,
        extract=get_element,
        embed=set_element,
        state_collection=state_collection,
        element_id=element_id,
    )


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _lift(
    middleware: BridgeMiddleware,
    *,
    extract: ExtractElement,
    embed: Callable[[Any, ElementIDAction], Any],
    state_collection: StateCollection,
    element_id: Callable[[Any], Any],
) -> BridgeMiddleware:
    return BridgeMiddleware(
        _lift_bridge(bridge, extract, embed, state_collection, element_id)
        for bridge in middleware.bridges
    )


def _lift_bridge(
    bridge: Bridge,
    extract: ExtractElement,
    embed: Callable[[Any, ElementIDAction], Any],
    state_collection: StateCollection,
    element_id: Callable[[Any], Any],
) -> Bridge:
    def transform(action: Any, get_state: GetState) -> Any:
        element_action = extract(action)
        if element_action is None:
            return None
        derived = bridge.transform(element_action.action, _no_element_state)
        if derived is None:
            return None
        return embed(action, ElementIDAction(id=element_action.id, action=derived))

    def predicate(get_state: GetState, action: Any) -> bool:
        element_action = extract(action)
        if element_action is None:
            return False
        element_state = _find(state_collection(get_state()), element_action.id, element_id)
        if element_state is _MISSING:
            return False
        return bridge.predicate(lambda: element_state, element_action.action)

    return Bridge(transform=transform, predicate=predicate, origin=bridge.origin)


def _find(elements: Iterable[Any], wanted: Any, element_id: Callable[[Any], Any]) -> Any:
    """Linear scan; first element with a matching id wins."""
    for element in elements:
        if element_id(element) == wanted:
            return element
    return _MISSING


def _no_element_state() -> None:
    return None
