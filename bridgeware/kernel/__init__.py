"""
Bridgeware Kernel: the bridge engine and its host.

Components:
  types       ActionSource, Bridge, ElementIDAction
  compose     matching helpers (case, equals, then, pipe, holds, ...)
  bridge      BridgeMiddleware: registry + evaluation + provenance
  lift        lift a per-element BridgeMiddleware onto a collection
  middleware  middleware contract, composition, tracing
  store       serial reducer/middleware loop
"""

from bridgeware.kernel.bridge import BridgeMiddleware
from bridgeware.kernel.compose import case, constant, equals, holds, ignore, pipe, then
from bridgeware.kernel.lift import lift_to_collection, lift_to_collection_in_place
from bridgeware.kernel.middleware import (
    ComposedMiddleware,
    Middleware,
    TraceMiddleware,
    compose,
    format_action,
)
from bridgeware.kernel.store import Store
from bridgeware.kernel.types import ActionSource, Bridge, ElementIDAction, always

__all__ = [
    "ActionSource",
    "Bridge",
    "ElementIDAction",
    "always",
    "BridgeMiddleware",
    "lift_to_collection",
    "lift_to_collection_in_place",
    "Middleware",
    "ComposedMiddleware",
    "TraceMiddleware",
    "compose",
    "format_action",
    "Store",
    "case",
    "constant",
    "equals",
    "holds",
    "ignore",
    "pipe",
    "then",
]
