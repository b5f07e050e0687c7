"""
Example application: lifecycle, reachability and a task list, connected by bridges.

  actions   AppAction variants and accessors
  state     pydantic state models
  reducer   (state, action) -> state
  bridges   lifecycle -> reachability, per-task confirmation lifted to the list
  app       build_store()
"""

from bridgeware.example.app import build_store

__all__ = ["build_store"]
