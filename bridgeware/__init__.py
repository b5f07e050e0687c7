"""Bridgeware: route actions between independently written middlewares."""

__version__ = "0.1.0"
