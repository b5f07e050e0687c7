"""
Bridgeware Kernel: Store

A minimal serial host for reducer + middleware. One action is processed at a
time:

    middleware.handle(action)  ->  reducer(state, action)  ->  after-reducer

Actions dispatched while another one is being processed (typically derived
actions coming out of a BridgeMiddleware) are queued and processed after the
current one completes, so every after-reducer sees the state produced by its
own action and nothing newer.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable

from bridgeware.kernel.middleware import Middleware
from bridgeware.kernel.types import ActionSource

logger = logging.getLogger(__name__)

Reducer = Callable[[Any, Any], Any]  # (state, action) -> new state

DEFAULT_HISTORY_LIMIT = 1000


class Store:
    """
    Holds the current state and drives the action loop.

    `history` keeps the most recent processed (action, source) pairs for
    debugging, at most `history_limit` of them (None keeps everything).
    """

    def __init__(
        self,
        initial_state: Any,
        reducer: Reducer,
        middleware: Middleware | None = None,
        history_limit: int | None = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._state = initial_state
        self._reducer = reducer
        self._middleware = middleware or Middleware()
        self._queue: deque[tuple[Any, ActionSource]] = deque()
        self._processing = False
        self.history: deque[tuple[Any, ActionSource]] = deque(maxlen=history_limit)
        self._middleware.receive_context(self.get_state, self.dispatch)

    @property
    def state(self) -> Any:
        return self._state

    def get_state(self) -> Any:
        return self._state

    def dispatch(self, action: Any, source: ActionSource | None = None) -> None:
        """
        Enqueue an action and, unless already inside the loop, drain the queue.

        If a reducer or middleware raises, the error propagates to the caller
        and the remaining queued actions are discarded.
        """
        self._queue.append((action, source or ActionSource.here(stacklevel=2)))
        if self._processing:
            return

        self._processing = True
        try:
            while self._queue:
                self._process(*self._queue.popleft())
        except Exception:
            dropped = len(self._queue)
            self._queue.clear()
            if dropped:
                logger.warning("Action processing failed, dropped %d queued action(s)", dropped)
            raise
        finally:
            self._processing = False

    def _process(self, action: Any, source: ActionSource) -> None:
        after_reducer = self._middleware.handle(action, source)
        self._state = self._reducer(self._state, action)
        self.history.append((action, source))
        if after_reducer is not None:
            after_reducer()
