"""
DictionaryStateStore - the single owner of the client-side ViewState.

State only changes through reload(). Listeners are called synchronously
with the new snapshot after every change.

Each reload is tagged with a sequence number. A response older than the
last one applied is dropped, so overlapping reloads cannot roll the list
back to an earlier snapshot.
"""

import logging
from collections.abc import Callable

from wordbook.core.errors import DictionaryError
from wordbook.core.models import LoadStatus, ViewState

logger = logging.getLogger(__name__)

Listener = Callable[[ViewState], None]


class DictionaryStateStore:
    def __init__(self, client, initial: ViewState | None = None):
        self.client = client
        self._state = initial or ViewState()
        self._listeners: list[Listener] = []
        self._issued = 0
        self._applied = 0

    @property
    def state(self) -> ViewState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that removes it again."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, state: ViewState):
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)

    async def reload(self) -> ViewState:
        """
        Re-fetch the whole collection.

        On failure the previous entries stay visible and the status carries the
        error message. Returns the state after this reload has been applied (or
        dropped as stale).
        """
        self._issued += 1
        seq = self._issued
        self._set(ViewState(self._state.entries, LoadStatus.LOADING))

        try:
            entries = await self.client.list()
        except DictionaryError as e:
            if seq < self._applied:
                logger.info("Dropping stale reload #%d failure: %s", seq, e.message)
                return self._state
            self._applied = seq
            logger.error("Reload #%d failed: %s", seq, e.message)
            self._set(ViewState(self._state.entries, LoadStatus.ERROR, e.message))
            return self._state

        if seq < self._applied:
            logger.info("Dropping stale reload #%d (already applied #%d)", seq, self._applied)
            return self._state

        self._applied = seq
        logger.debug("Reload #%d applied %d entries", seq, len(entries))
        self._set(ViewState(tuple(entries), LoadStatus.IDLE))
        return self._state
