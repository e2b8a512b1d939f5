"""
MutationCoordinator - runs add/delete actions against the remote store.

At most one add is in flight at a time, and at most one delete per entry id.
A successful mutation reloads the store before it reports success; a failed
one reports without reloading, since the collection is known unchanged.

Adds and deletes are not serialized against each other.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from wordbook.core.errors import BusyError, DictionaryError, ValidationError, require_word
from wordbook.core.models import BusyState
from wordbook.core.store import DictionaryStateStore

logger = logging.getLogger(__name__)

BusyListener = Callable[[BusyState], None]


@dataclass
class MutationResult:
    success: bool
    error: DictionaryError | None = None

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""


class MutationCoordinator:
    def __init__(self, client, store: DictionaryStateStore):
        self.client = client
        self.store = store
        self._adding = False
        self._deleting: set[int] = set()
        self._listeners: list[BusyListener] = []

    # === Busy flags ===

    @property
    def is_adding(self) -> bool:
        return self._adding

    def is_deleting(self, entry_id: int) -> bool:
        return entry_id in self._deleting

    @property
    def busy(self) -> BusyState:
        return BusyState(adding=self._adding, deleting=frozenset(self._deleting))

    def subscribe(self, listener: BusyListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        busy = self.busy
        for listener in list(self._listeners):
            try:
                listener(busy)
            except Exception:
                logger.exception("Busy listener %r failed", listener)

    # === Actions ===

    async def submit_add(self, word: str, definition: str | None = None) -> MutationResult:
        """
        Add a word. With no definition the server looks one up; otherwise the
        given definition is stored as-is.
        """
        try:
            word = require_word(word)
        except ValidationError as e:
            logger.warning("Rejected add: %s", e.message)
            return MutationResult(False, e)

        if self._adding:
            logger.warning("Rejected add of %r: another add is in progress", word)
            return MutationResult(False, BusyError("An add is already in progress"))

        self._adding = True
        self._notify()
        try:
            if definition is None:
                await self.client.create_from_lookup(word)
            else:
                await self.client.create(word, definition)
        except DictionaryError as e:
            logger.error("Failed to add %r: %s", word, e.message)
            return MutationResult(False, e)
        finally:
            self._adding = False
            self._notify()

        await self.store.reload()
        logger.info("Added %r", word)
        return MutationResult(True)

    async def submit_delete(self, entry_id: int) -> MutationResult:
        """Delete an entry. The caller is expected to have confirmed with the user."""
        if entry_id in self._deleting:
            logger.warning("Rejected delete of %d: already in progress", entry_id)
            return MutationResult(False, BusyError(f"Delete of word {entry_id} is already in progress"))

        self._deleting.add(entry_id)
        self._notify()
        try:
            await self.client.remove(entry_id)
        except DictionaryError as e:
            logger.error("Failed to delete %d: %s", entry_id, e.message)
            return MutationResult(False, e)
        finally:
            self._deleting.discard(entry_id)
            self._notify()

        await self.store.reload()
        logger.info("Deleted %d", entry_id)
        return MutationResult(True)
