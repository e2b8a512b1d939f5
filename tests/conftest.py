"""Shared fixtures: an in-memory stand-in for the remote dictionary."""

import asyncio

import pytest

from wordbook.core.coordinator import MutationCoordinator
from wordbook.core.errors import NotFound, ValidationError
from wordbook.core.models import WordEntry
from wordbook.core.store import DictionaryStateStore


class FakeRemote:
    """
    Behaves like RemoteDictionaryClient over an in-memory collection.

    hold(op) pauses the next call to `op` until the returned event is set.
    fail[op] makes every call to `op` raise the given error.
    """

    def __init__(self, entries=()):
        self.entries = {e.id: e for e in entries}
        self.next_id = max(self.entries, default=0) + 1
        self.calls: list[tuple] = []
        self.fail = {}
        self.holds: dict[str, list[asyncio.Event]] = {}

    def hold(self, op: str) -> asyncio.Event:
        event = asyncio.Event()
        self.holds.setdefault(op, []).append(event)
        return event

    def count(self, op: str) -> int:
        return sum(1 for c in self.calls if c[0] == op)

    async def _enter(self, op, *args):
        self.calls.append((op, *args))
        pending = self.holds.get(op)
        if pending:
            await pending.pop(0).wait()
        if op in self.fail:
            raise self.fail[op]

    def _insert(self, word, definition):
        entry = WordEntry(self.next_id, word, definition)
        self.entries[entry.id] = entry
        self.next_id += 1

    async def list(self):
        snapshot = list(self.entries.values())
        await self._enter("list")
        return snapshot

    async def create_from_lookup(self, word):
        await self._enter("create_from_lookup", word)
        if not word.strip():
            raise ValidationError("Word must not be empty")
        self._insert(word, f"definition of {word}")

    async def create(self, word, definition):
        await self._enter("create", word, definition)
        self._insert(word, definition)

    async def remove(self, entry_id):
        await self._enter("remove", entry_id)
        if entry_id not in self.entries:
            raise NotFound(f"Word with ID {entry_id} not found for deletion.")
        del self.entries[entry_id]


@pytest.fixture
def remote():
    return FakeRemote()


@pytest.fixture
def store(remote):
    return DictionaryStateStore(remote)


@pytest.fixture
def coordinator(remote, store):
    return MutationCoordinator(remote, store)
