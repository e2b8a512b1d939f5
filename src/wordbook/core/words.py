"""
WordStore - server-side persistence of word entries in Redis.

Keys:
  {prefix}:next_id       counter for id assignment
  {prefix}:ids           sorted set of live ids (score = id)
  {prefix}:entry:{id}    JSON {id, word, definition, created_at}
"""

import json
import logging
from datetime import datetime, timezone

import redis

from wordbook.core.models import WordEntry

logger = logging.getLogger(__name__)


class WordStore:
    """Stores word entries in Redis."""

    def __init__(self, client: redis.Redis, prefix: str = "wordbook"):
        self.client = client
        self.prefix = prefix

    def _counter_key(self) -> str:
        return f"{self.prefix}:next_id"

    def _ids_key(self) -> str:
        return f"{self.prefix}:ids"

    def _entry_key(self, entry_id: int) -> str:
        return f"{self.prefix}:entry:{entry_id}"

    def add(self, word: str, definition: str) -> WordEntry:
        """Store a new entry, returns it with its assigned id."""
        word = word.strip()
        if not word:
            raise ValueError("Word must not be empty")

        entry_id = int(self.client.incr(self._counter_key()))
        entry = WordEntry(id=entry_id, word=word, definition=definition)
        data = {**entry.to_dict(), "created_at": datetime.now(timezone.utc).isoformat()}

        pipe = self.client.pipeline()
        pipe.set(self._entry_key(entry_id), json.dumps(data))
        pipe.zadd(self._ids_key(), {str(entry_id): entry_id})
        pipe.execute()

        logger.info("Stored word %r as id %d", word, entry_id)
        return entry

    def get(self, entry_id: int) -> WordEntry | None:
        data = self.client.get(self._entry_key(entry_id))
        if not data:
            return None
        return WordEntry.from_dict(json.loads(data))

    def list_all(self) -> list[WordEntry]:
        """All entries in ascending id order."""
        entries = []
        for raw in self.client.zrange(self._ids_key(), 0, -1):
            entry = self.get(int(raw))
            if entry:
                entries.append(entry)
        return entries

    def delete(self, entry_id: int) -> bool:
        """Remove an entry. Returns False if there was nothing to remove."""
        pipe = self.client.pipeline()
        pipe.delete(self._entry_key(entry_id))
        pipe.zrem(self._ids_key(), str(entry_id))
        removed, _ = pipe.execute()
        if not removed:
            logger.warning("Word %d not found for deletion", entry_id)
            return False
        logger.info("Deleted word %d", entry_id)
        return True

    def clear(self) -> None:
        """Clear all entries. Useful for tests."""
        for key in self.client.scan_iter(f"{self.prefix}:*"):
            self.client.delete(key)
