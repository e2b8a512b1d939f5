"""
Word entries and the view state derived from them.
"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class WordEntry:
    id: int
    word: str
    definition: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "word": self.word,
            "definition": self.definition,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WordEntry":
        """Build an entry from its wire shape. Raises ValueError on anything incomplete."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")

        missing = [k for k in ("id", "word", "definition") if k not in data]
        if missing:
            raise ValueError(f"Entry is missing fields: {', '.join(missing)}")

        entry_id = data["id"]
        # bool is an int subclass; reject it explicitly
        if not isinstance(entry_id, int) or isinstance(entry_id, bool):
            raise ValueError(f"Entry id must be an integer, got {entry_id!r}")
        if not isinstance(data["word"], str) or not isinstance(data["definition"], str):
            raise ValueError(f"Entry {entry_id} has non-text word or definition")

        return cls(id=entry_id, word=data["word"], definition=data["definition"])


class LoadStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    entries: tuple[WordEntry, ...] = ()
    status: LoadStatus = LoadStatus.IDLE
    error: str | None = None

    @property
    def ids(self) -> set[int]:
        return {e.id for e in self.entries}

    def find(self, entry_id: int) -> WordEntry | None:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None


@dataclass(frozen=True)
class BusyState:
    adding: bool = False
    deleting: frozenset[int] = field(default_factory=frozenset)
