"""
Failure kinds surfaced by the dictionary client and coordinator.

Every failure carries a human-readable message and nothing else; the bridge
gives no structured cause.
"""


class DictionaryError(Exception):
    """Base class for all dictionary failures."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DictionaryError):
    """Input rejected locally, before any remote call."""

    kind = "validation"


class TransportError(DictionaryError):
    """The remote call itself failed."""

    kind = "transport"


class NotFound(TransportError):
    """The remote store has no entry with the requested id."""

    kind = "not_found"


class BusyError(DictionaryError):
    """The same action is already in flight."""

    kind = "busy"


def require_word(word: str) -> str:
    """Return the trimmed word, or raise ValidationError if nothing is left."""
    trimmed = (word or "").strip()
    if not trimmed:
        raise ValidationError("Word must not be empty")
    return trimmed
