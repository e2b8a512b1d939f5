"""
Definition lookup against the Free Dictionary API.

https://api.dictionaryapi.dev/api/v2/entries/en/<word> returns a list of
entries, each with "meanings" grouped by part of speech. We keep the
meanings of the first entry and store them as JSON text.
"""

import json
import logging
from dataclasses import dataclass, field

import httpx

from wordbook.config import DEFAULT_LOOKUP_URL

logger = logging.getLogger(__name__)


class DefinitionLookupError(Exception):
    """The dictionary API could not be reached or returned garbage."""


@dataclass
class Definition:
    definition: str
    example: str | None = None


@dataclass
class Meaning:
    part_of_speech: str
    definitions: list[Definition] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "partOfSpeech": self.part_of_speech,
            "definitions": [
                {"definition": d.definition, "example": d.example}
                for d in self.definitions
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Meaning":
        """Raises ValueError when `data` is not shaped like an API meaning."""
        if not isinstance(data, dict):
            raise ValueError(f"Meaning must be an object, got {type(data).__name__}")
        items = data.get("definitions", [])
        if not isinstance(items, list):
            raise ValueError("Meaning definitions must be a list")

        definitions = []
        for d in items:
            if not isinstance(d, dict):
                raise ValueError(f"Definition must be an object, got {type(d).__name__}")
            text = d.get("definition")
            if not text:
                continue
            example = d.get("example")
            definitions.append(Definition(
                definition=str(text),
                example=str(example) if example is not None else None,
            ))

        return cls(part_of_speech=str(data.get("partOfSpeech") or ""), definitions=definitions)


def meanings_from_json(text: str) -> list[Meaning]:
    """Parse a stored definition. Raises ValueError if it is not meanings JSON."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Stored definition is not a list of meanings")
    return [Meaning.from_dict(m) for m in data]


def meanings_to_json(meanings: list[Meaning]) -> str:
    return json.dumps([m.to_dict() for m in meanings])


async def fetch_definition(
    word: str,
    base_url: str = DEFAULT_LOOKUP_URL,
    http: httpx.AsyncClient | None = None,
) -> list[Meaning] | None:
    """
    Look up `word`. Returns None when the API has no entry for it (404 or no
    meanings); raises DefinitionLookupError for any other failure.
    """
    url = f"{base_url.rstrip('/')}/{word}"
    logger.info("Calling dictionary API: %s", url)

    owns_http = http is None
    http = http or httpx.AsyncClient(timeout=30)
    try:
        r = await http.get(url)
        if r.status_code == 404:
            logger.info("Dictionary API has no entry for %r", word)
            return None
        r.raise_for_status()
        data = r.json()
    except httpx.HTTPError as e:
        raise DefinitionLookupError(f"API error while fetching definition for '{word}': {e}") from e
    except ValueError as e:
        raise DefinitionLookupError(f"Unreadable API response for '{word}': {e}") from e
    finally:
        if owns_http:
            await http.aclose()

    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        return None

    raw = data[0].get("meanings", [])
    try:
        if not isinstance(raw, list):
            raise ValueError(f"'meanings' must be a list, got {type(raw).__name__}")
        meanings = [Meaning.from_dict(m) for m in raw]
    except ValueError as e:
        raise DefinitionLookupError(f"Unexpected API response shape for '{word}': {e}") from e

    meanings = [m for m in meanings if m.definitions]
    if not meanings:
        logger.info("No meanings in API response for %r", word)
        return None

    logger.info("Parsed %d meanings for %r", len(meanings), word)
    return meanings
