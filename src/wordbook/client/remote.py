"""
Async HTTP client for the wordbook API.

Every call is one request/response exchange. Failures surface as
TransportError (or NotFound for deletes of missing ids); nothing is retried.
"""

import logging

import httpx

from wordbook.config import DEFAULT_API_URL
from wordbook.core.errors import NotFound, TransportError, require_word
from wordbook.core.models import WordEntry

logger = logging.getLogger(__name__)


def _detail(r: httpx.Response) -> str:
    """Best-effort error message from a failed response."""
    try:
        body = r.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and "detail" in body:
        detail = body["detail"]
        return detail if isinstance(detail, str) else str(detail)
    if r.text:
        return r.text
    return f"HTTP {r.status_code}"


class RemoteDictionaryClient:
    """Typed wrapper over the /api/words endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=timeout)

    async def aclose(self):
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "RemoteDictionaryClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def _request(self, method: str, path: str, not_found: bool = False, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            r = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TransportError(f"Request to {url} failed: {e}") from e

        if r.status_code == 404 and not_found:
            raise NotFound(_detail(r))
        if r.is_error:
            message = _detail(r)
            logger.error("%s %s returned %d: %s", method, url, r.status_code, message)
            raise TransportError(message)

        try:
            return r.json()
        except ValueError as e:
            raise TransportError(f"Malformed response from {url}: {e}") from e

    # === Bridge operations ===

    async def list(self) -> list[WordEntry]:
        """Fetch the full collection, in whatever order the server returns it."""
        logger.debug("Fetching words")
        body = await self._request("GET", "/words")

        if not isinstance(body, dict) or not isinstance(body.get("words"), list):
            raise TransportError("Malformed word list: expected {'words': [...]}")

        entries = []
        seen = set()
        for item in body["words"]:
            try:
                entry = WordEntry.from_dict(item)
            except ValueError as e:
                raise TransportError(f"Malformed word entry: {e}") from e
            if entry.id in seen:
                raise TransportError(f"Duplicate word id {entry.id} in list response")
            seen.add(entry.id)
            entries.append(entry)

        logger.info("Fetched %d words", len(entries))
        return entries

    async def create_from_lookup(self, word: str) -> None:
        """Ask the server to look up `word` and store it with the definition it finds."""
        word = require_word(word)
        logger.info("Adding %r via definition lookup", word)
        await self._request("POST", "/words/lookup", json={"word": word})

    async def create(self, word: str, definition: str) -> None:
        """Store `word` with a caller-supplied definition."""
        word = require_word(word)
        logger.info("Adding %r with supplied definition", word)
        await self._request("POST", "/words", json={"word": word, "definition": definition})

    async def remove(self, entry_id: int) -> None:
        logger.info("Deleting word %d", entry_id)
        await self._request("DELETE", f"/words/{entry_id}", not_found=True)
