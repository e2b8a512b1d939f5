"""
Runtime settings, read from WORDBOOK_* environment variables.
"""

import os
from dataclasses import dataclass

DEFAULT_API_URL = "http://localhost:8000/api"
DEFAULT_LOOKUP_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"


@dataclass
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    lookup_url: str = DEFAULT_LOOKUP_URL

    @classmethod
    def from_env(cls, env: dict | None = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            api_url=env.get("WORDBOOK_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=float(env.get("WORDBOOK_TIMEOUT", 30)),
            redis_host=env.get("WORDBOOK_REDIS_HOST", "localhost"),
            redis_port=int(env.get("WORDBOOK_REDIS_PORT", 6379)),
            redis_db=int(env.get("WORDBOOK_REDIS_DB", 0)),
            lookup_url=env.get("WORDBOOK_LOOKUP_URL", DEFAULT_LOOKUP_URL).rstrip("/"),
        )
