"""
Shared dependencies for routes.
"""

from functools import lru_cache, partial

import redis

from wordbook.config import Settings
from wordbook.core.lookup import fetch_definition
from wordbook.core.words import WordStore


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def get_redis() -> redis.Redis:
    settings = get_settings()
    return redis.Redis(host=settings.redis_host, port=settings.redis_port, db=settings.redis_db)


def get_word_store() -> WordStore:
    return WordStore(get_redis())


def get_lookup():
    """Async callable word -> meanings | None."""
    return partial(fetch_definition, base_url=get_settings().lookup_url)
