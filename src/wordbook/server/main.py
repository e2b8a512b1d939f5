"""
wordbook API server.

    uvicorn wordbook.server.main:app --port 8000
"""

import logging
from contextlib import asynccontextmanager

import redis
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from wordbook.server.deps import get_redis, get_settings
from wordbook.server.routes import words

logger = logging.getLogger(__name__)


def route_table(app: FastAPI) -> list[tuple[str, str, str]]:
    """(methods, path, handler) for every API route, sorted by path."""
    rows = [
        (",".join(sorted(r.methods - {"HEAD", "OPTIONS"})), r.path, r.name)
        for r in app.routes
        if isinstance(r, APIRoute)
    ]
    return sorted(rows, key=lambda row: (row[1], row[0]))


@asynccontextmanager
async def lifespan(app: FastAPI):
    for methods, path, name in route_table(app):
        logger.info("route %-8s %s -> %s", methods, path, name)

    settings = get_settings()
    try:
        get_redis().ping()
    except redis.exceptions.ConnectionError as e:
        # Requests will fail until Redis comes up; the server still starts.
        logger.warning("Redis at %s:%d unreachable: %s", settings.redis_host, settings.redis_port, e)
    else:
        logger.info("Using Redis at %s:%d db %d", settings.redis_host, settings.redis_port, settings.redis_db)
    yield


app = FastAPI(title="wordbook API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:1420", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(words.router)


@app.get("/")
async def root():
    return {"name": "wordbook API", "version": "0.1.0"}


def run():
    uvicorn.run("wordbook.server.main:app", host="127.0.0.1", port=8000)


if __name__ == "__main__":
    run()
