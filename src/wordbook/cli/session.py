"""
Wiring of client, store and coordinator for one CLI invocation.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass

from wordbook.cli.presenter import ConsolePresenter
from wordbook.client.remote import RemoteDictionaryClient
from wordbook.config import Settings
from wordbook.core.coordinator import MutationCoordinator
from wordbook.core.store import DictionaryStateStore


@dataclass
class Session:
    client: RemoteDictionaryClient
    store: DictionaryStateStore
    coordinator: MutationCoordinator
    presenter: ConsolePresenter


def settings_from_args(args) -> Settings:
    settings = Settings.from_env()
    if getattr(args, "api_url", None):
        settings.api_url = args.api_url.rstrip("/")
    if getattr(args, "timeout", None) is not None:
        settings.timeout = args.timeout
    return settings


@asynccontextmanager
async def open_session(args, presenter: ConsolePresenter | None = None):
    settings = settings_from_args(args)
    presenter = presenter or ConsolePresenter(show_definitions=getattr(args, "definitions", False))

    async with RemoteDictionaryClient(settings.api_url, timeout=settings.timeout) as client:
        store = DictionaryStateStore(client)
        coordinator = MutationCoordinator(client, store)
        unsubscribe_state = store.subscribe(presenter.render_state)
        unsubscribe_busy = coordinator.subscribe(presenter.render_busy)
        try:
            yield Session(client, store, coordinator, presenter)
        finally:
            unsubscribe_busy()
            unsubscribe_state()
