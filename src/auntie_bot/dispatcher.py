"""Entry point that turns one inbound chat message into one reply."""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import UTC, datetime, tzinfo
from typing import Any

from auntie_bot import get_logger
from auntie_bot.config import Settings
from auntie_bot.graph import DispatchState, build_dispatch_graph
from auntie_bot.ledger.store import LedgerStore, SQLiteLedgerStore
from auntie_bot.replies import ResponseSelector

LOGGER = get_logger("dispatcher")

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class MessageDispatcher:
    """Runs the dispatch graph for each message against one ledger store.

    Messages are handled one at a time to completion; the store is the only
    shared state between calls.
    """

    def __init__(
        self,
        *,
        store: LedgerStore,
        selector: ResponseSelector,
        timezone: tzinfo,
        clock: Clock | None = None,
    ) -> None:
        self._store = store
        self._clock = clock or _utcnow
        self._graph = build_dispatch_graph(store=store, selector=selector, timezone=timezone)

    @property
    def store(self) -> LedgerStore:
        return self._store

    def dispatch(self, address: str | None, body: str | None) -> DispatchState:
        """Process a message and return the final graph state."""

        state = DispatchState(
            address=address or "",
            body=body or "",
            received_at=self._clock(),
        )
        raw_result = self._graph.invoke(state)
        return _coerce_state(raw_result)

    def handle_message(self, address: str | None, body: str | None) -> str:
        """Process a message and return the reply text."""

        result = self.dispatch(address, body)
        if not result.reply:
            LOGGER.warning("Dispatch finished without a reply route=%s", result.route)
            return ResponseSelector.usage_help()
        return result.reply


def create_dispatcher(
    settings: Settings,
    *,
    store: LedgerStore | None = None,
    rng: random.Random | None = None,
    clock: Clock | None = None,
) -> MessageDispatcher:
    """Build a dispatcher from settings, opening the SQLite store when needed."""

    resolved_store = store or SQLiteLedgerStore(
        settings.ledger_db,
        token_secret=settings.summary_salt.get_secret_value(),
    )
    selector = ResponseSelector(
        rng=rng,
        currency_prefix=settings.currency_prefix,
        timezone=settings.tzinfo,
        summary_page_url=settings.summary_page_url,
    )
    LOGGER.info("Dispatcher ready (timezone=%s)", settings.timezone)
    return MessageDispatcher(
        store=resolved_store,
        selector=selector,
        timezone=settings.tzinfo,
        clock=clock,
    )


def _coerce_state(raw_result: Any) -> DispatchState:
    if isinstance(raw_result, DispatchState):
        return raw_result
    if isinstance(raw_result, dict):
        return DispatchState(**raw_result)
    raise TypeError(f"Dispatch graph returned unexpected result: {raw_result!r}")


__all__ = ["Clock", "MessageDispatcher", "create_dispatcher"]
