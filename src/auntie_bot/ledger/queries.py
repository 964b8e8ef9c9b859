"""Token-addressed operations exposed outside the chat."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from auntie_bot import get_logger
from auntie_bot.ledger.models import Entry
from auntie_bot.ledger.store import LedgerStore

LOGGER = get_logger("ledger.queries")


class MissingTokenError(ValueError):
    """Raised when a token-addressed call arrives without a token."""


class UnknownTokenError(LookupError):
    """Raised when no ledger owns the supplied token."""


@dataclass(slots=True)
class LedgerSnapshot:
    """Read-only view of one ledger for the summary page."""

    entries: list[Entry]
    timezone: str
    generated_at: datetime


def fetch_ledger_snapshot(
    store: LedgerStore,
    token: str | None,
    *,
    timezone: str,
    now: datetime | None = None,
) -> LedgerSnapshot:
    """Return every entry owned by ``token`` along with the reference timezone."""

    user = store.find_by_token(_require_token(token))
    if user is None:
        raise UnknownTokenError("not found")
    return LedgerSnapshot(
        entries=list(user.entries),
        timezone=timezone,
        generated_at=now or datetime.now(UTC),
    )


def clear_ledger(store: LedgerStore, token: str | None) -> int:
    """Empty the ledger owned by ``token`` and return the prior entry count."""

    user = store.find_by_token(_require_token(token))
    if user is None:
        raise UnknownTokenError("not found")
    removed = store.clear_entries(user.address)
    LOGGER.info("Cleared ledger token=%s count_before=%d", user.token, removed)
    return removed


def _require_token(token: str | None) -> str:
    if not isinstance(token, str) or not token.strip():
        raise MissingTokenError("missing token")
    return token.strip()


__all__ = [
    "LedgerSnapshot",
    "MissingTokenError",
    "UnknownTokenError",
    "clear_ledger",
    "fetch_ledger_snapshot",
]
