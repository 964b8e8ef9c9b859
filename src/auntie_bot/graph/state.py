"""State carried through one pass of the dispatch graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

from auntie_bot.ledger.models import Entry
from auntie_bot.summary.aggregate import Period

Route = Literal["unidentified", "menu", "list", "undo", "summary", "tip", "record"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class DispatchState:
    """One inbound chat message and everything decided about it."""

    address: str = ""
    body: str = ""
    received_at: datetime = field(default_factory=_utcnow)
    command_text: str = ""
    route: Route | None = None
    period: Period | None = None
    token: str | None = None
    recorded_entry: Entry | None = None
    reply: str | None = None


__all__ = ["DispatchState", "Route"]
