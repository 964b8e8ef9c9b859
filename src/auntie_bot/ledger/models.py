"""Ledger records stored per chat address."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from auntie_bot.parsing.normalize import normalize_category, truncate_amount


@dataclass(slots=True)
class Entry:
    """One recorded expense."""

    category: str
    amount: Decimal
    recorded_at: datetime

    def __post_init__(self) -> None:
        if normalize_category(self.category).lower() != self.category:
            raise ValueError(f"Entry category {self.category!r} is not normalized.")
        if truncate_amount(self.amount) != self.amount:
            raise ValueError("Entry amount cannot carry more than two decimals.")
        if self.recorded_at.tzinfo is None:
            raise ValueError("Entry recorded_at must be timezone-aware.")


@dataclass(slots=True)
class UserRecord:
    """A chat address, its public token and its entries in insertion order."""

    address: str
    token: str
    entries: list[Entry] = field(default_factory=list)


@dataclass(slots=True)
class FeedbackRecord:
    """Free-text feedback left from the summary page."""

    id: str
    message: str
    at_server: datetime
    token: str | None = None
    page: str = "summary"
    at_client: str | None = None
    ip: str | None = None


__all__ = ["Entry", "FeedbackRecord", "UserRecord"]
