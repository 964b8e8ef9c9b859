"""Time windows and per-category totals over a ledger."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta, tzinfo
from decimal import Decimal
from typing import Literal

from auntie_bot.ledger.models import Entry

Period = Literal["week", "month"]


@dataclass(slots=True)
class CategoryTotal:
    category: str
    amount: Decimal


@dataclass(slots=True)
class SpendingSummary:
    """Totals for a window; ``rows`` sorted by amount, largest first."""

    rows: list[CategoryTotal] = field(default_factory=list)
    total: Decimal = Decimal("0.00")
    entry_count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.entry_count == 0


def _local_midnight(moment: datetime, tz: tzinfo) -> datetime:
    local = moment.astimezone(tz)
    return datetime.combine(local.date(), time.min, tzinfo=tz)


def week_start(now: datetime, tz: tzinfo) -> datetime:
    """Most recent Monday 00:00 in ``tz``."""

    midnight = _local_midnight(now, tz)
    return midnight - timedelta(days=midnight.weekday())


def month_start(now: datetime, tz: tzinfo) -> datetime:
    """First day of the current month, 00:00 in ``tz``."""

    return _local_midnight(now, tz).replace(day=1)


def day_bounds(now: datetime, tz: tzinfo) -> tuple[datetime, datetime]:
    """Start and end (inclusive) of the calendar day containing ``now`` in ``tz``."""

    start = _local_midnight(now, tz)
    return start, datetime.combine(start.date(), time.max, tzinfo=tz)


def period_start(period: Period, now: datetime, tz: tzinfo) -> datetime:
    if period == "month":
        return month_start(now, tz)
    return week_start(now, tz)


def entries_between(
    entries: Iterable[Entry], start: datetime, end: datetime
) -> list[Entry]:
    """Entries recorded within ``[start, end]``, in ledger order."""

    return [entry for entry in entries if start <= entry.recorded_at <= end]


def count_entries_today(entries: Iterable[Entry], now: datetime, tz: tzinfo) -> int:
    start, end = day_bounds(now, tz)
    return len(entries_between(entries, start, end))


def summarize(entries: Iterable[Entry], start: datetime, end: datetime) -> SpendingSummary:
    """Sum entries in ``[start, end]`` per category.

    Categories with equal subtotals keep the order in which they first
    appear in the ledger.
    """

    in_range = entries_between(entries, start, end)
    totals: dict[str, Decimal] = {}
    for entry in in_range:
        totals[entry.category] = totals.get(entry.category, Decimal("0.00")) + entry.amount

    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return SpendingSummary(
        rows=[CategoryTotal(category, amount) for category, amount in ordered],
        total=sum((entry.amount for entry in in_range), Decimal("0.00")),
        entry_count=len(in_range),
    )


__all__ = [
    "CategoryTotal",
    "Period",
    "SpendingSummary",
    "count_entries_today",
    "day_bounds",
    "entries_between",
    "month_start",
    "period_start",
    "summarize",
    "week_start",
]
