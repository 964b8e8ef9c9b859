"""Aggregation over ledger time windows."""

from .aggregate import (
    CategoryTotal,
    Period,
    SpendingSummary,
    count_entries_today,
    day_bounds,
    entries_between,
    month_start,
    period_start,
    summarize,
    week_start,
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
