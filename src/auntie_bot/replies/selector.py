"""Pick and fill Auntie's replies for each dispatcher outcome."""

from __future__ import annotations

import html
import random
from collections.abc import Sequence
from datetime import tzinfo
from decimal import Decimal
from typing import Literal
from zoneinfo import ZoneInfo

from auntie_bot.config import DEFAULT_CURRENCY_PREFIX, DEFAULT_TIMEZONE
from auntie_bot.ledger.models import Entry
from auntie_bot.parsing.normalize import format_amount, normalize_category
from auntie_bot.replies import templates
from auntie_bot.summary.aggregate import Period, SpendingSummary

Tier = Literal["NORMAL", "HIGH", "ULTRA"]

HIGH_THRESHOLD = Decimal("50")
ULTRA_THRESHOLD = Decimal("200")
STREAK_THRESHOLD = 3
LIST_LIMIT = 5

_TIER_POOLS: dict[Tier, Sequence[str]] = {
    "NORMAL": templates.ADD_NORMAL,
    "HIGH": templates.ADD_HIGH,
    "ULTRA": templates.ADD_ULTRA,
}
_PERIOD_LABELS: dict[Period, str] = {"week": "this week", "month": "this month"}


def classify_tier(amount: Decimal) -> Tier:
    """NORMAL below 50, HIGH from 50 up to 200, ULTRA from 200."""

    if amount >= ULTRA_THRESHOLD:
        return "ULTRA"
    if amount >= HIGH_THRESHOLD:
        return "HIGH"
    return "NORMAL"


def display_category(category: str) -> str:
    return html.escape(normalize_category(category).lower())


class ResponseSelector:
    """Builds reply text; all randomness flows through ``rng``."""

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
        timezone: tzinfo | None = None,
        summary_page_url: str | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._currency_prefix = currency_prefix
        self._timezone = timezone or ZoneInfo(DEFAULT_TIMEZONE)
        self._summary_page_url = summary_page_url

    def format_amount(self, amount: Decimal) -> str:
        return format_amount(amount, self._currency_prefix)

    def expense_added(self, amount: Decimal, category: str, today_count: int) -> str:
        """Tiered acknowledgment plus a streak line from the third entry of the day."""

        template = self._pick(_TIER_POOLS[classify_tier(amount)])
        line = self._fill(template, amount, category)
        if today_count >= STREAK_THRESHOLD:
            line += f"\n{self._pick(templates.TODAY_SPICE)}"
        return line

    def expense_undone(self, entry: Entry) -> str:
        return self._fill(self._pick(templates.UNDO_LINES), entry.amount, entry.category)

    def recent_entries(self, entries: Sequence[Entry]) -> str:
        """Latest entries, newest first, under a random header."""

        if not entries:
            return templates.NO_RECORDS
        latest = list(entries)[-LIST_LIMIT:][::-1]
        lines = [self._pick(templates.LIST_HEADERS)]
        for index, entry in enumerate(latest, start=1):
            stamp = entry.recorded_at.astimezone(self._timezone).strftime("%d/%m/%Y, %H:%M:%S")
            lines.append(
                f"{index}. {display_category(entry.category)} - "
                f"{self.format_amount(entry.amount)}  ({stamp})"
            )
        return "\n".join(lines)

    def spending_summary(self, period: Period, summary: SpendingSummary, token: str) -> str:
        if summary.is_empty:
            return self.no_spending(period)

        headers = (
            templates.SUMMARY_MONTH_HEADERS
            if period == "month"
            else templates.SUMMARY_WEEK_HEADERS
        )
        lines = [self._pick(headers)]
        lines.extend(
            f"{display_category(row.category)}: {self.format_amount(row.amount)}"
            for row in summary.rows
        )
        lines.extend(
            [
                "",
                f"💰 Total: {self.format_amount(summary.total)}",
                self._pick(templates.SUMMARY_FOOTERS),
            ]
        )
        text = "\n".join(lines)
        if self._summary_page_url:
            separator = "&" if "?" in self._summary_page_url else "?"
            text += f"\n\n📊 Full summary 👉 {self._summary_page_url}{separator}u={token}"
        return text

    def no_spending(self, period: Period) -> str:
        return templates.NO_SPENDING.replace("{LABEL}", _PERIOD_LABELS[period])

    def tip(self) -> str:
        return self._pick(templates.TIPS)

    @staticmethod
    def menu() -> str:
        return "\n".join(templates.MENU_LINES)

    @staticmethod
    def usage_help() -> str:
        return templates.USAGE_HELP

    @staticmethod
    def nothing_to_undo() -> str:
        return templates.NOTHING_TO_UNDO

    @staticmethod
    def unidentified() -> str:
        return templates.UNIDENTIFIED

    @staticmethod
    def store_failure() -> str:
        return templates.STORE_FAILURE

    def _pick(self, pool: Sequence[str]) -> str:
        return self._rng.choice(pool)

    def _fill(self, template: str, amount: Decimal, category: str) -> str:
        return template.replace("{AMT}", self.format_amount(amount)).replace(
            "{CAT}", display_category(category)
        )


__all__ = [
    "HIGH_THRESHOLD",
    "LIST_LIMIT",
    "ResponseSelector",
    "STREAK_THRESHOLD",
    "Tier",
    "ULTRA_THRESHOLD",
    "classify_tier",
    "display_category",
]
