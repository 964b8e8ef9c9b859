"""Unit tests for reply selection and formatting."""

from __future__ import annotations

import random
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import TypeVar

import pytest

from auntie_bot.ledger.models import Entry
from auntie_bot.replies import ResponseSelector, classify_tier, templates
from auntie_bot.summary import CategoryTotal, SpendingSummary

_T = TypeVar("_T")


class _FirstChoice(random.Random):
    """Always picks the first template so replies are predictable."""

    def choice(self, seq: Sequence[_T]) -> _T:
        return seq[0]


@pytest.fixture
def selector() -> ResponseSelector:
    return ResponseSelector(rng=_FirstChoice())


@pytest.mark.parametrize(
    ("amount", "tier"),
    [
        ("-5.00", "NORMAL"),
        ("49.99", "NORMAL"),
        ("50.00", "HIGH"),
        ("199.99", "HIGH"),
        ("200.00", "ULTRA"),
        ("5000", "ULTRA"),
    ],
)
def test_classify_tier_boundaries(amount: str, tier: str) -> None:
    assert classify_tier(Decimal(amount)) == tier


def test_expense_added_fills_tier_template(selector: ResponseSelector) -> None:
    assert selector.expense_added(Decimal("4.5"), "kopi", 1) == "Okay lah! S$4.50 for kopi masuk liao ✅"
    assert selector.expense_added(Decimal("60"), "dinner", 1) == (
        "Wah S$60.00 for dinner? Today treat yourself ah 🤭"
    )
    assert selector.expense_added(Decimal("200"), "shoes", 2) == (
        "WAH LAO S$200.00 for shoes?! Auntie need to sit down first 🪑"
    )


def test_expense_added_appends_streak_line_from_third_entry(selector: ResponseSelector) -> None:
    reply = selector.expense_added(Decimal("3"), "teh", 3)

    first_line, streak = reply.split("\n")
    assert first_line == "Okay lah! S$3.00 for teh masuk liao ✅"
    assert streak == templates.TODAY_SPICE[0]


def test_expense_added_without_streak_below_threshold(selector: ResponseSelector) -> None:
    assert "\n" not in selector.expense_added(Decimal("3"), "teh", 2)


def test_seeded_random_source_is_reproducible() -> None:
    first = ResponseSelector(rng=random.Random(7))
    second = ResponseSelector(rng=random.Random(7))

    replies_a = [first.expense_added(Decimal("5"), "kopi", n) for n in range(1, 6)]
    replies_b = [second.expense_added(Decimal("5"), "kopi", n) for n in range(1, 6)]

    assert replies_a == replies_b


def test_expense_undone_mentions_removed_entry(selector: ResponseSelector) -> None:
    entry = Entry("kopi", Decimal("4.50"), datetime(2025, 3, 12, 2, 0, tzinfo=UTC))

    assert selector.expense_undone(entry) == "Okay, Auntie cancel liao: kopi S$4.50 ↩️"


def test_recent_entries_lists_latest_five_newest_first(selector: ResponseSelector) -> None:
    start = datetime(2025, 3, 12, 1, 2, 3, tzinfo=UTC)
    entries = [
        Entry(f"item{index}", Decimal(index), start + timedelta(minutes=index))
        for index in range(6)
    ]

    lines = selector.recent_entries(entries).split("\n")

    assert lines[0] == templates.LIST_HEADERS[0]
    assert len(lines) == 6
    assert lines[1] == "1. item5 - S$5.00  (12/03/2025, 09:07:03)"
    assert lines[5] == "5. item1 - S$1.00  (12/03/2025, 09:03:03)"


def test_recent_entries_empty_ledger(selector: ResponseSelector) -> None:
    assert selector.recent_entries([]) == templates.NO_RECORDS


def test_spending_summary_renders_rows_total_and_link() -> None:
    selector = ResponseSelector(
        rng=_FirstChoice(), summary_page_url="https://auntie.example/summary"
    )
    summary = SpendingSummary(
        rows=[CategoryTotal("lunch", Decimal("12.00")), CategoryTotal("kopi", Decimal("7.50"))],
        total=Decimal("19.50"),
        entry_count=3,
    )

    reply = selector.spending_summary("week", summary, "abc123")

    assert reply.startswith(templates.SUMMARY_WEEK_HEADERS[0])
    assert "lunch: S$12.00\nkopi: S$7.50" in reply
    assert "💰 Total: S$19.50" in reply
    assert templates.SUMMARY_FOOTERS[0] in reply
    assert reply.endswith("\n\n📊 Full summary 👉 https://auntie.example/summary?u=abc123")


def test_spending_summary_month_header_and_no_link(selector: ResponseSelector) -> None:
    summary = SpendingSummary(
        rows=[CategoryTotal("rent", Decimal("900.00"))],
        total=Decimal("900.00"),
        entry_count=1,
    )

    reply = selector.spending_summary("month", summary, "abc123")

    assert reply.startswith(templates.SUMMARY_MONTH_HEADERS[0])
    assert "Full summary" not in reply


@pytest.mark.parametrize(("period", "label"), [("week", "this week"), ("month", "this month")])
def test_spending_summary_empty_window(
    selector: ResponseSelector, period: str, label: str
) -> None:
    reply = selector.spending_summary(period, SpendingSummary(), "abc123")

    assert reply == f"No spending {label} yet. Try $5 lunch to start!"


def test_static_replies(selector: ResponseSelector) -> None:
    assert selector.tip() == templates.TIPS[0]
    assert "Summary month" in selector.menu()
    assert selector.usage_help() == templates.USAGE_HELP
    assert selector.nothing_to_undo() == "Nothing to undo lah 😅"
    assert selector.unidentified() == "Aiyo, cannot identify you. Please try again later."


def test_custom_currency_prefix() -> None:
    selector = ResponseSelector(rng=_FirstChoice(), currency_prefix="RM")

    assert selector.format_amount(Decimal("3.456")) == "RM3.45"
