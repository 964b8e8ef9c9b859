"""Dispatch graph node helpers: classification and one handler per command."""

from __future__ import annotations

from datetime import tzinfo

from auntie_bot import get_logger
from auntie_bot.graph.state import DispatchState, Route
from auntie_bot.ledger.models import Entry
from auntie_bot.ledger.store import LedgerStore
from auntie_bot.parsing import fix_spaced_decimals, parse_expense_text
from auntie_bot.replies import ResponseSelector
from auntie_bot.summary.aggregate import (
    Period,
    count_entries_today,
    period_start,
    summarize,
)

LOGGER = get_logger("graph.nodes")

MENU_COMMANDS = {"menu", "help"}
LIST_COMMAND = "list"
UNDO_COMMAND = "undo"
SUMMARY_KEYWORD = "summary"
MONTH_KEYWORD = "month"
TIP_KEYWORD = "tip"


def classify_message(command_text: str) -> tuple[Route, Period | None]:
    """Route a trimmed, decimal-fixed, lower-cased message.

    Exact commands are checked before substring commands, and every command
    shadows expense parsing: "list" alone is never recorded as a category.
    """

    if command_text in MENU_COMMANDS:
        return "menu", None
    if command_text == LIST_COMMAND:
        return "list", None
    if command_text == UNDO_COMMAND:
        return "undo", None
    if SUMMARY_KEYWORD in command_text:
        return "summary", ("month" if MONTH_KEYWORD in command_text else "week")
    if TIP_KEYWORD in command_text:
        return "tip", None
    return "record", None


def prepare_message(
    state: DispatchState,
    *,
    store: LedgerStore,
    selector: ResponseSelector,
) -> None:
    """Validate the sender, create its ledger on first contact and classify."""

    state.body = (state.body or "").strip()
    state.command_text = fix_spaced_decimals(state.body).lower()

    address = (state.address or "").strip()
    if not address:
        LOGGER.warning("Rejected message without a sender address")
        state.route = "unidentified"
        state.reply = selector.unidentified()
        return

    state.address = address
    state.token = store.ensure_token(address)
    state.route, state.period = classify_message(state.command_text)
    LOGGER.debug("Classified message token=%s route=%s", state.token, state.route)


def show_menu(state: DispatchState, *, selector: ResponseSelector) -> None:
    state.reply = selector.menu()


def list_recent(
    state: DispatchState, *, store: LedgerStore, selector: ResponseSelector
) -> None:
    state.reply = selector.recent_entries(store.list_entries(state.address))


def undo_last(
    state: DispatchState, *, store: LedgerStore, selector: ResponseSelector
) -> None:
    """Remove exactly the most recent entry; a no-op on an empty ledger."""

    removed = store.pop_entry(state.address)
    if removed is None:
        state.reply = selector.nothing_to_undo()
        return
    LOGGER.info("Undid entry token=%s amount=%s", state.token, removed.amount)
    state.reply = selector.expense_undone(removed)


def summarize_period(
    state: DispatchState,
    *,
    store: LedgerStore,
    selector: ResponseSelector,
    timezone: tzinfo,
) -> None:
    period: Period = state.period or "week"
    start = period_start(period, state.received_at, timezone)
    summary = summarize(store.list_entries(state.address), start, state.received_at)
    state.reply = selector.spending_summary(period, summary, state.token or "")


def give_tip(state: DispatchState, *, selector: ResponseSelector) -> None:
    state.reply = selector.tip()


def record_expense(
    state: DispatchState,
    *,
    store: LedgerStore,
    selector: ResponseSelector,
    timezone: tzinfo,
) -> None:
    """Parse the original message and append an entry when it reads as an expense."""

    parsed = parse_expense_text(state.body)
    if parsed is None:
        state.reply = selector.usage_help()
        return

    entry = Entry(
        category=parsed.category.lower(),
        amount=parsed.amount,
        recorded_at=state.received_at,
    )
    store.append_entry(state.address, entry)
    state.recorded_entry = entry

    today_count = count_entries_today(
        store.list_entries(state.address), state.received_at, timezone
    )
    LOGGER.info(
        "Recorded entry token=%s rule=%s amount=%s today=%d",
        state.token,
        parsed.rule,
        entry.amount,
        today_count,
    )
    state.reply = selector.expense_added(entry.amount, entry.category, today_count)


__all__ = [
    "LIST_COMMAND",
    "MENU_COMMANDS",
    "UNDO_COMMAND",
    "classify_message",
    "give_tip",
    "list_recent",
    "prepare_message",
    "record_expense",
    "show_menu",
    "summarize_period",
    "undo_last",
]
