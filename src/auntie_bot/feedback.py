"""Feedback submissions from the summary page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from auntie_bot import get_logger
from auntie_bot.ledger.models import FeedbackRecord
from auntie_bot.ledger.store import LedgerStore

LOGGER = get_logger("feedback")

MAX_MESSAGE_LENGTH = 2000
DEFAULT_PAGE = "summary"
DEFAULT_LIMIT = 10
MAX_LIMIT = 50


class FeedbackValidationError(ValueError):
    """Raised when a feedback submission is unusable."""


@dataclass(slots=True)
class FeedbackPage:
    """One page of feedback, newest first."""

    total: int
    offset: int
    limit: int
    items: list[FeedbackRecord]


def submit_feedback(
    store: LedgerStore,
    *,
    message: object,
    token: object = None,
    page: object = None,
    at_client: object = None,
    ip: str | None = None,
    now: datetime | None = None,
) -> FeedbackRecord:
    """Validate and store a feedback message, returning the stored record."""

    if not isinstance(message, str) or not message.strip():
        raise FeedbackValidationError("message is required")

    record = FeedbackRecord(
        id=uuid4().hex,
        message=message.strip()[:MAX_MESSAGE_LENGTH],
        at_server=now or datetime.now(UTC),
        token=token if isinstance(token, str) else None,
        page=page if isinstance(page, str) else DEFAULT_PAGE,
        at_client=at_client if isinstance(at_client, str) else None,
        ip=ip,
    )
    store.add_feedback(record)
    LOGGER.info("Stored feedback id=%s page=%s", record.id, record.page)
    return record


def list_feedback(
    store: LedgerStore,
    *,
    offset: int | None = None,
    limit: int | None = None,
) -> FeedbackPage:
    """Return feedback newest first with offset/limit clamped to sane bounds."""

    resolved_offset = max(0, offset or 0)
    resolved_limit = min(MAX_LIMIT, max(1, limit or DEFAULT_LIMIT))

    records = sorted(
        store.list_feedback(), key=lambda record: record.at_server, reverse=True
    )
    return FeedbackPage(
        total=len(records),
        offset=resolved_offset,
        limit=resolved_limit,
        items=records[resolved_offset : resolved_offset + resolved_limit],
    )


__all__ = [
    "DEFAULT_LIMIT",
    "FeedbackPage",
    "FeedbackValidationError",
    "MAX_LIMIT",
    "MAX_MESSAGE_LENGTH",
    "list_feedback",
    "submit_feedback",
]
