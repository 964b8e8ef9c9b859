from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient
from httpx import Response
from pytest_bdd import given, parsers, scenarios, then, when

from auntie_bot.api import create_api
from auntie_bot.config import Settings
from auntie_bot.ledger import Entry, SQLiteLedgerStore

from .feature_registry import materialize_inline_feature

FEATURE_TEXT = """
Feature: Summary page backed by a private token
  The summary page never sees a chat address. It reads and clears a ledger
  using only the token Auntie shared in the chat.

  Background:
    Given a ledger with 3 entries behind a shared token

  Scenario: Opening the page with the shared token
    When the page requests the summary with the shared token
    Then the response status is 200
    And the page receives 3 entries in Asia/Singapore

  Scenario: Opening the page with a made-up token
    When the page requests the summary with token "ffffffffffffffffffffffff"
    Then the response status is 404
    And the error reads "not found"

  Scenario: Clearing the ledger from the page
    When the page clears the ledger with the shared token
    Then the response status is 200
    And the page is told 3 entries were cleared
    And the ledger is empty

  Scenario: Leaving feedback without a message
    When the page sends feedback "   "
    Then the response status is 400
    And the error reads "message is required"
"""


FEATURE_PATH = materialize_inline_feature(
    __file__, "test_summary_page.feature", FEATURE_TEXT
)
scenarios(str(FEATURE_PATH), features_base_dir=str(FEATURE_PATH.parent))

_ADDRESS = "telegram:9090"


@dataclass
class SummaryPageState:
    store: SQLiteLedgerStore
    client: TestClient
    token: str | None = None
    responses: list[Response] = field(default_factory=list)

    @property
    def last_body(self) -> dict[str, Any]:
        return self.responses[-1].json()


@pytest.fixture
def page(tmp_path: Path) -> Iterator[SummaryPageState]:
    settings = Settings(_env_file=None, SUMMARY_SALT="page-salt")
    store = SQLiteLedgerStore(tmp_path / "ledger.sqlite", token_secret="page-salt")
    state = SummaryPageState(store=store, client=TestClient(create_api(settings, store=store)))
    yield state
    store.close()


@given(parsers.parse("a ledger with {count:d} entries behind a shared token"))
def given_ledger(page: SummaryPageState, count: int) -> None:
    page.token = page.store.ensure_token(_ADDRESS)
    for index in range(count):
        page.store.append_entry(
            _ADDRESS,
            Entry("kopi", Decimal("1.20"), datetime(2025, 3, 12, index, 0, tzinfo=UTC)),
        )


@when("the page requests the summary with the shared token")
def when_request_shared(page: SummaryPageState) -> None:
    page.responses.append(page.client.get("/api/summary", params={"u": page.token}))


@when(parsers.parse('the page requests the summary with token "{token}"'))
def when_request_token(page: SummaryPageState, token: str) -> None:
    page.responses.append(page.client.get("/api/summary", params={"u": token}))


@when("the page clears the ledger with the shared token")
def when_clear(page: SummaryPageState) -> None:
    page.responses.append(page.client.post("/api/clear", json={"u": page.token}))


@when(parsers.parse('the page sends feedback "{message}"'))
def when_feedback(page: SummaryPageState, message: str) -> None:
    page.responses.append(page.client.post("/api/feedback", json={"message": message}))


@then(parsers.parse("the response status is {status:d}"))
def then_status(page: SummaryPageState, status: int) -> None:
    assert page.responses[-1].status_code == status


@then(parsers.parse("the page receives {count:d} entries in {tz}"))
def then_entries(page: SummaryPageState, count: int, tz: str) -> None:
    assert len(page.last_body["entries"]) == count
    assert page.last_body["tz"] == tz


@then(parsers.parse('the error reads "{message}"'))
def then_error(page: SummaryPageState, message: str) -> None:
    assert page.last_body == {"error": message}


@then(parsers.parse("the page is told {count:d} entries were cleared"))
def then_cleared(page: SummaryPageState, count: int) -> None:
    assert page.last_body["countBefore"] == count


@then("the ledger is empty")
def then_empty(page: SummaryPageState) -> None:
    assert page.store.list_entries(_ADDRESS) == []
