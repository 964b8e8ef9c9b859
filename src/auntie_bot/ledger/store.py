"""Ledger persistence: a per-address store protocol and its SQLite backend."""

from __future__ import annotations

import sqlite3
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path
from typing import Protocol, TypeVar, runtime_checkable

from auntie_bot import get_logger
from auntie_bot.ledger.models import Entry, FeedbackRecord, UserRecord
from auntie_bot.ledger.tokens import tokenize_address

LOGGER = get_logger("ledger.store")

_T = TypeVar("_T")


class LedgerStoreError(RuntimeError):
    """Raised when the backing store cannot complete an operation."""


@runtime_checkable
class LedgerStore(Protocol):
    """Key-value style access to ledgers keyed by chat address."""

    def ensure_token(self, address: str) -> str:
        """Return the token for ``address``, creating the user on first use."""

    def find_by_token(self, token: str) -> UserRecord | None:
        """Return the user owning ``token`` or ``None``."""

    def append_entry(self, address: str, entry: Entry) -> int:
        """Append ``entry`` and return the ledger length afterwards."""

    def pop_entry(self, address: str) -> Entry | None:
        """Remove and return the most recent entry, if any."""

    def list_entries(self, address: str) -> list[Entry]:
        """Return entries oldest first."""

    def clear_entries(self, address: str) -> int:
        """Drop every entry and return how many were removed."""

    def add_feedback(self, record: FeedbackRecord) -> None:
        """Persist a feedback record."""

    def list_feedback(self) -> list[FeedbackRecord]:
        """Return every feedback record in insertion order."""


class SQLiteLedgerStore:
    """SQLite implementation of :class:`LedgerStore`.

    Each public method runs inside one transaction while holding a lock on
    the shared connection, so concurrent appends and undos never interleave.
    """

    def __init__(
        self,
        db_path: str | Path,
        *,
        token_secret: str,
        timeout: float = 5.0,
    ) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._token_secret = token_secret
        self._lock = threading.RLock()
        self._conn = sqlite3.connect(
            self._db_path,
            timeout=timeout,
            check_same_thread=False,
        )
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA foreign_keys = ON")
        self._initialize_schema()

    def close(self) -> None:
        """Close the underlying SQLite connection."""

        with self._lock:
            self._conn.close()

    def ensure_token(self, address: str) -> str:
        if not address:
            raise ValueError("address is required.")

        def _op(conn: sqlite3.Connection) -> str:
            row = conn.execute(
                "SELECT token FROM users WHERE address = ?", (address,)
            ).fetchone()
            if row is not None:
                return row["token"]
            token = tokenize_address(address, self._token_secret)
            conn.execute(
                "INSERT INTO users (address, token, created_at) VALUES (?, ?, ?)",
                (address, token, _serialize_datetime(datetime.now(UTC))),
            )
            LOGGER.info("Created ledger for new address token=%s", token)
            return token

        return self._run(_op)

    def find_by_token(self, token: str) -> UserRecord | None:
        def _op(conn: sqlite3.Connection) -> UserRecord | None:
            row = conn.execute(
                "SELECT address, token FROM users WHERE token = ?", (token,)
            ).fetchone()
            if row is None:
                return None
            return UserRecord(
                address=row["address"],
                token=row["token"],
                entries=self._fetch_entries(conn, row["address"]),
            )

        return self._run(_op)

    def append_entry(self, address: str, entry: Entry) -> int:
        def _op(conn: sqlite3.Connection) -> int:
            conn.execute(
                """
                INSERT INTO entries (address, category, amount, recorded_at)
                VALUES (?, ?, ?, ?)
                """,
                (
                    address,
                    entry.category,
                    str(entry.amount),
                    _serialize_datetime(entry.recorded_at),
                ),
            )
            return self._count_entries(conn, address)

        count = self._run(_op)
        LOGGER.debug("Appended entry for address; ledger size=%d", count)
        return count

    def pop_entry(self, address: str) -> Entry | None:
        def _op(conn: sqlite3.Connection) -> Entry | None:
            row = conn.execute(
                """
                SELECT id, category, amount, recorded_at
                FROM entries
                WHERE address = ?
                ORDER BY id DESC
                LIMIT 1
                """,
                (address,),
            ).fetchone()
            if row is None:
                return None
            conn.execute("DELETE FROM entries WHERE id = ?", (row["id"],))
            return _row_to_entry(row)

        return self._run(_op)

    def list_entries(self, address: str) -> list[Entry]:
        return self._run(lambda conn: self._fetch_entries(conn, address))

    def clear_entries(self, address: str) -> int:
        def _op(conn: sqlite3.Connection) -> int:
            deleted = conn.execute("DELETE FROM entries WHERE address = ?", (address,))
            return int(deleted.rowcount)

        removed = self._run(_op)
        LOGGER.info("Cleared %d entries from a ledger", removed)
        return removed

    def add_feedback(self, record: FeedbackRecord) -> None:
        self._run(
            lambda conn: conn.execute(
                """
                INSERT INTO feedback (id, token, page, message, at_client, at_server, ip)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record.id,
                    record.token,
                    record.page,
                    record.message,
                    record.at_client,
                    _serialize_datetime(record.at_server),
                    record.ip,
                ),
            )
        )

    def list_feedback(self) -> list[FeedbackRecord]:
        def _op(conn: sqlite3.Connection) -> list[FeedbackRecord]:
            rows = conn.execute("SELECT * FROM feedback ORDER BY rowid").fetchall()
            return [
                FeedbackRecord(
                    id=row["id"],
                    token=row["token"],
                    page=row["page"],
                    message=row["message"],
                    at_client=row["at_client"],
                    at_server=datetime.fromisoformat(row["at_server"]),
                    ip=row["ip"],
                )
                for row in rows
            ]

        return self._run(_op)

    def _run(self, operation: Callable[[sqlite3.Connection], _T]) -> _T:
        with self._lock, self._transaction() as conn:
            return operation(conn)

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        try:
            with self._conn:
                yield self._conn
        except sqlite3.Error as exc:
            LOGGER.exception("Ledger store operation failed; transaction rolled back")
            raise LedgerStoreError(str(exc)) from exc

    @staticmethod
    def _fetch_entries(conn: sqlite3.Connection, address: str) -> list[Entry]:
        rows = conn.execute(
            """
            SELECT category, amount, recorded_at
            FROM entries
            WHERE address = ?
            ORDER BY id ASC
            """,
            (address,),
        ).fetchall()
        return [_row_to_entry(row) for row in rows]

    @staticmethod
    def _count_entries(conn: sqlite3.Connection, address: str) -> int:
        row = conn.execute(
            "SELECT COUNT(*) AS total FROM entries WHERE address = ?", (address,)
        ).fetchone()
        return int(row["total"])

    def _initialize_schema(self) -> None:
        with self._lock, self._conn:
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    address TEXT PRIMARY KEY,
                    token TEXT NOT NULL UNIQUE,
                    created_at TEXT NOT NULL
                )
                """
            )
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS entries (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    address TEXT NOT NULL REFERENCES users(address),
                    category TEXT NOT NULL,
                    amount TEXT NOT NULL,
                    recorded_at TEXT NOT NULL
                )
                """
            )
            self._conn.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_entries_address
                ON entries(address, id)
                """
            )
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS feedback (
                    id TEXT PRIMARY KEY,
                    token TEXT,
                    page TEXT NOT NULL,
                    message TEXT NOT NULL,
                    at_client TEXT,
                    at_server TEXT NOT NULL,
                    ip TEXT
                )
                """
            )


def _serialize_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


def _row_to_entry(row: sqlite3.Row) -> Entry:
    return Entry(
        category=row["category"],
        amount=Decimal(row["amount"]),
        recorded_at=datetime.fromisoformat(row["recorded_at"]),
    )


__all__ = ["LedgerStore", "LedgerStoreError", "SQLiteLedgerStore"]
