"""Per-address expense ledgers and their storage."""

from .models import Entry, FeedbackRecord, UserRecord
from .queries import (
    LedgerSnapshot,
    MissingTokenError,
    UnknownTokenError,
    clear_ledger,
    fetch_ledger_snapshot,
)
from .store import LedgerStore, LedgerStoreError, SQLiteLedgerStore
from .tokens import TOKEN_LENGTH, tokenize_address

__all__ = [
    "Entry",
    "FeedbackRecord",
    "LedgerSnapshot",
    "LedgerStore",
    "LedgerStoreError",
    "MissingTokenError",
    "SQLiteLedgerStore",
    "TOKEN_LENGTH",
    "UnknownTokenError",
    "UserRecord",
    "clear_ledger",
    "fetch_ledger_snapshot",
    "tokenize_address",
]
