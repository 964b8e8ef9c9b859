"""Unit tests for address tokenization."""

from __future__ import annotations

import hashlib
import hmac
import re

import pytest

from auntie_bot.ledger.tokens import TOKEN_LENGTH, tokenize_address


def test_tokenize_address_is_truncated_hmac_hex() -> None:
    token = tokenize_address("telegram:123", "pepper")

    expected = hmac.new(b"pepper", b"telegram:123", hashlib.sha256).hexdigest()[:24]
    assert token == expected
    assert len(token) == TOKEN_LENGTH
    assert re.fullmatch(r"[0-9a-f]{24}", token)


def test_tokenize_address_is_deterministic_per_secret() -> None:
    assert tokenize_address("telegram:1", "a") == tokenize_address("telegram:1", "a")
    assert tokenize_address("telegram:1", "a") != tokenize_address("telegram:2", "a")
    assert tokenize_address("telegram:1", "a") != tokenize_address("telegram:1", "b")


def test_tokenize_address_requires_an_address() -> None:
    with pytest.raises(ValueError):
        tokenize_address("", "pepper")


def test_tokenize_address_rejects_lengths_beyond_digest() -> None:
    with pytest.raises(ValueError):
        tokenize_address("telegram:1", "pepper", length=65)


def test_tokens_stay_unique_across_many_addresses() -> None:
    tokens = {tokenize_address(f"telegram:{chat_id}", "pepper") for chat_id in range(10_000)}

    assert len(tokens) == 10_000
