"""Pseudonymous tokens that stand in for a user's chat address."""

from __future__ import annotations

import hashlib
import hmac

TOKEN_LENGTH = 24


def tokenize_address(address: str, secret: str, *, length: int = TOKEN_LENGTH) -> str:
    """Return the first ``length`` hex chars of HMAC-SHA256(secret, address)."""

    if not address:
        raise ValueError("address is required to derive a token.")
    if not 0 < length <= hashlib.sha256().digest_size * 2:
        raise ValueError("length must fit inside a SHA-256 hex digest.")
    digest = hmac.new(
        secret.encode("utf-8"), address.encode("utf-8"), hashlib.sha256
    ).hexdigest()
    return digest[:length]


__all__ = ["TOKEN_LENGTH", "tokenize_address"]
