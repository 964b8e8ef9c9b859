"""Canonical forms for categories and amounts typed into the chat."""

from __future__ import annotations

import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation

DEFAULT_CATEGORY = "uncategorised"
MAX_CATEGORY_LENGTH = 13
CENTS = Decimal("0.01")
# Whole-unit digits accepted from chat; longer numerals overflow Decimal quantize.
MAX_INTEGER_DIGITS = 15

_CATEGORY_STRIP_RE = re.compile(r"[^A-Za-z0-9 ]+")
_WHITESPACE_RE = re.compile(r"\s+")
_SPACED_DECIMAL_RE = re.compile(r"(\d+)\s*\.\s*(\d+)")
_PLAIN_NUMERAL_RE = re.compile(r"-?\d*\.\d{2}")


def normalize_category(raw: str | None) -> str:
    """Reduce free text to letters, digits and single spaces, max 13 chars.

    The cut to 13 characters can land on a space, so the result is trimmed
    again afterwards; this keeps the function idempotent.
    """

    text = _CATEGORY_STRIP_RE.sub("", str(raw or ""))
    text = _WHITESPACE_RE.sub(" ", text).strip()
    text = text[:MAX_CATEGORY_LENGTH].rstrip()
    return text or DEFAULT_CATEGORY


def fix_spaced_decimals(text: str) -> str:
    """Collapse ``"23 . 25"`` style numerals into ``"23.25"``."""

    return _SPACED_DECIMAL_RE.sub(r"\1.\2", str(text))


def normalize_amount(raw_numeric: str) -> Decimal | None:
    """Turn a numeral into a two-decimal ``Decimal`` by truncation.

    Returns ``None`` when the string is not a usable numeral.
    """

    num = str(raw_numeric).strip()

    negative = num.startswith("-")
    if negative:
        num = num[1:].strip()

    if "." in num:
        num = num.replace(",", "")
    elif num.count(",") == 1:
        num = num.replace(",", ".")
    else:
        num = num.replace(",", "")

    integer, _, fraction = num.partition(".")
    if not integer and not fraction:
        return None
    if len(integer.lstrip("0")) > MAX_INTEGER_DIGITS:
        return None
    numeral = f"{'-' if negative else ''}{integer}.{fraction[:2].ljust(2, '0')}"
    if not _PLAIN_NUMERAL_RE.fullmatch(numeral):
        return None
    try:
        return truncate_amount(numeral)
    except InvalidOperation:
        return None


def truncate_amount(value: Decimal | int | str) -> Decimal:
    """Cut a value to whole cents toward zero (never rounds)."""

    return Decimal(value).quantize(CENTS, rounding=ROUND_DOWN)


def format_amount(value: Decimal | int | str, prefix: str = "S$") -> str:
    """Render ``value`` for chat replies, e.g. ``S$12.50`` or ``S$-3.00``."""

    amount = truncate_amount(value)
    if amount.is_zero():
        amount = abs(amount)
    return f"{prefix}{amount:.2f}"


__all__ = [
    "CENTS",
    "DEFAULT_CATEGORY",
    "MAX_CATEGORY_LENGTH",
    "MAX_INTEGER_DIGITS",
    "fix_spaced_decimals",
    "format_amount",
    "normalize_amount",
    "normalize_category",
    "truncate_amount",
]
