"""Two-rule grammar that turns a chat line into an amount and a category."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from auntie_bot import get_logger
from auntie_bot.parsing.normalize import (
    fix_spaced_decimals,
    normalize_amount,
    normalize_category,
)

LOGGER = get_logger("parsing.expense")

RuleName = Literal["amount_first", "category_first"]

_AMOUNT_FIRST_PATTERN = re.compile(
    r"""
    ^\s*
    (?P<sign>-)?\s*                                         # sign may precede the currency
    (?:s?\$)?\s*                                            # $ or S$
    (?P<number>-?[0-9][0-9,]*(?:[.][0-9]+|[,][0-9]+)?)      # numeral, commas allowed
    \s*
    (?P<category>.*)
    $
    """,
    re.IGNORECASE | re.VERBOSE,
)

_CATEGORY_FIRST_PATTERN = re.compile(
    r"""
    ^\s*
    (?P<category>.*?)\s*
    (?:[:\-])?\s*                                           # "kopi: 4" / "kopi - 4"
    (?:s?\$)?\s*
    (?P<number>-?[0-9][0-9,]*(?:[.][0-9]+|[,][0-9]+)?)
    \s*$
    """,
    re.IGNORECASE | re.VERBOSE,
)


@dataclass(slots=True)
class ParsedExpense:
    """Amount and normalized category extracted from one message."""

    amount: Decimal
    category: str
    rule: RuleName


@dataclass(frozen=True, slots=True)
class GrammarRule:
    """One way of reading a message; rules are tried in declaration order."""

    name: RuleName
    pattern: re.Pattern[str]
    requires_category: bool = False

    def apply(self, text: str) -> ParsedExpense | None:
        match = self.pattern.match(text)
        if match is None:
            return None

        raw_category = (match.group("category") or "").strip()
        if self.requires_category and not raw_category:
            return None

        amount = normalize_amount(_signed_numeral(match))
        if amount is None:
            return None
        return ParsedExpense(
            amount=amount,
            category=normalize_category(raw_category),
            rule=self.name,
        )


# Amount-first wins: "200 shoes" never reaches the category-first rule.
GRAMMAR_RULES: tuple[GrammarRule, ...] = (
    GrammarRule("amount_first", _AMOUNT_FIRST_PATTERN),
    GrammarRule("category_first", _CATEGORY_FIRST_PATTERN, requires_category=True),
)


def parse_expense_text(message: str) -> ParsedExpense | None:
    """Parse ``message`` with the first grammar rule that yields a result.

    Returns ``None`` when no rule matches or the numeral is unusable.
    """

    text = fix_spaced_decimals(message)
    for rule in GRAMMAR_RULES:
        parsed = rule.apply(text)
        if parsed is not None:
            LOGGER.debug(
                "Parsed expense via %s: amount=%s category=%s",
                rule.name,
                parsed.amount,
                parsed.category,
            )
            return parsed
    LOGGER.debug("No grammar rule matched message %r", text[:80])
    return None


def _signed_numeral(match: re.Match[str]) -> str:
    number = match.group("number")
    sign = match.groupdict().get("sign")
    if sign and not number.startswith("-"):
        return f"-{number}"
    return number


__all__ = ["GRAMMAR_RULES", "GrammarRule", "ParsedExpense", "RuleName", "parse_expense_text"]
