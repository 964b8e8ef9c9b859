"""Parsing helpers for the expense bot."""

from .expense import GRAMMAR_RULES, GrammarRule, ParsedExpense, parse_expense_text
from .normalize import (
    DEFAULT_CATEGORY,
    fix_spaced_decimals,
    format_amount,
    normalize_amount,
    normalize_category,
    truncate_amount,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "GRAMMAR_RULES",
    "GrammarRule",
    "ParsedExpense",
    "fix_spaced_decimals",
    "format_amount",
    "normalize_amount",
    "normalize_category",
    "parse_expense_text",
    "truncate_amount",
]
