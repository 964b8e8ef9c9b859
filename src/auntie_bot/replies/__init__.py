"""Reply text for the chat surface."""

from .selector import (
    HIGH_THRESHOLD,
    LIST_LIMIT,
    STREAK_THRESHOLD,
    ULTRA_THRESHOLD,
    ResponseSelector,
    Tier,
    classify_tier,
    display_category,
)

__all__ = [
    "HIGH_THRESHOLD",
    "LIST_LIMIT",
    "ResponseSelector",
    "STREAK_THRESHOLD",
    "Tier",
    "ULTRA_THRESHOLD",
    "classify_tier",
    "display_category",
]
