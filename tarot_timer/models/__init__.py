"""Data models for Tarot Timer."""

from tarot_timer.models.card import Card, Element, LocalizedText, Suit, SUITS
from tarot_timer.models.timeline import (
    HOURS_PER_DAY,
    HourSlot,
    SessionStats,
    TimelineState,
    validate_date,
    validate_hour,
)
from tarot_timer.models.journal import JournalEntry, MemoRecord

__all__ = [
    "Card",
    "Element",
    "LocalizedText",
    "Suit",
    "SUITS",
    "HOURS_PER_DAY",
    "HourSlot",
    "SessionStats",
    "TimelineState",
    "validate_date",
    "validate_hour",
    "JournalEntry",
    "MemoRecord",
]
