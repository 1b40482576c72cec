"""Tarot Timer - a 24-hour tarot timeline with a daily journal."""

from tarot_timer.catalog import CardCatalog, get_catalog
from tarot_timer.clock import Clock, ManualClock, SystemClock
from tarot_timer.controller import TimelineController, TimelinePhase
from tarot_timer.db.store import JournalStore

__all__ = [
    "CardCatalog",
    "get_catalog",
    "Clock",
    "ManualClock",
    "SystemClock",
    "TimelineController",
    "TimelinePhase",
    "JournalStore",
]
