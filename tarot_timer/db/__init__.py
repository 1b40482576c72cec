"""Persistence layer for Tarot Timer."""

from tarot_timer.db.store import JournalStore

__all__ = ["JournalStore"]
