"""Timeline controller for the 24-hour tarot timeline.

Owns the live TimelineState for "today", drives day rollover from an injected
Clock and mediates between the live state and the JournalStore.

Every public operation runs under one lock, so a rollover tick can never land
in the middle of a draw or a save. A save always targets the live state's
date; if the clock has already passed midnight, the save completes for the
old day and the next tick rolls over.
"""

import logging
import threading
from enum import Enum
from typing import Optional

from tarot_timer.assignment import assign_day
from tarot_timer.catalog import CardCatalog, get_catalog
from tarot_timer.clock import Clock
from tarot_timer.db.store import JournalStore
from tarot_timer.errors import NotFoundError, NothingToSaveError
from tarot_timer.models import Card, JournalEntry, MemoRecord, SessionStats, TimelineState, validate_hour

logger = logging.getLogger(__name__)


class TimelinePhase(str, Enum):
    """Lifecycle of the live timeline."""

    UNINITIALIZED = "uninitialized"
    EMPTY = "empty"
    DRAWN = "drawn"
    SAVED = "saved"


class TimelineController:
    """Orchestrates the catalog, assignment, live state and journal store."""

    def __init__(
        self,
        store: JournalStore,
        clock: Clock,
        catalog: Optional[CardCatalog] = None,
    ):
        """Initialize the controller.

        Args:
            store: Journal store for saved entries and the live record.
            clock: Wall-clock source.
            catalog: Card catalog. Defaults to the full 78-card deck.
        """
        self._store = store
        self._clock = clock
        self._catalog = catalog or get_catalog()
        self._lock = threading.RLock()
        self._state: Optional[TimelineState] = None
        self._saved = False

    # ==================== Lifecycle ====================

    def start(self) -> TimelinePhase:
        """Load today's timeline, or roll over if the date has changed.

        Safe to call repeatedly; it is the same check a poll tick performs.
        """
        return self.tick()

    def tick(self) -> TimelinePhase:
        """Re-check the wall clock and apply day rollover if needed."""
        with self._lock:
            today = self._clock.today()
            if self._state is None:
                self._rehydrate(today)
            elif self._state.date != today:
                self._roll_over(today)
            return self.phase

    def _rehydrate(self, today) -> None:
        live = self._store.load_live_state()
        saved = self._store.get_entry_by_date(today)

        if live is not None and live.date == today:
            state = live
            logger.debug("Rehydrated live timeline for %s", today)
        elif saved is not None:
            state = saved.to_timeline()
            self._store.save_live_state(state)
            logger.debug("Rehydrated timeline for %s from journal", today)
        else:
            state = TimelineState.empty(today)
            self._store.save_live_state(state)
            logger.debug("Started empty timeline for %s", today)

        self._state = state
        self._saved = saved is not None

    def _roll_over(self, today) -> None:
        previous = self._state
        self._state = None
        self._saved = False
        self._store.clear_live_state()
        self._rehydrate(today)
        if previous.is_drawn and self._store.get_entry_by_date(previous.date) is None:
            logger.info("Day rolled over to %s; unsaved timeline for %s discarded", today, previous.date)
        else:
            logger.info("Day rolled over to %s", today)

    def _require_state(self) -> TimelineState:
        if self._state is None:
            self.tick()
        return self._state

    # ==================== Views ====================

    @property
    def phase(self) -> TimelinePhase:
        with self._lock:
            if self._state is None:
                return TimelinePhase.UNINITIALIZED
            if self._saved:
                return TimelinePhase.SAVED
            if self._state.is_drawn:
                return TimelinePhase.DRAWN
            return TimelinePhase.EMPTY

    @property
    def is_saved(self) -> bool:
        return self.phase is TimelinePhase.SAVED

    @property
    def catalog(self) -> CardCatalog:
        return self._catalog

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def current_hour(self) -> int:
        """Hour of the wall clock right now; never cached."""
        return self._clock.now().hour

    def snapshot(self) -> TimelineState:
        """Get the live timeline as an immutable snapshot."""
        with self._lock:
            return self._require_state()

    def get_card(self, hour: int) -> Optional[Card]:
        """Get the card drawn for ``hour``, or None if not drawn."""
        with self._lock:
            slot = self._require_state().slot(hour)
            return self._catalog.get_card(slot.card_id) if slot.is_drawn else None

    def get_current_card(self) -> Optional[Card]:
        """Get the card for the current wall-clock hour, or None if not drawn."""
        with self._lock:
            self.tick()
            return self.get_card(self.current_hour)

    def session_stats(self) -> SessionStats:
        with self._lock:
            return self._require_state().stats()

    # ==================== Actions ====================

    def draw_all(self) -> TimelineState:
        """Draw cards for all 24 hours.

        The whole spread is computed before it replaces the live state, so a
        partially drawn day is never visible. Drawing again on the same day
        yields the same cards and keeps existing memos.

        Returns:
            The drawn timeline.
        """
        with self._lock:
            state = self._require_state()
            drawn = state.with_cards(assign_day(state.date, self._catalog))
            self._commit(drawn)
            logger.info("Drew 24 cards for %s", drawn.date)
            return drawn

    def set_memo(self, hour: int, memo: Optional[str]) -> TimelineState:
        """Set the memo for one hour of the live timeline.

        Only the live state changes; a saved entry is edited through
        update_saved_entry_memo.

        Raises:
            InvalidArgumentError: If hour is out of range.
            HourNotDrawnError: If the hour has no card yet.
        """
        with self._lock:
            updated = self._require_state().with_memo(hour, memo)
            self._commit(updated)
            return updated

    def clear_memo(self, hour: int) -> TimelineState:
        return self.set_memo(hour, None)

    def save_today(self) -> JournalEntry:
        """Save the live timeline as today's journal entry.

        Returns:
            The saved entry.

        Raises:
            NothingToSaveError: If no hour has been drawn.
            AlreadySavedError: If an entry for the date already exists.
        """
        with self._lock:
            state = self._require_state()
            if not state.is_drawn:
                raise NothingToSaveError()
            entry = JournalEntry.from_timeline(state, created_at=self._clock.now())
            self._store.save_entry(entry)
            self._saved = True
            return entry

    def update_saved_entry_memo(self, hour: int, memo: Optional[str]) -> JournalEntry:
        """Edit a memo in the saved entry for the live date.

        The live state gets the same memo so both views agree. The live
        record is written first and restored if the journal update fails.

        Raises:
            NotFoundError: If the live date has not been saved.
            HourNotDrawnError: If the hour has no card.
        """
        with self._lock:
            validate_hour(hour)
            state = self._require_state()
            if self._store.get_entry_by_date(state.date) is None:
                raise NotFoundError(f"No journal entry saved for {state.date}")
            updated = state.with_memo(hour, memo)
            self._store.save_live_state(updated)
            try:
                entry = self._store.update_saved_entry_memo(state.date, hour, memo)
            except Exception:
                self._store.save_live_state(state)
                raise
            self._state = updated
            self._saved = True
            return entry

    def _commit(self, state: TimelineState) -> None:
        """Persist then publish a new live state."""
        self._store.save_live_state(state)
        self._state = state

    # ==================== Journal ====================

    def list_entries(self) -> list[JournalEntry]:
        return self._store.list_entries()

    def list_memos(self, start_date, end_date=None) -> list[MemoRecord]:
        """Get memos saved between two dates; see JournalStore.list_memos."""
        return self._store.list_memos(start_date, end_date)

    def delete_entry(self, entry_id: str) -> None:
        """Delete a saved entry.

        Deleting today's entry returns the live timeline to DRAWN.

        Raises:
            NotFoundError: If no entry has this ID.
        """
        with self._lock:
            entry = self._store.get_entry(entry_id)
            if entry is None:
                raise NotFoundError(f"Nothing to delete: no journal entry {entry_id}")
            self._store.delete_entry(entry_id)
            if self._state is not None and entry.date == self._state.date:
                self._saved = False
