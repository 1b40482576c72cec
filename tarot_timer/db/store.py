"""SQLite journal store for Tarot Timer."""

import logging
import sqlite3
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Optional

from pydantic import TypeAdapter

from tarot_timer.errors import AlreadySavedError, NotFoundError
from tarot_timer.models import HourSlot, JournalEntry, MemoRecord, TimelineState, validate_date

logger = logging.getLogger(__name__)

_SLOTS_ADAPTER = TypeAdapter(tuple[HourSlot, ...])


def dump_slots(slots: Iterable[HourSlot]) -> str:
    """Serialize slots as a JSON array of {hour, card_id, is_drawn, memo}."""
    return _SLOTS_ADAPTER.dump_json(tuple(slots)).decode("utf-8")


def load_slots(raw: str) -> tuple[HourSlot, ...]:
    return _SLOTS_ADAPTER.validate_json(raw)


class JournalStore:
    """SQLite-based store for journal entries and the live timeline.

    Holds at most one journal entry per date and a single companion record
    with today's unsaved timeline so an in-progress day survives a restart.
    """

    REQUIRED_TABLES = [
        "journal",
        "live_timeline",
    ]

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()

            # One row per saved day
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS journal (
                    id TEXT PRIMARY KEY,
                    date TEXT NOT NULL UNIQUE,
                    slots TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
            """)

            # Today's live timeline, single row
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS live_timeline (
                    id INTEGER PRIMARY KEY CHECK (id = 1),
                    date TEXT NOT NULL,
                    slots TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            conn.commit()
        finally:
            conn.close()

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> JournalEntry:
        return JournalEntry(
            id=row["id"],
            date=date.fromisoformat(row["date"]),
            slots=load_slots(row["slots"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    # ==================== Journal ====================

    def save_entry(self, entry: JournalEntry) -> None:
        """Save a journal entry.

        The existence check and the insert run in one write transaction.

        Args:
            entry: Journal entry to save.

        Raises:
            AlreadySavedError: If an entry for the same date already exists.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("BEGIN IMMEDIATE")
            cursor.execute(
                "SELECT id FROM journal WHERE date = ?", (entry.date.isoformat(),)
            )
            if cursor.fetchone() is not None:
                conn.rollback()
                raise AlreadySavedError(f"Already saved a journal entry for {entry.date}")
            cursor.execute(
                """
                INSERT INTO journal (id, date, slots, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (
                    entry.id,
                    entry.date.isoformat(),
                    dump_slots(entry.slots),
                    entry.created_at.isoformat(),
                ),
            )
            conn.commit()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise AlreadySavedError(f"Already saved a journal entry for {entry.date}") from None
        finally:
            conn.close()

        logger.info("Saved journal entry %s for %s", entry.id, entry.date)

    def list_entries(self, from_date: Optional[date] = None) -> list[JournalEntry]:
        """Get journal entries, newest first.

        Args:
            from_date: Optional start date filter.

        Returns:
            List of journal entries.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            if from_date:
                cursor.execute(
                    """
                    SELECT id, date, slots, created_at
                    FROM journal
                    WHERE date >= ?
                    ORDER BY date DESC
                    """,
                    (validate_date(from_date).isoformat(),),
                )
            else:
                cursor.execute(
                    """
                    SELECT id, date, slots, created_at
                    FROM journal
                    ORDER BY date DESC
                    """
                )
            return [self._row_to_entry(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_entry(self, entry_id: str) -> Optional[JournalEntry]:
        """Get a journal entry by ID.

        Returns:
            JournalEntry if found, None otherwise.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT id, date, slots, created_at FROM journal WHERE id = ?",
                (entry_id,),
            )
            row = cursor.fetchone()
            return self._row_to_entry(row) if row else None
        finally:
            conn.close()

    def get_entry_by_date(self, entry_date) -> Optional[JournalEntry]:
        """Get the journal entry saved for a date.

        Returns:
            JournalEntry if found, None otherwise.

        Raises:
            InvalidArgumentError: If the date is malformed.
        """
        entry_date = validate_date(entry_date)
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT id, date, slots, created_at FROM journal WHERE date = ?",
                (entry_date.isoformat(),),
            )
            row = cursor.fetchone()
            return self._row_to_entry(row) if row else None
        finally:
            conn.close()

    def list_memos(self, start_date, end_date=None) -> list[MemoRecord]:
        """Get every saved memo between two dates, inclusive.

        Args:
            start_date: First date of the range.
            end_date: Last date of the range. Defaults to start_date.

        Returns:
            Memo records, newest date first and by hour within a day.

        Raises:
            InvalidArgumentError: If a date is malformed.
        """
        start_date = validate_date(start_date)
        end_date = validate_date(end_date) if end_date is not None else start_date

        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, date, slots, created_at
                FROM journal
                WHERE date >= ? AND date <= ?
                ORDER BY date DESC
                """,
                (start_date.isoformat(), end_date.isoformat()),
            )
            entries = [self._row_to_entry(row) for row in cursor.fetchall()]
        finally:
            conn.close()

        return [
            MemoRecord(date=entry.date, hour=slot.hour, card_id=slot.card_id, memo=slot.memo)
            for entry in entries
            for slot in entry.slots
            if slot.memo is not None
        ]

    def delete_entry(self, entry_id: str) -> None:
        """Permanently delete a journal entry.

        Args:
            entry_id: ID of the entry to delete.

        Raises:
            NotFoundError: If no entry has this ID.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM journal WHERE id = ?", (entry_id,))
            deleted = cursor.rowcount
            conn.commit()
        finally:
            conn.close()

        if not deleted:
            raise NotFoundError(f"Nothing to delete: no journal entry {entry_id}")
        logger.info("Deleted journal entry %s", entry_id)

    def update_saved_entry_memo(
        self, entry_date, hour: int, memo: Optional[str]
    ) -> JournalEntry:
        """Edit the memo of one hour in an already saved entry.

        Args:
            entry_date: Date of the saved entry.
            hour: Clock hour 0..23.
            memo: New memo, or None/blank to clear it.

        Returns:
            The updated journal entry.

        Raises:
            NotFoundError: If nothing is saved for the date.
            HourNotDrawnError: If the stored hour has no card.
            InvalidArgumentError: If the date or hour is malformed.
        """
        entry_date = validate_date(entry_date)
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("BEGIN IMMEDIATE")
            cursor.execute(
                "SELECT id, date, slots, created_at FROM journal WHERE date = ?",
                (entry_date.isoformat(),),
            )
            row = cursor.fetchone()
            if row is None:
                conn.rollback()
                raise NotFoundError(f"No journal entry saved for {entry_date}")
            try:
                updated = self._row_to_entry(row).with_memo(hour, memo)
            except Exception:
                conn.rollback()
                raise
            cursor.execute(
                "UPDATE journal SET slots = ? WHERE id = ?",
                (dump_slots(updated.slots), updated.id),
            )
            conn.commit()
            return updated
        finally:
            conn.close()

    # ==================== Live timeline ====================

    def save_live_state(self, state: TimelineState) -> None:
        """Store today's live timeline, replacing any previous one."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT OR REPLACE INTO live_timeline (id, date, slots, updated_at)
                VALUES (1, ?, ?, ?)
                """,
                (state.date.isoformat(), dump_slots(state.slots), datetime.now().isoformat()),
            )
            conn.commit()
        finally:
            conn.close()

    def load_live_state(self) -> Optional[TimelineState]:
        """Get the stored live timeline.

        Returns:
            TimelineState if one was stored, None otherwise.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT date, slots FROM live_timeline WHERE id = 1")
            row = cursor.fetchone()
            if row is None:
                return None
            return TimelineState(
                date=date.fromisoformat(row["date"]),
                slots=load_slots(row["slots"]),
            )
        finally:
            conn.close()

    def clear_live_state(self) -> None:
        conn = self._get_connection()
        try:
            conn.execute("DELETE FROM live_timeline")
            conn.commit()
        finally:
            conn.close()

    # ==================== Stats ====================

    def get_stats(self) -> dict:
        """Get database statistics.

        Returns:
            Dictionary with table record counts.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            stats = {}
            for table in self.REQUIRED_TABLES:
                cursor.execute(f"SELECT COUNT(*) as count FROM {table}")
                stats[table] = cursor.fetchone()["count"]
            return stats
        finally:
            conn.close()
