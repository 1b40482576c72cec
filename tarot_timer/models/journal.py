"""JournalEntry data model."""

import uuid
from datetime import date as date_type
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from tarot_timer.models.timeline import HourSlot, TimelineState, check_slots, replace_memo, validate_hour


class JournalEntry(BaseModel):
    """A saved snapshot of one day's 24 hour slots."""

    id: str = Field(..., min_length=1, description="Unique entry identifier")
    date: date_type = Field(..., description="Journal entry date")
    slots: tuple[HourSlot, ...] = Field(..., description="Snapshot of hours 0..23")
    created_at: datetime = Field(..., description="When the entry was saved")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _check_slots(self) -> "JournalEntry":
        check_slots(self.slots)
        return self

    @classmethod
    def from_timeline(
        cls, state: TimelineState, created_at: datetime, entry_id: Optional[str] = None
    ) -> "JournalEntry":
        """Snapshot a live timeline.

        Slots are frozen models, so the entry can never be changed through
        the live state it was copied from.
        """
        return cls(
            id=entry_id or uuid.uuid4().hex,
            date=state.date,
            slots=state.slots,
            created_at=created_at,
        )

    def slot(self, hour: int) -> HourSlot:
        return self.slots[validate_hour(hour)]

    def with_memo(self, hour: int, memo: Optional[str]) -> "JournalEntry":
        return self.model_copy(update={"slots": replace_memo(self.slots, hour, memo)})

    def to_timeline(self) -> TimelineState:
        return TimelineState(date=self.date, slots=self.slots)

    @property
    def drawn_count(self) -> int:
        return sum(1 for slot in self.slots if slot.is_drawn)

    @property
    def memo_count(self) -> int:
        return sum(1 for slot in self.slots if slot.memo is not None)


class MemoRecord(BaseModel):
    """A memo saved in the journal, with the day and card it belongs to."""

    date: date_type = Field(..., description="Journal entry date")
    hour: int = Field(..., ge=0, le=23, description="Clock hour")
    card_id: str = Field(..., description="Card drawn for the hour")
    memo: str = Field(..., min_length=1, description="Memo text")

    model_config = {"frozen": True, "extra": "forbid"}
