"""HourSlot and TimelineState data models.

A TimelineState is never edited in place. Draw and memo actions build a new
state and the owner swaps it in, so readers only ever see whole states.
"""

from datetime import date as date_type
from typing import Optional, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator

from tarot_timer.errors import HourNotDrawnError, InvalidArgumentError

HOURS_PER_DAY = 24


def validate_hour(hour) -> int:
    """Return ``hour`` if it is an int in 0..23, else raise InvalidArgumentError."""
    if isinstance(hour, bool) or not isinstance(hour, int):
        raise InvalidArgumentError(f"Hour must be an integer, got {hour!r}")
    if not 0 <= hour < HOURS_PER_DAY:
        raise InvalidArgumentError(f"Hour must be between 0 and 23, got {hour}")
    return hour


def validate_date(value) -> date_type:
    """Coerce a ``date`` or ISO ``YYYY-MM-DD`` string to a date."""
    # datetime is a date subclass; keep only the calendar part
    if isinstance(value, date_type):
        return date_type(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return date_type.fromisoformat(value)
        except ValueError:
            pass
    raise InvalidArgumentError(f"Invalid date: {value!r}")


def normalize_memo(memo: Optional[str]) -> Optional[str]:
    """Strip a memo; blank memos become None.

    Raises:
        InvalidArgumentError: If memo is neither a string nor None.
    """
    if memo is None:
        return None
    if not isinstance(memo, str):
        raise InvalidArgumentError(f"Memo must be text, got {type(memo).__name__}")
    memo = memo.strip()
    return memo or None


class HourSlot(BaseModel):
    """One clock hour of a day and its card/memo state."""

    hour: int = Field(..., ge=0, le=23, description="Clock hour")
    card_id: Optional[str] = Field(..., description="Assigned card, None until drawn")
    is_drawn: bool = Field(..., description="Whether the card has been drawn")
    memo: Optional[str] = Field(..., description="User memo for the hour")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("memo")
    @classmethod
    def _normalize_memo(cls, value: Optional[str]) -> Optional[str]:
        return normalize_memo(value)

    @model_validator(mode="after")
    def _check_drawn(self) -> "HourSlot":
        if self.is_drawn != (self.card_id is not None):
            raise ValueError("is_drawn must be true exactly when card_id is set")
        if self.memo is not None and not self.is_drawn:
            raise ValueError("memo can only be set on a drawn hour")
        return self

    @classmethod
    def empty(cls, hour: int) -> "HourSlot":
        return cls(hour=hour, card_id=None, is_drawn=False, memo=None)


class SessionStats(BaseModel):
    """Progress summary for a day's timeline."""

    total_cards: int = Field(..., ge=0)
    drawn_cards: int = Field(..., ge=0)
    cards_with_memos: int = Field(..., ge=0)
    completion_percentage: int = Field(..., ge=0, le=100)

    model_config = {"frozen": True}


def check_slots(slots: Sequence[HourSlot]) -> None:
    """Raise ValueError unless ``slots`` holds hours 0..23 in order."""
    if len(slots) != HOURS_PER_DAY:
        raise ValueError(f"expected {HOURS_PER_DAY} slots, got {len(slots)}")
    for index, slot in enumerate(slots):
        if slot.hour != index:
            raise ValueError(f"slot {index} has hour {slot.hour}")


class TimelineState(BaseModel):
    """The 24 ordered hour slots of one calendar day."""

    date: date_type = Field(..., description="Calendar date of the timeline")
    slots: tuple[HourSlot, ...] = Field(..., description="Slots for hours 0..23")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _check_slots(self) -> "TimelineState":
        check_slots(self.slots)
        return self

    @classmethod
    def empty(cls, day) -> "TimelineState":
        return cls(
            date=validate_date(day),
            slots=tuple(HourSlot.empty(hour) for hour in range(HOURS_PER_DAY)),
        )

    def slot(self, hour: int) -> HourSlot:
        return self.slots[validate_hour(hour)]

    @property
    def drawn_count(self) -> int:
        return sum(1 for slot in self.slots if slot.is_drawn)

    @property
    def memo_count(self) -> int:
        return sum(1 for slot in self.slots if slot.memo is not None)

    @property
    def is_drawn(self) -> bool:
        return self.drawn_count > 0

    @property
    def is_fully_drawn(self) -> bool:
        return self.drawn_count == HOURS_PER_DAY

    def with_cards(self, card_ids: Sequence[str]) -> "TimelineState":
        """Return a copy with every hour drawn, keeping existing memos."""
        if len(card_ids) != HOURS_PER_DAY:
            raise InvalidArgumentError(
                f"Expected {HOURS_PER_DAY} card ids, got {len(card_ids)}"
            )
        slots = tuple(
            HourSlot(hour=slot.hour, card_id=card_id, is_drawn=True, memo=slot.memo)
            for slot, card_id in zip(self.slots, card_ids)
        )
        return TimelineState(date=self.date, slots=slots)

    def with_memo(self, hour: int, memo: Optional[str]) -> "TimelineState":
        """Return a copy with the memo for ``hour`` replaced.

        Raises:
            InvalidArgumentError: If hour is out of range.
            HourNotDrawnError: If the hour has no card yet.
        """
        return TimelineState(date=self.date, slots=replace_memo(self.slots, hour, memo))

    def stats(self) -> SessionStats:
        memos = self.memo_count
        return SessionStats(
            total_cards=HOURS_PER_DAY,
            drawn_cards=self.drawn_count,
            cards_with_memos=memos,
            completion_percentage=round(memos / HOURS_PER_DAY * 100),
        )


def replace_memo(
    slots: Sequence[HourSlot], hour: int, memo: Optional[str]
) -> tuple[HourSlot, ...]:
    """Return ``slots`` with one memo replaced, enforcing the drawn gate."""
    current = slots[validate_hour(hour)]
    if not current.is_drawn:
        raise HourNotDrawnError(f"Hour {hour} has not been drawn yet")
    updated = current.model_copy(update={"memo": normalize_memo(memo)})
    return tuple(updated if slot.hour == hour else slot for slot in slots)
