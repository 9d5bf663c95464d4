'''
Time slot API and wizard models
'''
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .enums import DateSelectionMode


class TimeSlot(BaseModel):
    """
    A bookable slot as returned by the backend listing.
    Times are the backend's `HH:MM` strings.
    """
    id: str
    start_time: str
    end_time: str
    capacity: Optional[int] = None
    capacity_left: int = 0
    active: bool = True
    custom: bool = False

    model_config = ConfigDict(extra="allow")


class DaySlots(BaseModel):
    """One date bucket of the backend listing: `{"day": ..., "slots": [...]}`."""
    day: str
    slots: list[TimeSlot] = Field(default_factory=list)


# `{ "YYYY-MM-DD": DaySlots }`
TimeSlotsByDate = dict[str, DaySlots]


def available_only(timeslots: TimeSlotsByDate) -> TimeSlotsByDate:
    """
    Keeps only slots with seats left and drops the dates that end up empty.
    """
    available: TimeSlotsByDate = {}
    for date_key, day_data in timeslots.items():
        slots = [slot for slot in day_data.slots if slot.capacity_left > 0]
        if slots:
            available[date_key] = DaySlots(day=day_data.day, slots=slots)
    return available


class SlotDraft(BaseModel):
    """
    A slot while it is being edited in the generation wizard.
    """
    id: str
    start_time: time
    end_time: time
    capacity: int = Field(..., ge=1)
    active: bool = True
    custom: bool = False

    @property
    def duration_minutes(self) -> int:
        start = self.start_time.hour * 60 + self.start_time.minute
        end = self.end_time.hour * 60 + self.end_time.minute
        return end - start


class DateRangeSelection(BaseModel):
    """
    Which calendar dates receive the generated slot set:
    either a weekly recurrence between two dates, or one specific date.
    Weekdays use Python's numbering (0=Monday ... 6=Sunday).
    """
    mode: DateSelectionMode
    days_of_week: set[int] = Field(default_factory=set)
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    specific_date: Optional[date] = None

    def dates(self) -> list[date]:
        """Expands the selection into the concrete dates it covers."""
        if self.mode == DateSelectionMode.SPECIFIC:
            return [self.specific_date] if self.specific_date else []

        if not self.from_date or not self.to_date:
            return []

        covered = []
        current = self.from_date
        while current <= self.to_date:
            if current.weekday() in self.days_of_week:
                covered.append(current)
            current += timedelta(days=1)
        return covered

    @field_serializer("days_of_week")
    def _serialize_days(self, days: set[int]) -> list[int]:
        return sorted(days)


class SubmittedSlot(BaseModel):
    id: str
    start_time: str
    end_time: str
    capacity: int
    is_custom: bool


class SlotsSubmission(BaseModel):
    """
    What the wizard sends to `/timeslots/new` in one request.
    """
    date_selection: DateRangeSelection
    slots: list[SubmittedSlot]
    created_at: datetime


# --- Proxy request bodies ---

class SlotsCreateRequest(BaseModel):
    slotsData: Optional[dict[str, Any]] = None


class SlotEditRequest(BaseModel):
    slot_id: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class SlotDeleteRequest(BaseModel):
    slot_id: Optional[str] = None
