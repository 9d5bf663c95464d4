'''
Multi-step wizard that turns a date selection and a time window into a batch
of 30-minute slots for the admin to review and submit.

Steps: DATE_SELECTION -> TIME_WINDOW -> SLOT_REVIEW -> SUMMARY -> SUCCESS.
Every forward move runs a guard; a failing guard records field errors in
`SlotWizard.errors` and keeps the current step. Operations called from the
wrong step raise IllegalTransitionError.
'''
import enum
from datetime import date, datetime, time, timezone
from typing import Any, Awaitable, Callable, Iterable, Optional

from ..common.config import settings
from ..common.exceptions import IllegalTransitionError, SlotWizardError
from ..common.logger import log
from ..common import messages
from ..models.enums import DateSelectionMode
from ..models.timeslot import (
    DateRangeSelection,
    SlotDraft,
    SlotsSubmission,
    SubmittedSlot,
)

# Async callable that delivers the submission payload, e.g. ApiClient.create_timeslots
SlotsSender = Callable[[dict[str, Any]], Awaitable[Optional[dict[str, Any]]]]


class WizardStep(enum.IntEnum):
    DATE_SELECTION = 1
    TIME_WINDOW = 2
    SLOT_REVIEW = 3
    SUMMARY = 4
    SUCCESS = 5


# --- Time helpers ---

def time_to_minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def minutes_to_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def minutes_to_time(minutes: int) -> time:
    return time(minutes // 60, minutes % 60)


def parse_hhmm(value: str) -> time:
    """Parses `H:MM` / `HH:MM` (24h). Raises ValueError on anything else."""
    hours, minutes = value.strip().split(":")
    return time(int(hours), int(minutes))


def validate_time_range(start: time, end: time) -> Optional[str]:
    """
    Returns the error message for an invalid range, None if the range is usable.
    End must be strictly after start and the range at least one slot long.
    """
    duration = time_to_minutes(end) - time_to_minutes(start)
    if duration <= 0:
        return messages.END_AFTER_START
    if duration < settings.SLOT_DURATION_MINUTES:
        return messages.MIN_SLOT_DURATION
    return None


def generate_slots(start: time, end: time, capacity: int) -> list[SlotDraft]:
    """
    Partitions [start, end) into consecutive fixed-length slots.
    A trailing remainder shorter than one slot is dropped, so the result
    always has floor((end - start) / 30) entries.
    """
    step = settings.SLOT_DURATION_MINUTES
    start_minute = time_to_minutes(start)
    end_minute = time_to_minutes(end)

    slots = []
    current = start_minute
    while current < end_minute and current + step <= end_minute:
        slots.append(SlotDraft(
            id=f"generated-{len(slots) + 1}",
            start_time=minutes_to_time(current),
            end_time=minutes_to_time(current + step),
            capacity=capacity,
            active=True,
            custom=False,
        ))
        current += step
    return slots


class SlotWizard:
    """
    In-memory draft of one slot definition session. Nothing is persisted;
    dropping the instance discards the draft.
    """
    def __init__(self):
        self._clear()

    def _clear(self) -> None:
        self.step = WizardStep.DATE_SELECTION
        self.date_selection: Optional[DateRangeSelection] = None
        self.start_time: Optional[time] = None
        self.end_time: Optional[time] = None
        self.default_capacity: int = 1
        self.slots: list[SlotDraft] = []
        self.errors: dict[str, str] = {}
        self.last_response: Optional[dict[str, Any]] = None
        self._generated_for: Optional[tuple[time, time, int]] = None
        self._custom_counter = 0

    # --- Step bookkeeping ---

    def _require(self, *steps: WizardStep) -> None:
        if self.step not in steps:
            allowed = ", ".join(s.name for s in steps)
            raise IllegalTransitionError(f"Operation not allowed in step {self.step.name} (expected {allowed}).")

    def _move_to(self, step: WizardStep) -> None:
        log.info(f"Slot wizard: {self.step.name} -> {step.name}")
        self.step = step
        self.errors = {}

    def back(self) -> WizardStep:
        """Moves one step backward, keeping everything entered so far."""
        self._require(WizardStep.TIME_WINDOW, WizardStep.SLOT_REVIEW, WizardStep.SUMMARY)
        self._move_to(WizardStep(self.step - 1))
        return self.step

    def reset(self) -> None:
        """The "define new" action after a successful submission."""
        self._require(WizardStep.SUCCESS)
        log.info("Slot wizard: reset for a new definition.")
        self._clear()

    # --- Step 1: dates ---

    def select_weekly(self, days_of_week: Iterable[int], from_date: Optional[date], to_date: Optional[date]) -> None:
        self._require(WizardStep.DATE_SELECTION)
        self.date_selection = DateRangeSelection(
            mode=DateSelectionMode.WEEKLY,
            days_of_week=set(days_of_week),
            from_date=from_date,
            to_date=to_date,
        )

    def select_specific(self, specific_date: Optional[date]) -> None:
        self._require(WizardStep.DATE_SELECTION)
        self.date_selection = DateRangeSelection(
            mode=DateSelectionMode.SPECIFIC,
            specific_date=specific_date,
        )

    def _check_dates(self) -> dict[str, str]:
        selection = self.date_selection
        if selection is None:
            return {"date": messages.NO_DATE_SELECTED}

        if selection.mode == DateSelectionMode.SPECIFIC:
            if selection.specific_date is None:
                return {"specific_date": messages.NO_DATE_SELECTED}
            return {}

        errors = {}
        if not selection.days_of_week:
            errors["days_of_week"] = messages.NO_WEEKDAY_SELECTED
        if selection.from_date is None or selection.to_date is None:
            errors["date_range"] = messages.DATE_RANGE_REQUIRED
        elif selection.to_date < selection.from_date:
            errors["date_range"] = messages.DATE_RANGE_INVALID
        return errors

    def confirm_dates(self) -> bool:
        self._require(WizardStep.DATE_SELECTION)
        errors = self._check_dates()
        if errors:
            log.warning(f"Slot wizard: date selection rejected: {errors}")
            self.errors = errors
            return False
        self._move_to(WizardStep.TIME_WINDOW)
        return True

    # --- Step 2: time window ---

    def set_time_window(self, start: Optional[time], end: Optional[time], capacity: int = 1) -> None:
        self._require(WizardStep.TIME_WINDOW)
        self.start_time = start
        self.end_time = end
        self.default_capacity = capacity

    def _check_window(self) -> dict[str, str]:
        errors = {}
        if self.start_time is None:
            errors["start_time"] = messages.TIME_REQUIRED
        if self.end_time is None:
            errors["end_time"] = messages.TIME_REQUIRED
        if errors:
            return errors

        range_error = validate_time_range(self.start_time, self.end_time)
        if range_error:
            errors["end_time"] = range_error
        if not 1 <= self.default_capacity <= settings.MAX_DEFAULT_CAPACITY:
            errors["capacity"] = messages.CAPACITY_OUT_OF_RANGE
        return errors

    def generate(self) -> bool:
        """
        Validates the window and moves to review. The generated slots are only
        rebuilt when the window or default capacity changed; custom slots are kept.
        """
        self._require(WizardStep.TIME_WINDOW)
        errors = self._check_window()
        if errors:
            log.warning(f"Slot wizard: time window rejected: {errors}")
            self.errors = errors
            return False

        key = (self.start_time, self.end_time, self.default_capacity)
        if key != self._generated_for:
            custom = [slot for slot in self.slots if slot.custom]
            self.slots = generate_slots(self.start_time, self.end_time, self.default_capacity) + custom
            self._generated_for = key
            log.info(f"Slot wizard: generated {len(self.slots) - len(custom)} slots.")

        self._move_to(WizardStep.SLOT_REVIEW)
        return True

    # --- Step 3: review ---

    def get_slot(self, slot_id: str) -> SlotDraft:
        for slot in self.slots:
            if slot.id == slot_id:
                return slot
        raise SlotWizardError(f"Unknown slot: {slot_id}")

    def toggle_slot(self, slot_id: str) -> bool:
        self._require(WizardStep.SLOT_REVIEW)
        slot = self.get_slot(slot_id)
        slot.active = not slot.active
        return slot.active

    def set_slot_capacity(self, slot_id: str, capacity: int) -> bool:
        self._require(WizardStep.SLOT_REVIEW)
        slot = self.get_slot(slot_id)
        limit = settings.MAX_CUSTOM_CAPACITY if slot.custom else settings.MAX_DEFAULT_CAPACITY
        if not 1 <= capacity <= limit:
            self.errors[f"capacity:{slot_id}"] = messages.CAPACITY_OUT_OF_RANGE
            return False
        self.errors.pop(f"capacity:{slot_id}", None)
        slot.capacity = capacity
        return True

    def add_custom_slot(self, start: time, end: time, capacity: int = 1) -> Optional[SlotDraft]:
        self._require(WizardStep.SLOT_REVIEW)
        errors = {}
        range_error = validate_time_range(start, end)
        if range_error:
            errors["custom_end_time"] = range_error
        if not 1 <= capacity <= settings.MAX_CUSTOM_CAPACITY:
            errors["custom_capacity"] = messages.CAPACITY_OUT_OF_RANGE
        if errors:
            log.warning(f"Slot wizard: custom slot rejected: {errors}")
            self.errors.update(errors)
            return None

        self.errors.pop("custom_end_time", None)
        self.errors.pop("custom_capacity", None)
        self._custom_counter += 1
        slot = SlotDraft(
            id=f"custom-{self._custom_counter}",
            start_time=start,
            end_time=end,
            capacity=capacity,
            active=True,
            custom=True,
        )
        self.slots.append(slot)
        return slot

    def delete_slot(self, slot_id: str) -> None:
        """Removes a custom slot. Generated slots can only be deactivated."""
        self._require(WizardStep.SLOT_REVIEW)
        slot = self.get_slot(slot_id)
        if not slot.custom:
            raise SlotWizardError(f"Generated slot {slot_id} can only be deactivated.")
        self.slots.remove(slot)

    @property
    def active_slots(self) -> list[SlotDraft]:
        return sorted(
            (slot for slot in self.slots if slot.active),
            key=lambda slot: (slot.start_time, slot.end_time),
        )

    def review_done(self) -> bool:
        self._require(WizardStep.SLOT_REVIEW)
        if not self.active_slots:
            self.errors = {"slots": messages.NO_ACTIVE_SLOT}
            return False
        self._move_to(WizardStep.SUMMARY)
        return True

    # --- Step 4: summary & submit ---

    def summary(self) -> dict[str, Any]:
        self._require(WizardStep.SUMMARY, WizardStep.SUCCESS)
        return {
            "date_selection": self.date_selection,
            "dates": self.date_selection.dates(),
            "slots": self.active_slots,
            "total_capacity_per_day": sum(slot.capacity for slot in self.active_slots),
        }

    def build_submission(self, now: Optional[datetime] = None) -> SlotsSubmission:
        self._require(WizardStep.SUMMARY)
        return SlotsSubmission(
            date_selection=self.date_selection,
            slots=[
                SubmittedSlot(
                    id=slot.id,
                    start_time=slot.start_time.strftime("%H:%M"),
                    end_time=slot.end_time.strftime("%H:%M"),
                    capacity=slot.capacity,
                    is_custom=slot.custom,
                )
                for slot in self.active_slots
            ],
            created_at=now or datetime.now(timezone.utc),
        )

    async def submit(self, sender: SlotsSender, now: Optional[datetime] = None) -> bool:
        """
        Sends the batch in a single request. On failure the wizard stays on
        SUMMARY with the message under `errors["submit"]` so it can be retried.
        """
        self._require(WizardStep.SUMMARY)
        payload = self.build_submission(now).model_dump(mode="json")

        try:
            response = await sender(payload)
        except Exception as e:
            log.error(f"Slot wizard: submission failed: {e}", exc_info=True)
            self.errors = {"submit": getattr(e, "message", None) or messages.SLOTS_CREATE_FAILED}
            return False

        self.last_response = response
        if not response or not response.get("success"):
            message = (response or {}).get("message") or messages.SLOTS_CREATE_FAILED
            log.warning(f"Slot wizard: backend rejected submission: {message}")
            self.errors = {"submit": message}
            return False

        self._move_to(WizardStep.SUCCESS)
        return True
