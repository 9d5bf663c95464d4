'''
Gregorian <-> Jalali (Persian solar hijri) conversion.

The `convert_*` functions return a typed result so the caller has to look at
the failure case. The plain functions below them keep the `None` / `0`
sentinel behaviour the listing pages rely on: a sentinel means "cannot
resolve", and the page falls back to the unfiltered view.
'''
from dataclasses import dataclass
from datetime import date, datetime
from typing import Generic, Iterable, Optional, TypeVar, Union

import jdatetime

from ..common.logger import log
from ..common import messages

T = TypeVar("T")

JALALI_FORMAT = "%Y/%m/%d"


@dataclass(frozen=True)
class Converted(Generic[T]):
    value: T


@dataclass(frozen=True)
class ConversionFailed:
    reason: str


ConversionResult = Union[Converted[T], ConversionFailed]


# --- Parsing helpers ---

def parse_backend_date(value: Union[str, date, datetime]) -> date:
    """
    Backend date keys are `YYYY-MM-DD` (sometimes a full ISO timestamp).
    Only the calendar date is kept.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()


def _parse_jalali(text: str) -> jdatetime.date:
    parts = text.split("/")
    if len(parts) != 3:
        raise ValueError(f"expected YYYY/MM/DD, got {text!r}")
    year, month, day = (int(part) for part in parts)
    return jdatetime.date(year, month, day)


# --- Typed conversions ---

def convert_gregorian_to_jalali(value: Union[str, date, datetime]) -> ConversionResult[str]:
    try:
        gregorian = parse_backend_date(value)
        jalali = jdatetime.date.fromgregorian(date=gregorian)
        return Converted(jalali.strftime(JALALI_FORMAT))
    except (AttributeError, TypeError, ValueError) as e:
        log.warning(f"Error converting date to Jalali ({value!r}): {e}")
        return ConversionFailed(str(e))


def convert_jalali_to_gregorian(text: str) -> ConversionResult[date]:
    try:
        return Converted(_parse_jalali(text).togregorian())
    except (AttributeError, TypeError, ValueError) as e:
        log.warning(f"Error converting Jalali date {text!r}: {e}")
        return ConversionFailed(str(e))


def convert_jalali_day_of_year(text: str) -> ConversionResult[int]:
    try:
        jalali = _parse_jalali(text)
    except (AttributeError, TypeError, ValueError) as e:
        log.warning(f"Error calculating day of year for {text!r}: {e}")
        return ConversionFailed(str(e))

    # first six months have 31 days, the next five 30, Esfand 29/30
    if jalali.month <= 6:
        return Converted((jalali.month - 1) * 31 + jalali.day)
    return Converted(186 + (jalali.month - 7) * 30 + jalali.day)


# --- Sentinel API ---

def gregorian_to_jalali(value: Union[str, date, datetime]) -> Optional[str]:
    """Formats a Gregorian date as `YYYY/MM/DD` in the Jalali calendar, or None."""
    result = convert_gregorian_to_jalali(value)
    return result.value if isinstance(result, Converted) else None


def jalali_to_gregorian(text: str) -> Optional[date]:
    """Parses a `YYYY/MM/DD` Jalali string into a Gregorian date, or None."""
    result = convert_jalali_to_gregorian(text)
    return result.value if isinstance(result, Converted) else None


def get_jalali_day_of_year(text: str) -> int:
    """1-based ordinal day within the Jalali year, 0 when it cannot be computed."""
    result = convert_jalali_day_of_year(text)
    return result.value if isinstance(result, Converted) else 0


# --- Calendar widget helpers ---

def active_days_of_year(date_keys: Iterable[str]) -> set[int]:
    """
    Jalali day-of-year numbers of every backend date key, for highlighting
    the days that have slots in the date picker.
    """
    active = set()
    for key in date_keys:
        jalali = gregorian_to_jalali(key)
        if jalali:
            active.add(get_jalali_day_of_year(jalali))
    active.discard(0)
    return active


def find_matching_date(jalali_text: str, date_keys: Iterable[str]) -> Optional[str]:
    """
    Returns the backend date key that falls on the picked Jalali date.
    None if the date is invalid or no key matches.
    """
    picked = jalali_to_gregorian(jalali_text)
    if picked is None:
        return None

    for key in date_keys:
        try:
            if parse_backend_date(key) == picked:
                return key
        except (AttributeError, TypeError, ValueError):
            log.warning(f"Skipping unparsable date key: {key!r}")
    return None


def resolve_picked_date(jalali_text: str, date_keys: Iterable[str]) -> ConversionResult[str]:
    """
    The date picker's lookup: the matching backend date key, or the message
    to show when the picked date is invalid or has no slots.
    """
    if jalali_to_gregorian(jalali_text) is None:
        return ConversionFailed(messages.INVALID_DATE)

    matched = find_matching_date(jalali_text, date_keys)
    if matched is None:
        return ConversionFailed(messages.NO_SLOTS_FOR_DATE)
    return Converted(matched)
