'''
Helpers behind the reservation listing pages: pagination, filters,
the cancel rule and Persian date rendering.
'''
from datetime import date, datetime, timezone
from typing import Iterable, Optional, Union

import jdatetime

from ..models.enums import ReservationStatus
from ..models.reservation import Reservation
from .jalali import parse_backend_date

PERSIAN_MONTHS = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)

_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


def to_persian_digits(value: Union[str, int]) -> str:
    return str(value).translate(_PERSIAN_DIGITS)


def can_cancel(reservation: Reservation) -> bool:
    """A reservation can only be cancelled by its owner while still pending."""
    return reservation.status == ReservationStatus.PENDING


def filter_by_status(reservations: Iterable[Reservation], status: Optional[str]) -> list[Reservation]:
    if not status or status == "all":
        return list(reservations)
    return [r for r in reservations if r.status == status]


def build_listing_query(page: int = 1, status: Optional[str] = "all", search: Optional[str] = None) -> dict[str, str]:
    """
    Query parameters of a listing request. `status="all"` and a blank
    search box are left out.
    """
    params = {"page": str(page)}
    if status and status != "all":
        params["status"] = status
    if search and search.strip():
        params["id"] = search.strip()
    return params


def pagination_window(current_page: int, total_pages: int, max_visible: int = 5) -> list[int]:
    """
    The page numbers to show, centred on the current page where possible.
    Empty when there is only one page.
    """
    if total_pages <= 1:
        return []

    start = max(1, current_page - max_visible // 2)
    end = min(total_pages, start + max_visible - 1)
    if end - start + 1 < max_visible:
        start = max(1, end - max_visible + 1)
    return list(range(start, end + 1))


def time_ago(moment: Union[str, datetime], now: Optional[datetime] = None) -> str:
    """Persian relative time, e.g. "۳ ساعت پیش"."""
    if isinstance(moment, str):
        moment = datetime.fromisoformat(moment.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff = (now - moment).total_seconds()
    if diff < 0:
        return "در آینده"

    seconds = int(diff)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days} روز پیش"
    if hours > 0:
        return f"{hours % 24} ساعت پیش"
    if minutes > 0:
        return f"{minutes % 60} دقیقه پیش"
    return f"{seconds % 60} ثانیه پیش"


def format_persian_date(value: Union[str, date, datetime], with_year: bool = True) -> str:
    """Long Jalali date with Persian digits, e.g. "۱ فروردین ۱۴۰۲"."""
    jalali = jdatetime.date.fromgregorian(date=parse_backend_date(value))
    text = f"{jalali.day} {PERSIAN_MONTHS[jalali.month - 1]}"
    if with_year:
        text += f" {jalali.year}"
    return to_persian_digits(text)
