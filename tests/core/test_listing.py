'''
testing core/reservations.py
'''
import pytest
from datetime import date, datetime, timedelta, timezone

from dorm_laundry.core.reservations import (
    build_listing_query,
    can_cancel,
    filter_by_status,
    format_persian_date,
    pagination_window,
    time_ago,
    to_persian_digits,
)
from dorm_laundry.models.enums import ReservationStatus
from dorm_laundry.models.reservation import Reservation
from dorm_laundry.models.timeslot import DaySlots, available_only
from tests.constants import TEST_RESERVATION, TEST_TIMESLOTS

NOW = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)


def make_reservation(status: str) -> Reservation:
    return Reservation.model_validate({**TEST_RESERVATION, "status": status})


@pytest.mark.parametrize("status", ReservationStatus.get_all_names())
def test_only_pending_can_be_cancelled(status: str):
    assert can_cancel(make_reservation(status)) is (status == "pending")


def test_filter_by_status():
    reservations = [make_reservation("pending"), make_reservation("ready"), make_reservation("pending")]
    assert len(filter_by_status(reservations, "pending")) == 2
    assert len(filter_by_status(reservations, "all")) == 3
    assert len(filter_by_status(reservations, None)) == 3


class TestListingQuery:

    def test_defaults(self):
        assert build_listing_query() == {"page": "1"}

    def test_filters(self):
        assert build_listing_query(3, "washing", "  r-12 ") == {"page": "3", "status": "washing", "id": "r-12"}

    def test_blank_search_and_all_status_are_dropped(self):
        assert build_listing_query(2, "all", "   ") == {"page": "2"}


class TestPaginationWindow:

    def test_single_page_has_no_window(self):
        assert pagination_window(1, 1) == []

    def test_fewer_pages_than_window(self):
        assert pagination_window(2, 3) == [1, 2, 3]

    def test_centred_on_current(self):
        assert pagination_window(6, 20) == [4, 5, 6, 7, 8]

    def test_clamped_at_start_and_end(self):
        assert pagination_window(1, 20) == [1, 2, 3, 4, 5]
        assert pagination_window(20, 20) == [16, 17, 18, 19, 20]


class TestTimeAgo:

    def test_future(self):
        assert time_ago(NOW + timedelta(minutes=5), now=NOW) == "در آینده"

    @pytest.mark.parametrize("delta, expected", [
        (timedelta(seconds=42), "42 ثانیه پیش"),
        (timedelta(minutes=7, seconds=3), "7 دقیقه پیش"),
        (timedelta(hours=5, minutes=59), "5 ساعت پیش"),
        (timedelta(days=3, hours=2), "3 روز پیش"),
    ])
    def test_past(self, delta: timedelta, expected: str):
        assert time_ago(NOW - delta, now=NOW) == expected

    def test_iso_string_input(self):
        assert time_ago("2024-03-20T11:00:00Z", now=NOW) == "1 ساعت پیش"


def test_format_persian_date():
    assert format_persian_date(date(2024, 3, 20)) == "۱ فروردین ۱۴۰۳"
    assert format_persian_date("2023-10-23", with_year=False) == "۱ آبان"


def test_persian_digits():
    assert to_persian_digits(1403) == "۱۴۰۳"


def test_available_only_keeps_slots_with_seats_left():
    timeslots = {key: DaySlots.model_validate(day) for key, day in TEST_TIMESLOTS.items()}

    available = available_only(timeslots)

    assert set(available) == {"2024-03-20"}
    assert [slot.id for slot in available["2024-03-20"].slots] == ["s-1"]
    assert available_only({}) == {}
