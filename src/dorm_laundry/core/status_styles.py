'''
Display style (badge color classes, icon, Persian label) of each reservation status.
'''
from typing import NamedTuple

from typing_extensions import assert_never

from ..models.enums import ReservationStatus


class StatusStyle(NamedTuple):
    color: str
    icon: str
    label: str


def get_status_style(status: ReservationStatus) -> StatusStyle:
    """
    The match is exhaustive: a new ReservationStatus member without a case
    fails type checking at `assert_never`.
    """
    match status:
        case ReservationStatus.PENDING:
            return StatusStyle(
                color="bg-orange-100 text-orange-800 dark:bg-orange-800 dark:text-orange-100",
                icon="clock",
                label="در انتظار",
            )
        case ReservationStatus.WASHING:
            return StatusStyle(
                color="bg-yellow-100 text-yellow-800 dark:bg-yellow-800 dark:text-yellow-100",
                icon="washing-machine",
                label="در حال شستشو",
            )
        case ReservationStatus.READY:
            return StatusStyle(
                color="bg-green-100 text-green-800 dark:bg-green-800 dark:text-green-100",
                icon="alarm-clock-check",
                label="آماده تحویل",
            )
        case ReservationStatus.FINISHED:
            return StatusStyle(
                color="bg-blue-100 text-blue-800 dark:bg-blue-800 dark:text-blue-100",
                icon="bookmark-check",
                label="تحویل داده شده",
            )
        case ReservationStatus.CANCELLED:
            return StatusStyle(
                color="bg-gray-100 text-gray-800 dark:bg-gray-800 dark:text-gray-200",
                icon="bookmark-x",
                label="لغو شده",
            )
        case _:
            assert_never(status)


STATUS_STYLES: dict[ReservationStatus, StatusStyle] = {
    status: get_status_style(status) for status in ReservationStatus
}
