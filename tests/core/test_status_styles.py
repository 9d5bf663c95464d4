'''
testing core/status_styles.py
'''
import pytest

from dorm_laundry.core.status_styles import STATUS_STYLES, StatusStyle, get_status_style
from dorm_laundry.models.enums import ReservationStatus


def test_every_status_has_exactly_one_style():
    assert set(STATUS_STYLES) == set(ReservationStatus)
    assert len(STATUS_STYLES) == len(ReservationStatus.get_all_names())


def test_labels_are_distinct():
    labels = [style.label for style in STATUS_STYLES.values()]
    assert len(set(labels)) == len(labels)


@pytest.mark.parametrize("status, label", [
    ("pending", "در انتظار"),
    ("washing", "در حال شستشو"),
    ("ready", "آماده تحویل"),
    ("finished", "تحویل داده شده"),
    ("cancelled", "لغو شده"),
])
def test_style_for_raw_status_value(status: str, label: str):
    style = get_status_style(ReservationStatus(status))
    assert isinstance(style, StatusStyle)
    assert style.label == label
    assert style.color.startswith("bg-")
    assert style.icon
