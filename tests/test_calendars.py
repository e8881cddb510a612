from datetime import date, datetime

import pytest

from fwdcurve.conventions.calendars import (
    NULL_CALENDAR,
    TARGET,
    WEEKEND_ONLY,
    get_calendar,
    to_business_day_adjustment,
)
from fwdcurve.conventions.types import BusinessDayAdjustment, CalendarType


def test_target_holidays():
    assert not TARGET.is_business_day(date(2024, 1, 1))
    assert not TARGET.is_business_day(date(2024, 3, 29))  # Good Friday
    assert not TARGET.is_business_day(date(2024, 4, 1))  # Easter Monday
    assert TARGET.is_business_day(date(2024, 4, 2))
    assert TARGET.is_holiday(date(2024, 12, 25))


def test_weekend_calendar_only_skips_weekends():
    assert WEEKEND_ONLY.is_business_day(date(2024, 4, 1))
    assert not WEEKEND_ONLY.is_business_day(date(2024, 4, 6))


def test_add_business_days():
    friday = date(2024, 1, 5)
    assert WEEKEND_ONLY.add_business_days(friday, 1) == date(2024, 1, 8)
    assert WEEKEND_ONLY.add_business_days(date(2024, 1, 8), -1) == friday
    assert WEEKEND_ONLY.add_business_days(datetime(2024, 1, 5, 12, 0), 2) == date(2024, 1, 9)


@pytest.mark.parametrize(
    "adjustment, expected",
    [
        (BusinessDayAdjustment.NO_ADJUSTMENT, date(2024, 3, 30)),
        (BusinessDayAdjustment.FOLLOWING, date(2024, 4, 2)),
        (BusinessDayAdjustment.MODIFIED_FOLLOWING, date(2024, 3, 28)),
        (BusinessDayAdjustment.PRECEDING, date(2024, 3, 28)),
        (BusinessDayAdjustment.MODIFIED_PRECEDING, date(2024, 3, 28)),
    ],
)
def test_adjust_around_easter(adjustment, expected):
    # Saturday 2024-03-30, between Good Friday and Easter Monday
    assert TARGET.adjust(date(2024, 3, 30), adjustment) == expected


def test_modified_preceding_stays_in_month():
    # Sunday 2024-09-01
    assert TARGET.adjust(date(2024, 9, 1), "MODIFIED_PRECEDING") == date(2024, 9, 2)
    assert TARGET.adjust(date(2024, 9, 1), "PRECEDING") == date(2024, 8, 30)


def test_get_adjusted_date_shifts_then_rolls():
    assert TARGET.get_adjusted_date(date(2024, 1, 31), "1M", "FOLLOWING") == date(2024, 2, 29)
    assert TARGET.get_adjusted_date(date(2024, 3, 1), "1M", "FOLLOWING") == date(2024, 4, 2)
    assert TARGET.get_adjusted_date(date(2024, 1, 1), "3M", "NO_ADJUSTMENT") == date(2024, 4, 1)
    assert WEEKEND_ONLY.get_adjusted_date(date(2024, 1, 5), "2BD", "FOLLOWING") == date(2024, 1, 9)


def test_null_calendar_never_rolls():
    assert NULL_CALENDAR.get_adjusted_date(date(2024, 1, 1), "5D", "FOLLOWING") == date(2024, 1, 6)


def test_get_calendar():
    assert get_calendar("TARGET") is TARGET
    assert get_calendar("eur") is TARGET
    assert get_calendar(CalendarType.WEEKEND) is WEEKEND_ONLY
    assert get_calendar("USNY").name == "USNY"


def test_get_calendar_unknown():
    with pytest.raises(ValueError, match="Unknown calendar"):
        get_calendar("MARS")


def test_to_business_day_adjustment():
    assert to_business_day_adjustment("modified_following") == BusinessDayAdjustment.MODIFIED_FOLLOWING
    assert to_business_day_adjustment(BusinessDayAdjustment.PRECEDING) == BusinessDayAdjustment.PRECEDING
    with pytest.raises(ValueError):
        to_business_day_adjustment(3)
