from datetime import date

import pytest

from fwdcurve.business_calendar import OffsetToken, parse_offset_code, shift_date
from fwdcurve.conventions.calendars import WEEKEND_ONLY


def test_parse_offset_code():
    assert parse_offset_code("3M") == [OffsetToken(3, "M")]
    assert parse_offset_code(" 2bd  6m ") == [OffsetToken(2, "BD"), OffsetToken(6, "M")]
    assert parse_offset_code("-1Y") == [OffsetToken(-1, "Y")]
    assert str(OffsetToken(10, "D")) == "10D"


@pytest.mark.parametrize("code", ["", "  ", "3X", "M3", "3.5M", "3 M"])
def test_parse_malformed_codes(code):
    with pytest.raises(ValueError):
        parse_offset_code(code)


@pytest.mark.parametrize(
    "code, expected",
    [
        ("0D", date(2024, 1, 31)),
        ("10D", date(2024, 2, 10)),
        ("2W", date(2024, 2, 14)),
        ("1M", date(2024, 2, 29)),
        ("13M", date(2025, 2, 28)),
        ("1Y", date(2025, 1, 31)),
        ("-1M", date(2023, 12, 31)),
        ("1Y 1M", date(2025, 2, 28)),
    ],
)
def test_shift_date(code, expected):
    assert shift_date(date(2024, 1, 31), code) == expected


def test_business_day_tokens_use_calendar():
    assert shift_date(date(2024, 1, 5), "2BD", WEEKEND_ONLY) == date(2024, 1, 9)
    assert shift_date(date(2024, 1, 5), "2BD 1W", WEEKEND_ONLY) == date(2024, 1, 16)


def test_business_day_tokens_need_calendar():
    with pytest.raises(ValueError, match="calendar"):
        shift_date(date(2024, 1, 5), "2BD")
