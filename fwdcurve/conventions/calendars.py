"""
QuantLib-backed business day calendars.

A calendar answers business day questions and produces adjusted dates from a
base date, an offset code and a roll convention.
"""

from datetime import date, datetime
from typing import Protocol, Union

import QuantLib as ql

from fwdcurve.business_calendar.tenors import shift_date
from fwdcurve.conventions.types import BusinessDayAdjustment, CalendarType

_QL_ADJUSTMENTS = {
    BusinessDayAdjustment.NO_ADJUSTMENT: ql.Unadjusted,
    BusinessDayAdjustment.FOLLOWING: ql.Following,
    BusinessDayAdjustment.MODIFIED_FOLLOWING: ql.ModifiedFollowing,
    BusinessDayAdjustment.PRECEDING: ql.Preceding,
    BusinessDayAdjustment.MODIFIED_PRECEDING: ql.ModifiedPreceding,
}


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


def to_business_day_adjustment(
    value: Union[BusinessDayAdjustment, str]
) -> BusinessDayAdjustment:
    """Coerce an enum member or its string value to ``BusinessDayAdjustment``."""
    if isinstance(value, BusinessDayAdjustment):
        return value
    if isinstance(value, str):
        try:
            return BusinessDayAdjustment(value.upper())
        except ValueError:
            pass
    raise ValueError(
        f"Unknown business day adjustment: {value}. "
        f"Available: {[member.value for member in BusinessDayAdjustment]}"
    )


class BusinessDayCalendarProtocol(Protocol):
    """What a forward curve needs from a calendar."""

    def get_adjusted_date(
        self,
        dt: date,
        offset_code: str,
        roll_convention: BusinessDayAdjustment,
    ) -> date:
        ...


class Calendar:
    """Base calendar class for QuantLib-backed business day calculations."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        return self._ql_calendar.isHoliday(_to_ql_date(dt))

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        """Add (or subtract, for negative ``days``) business days to a date."""
        ql_result = self._ql_calendar.advance(_to_ql_date(start_date), days, ql.Days)
        return _to_py_date(ql_result)

    def adjust(
        self,
        dt: Union[date, datetime],
        roll_convention: Union[BusinessDayAdjustment, str],
    ) -> date:
        """Apply a business day adjustment to a date."""
        convention = _QL_ADJUSTMENTS[to_business_day_adjustment(roll_convention)]
        return _to_py_date(self._ql_calendar.adjust(_to_ql_date(dt), convention))

    def get_adjusted_date(
        self,
        dt: Union[date, datetime],
        offset_code: str,
        roll_convention: Union[BusinessDayAdjustment, str],
    ) -> date:
        """Shift a date by an offset code, then roll it to a business day.

        Examples:
            >>> TARGET.get_adjusted_date(date(2024, 1, 31), "1M", "FOLLOWING")
            datetime.date(2024, 2, 29)
        """
        unadjusted = shift_date(dt, offset_code, self)
        return self.adjust(unadjusted, roll_convention)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Calendar({self.name!r})"


class TargetCalendar(Calendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar."""

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class WeekendCalendar(Calendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self):
        super().__init__("WEEKEND", ql.WeekendsOnly())


class NewYorkCalendar(Calendar):
    """US settlement calendar."""

    def __init__(self):
        super().__init__("USNY", ql.UnitedStates(ql.UnitedStates.Settlement))


class LondonCalendar(Calendar):
    """UK exchange calendar."""

    def __init__(self):
        super().__init__("UK", ql.UnitedKingdom(ql.UnitedKingdom.Exchange))


class NullCalendar(Calendar):
    """Every day is a business day."""

    def __init__(self):
        super().__init__("NULL", ql.NullCalendar())


TARGET = TargetCalendar()
WEEKEND_ONLY = WeekendCalendar()
USNY = NewYorkCalendar()
UK = LondonCalendar()
NULL_CALENDAR = NullCalendar()

CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,
    "WEEKEND": WEEKEND_ONLY,
    "USNY": USNY,
    "USD": USNY,
    "UK": UK,
    "GBP": UK,
    "NULL": NULL_CALENDAR,
}


def get_calendar(name: Union[str, CalendarType]) -> Calendar:
    """Get a calendar by name (case-insensitive) or by ``CalendarType``."""
    key = name.value if isinstance(name, CalendarType) else name.upper()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
