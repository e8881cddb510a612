"""Market conventions: calendars, day counts and shared enums."""

from .calendars import (
    CALENDARS,
    BusinessDayCalendarProtocol,
    Calendar,
    get_calendar,
    to_business_day_adjustment,
)
from .daycount import ACT_365F, DayCountConvention, get_day_count_convention
from .types import (
    BusinessDayAdjustment,
    CalendarType,
    ExtrapolationMethod,
    InterpolationEntity,
    InterpolationMethod,
)

__all__ = [
    "ACT_365F",
    "CALENDARS",
    "BusinessDayAdjustment",
    "BusinessDayCalendarProtocol",
    "Calendar",
    "CalendarType",
    "DayCountConvention",
    "ExtrapolationMethod",
    "InterpolationEntity",
    "InterpolationMethod",
    "get_calendar",
    "get_day_count_convention",
    "to_business_day_adjustment",
]
