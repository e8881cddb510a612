"""
Basic enums shared by calendars and curves.
"""

from enum import Enum


class BusinessDayAdjustment(Enum):
    """Business day adjustment (date roll) rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


class InterpolationMethod(Enum):
    """Interpolation methods a curve may declare."""

    LINEAR = "LINEAR"
    CUBIC_SPLINE = "CUBIC_SPLINE"


class ExtrapolationMethod(Enum):
    """Extrapolation methods a curve may declare."""

    CONSTANT = "CONSTANT"
    LINEAR = "LINEAR"


class InterpolationEntity(Enum):
    """Quantity the interpolation acts on."""

    VALUE = "VALUE"
    LOG_OF_VALUE = "LOG_OF_VALUE"


class CalendarType(Enum):
    """Predefined calendars."""

    TARGET = "TARGET"
    WEEKEND = "WEEKEND"
    USNY = "USNY"
    UK = "UK"
    NULL = "NULL"
