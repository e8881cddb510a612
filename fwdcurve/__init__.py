"""Forward curve term structures.

This package provides forward curves for interest rate indices, with payment
offsets given either as a fixed tenor or as an offset code rolled on a
business day calendar.

Key modules:
- curves: forward, discount and base curves, curve model
- conventions: calendars, day count conventions and roll conventions
- business_calendar: offset code parsing
"""

from fwdcurve.conventions import BusinessDayAdjustment, get_calendar
from fwdcurve.curves import (
    CurveModel,
    DiscountCurve,
    ForwardCurve,
    ForwardCurveFromDiscountCurve,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BusinessDayAdjustment",
    "CurveModel",
    "DiscountCurve",
    "ForwardCurve",
    "ForwardCurveFromDiscountCurve",
    "get_calendar",
]
