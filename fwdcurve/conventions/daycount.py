"""
Day count conventions used to turn dates into curve times.

Payment offsets of forward curves are always measured ACT/365F. Discount
curves may put their time axis on ACT/360 instead.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

DateLike = Union[date, datetime]


def _ql_date(dt: DateLike) -> ql.Date:
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


class DayCountConvention:
    """A named QuantLib day counter measuring time between two dates."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(self, start: DateLike, end: DateLike) -> float:
        """Year fraction from ``start`` to ``end``; negative when end is earlier."""
        return self._ql_daycount.yearFraction(_ql_date(start), _ql_date(end))

    def day_count(self, start: DateLike, end: DateLike) -> int:
        return self._ql_daycount.dayCount(_ql_date(start), _ql_date(end))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"DayCountConvention({self.name!r})"


ACT_365F = DayCountConvention("ACT/365F", ql.Actual365Fixed())
ACT_360 = DayCountConvention("ACT/360", ql.Actual360())

_ALIASES = {
    ACT_365F: ("ACT/365F", "ACT/365", "ACTUAL/365F"),
    ACT_360: ("ACT/360", "ACTUAL/360"),
}
DAY_COUNT_CONVENTIONS = {
    alias: convention for convention, aliases in _ALIASES.items() for alias in aliases
}


def get_day_count_convention(
    convention: Union[str, DayCountConvention]
) -> DayCountConvention:
    """Resolve a curve time basis given by name (case-insensitive) or instance."""
    if isinstance(convention, DayCountConvention):
        return convention
    key = convention.upper()
    if key not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {convention}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[key]
