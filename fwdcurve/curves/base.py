"""
Base curve classes and protocols.
"""

from datetime import date, datetime
from typing import Protocol, Union

from fwdcurve.conventions.daycount import (
    ACT_365F,
    DayCountConvention,
    get_day_count_convention,
)
from fwdcurve.conventions.types import (
    ExtrapolationMethod,
    InterpolationEntity,
    InterpolationMethod,
)


class Curve(Protocol):
    """Protocol for anything that behaves as a named, dated curve."""

    name: str
    reference_date: date


class BaseCurve:
    """Identity and metadata shared by all curves."""

    def __init__(
        self,
        name: str,
        reference_date: date,
        interpolation_method: InterpolationMethod = InterpolationMethod.LINEAR,
        extrapolation_method: ExtrapolationMethod = ExtrapolationMethod.CONSTANT,
        interpolation_entity: InterpolationEntity = InterpolationEntity.VALUE,
        time_day_count: Union[str, DayCountConvention] = ACT_365F,
    ):
        """
        Initialize base curve.

        Args:
            name: Curve name, used to look the curve up in a model
            reference_date: Date which defines t=0 for this curve
            interpolation_method: Declared interpolation method
            extrapolation_method: Declared extrapolation method
            interpolation_entity: Quantity the interpolation acts on
            time_day_count: Day-count convention to convert dates to curve times
        """
        if isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        self._name = name
        self._reference_date = reference_date
        self.interpolation_method = interpolation_method
        self.extrapolation_method = extrapolation_method
        self.interpolation_entity = interpolation_entity
        self._time_day_count = get_day_count_convention(time_day_count)

    @property
    def name(self) -> str:
        return self._name

    @property
    def reference_date(self) -> date:
        return self._reference_date

    @property
    def time_day_count(self) -> DayCountConvention:
        return self._time_day_count

    def time_from_date(self, dt: Union[datetime, date, float]) -> float:
        """Convert a date to the curve's year fraction basis; floats pass through."""
        if isinstance(dt, (int, float)):
            return float(dt)
        if isinstance(dt, datetime):
            dt = dt.date()
        return self._time_day_count.year_fraction(self._reference_date, dt)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"
