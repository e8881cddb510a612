"""Forward curves and payment-offset resolution.

A forward curve models an index (e.g. EURIBOR 3M). Besides its identity it
carries the payment offset of the index, i.e. the time between a fixing and
the corresponding payment, and the name of the discount curve associated
with the index (its funding or collateral curve), if any.

The payment offset is either a fixed number of years, or an offset code
(e.g. ``"3M"``) which is rolled on a business day calendar. Coded offsets
depend on the fixing date and are memoised per fixing time.
"""

from __future__ import annotations

import logging
import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Union

import numpy as np

from fwdcurve.conventions.calendars import (
    BusinessDayCalendarProtocol,
    get_calendar,
    to_business_day_adjustment,
)
from fwdcurve.conventions.daycount import ACT_365F
from fwdcurve.conventions.types import (
    BusinessDayAdjustment,
    ExtrapolationMethod,
    InterpolationEntity,
    InterpolationMethod,
)
from fwdcurve.curves.base import BaseCurve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixedPaymentOffset:
    """Payment offset given as a constant number of years."""

    offset: float


@dataclass(frozen=True)
class CodedPaymentOffset:
    """Payment offset given as an offset code rolled on a calendar.

    Attributes:
        offset_code: Maturity of the index, e.g. ``"3M"`` or ``"2BD 6M"``
        calendar: Calendar used to shift and adjust the payment date
        roll_convention: Business day adjustment of the payment date
    """

    offset_code: str
    calendar: BusinessDayCalendarProtocol
    roll_convention: BusinessDayAdjustment

    def __post_init__(self):
        if not isinstance(self.offset_code, str) or not self.offset_code.strip():
            raise ValueError(f"Payment offset code must be a non-empty string: {self.offset_code!r}")
        if self.calendar is None:
            raise ValueError(f"Payment offset code {self.offset_code} requires a business day calendar")
        if self.roll_convention is None:
            raise ValueError(f"Payment offset code {self.offset_code} requires a date roll convention")

        calendar = self.calendar
        if isinstance(calendar, str):
            calendar = get_calendar(calendar)
        if not callable(getattr(calendar, "get_adjusted_date", None)):
            raise ValueError(f"Object {calendar!r} is not a business day calendar")

        object.__setattr__(self, "calendar", calendar)
        object.__setattr__(
            self, "roll_convention", to_business_day_adjustment(self.roll_convention)
        )


PaymentOffset = Union[FixedPaymentOffset, CodedPaymentOffset]


class ForwardCurve(BaseCurve, ABC):
    """Base class for a forward curve.

    Stores the payment offset of the underlying index and the name of the
    associated discount curve. Subclasses provide the forwards.

    Construction:
        ``ForwardCurve(name, reference_date, code, calendar, roll_convention,
        discount_curve_name)`` for a coded offset, and
        ``ForwardCurve.with_fixed_offset(name, reference_date, years,
        discount_curve_name)`` for a fixed offset. A fixed offset passed to the
        constructor directly needs ``discount_curve_name`` as a keyword.
    """

    def __init__(
        self,
        name: str,
        reference_date: date,
        payment_offset: Union[str, float, PaymentOffset],
        calendar: Union[BusinessDayCalendarProtocol, str, None] = None,
        roll_convention: Union[BusinessDayAdjustment, str, None] = None,
        discount_curve_name: Optional[str] = None,
    ):
        """
        Initialize forward curve.

        Args:
            name: The name of this curve
            reference_date: The date which defines t=0 for this curve
            payment_offset: Either the offset code of the index (``"3M"``),
                a fixed offset in years, or a prepared ``FixedPaymentOffset``
                / ``CodedPaymentOffset``
            calendar: Calendar (or registered calendar name) used for adjusting
                the payment date; only with an offset code
            roll_convention: Date roll convention used for adjusting the payment
                date; only with an offset code
            discount_curve_name: Name of a discount curve associated with this
                index, if any
        """
        super().__init__(
            name,
            reference_date,
            InterpolationMethod.LINEAR,
            ExtrapolationMethod.CONSTANT,
            InterpolationEntity.VALUE,
        )
        self._payment_offset = _make_payment_offset(payment_offset, calendar, roll_convention)
        self._discount_curve_name = discount_curve_name
        self._payment_offsets: Dict[float, float] = {}

    @classmethod
    def with_fixed_offset(
        cls,
        name: str,
        reference_date: date,
        payment_offset: float,
        discount_curve_name: Optional[str] = None,
        **kwargs,
    ):
        return cls(
            name,
            reference_date,
            FixedPaymentOffset(float(payment_offset)),
            discount_curve_name=discount_curve_name,
            **kwargs,
        )

    @classmethod
    def with_offset_code(
        cls,
        name: str,
        reference_date: date,
        payment_offset_code: str,
        calendar: Union[BusinessDayCalendarProtocol, str],
        roll_convention: Union[BusinessDayAdjustment, str],
        discount_curve_name: Optional[str] = None,
        **kwargs,
    ):
        return cls(
            name,
            reference_date,
            CodedPaymentOffset(payment_offset_code, calendar, roll_convention),
            discount_curve_name=discount_curve_name,
            **kwargs,
        )

    @property
    def payment_offset(self) -> PaymentOffset:
        return self._payment_offset

    @property
    def is_fixed_offset(self) -> bool:
        return isinstance(self._payment_offset, FixedPaymentOffset)

    @property
    def fixed_payment_offset(self) -> float:
        """Fixed offset in years, NaN for curves with an offset code."""
        if isinstance(self._payment_offset, FixedPaymentOffset):
            return self._payment_offset.offset
        return math.nan

    @property
    def payment_offset_code(self) -> Optional[str]:
        if isinstance(self._payment_offset, CodedPaymentOffset):
            return self._payment_offset.offset_code
        return None

    @property
    def payment_calendar(self) -> Optional[BusinessDayCalendarProtocol]:
        if isinstance(self._payment_offset, CodedPaymentOffset):
            return self._payment_offset.calendar
        return None

    @property
    def payment_roll_convention(self) -> Optional[BusinessDayAdjustment]:
        if isinstance(self._payment_offset, CodedPaymentOffset):
            return self._payment_offset.roll_convention
        return None

    def get_discount_curve_name(self) -> Optional[str]:
        """Name of the discount curve associated with this index, or None."""
        return self._discount_curve_name

    def get_payment_offset(self, fixing_time: float) -> float:
        """Time between payment and fixing, in years, for a given fixing time.

        For a coded offset the fixing time is turned into a date by adding
        ``int(fixing_time * 365)`` calendar days to the reference date
        (truncated, not rounded). That date is shifted and rolled on the
        calendar and the payment time is measured ACT/365F from the
        reference date.

        The result is memoised per fixing time with exact key equality. The
        cache is not locked: concurrent misses for the same fixing time
        compute the same value and the last write wins, so there is nothing
        to synchronise.

        NaN or infinite fixing times are rejected by the integer conversion
        (``ValueError`` / ``OverflowError``) rather than mapped to zero days.
        """
        payment_offset = self._payment_offset
        if isinstance(payment_offset, FixedPaymentOffset):
            return payment_offset.offset

        cached = self._payment_offsets.get(fixing_time)
        if cached is not None:
            return cached

        reference_date = self.reference_date
        payment_date = reference_date + timedelta(days=int(fixing_time * 365))
        payment_date = payment_offset.calendar.get_adjusted_date(
            payment_date, payment_offset.offset_code, payment_offset.roll_convention
        )
        payment_time = ACT_365F.year_fraction(reference_date, payment_date)
        offset = payment_time - fixing_time

        logger.debug(
            "%s: fixing time %s -> payment date %s, offset %s",
            self.name,
            fixing_time,
            payment_date,
            offset,
        )
        self._payment_offsets[fixing_time] = offset
        return offset

    def get_payment_offsets(self, fixing_times: Iterable[float]) -> np.ndarray:
        """Vectorised ``get_payment_offset``, sharing the same cache."""
        return np.array(
            [self.get_payment_offset(float(t)) for t in fixing_times], dtype=float
        )

    def cached_fixing_times(self) -> List[float]:
        """Fixing times with a memoised offset, sorted."""
        return sorted(self._payment_offsets)

    @abstractmethod
    def get_forward(self, model, fixing_time: float) -> float:
        """Forward rate for a fixing time, resolving other curves from ``model``."""

    def get_forwards(self, model, fixing_times: Iterable[float]) -> np.ndarray:
        return np.array(
            [self.get_forward(model, float(t)) for t in fixing_times], dtype=float
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, "
            f"reference_date={self.reference_date}, "
            f"payment_offset={self._payment_offset}, "
            f"discount_curve_name={self._discount_curve_name!r})"
        )


class ForwardCurveFromDiscountCurve(ForwardCurve):
    """Forward curve implied by a discount curve.

    The forward for fixing time ``t`` with payment offset ``d`` is
    ``(df(t) / df(t + d) - 1) / d`` on the referenced discount curve.
    """

    def __init__(
        self,
        discount_curve_name: str,
        reference_date: date,
        payment_offset: Union[str, float, PaymentOffset],
        calendar: Union[BusinessDayCalendarProtocol, str, None] = None,
        roll_convention: Union[BusinessDayAdjustment, str, None] = None,
        name: Optional[str] = None,
    ):
        if not discount_curve_name:
            raise ValueError("A forward curve from a discount curve needs a discount curve name")
        if name is None:
            name = f"ForwardCurveFromDiscountCurve({discount_curve_name},{_offset_label(payment_offset)})"
        super().__init__(
            name,
            reference_date,
            payment_offset,
            calendar,
            roll_convention,
            discount_curve_name,
        )

    @classmethod
    def with_fixed_offset(cls, name, reference_date, payment_offset, discount_curve_name=None, **kwargs):
        return cls(discount_curve_name, reference_date, FixedPaymentOffset(float(payment_offset)), name=name, **kwargs)

    @classmethod
    def with_offset_code(
        cls,
        name,
        reference_date,
        payment_offset_code,
        calendar,
        roll_convention,
        discount_curve_name=None,
        **kwargs,
    ):
        return cls(
            discount_curve_name,
            reference_date,
            CodedPaymentOffset(payment_offset_code, calendar, roll_convention),
            name=name,
            **kwargs,
        )

    def _discount_curve(self, model):
        if hasattr(model, "get_discount_curve"):
            return model.get_discount_curve(self.get_discount_curve_name())
        if hasattr(model, "df"):
            return model
        raise TypeError(f"Cannot resolve discount curve from {type(model).__name__}")

    def get_forward(self, model, fixing_time: float) -> float:
        discount_curve = self._discount_curve(model)
        payment_offset = self.get_payment_offset(fixing_time)
        if payment_offset == 0.0:
            raise ValueError(f"Zero payment offset at fixing time {fixing_time}")

        df_fixing = discount_curve.df(fixing_time)
        df_payment = discount_curve.df(fixing_time + payment_offset)
        return (df_fixing / df_payment - 1.0) / payment_offset


def _offset_label(payment_offset) -> str:
    if isinstance(payment_offset, CodedPaymentOffset):
        return payment_offset.offset_code
    if isinstance(payment_offset, FixedPaymentOffset):
        return str(payment_offset.offset)
    return str(payment_offset)


def _make_payment_offset(payment_offset, calendar, roll_convention) -> PaymentOffset:
    if isinstance(payment_offset, (FixedPaymentOffset, CodedPaymentOffset)):
        if calendar is not None or roll_convention is not None:
            raise ValueError("Calendar and roll convention belong inside a prepared payment offset")
        return payment_offset

    if isinstance(payment_offset, str):
        return CodedPaymentOffset(payment_offset, calendar, roll_convention)

    if isinstance(payment_offset, numbers.Real) and not isinstance(payment_offset, bool):
        if calendar is not None or roll_convention is not None:
            raise ValueError(
                "A fixed payment offset does not take a calendar or roll convention; "
                "pass an offset code, or use with_fixed_offset to give a discount curve name"
            )
        return FixedPaymentOffset(float(payment_offset))

    raise TypeError(f"Unsupported payment offset: {payment_offset!r}")
