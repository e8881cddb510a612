"""
Discount curve with log-linear interpolation of discount factors.
"""
import logging
import math
from datetime import date, datetime
from typing import List, Union

import numpy as np

from fwdcurve.conventions.daycount import ACT_365F, DayCountConvention
from fwdcurve.conventions.types import (
    ExtrapolationMethod,
    InterpolationEntity,
    InterpolationMethod,
)

from .base import BaseCurve

logger = logging.getLogger(__name__)


class DiscountCurve(BaseCurve):
    """
    Discount curve given by discount factors at pillar times.

    Log discount factors are interpolated linearly between pillars, which is
    piecewise flat continuously compounded forwards. Beyond the last pillar the
    zero rate of the last pillar is held constant.
    """

    def __init__(self,
                 name: str,
                 reference_date: date,
                 pillar_times: List[float],
                 discount_factors: List[float],
                 time_day_count: Union[str, DayCountConvention] = ACT_365F):
        """
        Initialize discount curve.

        Args:
            name: Curve name
            reference_date: Curve valuation date
            pillar_times: Pillar times in years from reference date
            discount_factors: Discount factors at pillar times
            time_day_count: Day count turning dates into curve times
                (``"ACT/365F"`` or ``"ACT/360"``)
        """
        super().__init__(
            name,
            reference_date,
            InterpolationMethod.LINEAR,
            ExtrapolationMethod.CONSTANT,
            InterpolationEntity.LOG_OF_VALUE,
            time_day_count,
        )

        if len(pillar_times) != len(discount_factors):
            raise ValueError("Pillar times and discount factors must have same length")
        if len(pillar_times) < 1:
            raise ValueError("Need at least 1 pillar point")

        for i, (t, df) in enumerate(zip(pillar_times, discount_factors, strict=True)):
            if t <= 0:
                raise ValueError(f"Pillar time at pillar {i} must be positive: {t}")
            if df <= 0:
                raise ValueError(f"Discount factor at pillar {i} must be positive: {df}")

        sorted_pairs = sorted(zip(pillar_times, discount_factors, strict=True))
        times = [p[0] for p in sorted_pairs]
        if len(set(times)) != len(times):
            raise ValueError("Duplicate pillar times not allowed")

        for i in range(1, len(sorted_pairs)):
            increase = sorted_pairs[i][1] - sorted_pairs[i - 1][1]
            if increase > 1e-6:
                logger.warning(
                    "%s: discount factors increasing at pillar %s (increase = %.8f)",
                    name,
                    i,
                    increase,
                )

        self.pillar_times = times
        self.discount_factors = [p[1] for p in sorted_pairs]
        self._times = np.array([0.0] + times)
        self._log_dfs = np.log(np.array([1.0] + self.discount_factors))

    def df(self, t: Union[datetime, date, float]) -> float:
        """Get discount factor at time t (year fraction or date)."""
        time_frac = self.time_from_date(t)
        if time_frac <= 0:
            return 1.0

        last_time = self._times[-1]
        if time_frac > last_time:
            return math.exp(self._log_dfs[-1] / last_time * time_frac)
        return math.exp(np.interp(time_frac, self._times, self._log_dfs))

    def zero(self, t: Union[datetime, date, float]) -> float:
        """Get continuously compounded zero rate at time t."""
        time_frac = self.time_from_date(t)
        if time_frac <= 0:
            return 0.0
        return -math.log(self.df(time_frac)) / time_frac

    def __repr__(self) -> str:
        return (f"DiscountCurve(name='{self.name}', "
                f"reference_date={self.reference_date}, "
                f"pillar_times={self.pillar_times}, "
                f"discount_factors={self.discount_factors})")


def create_flat_discount_curve(name: str,
                               reference_date: date,
                               flat_rate: float,
                               max_time: float = 30.0,
                               num_pillars: int = 10,
                               time_day_count: Union[str, DayCountConvention] = ACT_365F) -> DiscountCurve:
    """
    Create a discount curve with a flat continuously compounded zero rate.

    Args:
        name: Curve name
        reference_date: Curve reference date
        flat_rate: Flat zero rate (decimal)
        max_time: Maximum pillar time in years
        num_pillars: Number of pillar points
        time_day_count: Day count turning dates into curve times

    Returns:
        Flat discount curve
    """
    times = [(i + 1) * max_time / num_pillars for i in range(num_pillars)]
    discount_factors = [math.exp(-flat_rate * t) for t in times]
    return DiscountCurve(name, reference_date, times, discount_factors, time_day_count)
