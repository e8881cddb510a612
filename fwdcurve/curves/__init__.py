"""
Curves package.

Main APIs:
---------
    - ForwardCurve: payment offsets and discount curve association of an index
    - ForwardCurveFromDiscountCurve: forwards implied by a discount curve
    - DiscountCurve: discount factors with log-linear interpolation
    - CurveModel: curves looked up by name
"""

from .base import BaseCurve, Curve
from .discount import DiscountCurve, create_flat_discount_curve
from .forward import (
    CodedPaymentOffset,
    FixedPaymentOffset,
    ForwardCurve,
    ForwardCurveFromDiscountCurve,
    PaymentOffset,
)
from .model import CurveModel

__all__ = [
    "BaseCurve",
    "CodedPaymentOffset",
    "Curve",
    "CurveModel",
    "DiscountCurve",
    "FixedPaymentOffset",
    "ForwardCurve",
    "ForwardCurveFromDiscountCurve",
    "PaymentOffset",
    "create_flat_discount_curve",
]
