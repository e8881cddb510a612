"""
Offset-code (tenor) parsing and unadjusted date shifting.

An offset code is one or more whitespace separated tokens such as ``3M``,
``2Y``, ``1W``, ``10D`` or ``2BD``. ``BD`` counts business days and needs a
calendar; the other units are calendar arithmetic.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from dateutil.relativedelta import relativedelta

_TOKEN_PATTERN = re.compile(r"^([+-]?\d+)(BD|D|W|M|Y)$")


@dataclass(frozen=True)
class OffsetToken:
    """Single ``<amount><unit>`` component of an offset code."""

    amount: int
    unit: str

    def __str__(self) -> str:
        return f"{self.amount}{self.unit}"


def parse_offset_code(code: str) -> List[OffsetToken]:
    """Split an offset code such as ``"2BD 3M"`` into tokens."""
    if code is None or not code.strip():
        raise ValueError("Offset code must be a non-empty string")

    tokens = []
    for raw in code.upper().split():
        match = _TOKEN_PATTERN.match(raw)
        if match is None:
            raise ValueError(f"Unsupported offset code: {code}")
        tokens.append(OffsetToken(int(match.group(1)), match.group(2)))
    return tokens


def shift_date(
    start: Union[date, datetime], code: str, calendar: Optional[object] = None
) -> date:
    """Shift a date by an offset code without any business day adjustment.

    Tokens are applied left to right. ``BD`` tokens are delegated to
    ``calendar.add_business_days``.
    """
    dt = start.date() if isinstance(start, datetime) else start

    for token in parse_offset_code(code):
        if token.unit == "D":
            dt = dt + timedelta(days=token.amount)
        elif token.unit == "W":
            dt = dt + timedelta(weeks=token.amount)
        elif token.unit == "M":
            dt = dt + relativedelta(months=token.amount)
        elif token.unit == "Y":
            dt = dt + relativedelta(years=token.amount)
        else:
            if calendar is None:
                raise ValueError(f"Offset code {code} needs a business day calendar")
            dt = calendar.add_business_days(dt, token.amount)
    return dt
