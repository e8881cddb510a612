from datetime import date, timedelta

import pytest

from fwdcurve.curves import ForwardCurve


class RecordingCalendar:
    """Calendar double that records its inputs and shifts by a fixed number of days."""

    def __init__(self, shift_days: int = 0):
        self.shift_days = shift_days
        self.calls = []

    def get_adjusted_date(self, dt, offset_code, roll_convention):
        self.calls.append((dt, offset_code, roll_convention))
        return dt + timedelta(days=self.shift_days)


class FailingCalendar:
    def get_adjusted_date(self, dt, offset_code, roll_convention):
        raise ValueError(f"Unsupported offset code: {offset_code}")


class FlatForwardCurve(ForwardCurve):
    """Forward curve returning a constant forward."""

    def __init__(self, *args, forward: float = 0.03, **kwargs):
        super().__init__(*args, **kwargs)
        self.forward = forward

    def get_forward(self, model, fixing_time):
        return self.forward


@pytest.fixture()
def reference_date():
    return date(2024, 1, 1)


@pytest.fixture()
def recording_calendar():
    return RecordingCalendar()
