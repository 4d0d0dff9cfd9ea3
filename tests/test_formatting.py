from datetime import datetime

from shiftview.domain.classifier import classify_shift
from shiftview.domain.formatting import format_duration, format_time, shift_title


def test_format_duration():
    assert format_duration(480) == "8h 0m"
    assert format_duration(450) == "7h 30m"
    assert format_duration(5) == "0h 5m"


def test_format_time_is_24h():
    assert format_time(datetime(2025, 1, 1, 21, 5)) == "21:05"


def test_shift_title(shift):
    planned = shift()

    assert shift_title(classify_shift(planned, None, True)) == "Absent"
    assert shift_title(classify_shift(planned, None, False)) == "09:00 - 17:00"


def test_format_negative_duration_keeps_sign_apart():
    assert format_duration(-30) == "-0h 30m"
    assert format_duration(-90) == "-1h 30m"
