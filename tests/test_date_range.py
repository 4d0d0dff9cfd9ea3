from datetime import date

from shiftview.application.date_range import (
    DateRange,
    clamp_range,
    days_in_range,
    default_range,
    quick_range,
    quick_range_available,
    quick_ranges,
)

TODAY = date(2025, 3, 10)


def test_default_range_covers_four_days():
    r = default_range(TODAY)

    assert r == DateRange(date(2025, 3, 10), date(2025, 3, 13))
    assert r.days == 4


def test_basic_mode_limits_span():
    r = clamp_range(date(2025, 3, 10), date(2025, 3, 20), advanced=False)

    assert r.end == date(2025, 3, 13)
    assert r.days == 4


def test_advanced_mode_has_no_span_limit():
    r = clamp_range(date(2025, 3, 10), date(2025, 3, 20), advanced=True)

    assert r.end == date(2025, 3, 20)


def test_inverted_range_is_kept():
    r = clamp_range(date(2025, 3, 10), date(2025, 3, 8), advanced=False)

    assert r == DateRange(date(2025, 3, 10), date(2025, 3, 8))
    assert days_in_range(r) == []


def test_quick_ranges_in_basic_mode():
    assert quick_range(0, TODAY) == DateRange(TODAY, TODAY)
    assert quick_range(6, TODAY, advanced=False).end == date(2025, 3, 13)
    assert quick_range_available(3, advanced=False) is True
    assert quick_range_available(6, advanced=False) is False

    labels = {r["label"]: r["available"] for r in quick_ranges(TODAY, advanced=False)}
    assert labels == {"Today": True, "4 days": True, "1 week": False, "2 weeks": False}


def test_quick_ranges_in_advanced_mode():
    ranges = quick_ranges(TODAY, advanced=True)

    assert all(r["available"] for r in ranges)
    assert ranges[-1]["end_date"] == date(2025, 3, 23)


def test_days_in_range_is_inclusive():
    days = days_in_range(DateRange(date(2025, 2, 27), date(2025, 3, 2)))

    assert days == [date(2025, 2, 27), date(2025, 2, 28), date(2025, 3, 1), date(2025, 3, 2)]
