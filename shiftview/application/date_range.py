"""
Date range policy for the schedule view: span limit in basic mode, quick shortcuts, day listing.
The range filter itself does not apply any of this; callers clamp first.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from shiftview.application.config import (
    DEFAULT_RANGE_EXTRA_DAYS,
    MAX_BASIC_RANGE_DAYS,
    QUICK_RANGES,
)


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    @property
    def days(self) -> int:
        """Inclusive day count (0 or negative when inverted)."""
        return (self.end - self.start).days + 1


def default_range(today: date | None = None) -> DateRange:
    today = today or date.today()
    return DateRange(today, today + timedelta(days=DEFAULT_RANGE_EXTRA_DAYS))


def clamp_range(
    start: date,
    end: date,
    advanced: bool,
    max_days: int = MAX_BASIC_RANGE_DAYS,
) -> DateRange:
    """Basic mode pulls an end past start + max_days - 1 back to that day. Inverted ranges are kept."""
    if not advanced:
        max_end = start + timedelta(days=max_days - 1)
        if end > max_end:
            end = max_end
    return DateRange(start, end)


def quick_range_available(days: int, advanced: bool, max_days: int = MAX_BASIC_RANGE_DAYS) -> bool:
    return advanced or days < max_days


def quick_range(
    days: int,
    today: date | None = None,
    advanced: bool = False,
    max_days: int = MAX_BASIC_RANGE_DAYS,
) -> DateRange:
    today = today or date.today()
    return clamp_range(today, today + timedelta(days=days), advanced, max_days)


def quick_ranges(
    today: date | None = None,
    advanced: bool = False,
    max_days: int = MAX_BASIC_RANGE_DAYS,
) -> list[dict]:
    today = today or date.today()
    out = []
    for label, days in QUICK_RANGES:
        r = quick_range(days, today, advanced, max_days)
        out.append(
            {
                "label": label,
                "start_date": r.start,
                "end_date": r.end,
                "available": quick_range_available(days, advanced, max_days),
            }
        )
    return out


def days_in_range(date_range: DateRange) -> list[date]:
    days: list[date] = []
    current = date_range.start
    while current <= date_range.end:
        days.append(current)
        current += timedelta(days=1)
    return days
