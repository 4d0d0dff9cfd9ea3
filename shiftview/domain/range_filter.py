"""
Range filter. Keeps whole shifts overlapping a day-granular window. Derived view, no mutation.
"""

from datetime import date, datetime, time
from typing import Sequence

from shiftview.domain.models import EmployeeSchedule, ShiftRecord
from shiftview.domain.timeutils import to_local


def normalize_window(start: date, end: date) -> tuple[datetime, datetime]:
    """start -> 00:00:00 of its day, end -> 23:59:59 of its day (local)."""
    if isinstance(start, datetime):
        start = to_local(start).date()
    if isinstance(end, datetime):
        end = to_local(end).date()
    return (
        datetime.combine(start, time(0, 0, 0)),
        datetime.combine(end, time(23, 59, 59)),
    )


def overlaps(shift: ShiftRecord, window_start: datetime, window_end: datetime) -> bool:
    return (
        to_local(shift.start_time) <= window_end
        and to_local(shift.end_time) >= window_start
    )


def filter_by_range(
    schedules: Sequence[EmployeeSchedule],
    start: date,
    end: date,
) -> list[EmployeeSchedule]:
    """
    Planned and actual shifts are filtered independently; shift boundaries are not clipped.
    Schedules left with no shifts at all are dropped. Order is preserved.
    An inverted window simply matches nothing (or almost nothing).
    """
    window_start, window_end = normalize_window(start, end)

    result: list[EmployeeSchedule] = []
    for schedule in schedules:
        planned = [s for s in schedule.planned_shifts if overlaps(s, window_start, window_end)]
        actual = [s for s in schedule.actual_shifts if overlaps(s, window_start, window_end)]
        if not planned and not actual:
            continue
        result.append(
            EmployeeSchedule(
                employee=schedule.employee,
                location=schedule.location,
                role=schedule.role,
                planned_shifts=planned,
                actual_shifts=actual,
            )
        )
    return result
