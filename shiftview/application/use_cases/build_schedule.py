"""
Schedule grid use case. Orchestrates domain. No FastAPI.

Flow: group_schedules -> filter_by_range -> per (row, day) cell -> classify_shift.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from shiftview.application.config import CLAMP_NEGATIVE_DURATION
from shiftview.application.date_range import DateRange, days_in_range
from shiftview.domain.classifier import classify_shift
from shiftview.domain.grouping import group_schedules
from shiftview.domain.models import (
    EmployeeSchedule,
    ScheduleData,
    ShiftAssessment,
    ShiftRecord,
)
from shiftview.domain.range_filter import filter_by_range
from shiftview.domain.timeutils import to_local

logger = logging.getLogger(__name__)


@dataclass
class ScheduleRow:
    schedule: EmployeeSchedule
    cells: List[Optional[ShiftAssessment]] = field(default_factory=list)  # one per day, None = no shift


@dataclass
class ScheduleView:
    date_range: DateRange
    advanced: bool
    days: List[date]
    rows: List[ScheduleRow]

    @property
    def is_empty(self) -> bool:
        return not self.rows


def _touches_day(shift: ShiftRecord, day: date) -> bool:
    return to_local(shift.start_time).date() == day or to_local(shift.end_time).date() == day


def shift_for_day(shifts: Sequence[ShiftRecord], day: date) -> Optional[ShiftRecord]:
    """First shift that starts or ends on the given local day."""
    return next((s for s in shifts if _touches_day(s, day)), None)


def assess_day(
    schedule: EmployeeSchedule,
    day: date,
    advanced: bool,
    clamp_negative_duration: bool = CLAMP_NEGATIVE_DURATION,
) -> Optional[ShiftAssessment]:
    planned = shift_for_day(schedule.planned_shifts, day)
    if planned is None:
        return None
    actual = shift_for_day(schedule.actual_shifts, day)
    return classify_shift(
        planned,
        actual,
        absence_tracking_enabled=advanced,
        clamp_negative_duration=clamp_negative_duration,
    )


def build_schedule(
    data: ScheduleData,
    date_range: DateRange,
    advanced: bool = False,
    clamp_negative_duration: bool = CLAMP_NEGATIVE_DURATION,
) -> ScheduleView:
    """
    Full recompute per call: the grid is rebuilt whenever range, mode or data change.
    """
    grouped = group_schedules(data.planned, data.actual, track_actual=advanced)
    filtered = filter_by_range(grouped, date_range.start, date_range.end)
    days = days_in_range(date_range)

    rows = [
        ScheduleRow(
            schedule=s,
            cells=[assess_day(s, d, advanced, clamp_negative_duration) for d in days],
        )
        for s in filtered
    ]

    logger.info(
        "Schedule %s..%s (advanced=%s): %d planned, %d actual -> %d groups, %d rows, %d days",
        date_range.start,
        date_range.end,
        advanced,
        len(data.planned),
        len(data.actual),
        len(grouped),
        len(rows),
        len(days),
    )
    return ScheduleView(date_range=date_range, advanced=advanced, days=days, rows=rows)
