"""
Shift classifier. Pure scoring of one planned shift against its actual counterpart. No I/O.
"""

from typing import Optional

from shiftview.domain.models import ShiftAssessment, ShiftRecord
from shiftview.domain.timeutils import minutes_between, to_local


def _duration(start, end, clamp_negative: bool) -> int:
    minutes = minutes_between(start, end)
    if clamp_negative and minutes < 0:
        return 0
    return minutes


def classify_shift(
    planned: ShiftRecord,
    actual: Optional[ShiftRecord] = None,
    absence_tracking_enabled: bool = False,
    clamp_negative_duration: bool = False,
) -> ShiftAssessment:
    """
    No actual: absent only when absence tracking is on; duration = planned duration.
    With actual: late if actual start > planned start, early leave if actual end < planned end
    (strict comparisons); duration = actual duration.
    Inverted ranges give negative durations unless clamp_negative_duration is set.
    """
    planned_duration = _duration(planned.start_time, planned.end_time, clamp_negative_duration)

    if actual is None:
        return ShiftAssessment(
            planned=planned,
            actual=None,
            is_late=False,
            is_early_leave=False,
            is_absent=absence_tracking_enabled,
            duration=planned_duration,
            planned_duration=planned_duration,
        )

    return ShiftAssessment(
        planned=planned,
        actual=actual,
        is_late=to_local(actual.start_time) > to_local(planned.start_time),
        is_early_leave=to_local(actual.end_time) < to_local(planned.end_time),
        is_absent=False,
        duration=_duration(actual.start_time, actual.end_time, clamp_negative_duration),
        planned_duration=planned_duration,
    )
