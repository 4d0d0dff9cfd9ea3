"""
Display helpers for shift cells and detail views.
"""

from datetime import datetime

from shiftview.domain.models import ShiftAssessment
from shiftview.domain.timeutils import to_local


def format_duration(minutes: int) -> str:
    """480 -> '8h 0m', -30 -> '-0h 30m'."""
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours}h {mins}m"


def format_time(dt: datetime) -> str:
    return to_local(dt).strftime("%H:%M")


def shift_title(assessment: ShiftAssessment) -> str:
    if assessment.is_absent:
        return "Absent"
    planned = assessment.planned
    return f"{format_time(planned.start_time)} - {format_time(planned.end_time)}"
