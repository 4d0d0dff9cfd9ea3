"""
Grouping engine. Flat planned/actual records -> one EmployeeSchedule per (employee, location).
"""

from typing import Sequence

from shiftview.domain.models import EmployeeSchedule, ShiftRecord


def group_schedules(
    planned: Sequence[ShiftRecord],
    actual: Sequence[ShiftRecord],
    track_actual: bool = False,
) -> list[EmployeeSchedule]:
    """
    1. Walk planned in order; first sight of a key creates the schedule (role from that record).
    2. If track_actual, append each actual record to its key's schedule.
       Actual records with no planned key are dropped.
    3. Return schedules in first-appearance order of keys in planned.
    """
    by_key: dict[tuple[str, str], EmployeeSchedule] = {}

    for shift in planned:
        key = (shift.employee, shift.location)
        schedule = by_key.get(key)
        if schedule is None:
            schedule = EmployeeSchedule(
                employee=shift.employee,
                location=shift.location,
                role=shift.role,
            )
            by_key[key] = schedule
        schedule.planned_shifts.append(shift)

    if track_actual:
        for shift in actual:
            schedule = by_key.get((shift.employee, shift.location))
            if schedule is not None:
                schedule.actual_shifts.append(shift)

    return list(by_key.values())
