"""
Shiftview domain models. Dataclasses only. No FastAPI, no external deps beyond dataclasses/typing.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class ShiftRecord:
    id: int
    employee: str
    location: str
    role: str
    start_time: datetime
    end_time: datetime


@dataclass(frozen=True)
class ScheduleData:
    """Source record set, loaded once: planned and actual shifts."""
    planned: List[ShiftRecord] = field(default_factory=list)
    actual: List[ShiftRecord] = field(default_factory=list)


@dataclass
class EmployeeSchedule:
    """Shifts of one employee at one location. Key: (employee, location)."""
    employee: str
    location: str
    role: str  # from the first planned record seen for the key
    planned_shifts: List[ShiftRecord] = field(default_factory=list)
    actual_shifts: List[ShiftRecord] = field(default_factory=list)

    @property
    def key(self) -> tuple[str, str]:
        return (self.employee, self.location)


@dataclass(frozen=True)
class ShiftAssessment:
    planned: ShiftRecord
    actual: Optional[ShiftRecord]
    is_late: bool
    is_early_leave: bool
    is_absent: bool
    duration: int  # minutes, realized (or planned if no actual)
    planned_duration: int

    @property
    def status(self) -> str:
        if self.is_absent:
            return "absent"
        if self.is_late and self.is_early_leave:
            return "late_early_leave"
        if self.is_late:
            return "late"
        if self.is_early_leave:
            return "early_leave"
        if self.actual is None:
            return "planned"
        return "on_time"
