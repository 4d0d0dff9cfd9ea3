"""
API request/response schemas. Pydantic only in api layer.
"""

from datetime import date, datetime

from pydantic import BaseModel


class ShiftRecordSchema(BaseModel):
    """Raw shift as sent by the client. Timestamps stay text; the loader parses them."""
    id: int = 0
    employee: str
    location: str = ""
    store: str | None = None  # legacy name for location
    role: str = ""
    startTime: str
    endTime: str


class ScheduleRequest(BaseModel):
    planned: list[ShiftRecordSchema] = []
    actual: list[ShiftRecordSchema] = []
    start_date: date
    end_date: date
    advanced: bool = False


class ClassifyRequest(BaseModel):
    planned: ShiftRecordSchema
    actual: ShiftRecordSchema | None = None
    advanced: bool = False


class ShiftSchema(BaseModel):
    id: int
    employee: str
    location: str
    role: str
    start_time: datetime
    end_time: datetime


class ShiftAssessmentSchema(BaseModel):
    planned: ShiftSchema
    actual: ShiftSchema | None = None
    is_late: bool
    is_early_leave: bool
    is_absent: bool
    duration: int  # minutes
    planned_duration: int
    status: str  # absent | late | early_leave | late_early_leave | on_time | planned
    title: str
    duration_text: str


class ScheduleRowSchema(BaseModel):
    employee: str
    location: str
    role: str
    planned_shifts: list[ShiftSchema]
    actual_shifts: list[ShiftSchema]
    cells: list[ShiftAssessmentSchema | None]  # one per day


class ScheduleViewSchema(BaseModel):
    start_date: date
    end_date: date
    advanced: bool
    range_limited: bool = False  # True if the requested end was pulled back (basic mode)
    days: list[date]
    rows: list[ScheduleRowSchema]


class QuickRangeSchema(BaseModel):
    label: str
    start_date: date
    end_date: date
    available: bool
