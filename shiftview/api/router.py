"""
API router. Calls application only. No business logic.
"""

import logging
from datetime import date
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from shiftview.api.schemas import (
    ClassifyRequest,
    QuickRangeSchema,
    ScheduleRequest,
    ScheduleRowSchema,
    ScheduleViewSchema,
    ShiftAssessmentSchema,
    ShiftRecordSchema,
    ShiftSchema,
)
from shiftview.application.config import CLAMP_NEGATIVE_DURATION, DATA_JSON
from shiftview.application.date_range import clamp_range, quick_ranges
from shiftview.application.use_cases.build_schedule import ScheduleView, build_schedule
from shiftview.domain.classifier import classify_shift
from shiftview.domain.formatting import format_duration, shift_title
from shiftview.domain.models import ScheduleData, ShiftAssessment, ShiftRecord
from shiftview.infrastructure.schedule_loader import (
    load_schedule,
    load_schedule_file,
    load_shift,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache(maxsize=1)
def _load_default_data() -> ScheduleData:
    return load_schedule_file(DATA_JSON)


def get_schedule_data() -> ScheduleData:
    """Data set loaded once per process from DATA_JSON."""
    try:
        return _load_default_data()
    except FileNotFoundError:
        raise HTTPException(status_code=503, detail=f"Schedule data file not found: {DATA_JSON}")
    except ValueError as e:
        raise HTTPException(status_code=503, detail=f"Schedule data file is invalid: {e}")


def _shift_out(shift: ShiftRecord) -> ShiftSchema:
    return ShiftSchema(
        id=shift.id,
        employee=shift.employee,
        location=shift.location,
        role=shift.role,
        start_time=shift.start_time,
        end_time=shift.end_time,
    )


def _assessment_out(a: ShiftAssessment) -> ShiftAssessmentSchema:
    return ShiftAssessmentSchema(
        planned=_shift_out(a.planned),
        actual=_shift_out(a.actual) if a.actual is not None else None,
        is_late=a.is_late,
        is_early_leave=a.is_early_leave,
        is_absent=a.is_absent,
        duration=a.duration,
        planned_duration=a.planned_duration,
        status=a.status,
        title=shift_title(a),
        duration_text=format_duration(a.duration),
    )


def _view_out(view: ScheduleView, range_limited: bool) -> ScheduleViewSchema:
    return ScheduleViewSchema(
        start_date=view.date_range.start,
        end_date=view.date_range.end,
        advanced=view.advanced,
        range_limited=range_limited,
        days=view.days,
        rows=[
            ScheduleRowSchema(
                employee=row.schedule.employee,
                location=row.schedule.location,
                role=row.schedule.role,
                planned_shifts=[_shift_out(s) for s in row.schedule.planned_shifts],
                actual_shifts=[_shift_out(s) for s in row.schedule.actual_shifts],
                cells=[_assessment_out(c) if c is not None else None for c in row.cells],
            )
            for row in view.rows
        ],
    )


def _raw(record: ShiftRecordSchema) -> dict:
    return record.model_dump()


def _schedule_view(data: ScheduleData, start: date, end: date, advanced: bool) -> ScheduleViewSchema:
    date_range = clamp_range(start, end, advanced)
    view = build_schedule(data, date_range, advanced=advanced)
    return _view_out(view, range_limited=date_range.end != end)


@router.post("/schedule", response_model=ScheduleViewSchema)
def post_schedule(request: ScheduleRequest) -> ScheduleViewSchema:
    """
    POST /schedule
    Accepts planned + actual shifts and a date range. Returns the schedule grid.
    """
    try:
        data = load_schedule(
            {
                "planned": [_raw(r) for r in request.planned],
                "actual": [_raw(r) for r in request.actual],
            }
        )
        return _schedule_view(data, request.start_date, request.end_date, request.advanced)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("POST /schedule failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/schedule", response_model=ScheduleViewSchema)
def get_schedule(
    start_date: date,
    end_date: date,
    advanced: bool = False,
    data: ScheduleData = Depends(get_schedule_data),
) -> ScheduleViewSchema:
    """
    GET /schedule?start_date=YYYY-MM-DD&end_date=YYYY-MM-DD&advanced=false
    Same grid over the data set loaded at startup.
    """
    try:
        return _schedule_view(data, start_date, end_date, advanced)
    except Exception as e:
        logger.exception("GET /schedule failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/shift/classify", response_model=ShiftAssessmentSchema)
def post_classify(request: ClassifyRequest) -> ShiftAssessmentSchema:
    """
    POST /shift/classify
    One planned shift (+ optional actual). Returns late / early leave / absent and duration.
    """
    try:
        planned = load_shift(_raw(request.planned))
        actual = load_shift(_raw(request.actual)) if request.actual is not None else None
        assessment = classify_shift(
            planned,
            actual,
            absence_tracking_enabled=request.advanced,
            clamp_negative_duration=CLAMP_NEGATIVE_DURATION,
        )
        return _assessment_out(assessment)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("POST /shift/classify failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/ranges/quick", response_model=list[QuickRangeSchema])
def get_quick_ranges(advanced: bool = False, today: date | None = None) -> list[QuickRangeSchema]:
    """GET /ranges/quick — shortcut ranges; in basic mode long shortcuts are unavailable."""
    return [QuickRangeSchema(**r) for r in quick_ranges(today, advanced)]
