"""
Schedule loader. Raw dict / JSON file -> domain ScheduleData.
Accepts camelCase (startTime) and snake_case (start_time) keys, and legacy "store" for location.
"""

import json
import logging
from pathlib import Path

from shiftview.domain.models import ScheduleData, ShiftRecord
from shiftview.domain.timeutils import parse_timestamp

logger = logging.getLogger(__name__)


def _pick(raw: dict, *names: str, default=None):
    for name in names:
        if name in raw and raw[name] is not None:
            return raw[name]
    return default


def load_shift(raw: dict) -> ShiftRecord:
    """Transform one raw record. Raises ValueError if the id is not an integer or a timestamp is missing or malformed."""
    record_id = _pick(raw, "id", default=0)
    start = _pick(raw, "startTime", "start_time")
    end = _pick(raw, "endTime", "end_time")
    if not isinstance(start, str) or not isinstance(end, str):
        raise ValueError(f"Shift {record_id!r}: startTime and endTime are required")
    try:
        start_time = parse_timestamp(start)
        end_time = parse_timestamp(end)
    except ValueError as e:
        raise ValueError(f"Shift {record_id!r}: invalid timestamp ({e})") from e

    if isinstance(record_id, bool) or not isinstance(record_id, (int, str)):
        raise ValueError(f"Shift {record_id!r}: id must be an integer")
    try:
        shift_id = int(record_id)
    except ValueError as e:
        raise ValueError(f"Shift {record_id!r}: id must be an integer") from e

    return ShiftRecord(
        id=shift_id,
        employee=str(_pick(raw, "employee", default="")),
        location=str(raw.get("location") or raw.get("store") or ""),
        role=str(_pick(raw, "role", default="")),
        start_time=start_time,
        end_time=end_time,
    )


def load_schedule(raw: dict) -> ScheduleData:
    """{"planned": [...], "actual": [...]} -> ScheduleData. Missing lists count as empty."""
    planned = [load_shift(r) for r in raw.get("planned") or []]
    actual = [load_shift(r) for r in raw.get("actual") or []]
    logger.debug("Loaded %d planned and %d actual shifts", len(planned), len(actual))
    return ScheduleData(planned=planned, actual=actual)


def load_schedule_file(path: Path) -> ScheduleData:
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    data = load_schedule(raw)
    logger.info(
        "Schedule file %s: %d planned, %d actual", path, len(data.planned), len(data.actual)
    )
    return data
