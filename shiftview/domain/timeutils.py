"""
Timestamp helpers shared by the domain. Local wall-clock semantics.
"""

from datetime import datetime


def parse_timestamp(value: str) -> datetime:
    """ISO-8601 text -> datetime. Raises ValueError on malformed text."""
    return datetime.fromisoformat(value.strip())


def to_local(dt: datetime) -> datetime:
    """Aware -> naive local time. Naive values are already local."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated toward zero (negative if inverted)."""
    seconds = (to_local(end) - to_local(start)).total_seconds()
    return int(seconds / 60)
