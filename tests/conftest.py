from datetime import datetime

import pytest

from shiftview.domain.models import ShiftRecord


def _shift(employee="A", location="X", start="2025-01-01T09:00", end="2025-01-01T17:00", role="Clerk", id=1):
    return ShiftRecord(
        id=id,
        employee=employee,
        location=location,
        role=role,
        start_time=datetime.fromisoformat(start),
        end_time=datetime.fromisoformat(end),
    )


@pytest.fixture
def shift():
    """Factory: shift(employee, location, start, end, role, id) -> ShiftRecord."""
    return _shift
