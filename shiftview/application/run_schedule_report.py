"""
Print the schedule grid for a JSON data file.

Usage (from repo root):
  python -m shiftview.application.run_schedule_report
  python -m shiftview.application.run_schedule_report --start 2025-01-01 --end 2025-01-07 --advanced

Flow:
  JSON (planned + actual) ->
  range clamp (day limit in basic mode) ->
  build_schedule (group, filter, classify) ->
  employee/day table + KPIs.
"""

import argparse
from datetime import date
from pathlib import Path

from shiftview.application.config import DATA_JSON
from shiftview.application.date_range import clamp_range, default_range
from shiftview.application.use_cases.build_schedule import ScheduleView, build_schedule
from shiftview.domain.formatting import format_duration, format_time
from shiftview.domain.models import ShiftAssessment
from shiftview.infrastructure.schedule_loader import load_schedule_file

_CELL_WIDTH = 28


def _cell_text(cell: ShiftAssessment | None) -> str:
    if cell is None:
        return ""
    planned = f"{format_time(cell.planned.start_time)}-{format_time(cell.planned.end_time)}"
    if cell.is_absent:
        return f"{planned} ABSENT"
    if cell.actual is None:
        return planned
    flags = ""
    if cell.is_late:
        flags += "L"
    if cell.is_early_leave:
        flags += "E"
    actual = f"{format_time(cell.actual.start_time)}-{format_time(cell.actual.end_time)}"
    return f"{planned}/{actual} {flags}".rstrip()


def _print_view(view: ScheduleView) -> None:
    header = f"{'Employee':<20}{'Location':<16}{'Role':<14}"
    header += "".join(f"{d.strftime('%d %b'):<{_CELL_WIDTH}}" for d in view.days)
    print(header)
    for row in view.rows:
        s = row.schedule
        line = f"{s.employee:<20}{s.location:<16}{s.role:<14}"
        line += "".join(f"{_cell_text(c):<{_CELL_WIDTH}}" for c in row.cells)
        print(line)


def distinct_shifts(view: ScheduleView) -> list[ShiftAssessment]:
    """One assessment per shift. A night shift fills a cell on each of its days."""
    seen: set = set()
    out: list[ShiftAssessment] = []
    for row in view.rows:
        for c in row.cells:
            if c is None:
                continue
            key = (row.schedule.key, c.planned.id, c.actual.id if c.actual is not None else None)
            if key in seen:
                continue
            seen.add(key)
            out.append(c)
    return out


def _print_kpis(view: ScheduleView) -> None:
    cells = distinct_shifts(view)
    worked = sum(c.duration for c in cells if not c.is_absent)
    print("\n--- KPIs ---")
    print(f"  Employees:     {len(view.rows)}")
    print(f"  Shifts:        {len(cells)}")
    print(f"  Worked time:   {format_duration(worked)}")
    if view.advanced:
        print(f"  Late:          {sum(1 for c in cells if c.is_late)}")
        print(f"  Early leave:   {sum(1 for c in cells if c.is_early_leave)}")
        print(f"  Absent:        {sum(1 for c in cells if c.is_absent)}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Shiftview: planned vs actual shift report")
    parser.add_argument(
        "--data",
        type=Path,
        default=DATA_JSON,
        help="JSON with planned and actual shifts",
    )
    parser.add_argument("--start", type=date.fromisoformat, default=None, help="YYYY-MM-DD")
    parser.add_argument("--end", type=date.fromisoformat, default=None, help="YYYY-MM-DD")
    parser.add_argument(
        "--advanced",
        action="store_true",
        help="Match actual shifts, flag late/early leave/absence, no range limit",
    )
    args = parser.parse_args()

    if not args.data.exists():
        print(f"ERROR: data file not found: {args.data}")
        return 1

    try:
        data = load_schedule_file(args.data)
    except ValueError as e:
        print(f"ERROR: invalid data file {args.data}: {e}")
        return 1
    print(f"Loaded {len(data.planned)} planned / {len(data.actual)} actual shifts from {args.data}")

    fallback = default_range()
    start = args.start or fallback.start
    end = args.end or (start + (fallback.end - fallback.start))
    date_range = clamp_range(start, end, args.advanced)
    if date_range.end != end:
        print(f"Range limited to {date_range.days} days: {date_range.start} .. {date_range.end}")

    view = build_schedule(data, date_range, advanced=args.advanced)
    if view.is_empty:
        print("No schedule data for the selected date range.")
        return 0

    _print_view(view)
    _print_kpis(view)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
