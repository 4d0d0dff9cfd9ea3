"""
Default configuration. One place for values shared by the API, the CLI and the use cases.
"""

import os
from pathlib import Path

# Basic mode: max days in one selected range (advanced mode has no limit)
MAX_BASIC_RANGE_DAYS = 4

# Default range on startup: today .. today + 3
DEFAULT_RANGE_EXTRA_DAYS = 3

# Inverted shifts (end before start): False = report negative minutes, True = clamp to 0
CLAMP_NEGATIVE_DURATION = False

# Quick range shortcuts: (label, extra days after today)
QUICK_RANGES = [
    ("Today", 0),
    ("4 days", 3),
    ("1 week", 6),
    ("2 weeks", 13),
]

DATA_JSON = Path(
    os.environ.get(
        "SHIFTVIEW_DATA_FILE",
        Path(__file__).resolve().parent.parent / "data" / "schedule_data.json",
    )
)

CORS_ORIGINS = [
    "http://localhost:5173",
]
