"""Render stored dates (ISO strings from the data store) as short month/year text."""

import re
from datetime import date, datetime
from typing import Optional, Union

UNKNOWN_DATE = "Unknown"

MONTHS_ABBR = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

DateLike = Union[str, date, datetime, None]


def parse_stored_date(value: DateLike) -> Optional[date]:
    """
    Parse a date column value. Handles date/datetime objects, "2021-03-15",
    "2021-03" (month picker) and full ISO timestamps ("2021-03-15T00:00:00Z").
    Returns None when the value is empty or cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    # ---- Year-month only ----
    m = re.fullmatch(r"(\d{4})-(\d{1,2})", text)
    if m:
        try:
            return date(int(m.group(1)), int(m.group(2)), 1)
        except ValueError:
            return None
    return None


def format_month_year(value: DateLike, fallback: str = UNKNOWN_DATE) -> str:
    """Format as "Mar 2021"; missing or malformed values render as `fallback`."""
    parsed = parse_stored_date(value)
    if parsed is None:
        return fallback
    return f"{MONTHS_ABBR[parsed.month - 1]} {parsed.year}"
