from datetime import date, datetime
from typing import Any, Optional


def parse_calendar_date(value: Any) -> Optional[date]:
    """
    Reduce a date, datetime or ISO string to the calendar day it names.

    A time of day or UTC offset is dropped rather than converted, so
    "2025-03-01T23:30:00-05:00" stays on March 1st.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None
