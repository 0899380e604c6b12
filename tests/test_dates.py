from datetime import date, datetime

import pytest

from pcos_tracker.utils.dates import parse_calendar_date


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2025-03-01", date(2025, 3, 1)),
        ("2025-03-01T23:30:00-05:00", date(2025, 3, 1)),
        ("2025-03-01T00:00:00Z", date(2025, 3, 1)),
        (datetime(2025, 3, 1, 18, 0), date(2025, 3, 1)),
        (date(2025, 3, 1), date(2025, 3, 1)),
    ],
)
def test_parse_calendar_date_keeps_written_day(value, expected):
    assert parse_calendar_date(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "yesterday", "2025-13-01", 20250301])
def test_parse_calendar_date_rejects_other_values(value):
    assert parse_calendar_date(value) is None
