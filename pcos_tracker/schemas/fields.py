from marshmallow import fields

from pcos_tracker.utils.dates import parse_calendar_date


class CalendarDate(fields.Field):
    """ISO date or datetime, loaded as the calendar day it names."""

    default_error_messages = {"invalid": "Not a valid date."}

    def _deserialize(self, value, attr, data, **kwargs):
        parsed = parse_calendar_date(value)
        if parsed is None:
            raise self.make_error("invalid")
        return parsed
