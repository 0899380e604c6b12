from marshmallow import Schema, EXCLUDE

from pcos_tracker.schemas.fields import CalendarDate


class ReportRangeQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    start_date = CalendarDate(allow_none=True, load_default=None, data_key="startDate")
    end_date = CalendarDate(allow_none=True, load_default=None, data_key="endDate")
