from marshmallow import Schema, fields, EXCLUDE

from pcos_tracker.schemas.fields import CalendarDate


class CreateSymptomEntrySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Int(required=True, data_key="userId")
    date = CalendarDate(required=True)
    # names or {"name", "severity"} objects, normalized by the validation service
    symptoms = fields.Raw(required=True)
    symptom_details = fields.Dict(keys=fields.Str(), allow_none=True, load_default=None, data_key="symptomDetails")
    notes = fields.Str(allow_none=True, load_default=None)
