from marshmallow import Schema, fields, validate, EXCLUDE


class CreateUserSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1))
    email = fields.Email(required=True)
    age = fields.Int(allow_none=True, validate=validate.Range(min=0, max=120))
    weight = fields.Float(allow_none=True, validate=validate.Range(min=1, max=500))
    height = fields.Float(allow_none=True, validate=validate.Range(min=30, max=300))


class UpdateUserSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(validate=validate.Length(min=1))
    email = fields.Email()
    age = fields.Int(allow_none=True, validate=validate.Range(min=0, max=120))
    weight = fields.Float(allow_none=True, validate=validate.Range(min=1, max=500))
    height = fields.Float(allow_none=True, validate=validate.Range(min=30, max=300))
