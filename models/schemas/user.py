from marshmallow import Schema, fields, pre_load, validate, ValidationError, EXCLUDE


def _norm_email(v):
    return v.strip().lower() if isinstance(v, str) else v


def _utf8_encodable(value: str) -> None:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError("Password must be valid UTF-8 text.")


class UserCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.String(
        required=True,
        load_only=True,
        validate=[validate.Length(min=1), _utf8_encodable],
    )

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data["email"] = _norm_email(data["email"])
        return data


# Same shape for PUT /api/users (both fields required)
UserUpdateSchema = UserCreateSchema


class UserLoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True)
    password = fields.String(required=True, load_only=True)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data["email"] = _norm_email(data["email"])
        return data


class UserOutSchema(Schema):
    id = fields.String()
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
    email = fields.String()
    is_chirpy_red = fields.Boolean(data_key="isChirpyRed")
