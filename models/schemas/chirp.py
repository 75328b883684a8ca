from marshmallow import Schema, fields, validate, EXCLUDE

from models.chirp import MAX_CHIRP_LENGTH

BANNED_WORDS = {"kerfuffle", "sharbert", "fornax"}


def clean_body(body: str) -> str:
    """Replace banned words (case-insensitive, space separated) with ****."""
    return " ".join(
        "****" if word.lower() in BANNED_WORDS else word for word in body.split(" ")
    )


class ChirpCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    body = fields.String(
        required=True,
        validate=validate.Length(
            max=MAX_CHIRP_LENGTH,
            error=f"Chirp is too long. Max length is {MAX_CHIRP_LENGTH}",
        ),
    )


class ChirpOutSchema(Schema):
    id = fields.String()
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
    body = fields.String()
    user_id = fields.String(data_key="userId")
